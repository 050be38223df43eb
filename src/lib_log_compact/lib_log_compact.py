"""Logging façade that wires domain, application, and adapter layers together.

Purpose
-------
Expose a small, ergonomic API for host applications: build one line renderer
per process, hand out named loggers, bridge the stdlib :mod:`logging` engine,
and shut everything down again. This module is the single composition point
that translates keyword arguments and environment overrides into wiring.

Contents
--------
* :class:`LoggerProxy` - named logger with ``debug/info/warning/error``.
* Public API: :func:`init`, :func:`get`, :func:`attach`, :func:`shutdown`,
  :func:`logdemo`, :func:`summary_info`.

System Role
-----------
The renderer itself is never a hidden global: :func:`init` constructs it
explicitly and returns it, and the runtime only keeps a handle so named
loggers can find it.
"""

from __future__ import annotations

import logging
import os
import time
from datetime import datetime
from typing import IO, Any, Callable, Mapping

from rich.console import Console

from .adapters import COLOR_THEMES, LineRenderer, LineRendererHandler
from .adapters.console.colors import ColorTable
from .application.ports import ClockPort
from .application.use_cases.shutdown import create_shutdown
from .config import env_bool, merge_console_colors, parse_console_colors
from .domain import LogLevel, LogRecord
from .runtime import LoggingRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


class _SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware local timestamps."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class LoggerProxy:
    """Named logger bound to the active runtime.

    Every call builds a :class:`LogRecord` stamped by the runtime clock and
    hands it to the renderer while holding the runtime write lock.
    """

    def __init__(self, name: str, runtime: LoggingRuntime) -> None:
        self._name = name
        self._runtime = runtime

    @property
    def name(self) -> str:
        return self._name

    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    warn = warning

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def log(self, level: LogLevel | Any, message: str) -> None:
        """Render ``message`` at ``level``; unknown levels get the ``UNKN`` badge."""

        runtime = self._runtime
        with runtime.write_lock:
            record = LogRecord(level=level, source_name=self._name, timestamp=runtime.clock.now(), payload=message)
            runtime.renderer.write(record)


def init(
    *,
    force_color: bool = False,
    no_color: bool = False,
    theme: str | None = None,
    console_colors: Mapping[str | LogLevel, str] | None = None,
    console: Console | None = None,
    stream: IO[str] | None = None,
    clock: ClockPort | None = None,
    diagnostic_hook: Callable[[str, dict[str, Any]], None] | None = None,
) -> LineRenderer:
    """Compose the console runtime and return its renderer.

    Parameters
    ----------
    force_color, no_color:
        Console colour overrides; mirror ``LOG_FORCE_COLOR`` and ``LOG_NO_COLOR``.
    theme:
        Name of a palette in :data:`COLOR_THEMES`; ``LOG_CONSOLE_THEME`` wins.
    console_colors:
        Per-level badge colours (ANSI pairs or Rich style strings) applied on
        top of the theme. ``LOG_CONSOLE_COLORS`` (``LEVEL=style,...``) wins.
    console, stream:
        Optional Rich console or text stream to write to (default stdout).
    clock:
        Time source for records emitted through :func:`get` loggers.
    diagnostic_hook:
        Callback receiving ``render_fallback`` / ``write_failed`` events.

    Raises
    ------
    RuntimeError
        If the runtime is already initialised.
    ValueError
        When the theme, a level name, or a colour cannot be parsed.

    Examples
    --------
    >>> import lib_log_compact as log  # doctest: +SKIP
    >>> log.init(force_color=True)  # doctest: +SKIP
    >>> log.get("MyApp").error("First error")  # doctest: +SKIP
    >>> log.shutdown()  # doctest: +SKIP
    """
    if is_initialised():
        raise RuntimeError("lib_log_compact is already initialised. Call shutdown() first.")

    force_color = env_bool("LOG_FORCE_COLOR", force_color)
    no_color = env_bool("LOG_NO_COLOR", no_color)
    theme = os.getenv("LOG_CONSOLE_THEME") or theme

    palette: dict[str, str] = {}
    if theme is not None:
        key = theme.strip().lower()
        try:
            palette = dict(COLOR_THEMES[key])
        except KeyError as exc:
            raise ValueError(f"Unknown console theme: {theme!r}") from exc

    palette.update(merge_console_colors(console_colors, {}))
    colors = ColorTable(merge_console_colors(palette, parse_console_colors(os.getenv("LOG_CONSOLE_COLORS"))))

    renderer = LineRenderer(
        console,
        stream=stream,
        force_color=force_color,
        no_color=no_color,
        colors=colors,
        diagnostic=diagnostic_hook,
    )
    handlers: list[tuple[logging.Logger, logging.Handler]] = []
    runtime = LoggingRuntime(
        renderer=renderer,
        clock=clock if clock is not None else _SystemClock(),
        shutdown=create_shutdown(console=renderer, handlers=lambda: list(handlers)),
        handlers=handlers,
    )
    set_runtime(runtime)
    return renderer


def get(name: str) -> LoggerProxy:
    """Return a logger proxy bound to the configured runtime.

    Raises
    ------
    RuntimeError
        If :func:`init` has not been called yet.
    """
    return LoggerProxy(name, current_runtime())


def attach(logger: logging.Logger | str | None = None, *, level: int | LogLevel = logging.DEBUG) -> LineRendererHandler:
    """Route a stdlib logger (default: the root logger) to the renderer.

    ``level`` is a :mod:`logging` number or a :class:`LogLevel`. The handler
    shares the runtime write lock and is detached again by :func:`shutdown`.
    """
    runtime = current_runtime()
    if isinstance(level, LogLevel):
        level = level.to_python_level()
    target = logger if isinstance(logger, logging.Logger) else logging.getLogger(logger)
    handler = LineRendererHandler(runtime.renderer, level=level, write_lock=runtime.write_lock)
    target.addHandler(handler)
    if target.level == logging.NOTSET or target.level > level:
        target.setLevel(level)
    runtime.handlers.append((target, handler))
    return handler


def shutdown() -> None:
    """Detach stdlib handlers, flush the console, and clear the runtime.

    Raises
    ------
    RuntimeError
        If :func:`init` has not been called yet.
    """
    runtime = current_runtime()
    try:
        runtime.shutdown()
    finally:
        clear_runtime()


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


def logdemo(
    *,
    theme: str = "classic",
    source: str = "MyApp",
    pause: float = 1.0,
    force_color: bool = True,
    no_color: bool = False,
    console: Console | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> dict[str, Any]:
    """Replay the reference sequence that shows every header mode.

    Three errors in the same second collapse under the first header, the
    fourth error after ``pause`` seconds shows only its timestamp, and the
    closing info message brings the full header back.

    Raises
    ------
    RuntimeError
        If the runtime is already initialised.
    ValueError
        When ``theme`` is unknown.
    """
    if is_initialised():
        raise RuntimeError("logdemo() requires lib_log_compact to be uninitialised. Call shutdown() first.")

    key = theme.strip().lower()
    if key not in COLOR_THEMES:
        raise ValueError(f"Unknown console theme: {theme!r}")

    renderer = init(force_color=force_color, no_color=no_color, theme=key, console=console)
    applied = (os.getenv("LOG_CONSOLE_THEME") or key).strip().lower()
    messages: list[tuple[str, str]] = []
    try:
        logger = get(source)
        for message in ("First error", "Second error", "Third error"):
            logger.error(message)
            messages.append(("error", message))
        sleep(pause)
        logger.error("Fourth error after 1 second")
        messages.append(("error", "Fourth error after 1 second"))
        logger.info("Info message")
        messages.append(("info", "Info message"))
    finally:
        shutdown()

    return {"theme": applied, "colors": renderer.colors.as_dict(), "source": source, "messages": messages}


__all__ = [
    "LoggerProxy",
    "attach",
    "get",
    "init",
    "logdemo",
    "shutdown",
    "summary_info",
]
