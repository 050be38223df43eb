"""Runtime state container and access helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Callable

from lib_log_compact.adapters.console.line_renderer import LineRenderer
from lib_log_compact.application.ports.time import ClockPort


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of live collaborators assembled by :func:`lib_log_compact.init`.

    ``write_lock`` serialises every record handed to ``renderer``, from façade
    loggers and attached stdlib handlers alike. It is re-entrant so a
    diagnostic hook that logs does not deadlock its own writer.
    """

    renderer: LineRenderer
    clock: ClockPort
    shutdown: Callable[[], None]
    write_lock: RLock = field(default_factory=RLock)
    handlers: list[tuple[logging.Logger, logging.Handler]] = field(default_factory=list)


_STATE: LoggingRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: LoggingRuntime) -> None:
    """Install ``runtime`` as the active runtime."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> None:
    """Remove the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> LoggingRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_compact.init() must be called before using the logging API")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_log_compact.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "LoggingRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "set_runtime",
]
