"""Rich-powered terminal sink implementing :class:`ConsolePort`.

Purpose
-------
Print records as aligned, colourised lines and collapse the header whenever
consecutive records share their level, source name and second.

Contents
--------
* :data:`ROLE_STYLES` - styles for the non-badge header fragments.
* :class:`LineRenderer` - the sink constructed by :func:`lib_log_compact.init`.

System Role
-----------
Terminal leaf of the pipeline: the logging engine (the stdlib bridge or the
façade's logger proxies) calls :meth:`LineRenderer.write` once per record.
Calls are not synchronised here; callers funnel records through one writer at
a time.
"""

from __future__ import annotations

import logging
from typing import IO, Any, Callable, Mapping

from rich.console import Console
from rich.text import Text

from lib_log_compact.adapters.console.colors import ColorSpec, ColorTable
from lib_log_compact.application.ports.console import ConsolePort
from lib_log_compact.application.use_cases.render_record import (
    RenderedLine,
    Role,
    compose_full,
    compose_lines,
)
from lib_log_compact.domain.events import LogRecord
from lib_log_compact.domain.levels import LogLevel
from lib_log_compact.domain.state import RendererState

LOGGER = logging.getLogger(__name__)

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None

ROLE_STYLES: Mapping[Role, str] = {
    Role.TIMESTAMP: "bright_black",
    Role.BRACKET: "white",
    Role.SOURCE: "bold white",
}


class LineRenderer(ConsolePort):
    """Render log records with header de-duplication.

    Examples
    --------
    >>> from datetime import datetime
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=80)
    >>> renderer = LineRenderer(console)
    >>> ts = datetime(2025, 9, 30, 12, 0, 0)
    >>> renderer.write(LogRecord(LogLevel.ERROR, "MyApp", ts, "First error"))
    >>> renderer.write(LogRecord(LogLevel.ERROR, "MyApp", ts, "Second error"))
    >>> print(console.export_text(), end="")
    [12:00:00] [MyApp]  EROR  First error
                               Second error
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        stream: IO[str] | None = None,
        force_color: bool = False,
        no_color: bool = False,
        colors: ColorTable | Mapping[LogLevel | str, ColorSpec] | None = None,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        """Configure the console and the badge colours."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(
                file=stream,
                force_terminal=True if force_color else None,
                no_color=no_color,
                highlight=False,
                soft_wrap=True,
            )
        self._no_color = no_color
        self._colors = colors if isinstance(colors, ColorTable) else ColorTable(colors)
        self._diagnostic = diagnostic
        self._state = RendererState()

    @property
    def console(self) -> Console:
        return self._console

    @property
    def state(self) -> RendererState:
        return self._state

    @property
    def colors(self) -> ColorTable:
        return self._colors

    def set_color(self, level: LogLevel | str, color: ColorSpec) -> None:
        """Paint ``level`` badges with ``color`` from the next record on.

        Raises
        ------
        ValueError
            When ``level`` or ``color`` cannot be parsed.
        """
        self._colors = self._colors.with_color(level, color)

    def write(self, record: LogRecord) -> None:
        """Render ``record`` as one or more console lines; never raises."""

        try:
            self._write(record)
        except Exception as exc:  # noqa: BLE001
            LOGGER.error("Rendering a record failed; record dropped", exc_info=exc)
            self._emit_diagnostic("render_failed", {"error": repr(exc)})

    render = write

    def _write(self, record: LogRecord) -> None:
        continuity = self._state.advance(record)
        try:
            lines = compose_lines(record, continuity)
        except Exception as exc:  # noqa: BLE001
            LOGGER.warning("Compacting a record from %r failed; rendering the full header", record.source_name, exc_info=exc)
            self._emit_diagnostic("render_fallback", {"source_name": repr(record.source_name), "error": repr(exc)})
            lines = compose_full(record)

        try:
            for line in lines:
                self._console.print(self._stylise(line), soft_wrap=True, highlight=False)
        except Exception as exc:  # noqa: BLE001
            LOGGER.error("Console write failed; record dropped", exc_info=exc)
            self._emit_diagnostic("write_failed", {"source_name": repr(record.source_name), "error": repr(exc)})

    def flush(self) -> None:
        file = self._console.file
        flush = getattr(file, "flush", None)
        if callable(flush):
            flush()

    def _stylise(self, line: RenderedLine) -> Text:
        text = Text(no_wrap=True)
        for fragment in line.fragments:
            if self._no_color or fragment.role is Role.TEXT:
                text.append(fragment.text)
            elif fragment.role is Role.BADGE:
                text.append(fragment.text, style=self._colors.style_for(line.level))
            else:
                text.append(fragment.text, style=ROLE_STYLES[fragment.role])
        return text

    def _emit_diagnostic(self, event: str, payload: dict[str, Any]) -> None:
        if self._diagnostic is None:
            return
        try:
            self._diagnostic(event, payload)
        except Exception as diagnostic_exc:  # noqa: BLE001
            LOGGER.error("Renderer diagnostic hook raised while reporting %s", event, exc_info=diagnostic_exc)


__all__ = ["LineRenderer", "ROLE_STYLES"]
