"""Continuity tracking between consecutive records.

Purpose
-------
Hold the "last seen" triple the renderer compares each incoming record
against, and turn that comparison into a :class:`RenderMode`.

System Role
-----------
Owned by exactly one :class:`~lib_log_compact.adapters.console.line_renderer.LineRenderer`
for its whole lifetime; never reset except by building a new renderer. The
transition in :meth:`RendererState.advance` is not atomic, so concurrent
callers must serialise access.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .events import LogRecord
from .layout import RenderMode


@dataclass(slots=True, frozen=True)
class Continuity:
    """Outcome of comparing a record with the previously rendered one."""

    same_source: bool
    same_time: bool
    current_time: datetime | None

    @property
    def mode(self) -> RenderMode:
        if not self.same_source:
            return RenderMode.FULL
        if not self.same_time:
            return RenderMode.TIME_ONLY
        return RenderMode.SUPPRESSED


@dataclass(slots=True)
class RendererState:
    """Level, source name and second of the most recently rendered record.

    ``same_source`` compares the level *and* the source name: a record only
    continues a run when neither changed.
    """

    last_level: Any = None
    last_source_name: str = ""
    last_time: datetime | None = None

    def advance(self, record: LogRecord) -> Continuity:
        """Compare ``record`` with the stored triple, then store its own.

        The new values are stored before anything is rendered, so a render
        that fails afterwards still moves the state forward. A timestamp that
        cannot be truncated is stored as ``None``, and a comparison that raises
        counts as a change; the triple is stored either way.

        Examples
        --------
        >>> from lib_log_compact.domain.levels import LogLevel
        >>> state = RendererState()
        >>> record = LogRecord(LogLevel.INFO, "A", datetime(2025, 1, 1, 12, 0, 0), "x")
        >>> state.advance(record).mode
        <RenderMode.FULL: 'full'>
        >>> state.advance(record).mode
        <RenderMode.SUPPRESSED: 'suppressed'>
        """
        try:
            current_time: datetime | None = record.second
        except (OverflowError, ValueError, TypeError, AttributeError):
            current_time = None
        try:
            same_source = bool(record.level == self.last_level and record.source_name == self.last_source_name)
        except Exception:  # noqa: BLE001
            same_source = False
        same_time = current_time is not None and current_time == self.last_time

        self.last_level = record.level
        self.last_source_name = record.source_name
        self.last_time = current_time

        return Continuity(same_source=same_source, same_time=same_time, current_time=current_time)


__all__ = ["Continuity", "RendererState"]
