"""Console port describing the sink contract the logging engine calls.

Purpose
-------
Define the narrow ``write(record)`` callback a logging engine needs to feed a
terminal sink, so the engine never depends on a concrete renderer class.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol with ``write`` and ``flush``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_compact.domain.events import LogRecord


@runtime_checkable
class ConsolePort(Protocol):
    """Render a log record to an interactive console."""

    def write(self, record: LogRecord) -> None:
        """Render ``record``; must never raise."""

    def flush(self) -> None:
        """Make previously written lines visible."""


__all__ = ["ConsolePort"]
