"""Domain record describing one log event handed to the line renderer.

Purpose
-------
Provide an immutable representation of the already-formatted records produced
by the logging engine, plus the second-resolution view of their timestamps
the de-duplication logic compares.

Contents
--------
* :class:`LogRecord` dataclass.
* :func:`truncate_to_second` helper.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .levels import LogLevel


def truncate_to_second(ts: datetime) -> datetime:
    """Return ``ts`` in local wall time with sub-second precision dropped.

    Naive timestamps are treated as local wall time already.

    Examples
    --------
    >>> truncate_to_second(datetime(2025, 1, 2, 3, 4, 5, 678))
    datetime.datetime(2025, 1, 2, 3, 4, 5)
    """
    if ts.tzinfo is not None and ts.tzinfo.utcoffset(ts) is not None:
        ts = ts.astimezone()
    return ts.replace(microsecond=0)


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Immutable log record consumed by the renderer.

    Attributes
    ----------
    level:
        :class:`LogLevel` severity; any other value is accepted and rendered
        with the unknown badge.
    source_name:
        Logical logger or subsystem emitting the record.
    timestamp:
        Time of the event. Numeric epoch seconds are converted to a local
        :class:`datetime`.
    payload:
        Already interpolated message text, possibly empty or multi-line.
    """

    level: LogLevel | Any
    source_name: str
    timestamp: datetime
    payload: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.timestamp, (int, float)) and not isinstance(self.timestamp, bool):
            object.__setattr__(self, "timestamp", datetime.fromtimestamp(self.timestamp))
        if not isinstance(self.timestamp, datetime):
            raise TypeError("timestamp must be a datetime or epoch seconds")

    @property
    def second(self) -> datetime:
        """Return the timestamp truncated to whole seconds."""

        return truncate_to_second(self.timestamp)


__all__ = ["LogRecord", "truncate_to_second"]
