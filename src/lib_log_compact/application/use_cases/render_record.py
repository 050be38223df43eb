"""Compose the console lines for one record.

Purpose
-------
Decide how much of the decorative header each line of a record carries and
compute the padding that keeps compacted lines aligned. The functions here are
pure: they neither touch the console nor the renderer state, which keeps them
trivially testable and reusable from any sink.

Contents
--------
* :class:`Role` / :class:`Fragment` / :class:`RenderedLine` - styled-text
  building blocks handed to the console adapter.
* :func:`split_payload` - newline splitting that keeps trailing empty lines.
* :func:`compose_lines` - mode-aware composition for a record.
* :func:`compose_full` - conservative composition used when anything fails.
* :func:`render_record` - convenience wrapper advancing a state and composing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from lib_log_compact.domain import Continuity, HeaderLayout, LogRecord, RenderMode, RendererState, badge_for


class Role(Enum):
    """Semantic role of a fragment; the console adapter maps roles to styles."""

    TIMESTAMP = "timestamp"
    BRACKET = "bracket"
    SOURCE = "source"
    BADGE = "badge"
    TEXT = "text"


@dataclass(slots=True, frozen=True)
class Fragment:
    text: str
    role: Role = Role.TEXT


@dataclass(slots=True, frozen=True)
class RenderedLine:
    """One output line without its trailing newline.

    ``level`` is only consulted for :attr:`Role.BADGE` fragments.
    """

    fragments: tuple[Fragment, ...]
    level: Any = None

    @property
    def plain(self) -> str:
        """Return the visible text of the line, free of any styling."""

        return "".join(fragment.text for fragment in self.fragments)

    @property
    def has_header(self) -> bool:
        return any(fragment.role is Role.BADGE for fragment in self.fragments)


def split_payload(payload: str) -> list[str]:
    """Split ``payload`` on ``\\n`` into a non-empty list of lines.

    Examples
    --------
    >>> split_payload("one")
    ['one']
    >>> split_payload("one\\ntwo\\n")
    ['one', 'two', '']
    >>> split_payload("")
    ['']
    """
    return payload.split("\n")


def _clock(record: LogRecord) -> str:
    return record.second.strftime("%H:%M:%S")


def _raw_clock(record: LogRecord) -> str:
    try:
        return _clock(record)
    except (OverflowError, ValueError):
        return record.timestamp.strftime("%H:%M:%S")


def _timestamp_fragments(clock: str) -> tuple[Fragment, ...]:
    return (
        Fragment("[", Role.TIMESTAMP),
        Fragment(clock, Role.TIMESTAMP),
        Fragment("]", Role.TIMESTAMP),
    )


def _full_header(record: LogRecord, source_name: str, text: str, clock: str | None = None) -> RenderedLine:
    fragments = (
        *_timestamp_fragments(_clock(record) if clock is None else clock),
        Fragment(" "),
        Fragment("[", Role.BRACKET),
        Fragment(source_name, Role.SOURCE),
        Fragment("]", Role.BRACKET),
        Fragment(" "),
        Fragment(badge_for(record.level), Role.BADGE),
        Fragment(" "),
        Fragment(text),
    )
    return RenderedLine(fragments, level=record.level)


def _time_only(record: LogRecord, indent: int, text: str) -> RenderedLine:
    fragments = (
        Fragment(f"[{_clock(record)}]"),
        Fragment(" "),
        Fragment(" " * indent),
        Fragment(text),
    )
    return RenderedLine(fragments, level=record.level)


def _suppressed(record: LogRecord, indent: int, text: str) -> RenderedLine:
    return RenderedLine((Fragment(" " * indent), Fragment(text)), level=record.level)


def compose_lines(record: LogRecord, continuity: Continuity) -> list[RenderedLine]:
    """Return the lines for ``record`` given its continuity with the previous one.

    The first line follows ``continuity.mode``; continuation lines of a
    multi-line payload always use the fully suppressed indent. The time-only
    line carries no styled fragments at all.
    """
    layout = HeaderLayout(record.source_name)
    time_only_indent = layout.time_only_indent
    suppressed_indent = layout.suppressed_indent
    first, *rest = split_payload(record.payload)

    mode = continuity.mode
    if mode is RenderMode.FULL:
        lines = [_full_header(record, record.source_name, first)]
    elif mode is RenderMode.TIME_ONLY:
        lines = [_time_only(record, time_only_indent, first)]
    else:
        lines = [_suppressed(record, suppressed_indent, first)]

    lines.extend(_suppressed(record, suppressed_indent, text) for text in rest)
    return lines


def compose_full(record: LogRecord) -> list[RenderedLine]:
    """Return the lines for ``record`` with a full header, whatever its fields hold.

    Non-string source names and payloads are converted with :func:`str`. A
    timestamp that cannot be moved to local time is printed as given.
    """
    source_name = str(record.source_name)
    payload = record.payload if isinstance(record.payload, str) else str(record.payload)
    first, *rest = split_payload(payload)
    indent = HeaderLayout(source_name).suppressed_indent
    lines = [_full_header(record, source_name, first, _raw_clock(record))]
    lines.extend(_suppressed(record, indent, text) for text in rest)
    return lines


def render_record(record: LogRecord, state: RendererState) -> list[RenderedLine]:
    """Advance ``state`` with ``record`` and return the composed lines.

    Examples
    --------
    >>> from datetime import datetime
    >>> from lib_log_compact.domain import LogLevel
    >>> state = RendererState()
    >>> ts = datetime(2025, 1, 1, 12, 0, 0)
    >>> [line.plain for line in render_record(LogRecord(LogLevel.INFO, "A", ts, "hi"), state)]
    ['[12:00:00] [A]  INFO  hi']
    >>> [line.plain for line in render_record(LogRecord(LogLevel.INFO, "A", ts, "again"), state)]
    ['                       again']
    """
    continuity = state.advance(record)
    return compose_lines(record, continuity)


__all__ = [
    "Fragment",
    "RenderedLine",
    "Role",
    "compose_full",
    "compose_lines",
    "render_record",
    "split_payload",
]
