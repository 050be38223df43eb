"""Header geometry used to align suppressed headers.

Purpose
-------
Capture the column arithmetic that keeps compacted lines aligned under where
the omitted header would have been printed. Widths are measured in visible
characters; colour escapes never count.

Contents
--------
* :class:`RenderMode` - the three header verbosity levels.
* :class:`HeaderLayout` - widths derived from a source name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .levels import BADGE_WIDTH

TIMESTAMP_WIDTH = 10
"""Width of ``[HH:MM:SS]`` including brackets."""

HEADER_GAP = 2
"""Spacing between the timestamp field and the source segment in suppressed indents."""


class RenderMode(Enum):
    """Header verbosity chosen for the first line of a record."""

    FULL = "full"
    TIME_ONLY = "time_only"
    SUPPRESSED = "suppressed"


@dataclass(slots=True, frozen=True)
class HeaderLayout:
    """Derived widths for one source name; recomputed for every record.

    Examples
    --------
    >>> layout = HeaderLayout("A")
    >>> layout.source_width, layout.time_only_indent, layout.suppressed_indent
    (11, 11, 23)
    """

    source_name: str

    @property
    def source_width(self) -> int:
        """Width of ``[source_name] BADGE `` (brackets, space, badge, space)."""

        return len(self.source_name) + 2 + 1 + BADGE_WIDTH + 1

    @property
    def time_only_indent(self) -> int:
        return self.source_width

    @property
    def suppressed_indent(self) -> int:
        return TIMESTAMP_WIDTH + HEADER_GAP + self.source_width


__all__ = ["HEADER_GAP", "HeaderLayout", "RenderMode", "TIMESTAMP_WIDTH"]
