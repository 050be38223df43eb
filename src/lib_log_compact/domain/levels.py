"""Log level abstraction carrying the fixed-width console badges.

Purpose
-------
Offer a domain-specific representation of the severities the line renderer
understands, augmenting the stdlib levels with the six-character badges shown
in every full header.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* :func:`badge_for` helper that tolerates values outside the enum.
* ``_BADGE_TABLE`` constant mapping levels to badges.

System Role
-----------
Used by the renderer to decide the badge text and colour of a header, and by
the stdlib bridge to translate :mod:`logging` level numbers.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

BADGE_WIDTH = 6
UNKNOWN_BADGE = " UNKN "


class LogLevel(Enum):
    """Enumerated logging levels rendered with a dedicated badge."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @property
    def badge(self) -> str:
        """Return the padded six-character badge shown in full headers."""

        return _BADGE_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging level integer into :class:`LogLevel`."""
        return cls.from_numeric(level)

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` corresponding to ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


_BADGE_TABLE = {
    LogLevel.DEBUG: " DEBG ",
    LogLevel.INFO: " INFO ",
    LogLevel.WARNING: " WARN ",
    LogLevel.ERROR: " EROR ",
}
# Console badges displayed in full headers, all exactly BADGE_WIDTH wide.

_ALIASES = {"WARN": "WARNING", "ERR": "ERROR"}


def badge_for(level: Any) -> str:
    """Return the badge for ``level``, falling back to ``" UNKN "``.

    Examples
    --------
    >>> badge_for(LogLevel.ERROR)
    ' EROR '
    >>> badge_for(50)
    ' UNKN '
    """

    if isinstance(level, LogLevel):
        return level.badge
    return UNKNOWN_BADGE


__all__ = ["BADGE_WIDTH", "LogLevel", "UNKNOWN_BADGE", "badge_for"]
