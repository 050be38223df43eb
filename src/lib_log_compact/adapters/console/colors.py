"""Badge colour table for the line renderer.

Purpose
-------
Map each :class:`LogLevel` to the Rich style painted behind its badge and
translate the colour notations accepted from callers (raw ANSI SGR pairs or
Rich style strings) into :class:`rich.style.Style` objects.

Contents
--------
* :data:`DEFAULT_COLORS` - background/foreground pairs per level.
* :data:`COLOR_THEMES` - named palettes for :func:`lib_log_compact.init`.
* :func:`parse_color` - colour notation parser.
* :class:`ColorTable` - immutable level-to-style mapping.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from rich.ansi import AnsiDecoder
from rich.errors import StyleSyntaxError
from rich.style import Style

from lib_log_compact.domain.levels import LogLevel


DEFAULT_COLORS: Mapping[LogLevel, str] = {
    LogLevel.INFO: "black on green",
    LogLevel.WARNING: "black on yellow",
    LogLevel.ERROR: "white on red",
    LogLevel.DEBUG: "black on cyan",
}

_SGR_RUN = re.compile(r"(?:\x1b\[[0-9;]*m)+")

COLOR_THEMES: dict[str, dict[str, str]] = {
    "classic": {level.name: style for level, style in DEFAULT_COLORS.items()},
    "bold": {
        "DEBUG": "bold black on bright_cyan",
        "INFO": "bold black on bright_green",
        "WARNING": "bold black on bright_yellow",
        "ERROR": "bold bright_white on red",
    },
    "mono": {
        "DEBUG": "dim reverse",
        "INFO": "reverse",
        "WARNING": "bold reverse",
        "ERROR": "bold underline reverse",
    },
}
"""Built-in badge palettes keyed by theme name."""


ColorSpec = str | Style


def parse_color(value: ColorSpec) -> Style:
    """Return a :class:`Style` for ``value``.

    Raw ANSI sequences are decoded the way a terminal would read them; any
    other string is parsed as a Rich style definition. ANSI input must be a
    run of complete SGR sequences that sets at least one attribute.

    Examples
    --------
    >>> style = parse_color("\\x1b[42m\\x1b[30m")
    >>> (style.color.number, style.bgcolor.number)
    (0, 2)
    >>> parse_color("white on red").bgcolor.name
    'red'
    >>> parse_color("\\x1b[999m")
    Traceback (most recent call last):
    ...
    ValueError: ANSI colour sets no style: '\\x1b[999m'
    """
    if isinstance(value, Style):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported colour specification: {value!r}")
    if "\x1b" in value:
        if not _SGR_RUN.fullmatch(value):
            raise ValueError(f"Malformed ANSI colour: {value!r}")
        decoder = AnsiDecoder()
        decoder.decode_line(f"{value}x")
        if not decoder.style:
            raise ValueError(f"ANSI colour sets no style: {value!r}")
        return decoder.style
    try:
        return Style.parse(value)
    except StyleSyntaxError as exc:
        raise ValueError(f"Invalid colour specification: {value!r}") from exc


def _coerce_level(key: LogLevel | str) -> LogLevel:
    if isinstance(key, LogLevel):
        return key
    return LogLevel.from_name(key)


class ColorTable:
    """Immutable mapping from level to badge style.

    Levels outside :class:`LogLevel` resolve to a null style, so unknown
    badges stay neutral.
    """

    __slots__ = ("_styles",)

    def __init__(self, colors: Mapping[LogLevel | str, ColorSpec] | None = None) -> None:
        styles = {level: parse_color(spec) for level, spec in DEFAULT_COLORS.items()}
        if colors:
            for key, spec in colors.items():
                styles[_coerce_level(key)] = parse_color(spec)
        self._styles: Mapping[LogLevel, Style] = styles

    def style_for(self, level: Any) -> Style:
        if isinstance(level, LogLevel):
            return self._styles.get(level, Style.null())
        return Style.null()

    def with_color(self, level: LogLevel | str, color: ColorSpec) -> "ColorTable":
        """Return a copy of the table with ``level`` painted as ``color``."""

        merged: dict[LogLevel | str, ColorSpec] = dict(self._styles)
        merged[_coerce_level(level)] = parse_color(color)
        return ColorTable(merged)

    def as_dict(self) -> dict[str, str]:
        return {level.name: str(style) for level, style in self._styles.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorTable):
            return NotImplemented
        return dict(self._styles) == dict(other._styles)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ColorTable({self.as_dict()!r})"


__all__ = ["COLOR_THEMES", "ColorSpec", "ColorTable", "DEFAULT_COLORS", "parse_color"]
