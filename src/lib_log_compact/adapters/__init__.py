"""Adapters bridging the application layer with Rich and the stdlib logging engine."""

from __future__ import annotations

from .console import COLOR_THEMES, ColorTable, LineRenderer, parse_color
from .logging_handler import LineRendererHandler, to_log_record

__all__ = [
    "COLOR_THEMES",
    "ColorTable",
    "LineRenderer",
    "LineRendererHandler",
    "parse_color",
    "to_log_record",
]
