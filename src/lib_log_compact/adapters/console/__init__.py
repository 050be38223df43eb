"""Console adapters."""

from __future__ import annotations

from .colors import COLOR_THEMES, ColorTable, parse_color
from .line_renderer import LineRenderer

__all__ = ["COLOR_THEMES", "ColorTable", "LineRenderer", "parse_color"]
