"""Domain entities and value objects used by the line renderer."""

from __future__ import annotations

from .events import LogRecord
from .layout import HeaderLayout, RenderMode
from .levels import LogLevel, badge_for
from .state import Continuity, RendererState

__all__ = [
    "Continuity",
    "HeaderLayout",
    "LogLevel",
    "LogRecord",
    "RenderMode",
    "RendererState",
    "badge_for",
]
