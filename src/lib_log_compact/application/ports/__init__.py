"""Protocols separating the application layer from concrete adapters."""

from __future__ import annotations

from .console import ConsolePort
from .time import ClockPort

__all__ = ["ClockPort", "ConsolePort"]
