"""Runtime state container for the façade."""

from __future__ import annotations

from ._state import LoggingRuntime, clear_runtime, current_runtime, is_initialised, set_runtime

__all__ = ["LoggingRuntime", "clear_runtime", "current_runtime", "is_initialised", "set_runtime"]
