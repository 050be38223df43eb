"""Compact, aligned, colourised console log lines.

Build a renderer with :func:`init`, log through :func:`get` or route the
stdlib :mod:`logging` engine into it with :func:`attach`, and release it with
:func:`shutdown`. The building blocks (:class:`LineRenderer`,
:class:`LogRecord`, :class:`RendererState`) can also be used directly.
"""

from __future__ import annotations

from .adapters import COLOR_THEMES, ColorTable, LineRenderer, LineRendererHandler
from .application.use_cases import RenderedLine, render_record
from .domain import LogLevel, LogRecord, RendererState, RenderMode
from .lib_log_compact import LoggerProxy, attach, get, init, logdemo, shutdown, summary_info

__all__ = [
    "COLOR_THEMES",
    "ColorTable",
    "LineRenderer",
    "LineRendererHandler",
    "LogLevel",
    "LogRecord",
    "LoggerProxy",
    "RenderMode",
    "RenderedLine",
    "RendererState",
    "attach",
    "get",
    "init",
    "logdemo",
    "render_record",
    "shutdown",
    "summary_info",
]
