"""Application use cases orchestrating the domain for the console adapters."""

from __future__ import annotations

from .render_record import (
    Fragment,
    RenderedLine,
    Role,
    compose_full,
    compose_lines,
    render_record,
    split_payload,
)
from .shutdown import create_shutdown

__all__ = [
    "Fragment",
    "RenderedLine",
    "Role",
    "compose_full",
    "compose_lines",
    "create_shutdown",
    "render_record",
    "split_payload",
]
