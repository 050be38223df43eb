"""Shutdown orchestration for the console runtime.

Purpose
-------
Provide a unified shutdown routine that detaches stdlib handlers and flushes
the console sink.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from lib_log_compact.application.ports.console import ConsolePort


def create_shutdown(
    *,
    console: ConsolePort,
    handlers: Callable[[], Sequence[tuple[logging.Logger, logging.Handler]]],
) -> Callable[[], None]:
    """Return a callable performing the shutdown sequence.

    ``handlers`` is called at shutdown time so handlers attached after the
    runtime was built are detached as well.
    """

    def shutdown() -> None:
        """Detach stdlib handlers, then flush the console."""
        for logger, handler in handlers():
            logger.removeHandler(handler)
            handler.close()
        console.flush()

    return shutdown


__all__ = ["create_shutdown"]
