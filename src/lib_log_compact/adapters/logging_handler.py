"""Bridge from the stdlib :mod:`logging` engine to the line renderer.

Purpose
-------
Let applications keep using ``logging.getLogger(name)`` while records are
rendered by a :class:`~lib_log_compact.application.ports.console.ConsolePort`.
The stdlib engine owns level filtering, named logger registration and message
interpolation; this handler only converts its records.

Contents
--------
* :class:`LineRendererHandler` - :class:`logging.Handler` subclass.
* :func:`to_log_record` - conversion helper.
"""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager, nullcontext
from datetime import datetime
from typing import Any

from lib_log_compact.application.ports.console import ConsolePort
from lib_log_compact.domain.events import LogRecord
from lib_log_compact.domain.levels import LogLevel

_INTERNAL_PREFIX = "lib_log_compact"


def _coerce_level(record: logging.LogRecord) -> LogLevel | Any:
    try:
        return LogLevel.from_python_level(record.levelno)
    except ValueError:
        return record.levelname


def to_log_record(record: logging.LogRecord, message: str | None = None) -> LogRecord:
    """Translate a stdlib record into a :class:`LogRecord`.

    Levels without a badge (``CRITICAL``, custom levels) keep their level name
    and render with the unknown badge.

    Examples
    --------
    >>> std = logging.LogRecord("db", logging.WARNING, __file__, 1, "slow %s", ("query",), None)
    >>> converted = to_log_record(std)
    >>> converted.level, converted.source_name, converted.payload
    (<LogLevel.WARNING: 30>, 'db', 'slow query')
    """
    payload = record.getMessage() if message is None else message
    return LogRecord(
        level=_coerce_level(record),
        source_name=record.name,
        timestamp=datetime.fromtimestamp(record.created),
        payload=payload,
    )


class LineRendererHandler(logging.Handler):
    """Forward stdlib records to a console sink.

    Exception and stack information are appended to the payload so they
    render as continuation lines. Records emitted by this package's own
    loggers are filtered out so renderer failures cannot feed back into the
    renderer. Pass ``write_lock`` when other writers share the sink; it is
    held around every write so records from all of them are serialised.
    """

    def __init__(
        self,
        console: ConsolePort,
        level: int = logging.NOTSET,
        *,
        write_lock: AbstractContextManager[Any] | None = None,
    ) -> None:
        super().__init__(level=level)
        self._console = console
        self._write_lock = write_lock if write_lock is not None else nullcontext()
        self.addFilter(_skip_internal)

    @property
    def console(self) -> ConsolePort:
        return self._console

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            if record.exc_info and not record.exc_text:
                record.exc_text = logging.Formatter().formatException(record.exc_info)
            if record.exc_text:
                message = f"{message}\n{record.exc_text}"
            if record.stack_info:
                message = f"{message}\n{record.stack_info}"
            converted = to_log_record(record, message)
            with self._write_lock:
                self._console.write(converted)
        except RecursionError:  # See issue 36272
            raise
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def flush(self) -> None:
        self.acquire()
        try:
            self._console.flush()
        finally:
            self.release()


def _skip_internal(record: logging.LogRecord) -> bool:
    return not (record.name == _INTERNAL_PREFIX or record.name.startswith(f"{_INTERNAL_PREFIX}."))


__all__ = ["LineRendererHandler", "to_log_record"]
