from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta
from io import StringIO

import pytest
from rich.console import Console

from lib_log_compact import config as log_config
from lib_log_compact.runtime import clear_runtime

_LOG_ENV_VARS = (
    "LOG_FORCE_COLOR",
    "LOG_NO_COLOR",
    "LOG_CONSOLE_THEME",
    "LOG_CONSOLE_COLORS",
    log_config.DOTENV_ENV_VAR,
)

T0 = datetime(2025, 9, 30, 12, 0, 0)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _LOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    try:
        yield
    finally:
        clear_runtime()


@pytest.fixture
def record_console() -> Console:
    """Plain-text console whose output is available via ``export_text``."""

    return Console(file=StringIO(), record=True, width=120, color_system=None, force_terminal=False)


@pytest.fixture
def ansi_buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def ansi_console(ansi_buffer: StringIO) -> Console:
    """Console forced into 16-colour ANSI mode writing into ``ansi_buffer``."""

    return Console(file=ansi_buffer, force_terminal=True, color_system="standard", width=200)


class FakeClock:
    """Clock returning preset timestamps, repeating the last one when exhausted."""

    def __init__(self, *offsets: float) -> None:
        self._stamps = [T0 + timedelta(seconds=offset) for offset in offsets] or [T0]
        self._index = 0

    def now(self) -> datetime:
        stamp = self._stamps[min(self._index, len(self._stamps) - 1)]
        self._index += 1
        return stamp


@pytest.fixture
def fake_clock_factory():
    return FakeClock
