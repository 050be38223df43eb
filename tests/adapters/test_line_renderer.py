from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lib_log_compact.adapters.console.line_renderer import LineRenderer
from lib_log_compact.domain.events import LogRecord
from lib_log_compact.domain.levels import LogLevel

T0 = datetime(2025, 9, 30, 12, 0, 0)


def _record(payload: str, *, level: object = LogLevel.ERROR, source: str = "MyApp", offset: float = 0.0) -> LogRecord:
    return LogRecord(level, source, T0 + timedelta(seconds=offset), payload)


def _lines(console) -> list[str]:
    return console.export_text().splitlines()


def test_reference_scenario_output(record_console) -> None:
    renderer = LineRenderer(record_console)
    renderer.write(_record("First error"))
    renderer.write(_record("Second error"))
    renderer.write(_record("Third error"))
    renderer.write(_record("Fourth error", offset=1))
    renderer.write(_record("Info message", level=LogLevel.INFO, offset=1))

    assert _lines(record_console) == [
        "[12:00:00] [MyApp]  EROR  First error",
        " " * 27 + "Second error",
        " " * 27 + "Third error",
        "[12:00:01]" + " " * 16 + "Fourth error",
        "[12:00:01] [MyApp]  INFO  Info message",
    ]


def test_render_is_an_alias_of_write(record_console) -> None:
    renderer = LineRenderer(record_console)
    renderer.render(_record("hello"))
    assert _lines(record_console) == ["[12:00:00] [MyApp]  EROR  hello"]


def test_multiline_payload_is_split_and_aligned(record_console) -> None:
    renderer = LineRenderer(record_console)
    renderer.write(_record("line1\nline2\nline3", source="A", level=LogLevel.INFO))
    assert _lines(record_console) == [
        "[12:00:00] [A]  INFO  line1",
        " " * 23 + "line2",
        " " * 23 + "line3",
    ]


def test_long_lines_are_never_wrapped(record_console) -> None:
    renderer = LineRenderer(record_console)
    payload = "x" * 300
    renderer.write(_record(payload))
    [line] = _lines(record_console)
    assert line.endswith(payload)


def test_state_advances_once_per_record(record_console) -> None:
    renderer = LineRenderer(record_console)
    renderer.write(_record("a", source="one", level=LogLevel.DEBUG))
    renderer.write(_record("b", source="two", level=LogLevel.WARNING, offset=2.5))
    state = renderer.state
    assert (state.last_level, state.last_source_name, state.last_time) == (
        LogLevel.WARNING,
        "two",
        T0 + timedelta(seconds=2),
    )


def test_badges_are_coloured_and_time_only_lines_are_plain(ansi_console, ansi_buffer) -> None:
    renderer = LineRenderer(ansi_console)
    renderer.write(_record("first"))
    renderer.write(_record("later", offset=1))

    header, time_only = ansi_buffer.getvalue().splitlines()
    assert "\x1b[37;41m EROR \x1b[0m" in header
    assert "\x1b[90m" in header
    assert "\x1b[1;37mMyApp\x1b[0m" in header
    assert "\x1b" not in time_only
    assert time_only == "[12:00:01]" + " " * 16 + "later"


def test_default_colour_pairs(ansi_console, ansi_buffer) -> None:
    renderer = LineRenderer(ansi_console)
    renderer.write(_record("i", level=LogLevel.INFO))
    renderer.write(_record("w", level=LogLevel.WARNING))
    renderer.write(_record("d", level=LogLevel.DEBUG))
    output = ansi_buffer.getvalue()
    assert "\x1b[30;42m INFO \x1b[0m" in output
    assert "\x1b[30;43m WARN \x1b[0m" in output
    assert "\x1b[30;46m DEBG \x1b[0m" in output


def test_unknown_level_badge_is_neutral(ansi_console, ansi_buffer) -> None:
    renderer = LineRenderer(ansi_console)
    renderer.write(_record("boom", level="CRITICAL"))
    output = ansi_buffer.getvalue()
    assert " UNKN  boom" in output
    assert "m UNKN " not in output


def test_set_color_applies_to_following_records_only(ansi_console, ansi_buffer) -> None:
    renderer = LineRenderer(ansi_console)
    renderer.write(_record("before", level=LogLevel.INFO))
    renderer.set_color(LogLevel.INFO, "\x1b[45m\x1b[30m")
    renderer.write(_record("after", level=LogLevel.INFO, source="other"))
    before, after = ansi_buffer.getvalue().splitlines()
    assert "\x1b[30;42m INFO " in before
    assert "\x1b[30;45m INFO " in after


def test_set_color_rejects_unknown_levels(record_console) -> None:
    renderer = LineRenderer(record_console)
    with pytest.raises(ValueError):
        renderer.set_color("verbose", "red")


def test_no_color_strips_every_style(ansi_console, ansi_buffer) -> None:
    renderer = LineRenderer(ansi_console, no_color=True)
    renderer.write(_record("plain"))
    assert ansi_buffer.getvalue() == "[12:00:00] [MyApp]  EROR  plain\n"


def test_width_failure_falls_back_to_full_header(record_console) -> None:
    events: list[tuple[str, dict]] = []
    renderer = LineRenderer(record_console, diagnostic=lambda name, payload: events.append((name, payload)))
    renderer.write(LogRecord(LogLevel.ERROR, 42, T0, "first\nsecond"))  # type: ignore[arg-type]

    assert _lines(record_console) == [
        "[12:00:00] [42]  EROR  first",
        " " * 24 + "second",
    ]
    assert events[0][0] == "render_fallback"
    assert renderer.state.last_source_name == 42


def test_failing_record_does_not_block_later_records(record_console) -> None:
    renderer = LineRenderer(record_console)
    renderer.write(LogRecord(LogLevel.INFO, "svc", T0, None))  # type: ignore[arg-type]
    renderer.write(_record("next", level=LogLevel.INFO, source="svc"))
    assert _lines(record_console) == [
        "[12:00:00] [svc]  INFO  None",
        " " * 25 + "next",
    ]


class _BrokenStream:
    def write(self, text: str) -> int:
        raise OSError("stream closed")

    def flush(self) -> None:
        raise OSError("stream closed")


def test_write_failures_never_escape(caplog: pytest.LogCaptureFixture) -> None:
    events: list[str] = []
    renderer = LineRenderer(stream=_BrokenStream(), diagnostic=lambda name, payload: events.append(name))
    renderer.write(_record("lost"))
    renderer.write(_record("lost again"))
    assert events == ["write_failed", "write_failed"]
    assert renderer.state.last_source_name == "MyApp"
    assert "Console write failed" in caplog.text


def test_diagnostic_hook_errors_are_logged_not_raised(record_console, caplog: pytest.LogCaptureFixture) -> None:
    def explode(name: str, payload: dict) -> None:
        raise RuntimeError("hook failure")

    renderer = LineRenderer(record_console, diagnostic=explode)
    renderer.write(LogRecord(LogLevel.INFO, None, T0, "x"))  # type: ignore[arg-type]
    assert "diagnostic hook raised" in caplog.text
    assert _lines(record_console) == ["[12:00:00] [None]  INFO  x"]


def test_flush_reaches_the_stream(record_console) -> None:
    renderer = LineRenderer(record_console)
    renderer.write(_record("x"))
    renderer.flush()


def test_timestamp_that_cannot_reach_local_time_still_renders(record_console) -> None:
    events: list[str] = []
    renderer = LineRenderer(record_console, diagnostic=lambda name, payload: events.append(name))
    ancient = datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=5)))

    renderer.render(LogRecord(LogLevel.INFO, "A", ancient, "x"))
    renderer.render(_record("next", level=LogLevel.INFO, source="A"))

    assert _lines(record_console) == [
        "[00:00:00] [A]  INFO  x",
        "[12:00:00]" + " " * 12 + "next",
    ]
    assert events == ["render_fallback"]
    assert renderer.state.last_time == T0


class _HostileLevel:
    def __eq__(self, other: object) -> bool:
        raise RuntimeError("bad eq")

    __hash__ = object.__hash__


def test_level_comparison_errors_count_as_a_change(record_console) -> None:
    renderer = LineRenderer(record_console)
    level = _HostileLevel()

    renderer.render(_record("one", level=level))
    renderer.render(_record("two", level=level))

    assert _lines(record_console) == [
        "[12:00:00] [MyApp]  UNKN  one",
        "[12:00:00] [MyApp]  UNKN  two",
    ]
    assert renderer.state.last_level is level
    assert renderer.state.last_source_name == "MyApp"


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no text")

    def __repr__(self) -> str:
        return "<unprintable>"


def test_unrenderable_record_is_dropped_and_reported(record_console, caplog: pytest.LogCaptureFixture) -> None:
    events: list[str] = []
    renderer = LineRenderer(record_console, diagnostic=lambda name, payload: events.append(name))
    source = _Unprintable()

    renderer.render(LogRecord(LogLevel.INFO, source, T0, "x"))  # type: ignore[arg-type]
    renderer.render(_record("after"))

    assert events == ["render_fallback", "render_failed"]
    assert "Rendering a record failed" in caplog.text
    assert _lines(record_console) == ["[12:00:00] [MyApp]  EROR  after"]
