"""
Tests for notifier.trace — modes, sinks and the trace recorder.
"""

import logging
from datetime import datetime, timezone

import pytest

from notifier.events.params import NotifyParams
from notifier.trace.modes import TraceMode, parse_trace_mode
from notifier.trace.recorder import (
    NotifierTrace,
    get_default_trace,
    set_default_trace,
)
from notifier.trace.sinks import FileTraceSink, LoggerTraceSink
from notifier.time.clock import FixedClock

T0 = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class RecordingSink:
    def __init__(self):
        self.lines = []

    def write(self, line):
        self.lines.append(line)


class BrokenSink:
    def write(self, line):
        raise OSError("log directory missing")


def _trace(mode, sink, page="checkout"):
    return NotifierTrace(mode, sink, clock=FixedClock(T0), page_provider=lambda: page)


# ══════════════════════════════════════════════════════════════
# MODES
# ══════════════════════════════════════════════════════════════

class TestParseTraceMode:
    @pytest.mark.parametrize("value", [None, "", "false", "Off", "off", False])
    def test_off(self, value):
        assert parse_trace_mode(value) is TraceMode.OFF

    @pytest.mark.parametrize("value", ["var_export", "var_dump", "true", True, "VAR_EXPORT"])
    def test_var_export(self, value):
        assert parse_trace_mode(value) is TraceMode.VAR_EXPORT

    @pytest.mark.parametrize("value", ["print_r", "On", "on"])
    def test_print_r(self, value):
        assert parse_trace_mode(value) is TraceMode.PRINT_R

    @pytest.mark.parametrize("value", ["1", "yes", "verbose"])
    def test_unrecognized_enables_event_only(self, value):
        assert parse_trace_mode(value) is TraceMode.EVENT_ONLY

    def test_passthrough(self):
        assert parse_trace_mode(TraceMode.PRINT_R) is TraceMode.PRINT_R

    def test_enabled(self):
        assert not TraceMode.OFF.enabled
        assert TraceMode.EVENT_ONLY.enabled


# ══════════════════════════════════════════════════════════════
# RECORDER
# ══════════════════════════════════════════════════════════════

class TestNotifierTrace:
    def test_off_writes_nothing(self):
        sink = RecordingSink()
        _trace(TraceMode.OFF, sink).record("EVT", NotifyParams({"a": 1}))
        assert sink.lines == []

    def test_line_without_params(self):
        sink = RecordingSink()
        _trace(TraceMode.VAR_EXPORT, sink).record("NOTIFY_HEADER_START", NotifyParams())
        assert sink.lines == ["2025-06-01 12:00:00 [main_page=checkout] NOTIFY_HEADER_START"]

    def test_var_export_line(self):
        sink = RecordingSink()
        _trace(TraceMode.VAR_EXPORT, sink).record(
            "ORDER_PLACED", NotifyParams({"orderId": 42})
        )
        assert sink.lines == [
            "2025-06-01 12:00:00 [main_page=checkout] ORDER_PLACED, array (\n"
            "  'param1' => \n"
            "  array (\n"
            "    'orderId' => 42,\n"
            "  ),\n"
            ")"
        ]

    def test_print_r_line(self):
        sink = RecordingSink()
        _trace(TraceMode.PRINT_R, sink, page="").record(
            "ORDER_PLACED", NotifyParams({}, 5)
        )
        assert sink.lines == [
            "2025-06-01 12:00:00 [main_page=] ORDER_PLACED, Array\n"
            "(\n"
            "    [param2] => 5\n"
            ")"
        ]

    def test_event_only_skips_params(self):
        sink = RecordingSink()
        _trace(TraceMode.EVENT_ONLY, sink).record("EVT", NotifyParams({"a": 1}))
        assert sink.lines == ["2025-06-01 12:00:00 [main_page=checkout] EVT"]

    def test_sink_failure_is_swallowed_and_logged(self, caplog):
        trace = _trace(TraceMode.PRINT_R, BrokenSink())
        with caplog.at_level(logging.WARNING, logger="notifier.trace"):
            trace.record("EVT", NotifyParams({"a": 1}))
        assert "Trace write failed for 'EVT'" in caplog.text

    def test_render_failure_is_swallowed(self):
        class Exploding:
            def present(self):
                raise ValueError("bad params")

        sink = RecordingSink()
        _trace(TraceMode.VAR_EXPORT, sink).record("EVT", Exploding())
        assert sink.lines == []

    def test_mode_from_setting_value(self):
        assert NotifierTrace("print_r", RecordingSink()).mode is TraceMode.PRINT_R

    def test_default_page_from_context(self):
        from notifier.context.page import page_context

        sink = RecordingSink()
        trace = NotifierTrace(TraceMode.EVENT_ONLY, sink, clock=FixedClock(T0))
        with page_context("shopping_cart"):
            trace.record("EVT")
        assert sink.lines == ["2025-06-01 12:00:00 [main_page=shopping_cart] EVT"]


class TestDefaultTrace:
    def test_set_and_get_default(self):
        original = get_default_trace()
        custom = NotifierTrace(TraceMode.PRINT_R, RecordingSink())
        set_default_trace(custom)
        try:
            assert get_default_trace() is custom
        finally:
            set_default_trace(original)


# ══════════════════════════════════════════════════════════════
# SINKS
# ══════════════════════════════════════════════════════════════

class TestSinks:
    def test_file_sink_appends(self, tmp_path):
        path = tmp_path / "notifier_trace.log"
        sink = FileTraceSink(path)
        sink.write("first")
        sink.write("second")
        assert path.read_text(encoding="utf-8") == "first\nsecond\n"

    def test_file_sink_missing_directory_raises(self, tmp_path):
        sink = FileTraceSink(tmp_path / "missing" / "trace.log")
        with pytest.raises(OSError):
            sink.write("line")

    def test_file_sink_failure_swallowed_by_recorder(self, tmp_path):
        sink = FileTraceSink(tmp_path / "missing" / "trace.log")
        _trace(TraceMode.EVENT_ONLY, sink).record("EVT")

    def test_logger_sink(self, caplog):
        sink = LoggerTraceSink()
        with caplog.at_level(logging.INFO, logger="notifier.trace"):
            sink.write("2025-06-01 12:00:00 [main_page=] EVT")
        assert "[main_page=] EVT" in caplog.text

    def test_logger_sink_custom_logger(self):
        custom = logging.getLogger("tests.trace")
        assert LoggerTraceSink(custom).logger is custom
