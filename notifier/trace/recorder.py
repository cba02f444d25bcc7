"""
Notifier Trace — Recorder
===========================
Writes one line per notify() call when tracing is enabled:

    2025-06-01 12:00:00 [main_page=checkout] NOTIFY_ORDER_PLACED, array (...)

Tracing is best-effort. A rendering or sink failure is logged and
swallowed; it never reaches the notifying caller.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from notifier.context.page import current_page
from notifier.time.clock import Clock, format_timestamp, get_default_clock
from notifier.trace.modes import TraceMode, parse_trace_mode
from notifier.trace.render import render_print_r, render_var_export
from notifier.trace.sinks import LoggerTraceSink, TraceSink

logger = logging.getLogger("notifier.trace")

_RENDERERS: Dict[TraceMode, Callable[[Any], str]] = {
    TraceMode.VAR_EXPORT: render_var_export,
    TraceMode.PRINT_R: render_print_r,
}


class NotifierTrace:
    """Diagnostic recorder for dispatched events."""

    def __init__(
        self,
        mode: Any = TraceMode.OFF,
        sink: Optional[TraceSink] = None,
        clock: Optional[Clock] = None,
        page_provider: Optional[Callable[[], str]] = None,
    ) -> None:
        self.mode = parse_trace_mode(mode)
        self.sink = sink if sink is not None else LoggerTraceSink()
        self._clock = clock
        self._page_provider = page_provider or current_page

    @property
    def enabled(self) -> bool:
        return self.mode.enabled

    def format_line(self, event_id: str, params: Any) -> str:
        clock = self._clock or get_default_clock()
        output = ""
        present = params.present() if params is not None else {}
        renderer = _RENDERERS.get(self.mode)
        if present and renderer is not None:
            output = ", " + renderer(present).rstrip("\n")
        return (
            f"{format_timestamp(clock.now())} "
            f"[main_page={self._page_provider()}] {event_id}{output}"
        )

    def record(self, event_id: str, params: Any = None) -> None:
        if not self.enabled:
            return
        try:
            self.sink.write(self.format_line(event_id, params))
        except Exception as exc:
            logger.warning(
                f"Trace write failed for '{event_id}': {exc}",
                exc_info=True,
            )


# ══════════════════════════════════════════════════════════════
# DEFAULT TRACE (off until configured)
# ══════════════════════════════════════════════════════════════

_default_trace: NotifierTrace = NotifierTrace(TraceMode.OFF)


def set_default_trace(trace: NotifierTrace) -> None:
    global _default_trace
    _default_trace = trace


def get_default_trace() -> NotifierTrace:
    return _default_trace
