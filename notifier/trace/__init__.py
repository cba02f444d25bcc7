"""
Notifier Trace — Public API
=============================
Optional diagnostic log of every dispatched event.
"""

from notifier.trace.modes import TraceMode, parse_trace_mode
from notifier.trace.recorder import (
    NotifierTrace,
    get_default_trace,
    set_default_trace,
)
from notifier.trace.render import render_print_r, render_var_export
from notifier.trace.sinks import FileTraceSink, LoggerTraceSink, TraceSink

__all__ = [
    "TraceMode",
    "parse_trace_mode",
    "NotifierTrace",
    "get_default_trace",
    "set_default_trace",
    "render_var_export",
    "render_print_r",
    "TraceSink",
    "FileTraceSink",
    "LoggerTraceSink",
]
