"""
Notifier Trace — Modes
========================
How (and whether) dispatches are written to the trace log.

Recognized setting values (case-insensitive):
    off         None, "", "false", "off", False
    var_export  "var_export", "var_dump", "true", True
    print_r     "print_r", "on"
Any other non-empty value enables tracing of event ids only.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

_OFF_VALUES = frozenset({"", "false", "off"})
_VAR_EXPORT_VALUES = frozenset({"var_export", "var_dump", "true"})
_PRINT_R_VALUES = frozenset({"print_r", "on"})


class TraceMode(Enum):
    OFF = "off"
    VAR_EXPORT = "var_export"
    PRINT_R = "print_r"
    EVENT_ONLY = "event_only"

    @property
    def enabled(self) -> bool:
        return self is not TraceMode.OFF


def parse_trace_mode(value: Any) -> TraceMode:
    """Map a configuration value to a TraceMode."""
    if isinstance(value, TraceMode):
        return value
    if value is None or value is False:
        return TraceMode.OFF
    if value is True:
        return TraceMode.VAR_EXPORT

    normalized = str(value).strip().lower()
    if normalized in _OFF_VALUES:
        return TraceMode.OFF
    if normalized in _VAR_EXPORT_VALUES:
        return TraceMode.VAR_EXPORT
    if normalized in _PRINT_R_VALUES:
        return TraceMode.PRINT_R
    return TraceMode.EVENT_ONLY
