"""
Notifier Time — Public API
============================
Injectable clock for trace timestamps.
"""

from notifier.time.clock import (
    TIMESTAMP_FORMAT,
    Clock,
    FixedClock,
    SystemClock,
    format_timestamp,
    get_default_clock,
    set_default_clock,
)

__all__ = [
    "TIMESTAMP_FORMAT",
    "Clock",
    "FixedClock",
    "SystemClock",
    "format_timestamp",
    "get_default_clock",
    "set_default_clock",
]
