"""
Notifier Config — Public API
==============================
"""

from notifier.config.settings import DEFAULT_TRACE_FILENAME, NotifierSettings

__all__ = [
    "DEFAULT_TRACE_FILENAME",
    "NotifierSettings",
]
