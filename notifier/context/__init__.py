"""
Notifier Context — Public API
===============================
Request-scoped page identifier used in trace lines.
"""

from notifier.context.page import (
    HOME_PAGE,
    current_page,
    page_context,
    reset_current_page,
    set_current_page,
)

__all__ = [
    "HOME_PAGE",
    "current_page",
    "page_context",
    "set_current_page",
    "reset_current_page",
]
