"""
Notifier Django adapter.
Thin framework glue: settings → notifier defaults, request → page context.
"""

from adapters.django_notifier.middleware import PageContextMiddleware, page_for_request

__all__ = [
    "PageContextMiddleware",
    "page_for_request",
]
