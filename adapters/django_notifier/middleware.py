"""
Notifier Django — Page Context Middleware
===========================================
Names the page being served so trace lines can say where an event
fired:

- '/'                          → index-home
- paths under the admin prefix → last path segment
- anything else                → ?main_page= query value, or ''
"""

from __future__ import annotations

from django.conf import settings
from django.http import HttpRequest

from notifier.context.page import HOME_PAGE, reset_current_page, set_current_page

DEFAULT_ADMIN_PREFIX = "/admin/"


def page_for_request(request: HttpRequest) -> str:
    path = request.path or "/"
    if path == "/":
        return HOME_PAGE

    admin_prefix = getattr(settings, "NOTIFIER_ADMIN_PREFIX", DEFAULT_ADMIN_PREFIX)
    if admin_prefix and path.startswith(admin_prefix):
        return path.rstrip("/").rsplit("/", 1)[-1]

    return request.GET.get("main_page", "")


class PageContextMiddleware:
    """Sets the notifier page context for the duration of a request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        token = set_current_page(page_for_request(request))
        try:
            return self.get_response(request)
        finally:
            reset_current_page(token)
