"""
Notifier Context — Page Context
=================================
The page (or admin script) currently being served. Trace lines
include it as [main_page=...]. The hosting layer sets it per request;
outside a request it is the empty string.
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Iterator

HOME_PAGE = "index-home"

page_ctx: contextvars.ContextVar[str] = contextvars.ContextVar(
    "notifier_page", default=""
)


def current_page() -> str:
    return page_ctx.get()


def set_current_page(page: str) -> contextvars.Token:
    return page_ctx.set(page or "")


def reset_current_page(token: contextvars.Token) -> None:
    page_ctx.reset(token)


@contextmanager
def page_context(page: str) -> Iterator[str]:
    """Set the page for the duration of the block."""
    token = set_current_page(page)
    try:
        yield current_page()
    finally:
        reset_current_page(token)
