"""
Notifier Events — Handler Method Naming
=========================================
Event id → observer method name convention.

    NOTIFY_ORDER_CART_SUBTOTAL_CALCULATE
        → updateNotifyOrderCartSubtotalCalculate
"""

from __future__ import annotations

import re

GENERIC_HANDLER = "update"

_BOUNDARY = re.compile(r"[_-]([0-9,a-z])")


def camelize(raw_name: str, camel_first: bool = False) -> str:
    """
    Collapse '_' / '-' boundaries into camel case.

    Only a delimiter followed by [0-9,a-z] is consumed; any other
    delimiter is left in place.
    """
    if raw_name == "":
        return raw_name
    if camel_first:
        raw_name = raw_name[0].upper() + raw_name[1:]
    return _BOUNDARY.sub(lambda match: match.group(1).upper(), raw_name)


def handler_name_for(event_id: str) -> str:
    """Specific handler method name for an event id ('' for '')."""
    if not event_id:
        return ""
    return GENERIC_HANDLER + camelize(event_id.lower(), camel_first=True)
