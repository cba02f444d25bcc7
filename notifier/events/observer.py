"""
Notifier Events — Observer Contract
=====================================
Observers receive events through one of:

1. A method marked with @handles(event_id, ...)
2. A method named by convention, e.g. updateNotifyOrderPlaced
3. The generic update(notifier, event_id, params)

Resolution follows that order. Observers do not have to subclass
Observer; plain objects are resolved through (2) and (3).
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, TypeVar

from notifier.events.errors import ObserverContractError
from notifier.events.naming import GENERIC_HANDLER, handler_name_for
from notifier.events.registry import observer_identity

HANDLES_ATTR = "__notifier_handles__"

F = TypeVar("F", bound=Callable[..., Any])


def handles(*event_ids: str) -> Callable[[F], F]:
    """Mark a method as the specific handler for event_ids."""
    if not event_ids:
        raise ValueError("handles() requires at least one event id.")

    def decorator(func: F) -> F:
        existing = getattr(func, HANDLES_ATTR, ())
        setattr(func, HANDLES_ATTR, tuple(existing) + tuple(event_ids))
        return func

    return decorator


class Observer:
    """
    Base class for observers.

    Subclasses override update() and/or mark specific handlers
    with @handles. The handler table is built once per class.
    """

    _event_handlers: ClassVar[Dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        table: Dict[str, str] = {}
        for base in reversed(cls.__mro__[1:]):
            table.update(getattr(base, "_event_handlers", {}))
        for attr_name, value in vars(cls).items():
            for event_id in getattr(value, HANDLES_ATTR, ()):
                table[event_id] = attr_name
        cls._event_handlers = table

    def update(self, notifier: Any, event_id: str, params: Any) -> None:
        """Generic handler. Default: ignore the event."""
        return None


def resolve_handler(observer: Any, event_id: str) -> Callable[..., Any]:
    """
    Find the bound method observer should receive event_id on.

    Raises:
        ObserverContractError: no specific handler and no update().
    """
    table = getattr(type(observer), "_event_handlers", None) or {}
    candidates = []
    if event_id in table:
        candidates.append(table[event_id])
    specific = handler_name_for(event_id)
    if specific:
        candidates.append(specific)
    candidates.append(GENERIC_HANDLER)

    for name in candidates:
        method = getattr(observer, name, None)
        if callable(method):
            return method

    raise ObserverContractError(observer_identity(observer), event_id)
