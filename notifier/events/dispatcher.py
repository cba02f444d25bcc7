"""
Notifier Events — Dispatcher
==============================
Routes a notified event to every matching observer.

Dispatch behavior:
1. Record the event in the trace log (no-op unless enabled)
2. Return immediately if no observer is registered
3. Snapshot the registry
4. For each registration, in insertion order:
   - match on the event id, the '*' wildcard, or a legacy alias
   - resolve the observer's handler method
   - call it with (notifier, actual_event_id, params)
5. Each observer gets its own copy of param1; param2-9 are shared

Handler exceptions propagate to the caller unchanged. Observers
after the failing one are not called.

Observers may attach, detach or notify from inside a handler.
The in-progress dispatch keeps iterating its own snapshot.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from notifier.events.aliases import AliasTable, get_default_aliases
from notifier.events.observer import resolve_handler
from notifier.events.params import _UNSET, NotifyParams
from notifier.events.registry import (
    WILDCARD,
    ObserverRegistry,
    get_default_registry,
)
from notifier.trace.recorder import NotifierTrace, get_default_trace

logger = logging.getLogger("notifier.events")


def match_event(
    record_event_id: str, event_id: str, aliases: AliasTable
) -> Optional[str]:
    """
    Decide whether a registration hears event_id.

    Returns the event id the observer sees (its own legacy name when
    matched through an alias), or None when it does not match.
    """
    if record_event_id == event_id or record_event_id == WILDCARD:
        return event_id
    if (
        aliases.has_alias(event_id)
        and aliases.is_legacy(record_event_id)
        and aliases.substitute(record_event_id) == event_id
    ):
        return record_event_id
    return None


class Notifier:
    """
    Base class for anything that announces events.

    Every Notifier built without an explicit registry shares the
    process-wide default registry, so an observer attached through
    one notifier hears events from all of them.
    """

    def __init__(
        self,
        registry: Optional[ObserverRegistry] = None,
        trace: Optional[NotifierTrace] = None,
        aliases: Optional[AliasTable] = None,
    ):
        self._registry = registry
        self._trace = trace
        self._aliases = aliases

    @property
    def registry(self) -> ObserverRegistry:
        return self._registry if self._registry is not None else get_default_registry()

    @property
    def trace(self) -> NotifierTrace:
        return self._trace if self._trace is not None else get_default_trace()

    @property
    def aliases(self) -> AliasTable:
        return self._aliases if self._aliases is not None else get_default_aliases()

    def attach(self, observer: Any, event_ids: Iterable[str]) -> None:
        self.registry.attach(observer, event_ids)

    def detach(self, observer: Any, event_ids: Iterable[str]) -> None:
        self.registry.detach(observer, event_ids)

    def notify(
        self,
        event_id: str,
        param1: Any = _UNSET,
        param2: Any = None,
        param3: Any = None,
        param4: Any = None,
        param5: Any = None,
        param6: Any = None,
        param7: Any = None,
        param8: Any = None,
        param9: Any = None,
        *,
        params: Optional[NotifyParams] = None,
    ) -> None:
        """
        Announce event_id to every matching observer.

        Args:
            event_id:  Event being announced.
            param1:    Payload, passed by value (defaults to an empty dict).
            param2-9:  Shared slots observers may overwrite.
            params:    A caller-held bundle, instead of param1-9. Writes
                       to its param2-9 are visible after notify() returns.
        """
        if params is None:
            params = NotifyParams(
                param1,
                param2, param3, param4, param5,
                param6, param7, param8, param9,
            )
        elif param1 is not _UNSET or any(
            p is not None
            for p in (param2, param3, param4, param5,
                      param6, param7, param8, param9)
        ):
            raise TypeError("notify() takes either params= or param1-9, not both.")

        self.trace.record(event_id, params)

        registry = self.registry
        if registry.is_empty():
            return

        aliases = self.aliases
        for record in registry.snapshot():
            actual_event_id = match_event(record.event_id, event_id, aliases)
            if actual_event_id is None:
                continue

            handler = resolve_handler(record.observer, actual_event_id)
            logger.debug(
                f"Dispatching {actual_event_id} → "
                f"{record.observer_identity}.{getattr(handler, '__name__', handler)}"
            )
            handler(self, actual_event_id, params.for_observer())
