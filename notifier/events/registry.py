"""
Notifier Events — Observer Registry
=====================================
Controls which observers hear which events.

Rules:
- One registration per (observer class, event id) pair
- Re-attaching the same pair replaces the record in place
- Two instances of one class on the same event collide:
  the later attach wins
- Detaching an unknown pair is a no-op
- Enumeration is a point-in-time snapshot in insertion order
- Thread-safe mutation
- The registry does not own observer lifetimes
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

logger = logging.getLogger("notifier.events")

WILDCARD = "*"


def observer_identity(observer: Any) -> str:
    """Identity of an observer: the qualified name of its runtime class."""
    cls = type(observer)
    return f"{cls.__module__}.{cls.__qualname__}"


def registration_key(identity: str, event_id: str) -> str:
    return hashlib.md5((identity + event_id).encode("utf-8")).hexdigest()


def _as_event_ids(event_ids: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(event_ids, str):
        return (event_ids,)
    return tuple(event_ids)


@dataclass(frozen=True)
class RegistrationRecord:
    """One observer listening to one event id."""

    key: str
    observer_identity: str
    event_id: str
    observer: Any


class ObserverRegistry:
    """
    In-memory registry of observers, keyed by
    md5(observer class identity + event id).
    """

    def __init__(self):
        self._records: Dict[str, RegistrationRecord] = {}
        self._lock = Lock()

    def attach(self, observer: Any, event_ids: Iterable[str]) -> None:
        """
        Register observer for each event id.

        Args:
            observer:  Any object exposing update() or a specific handler.
            event_ids: Event ids to listen for ('*' for every event).
        """
        identity = observer_identity(observer)
        names = _as_event_ids(event_ids)

        with self._lock:
            for event_id in names:
                key = registration_key(identity, event_id)
                self._records[key] = RegistrationRecord(
                    key=key,
                    observer_identity=identity,
                    event_id=event_id,
                    observer=observer,
                )

        logger.debug(f"Observer attached: {identity} → {list(names)}")

    def detach(self, observer: Any, event_ids: Iterable[str]) -> None:
        """Remove registrations for observer; unknown ids are ignored."""
        identity = observer_identity(observer)
        names = _as_event_ids(event_ids)

        with self._lock:
            for event_id in names:
                self._records.pop(registration_key(identity, event_id), None)

        logger.debug(f"Observer detached: {identity} ← {list(names)}")

    def snapshot(self) -> Tuple[RegistrationRecord, ...]:
        with self._lock:
            return tuple(self._records.values())

    def get(self, observer: Any, event_id: str) -> Optional[RegistrationRecord]:
        key = registration_key(observer_identity(observer), event_id)
        with self._lock:
            return self._records.get(key)

    def is_attached(self, observer: Any, event_id: str) -> bool:
        """True if observer's class is registered for event_id."""
        return self.get(observer, event_id) is not None

    def event_ids_for(self, observer: Any) -> Tuple[str, ...]:
        identity = observer_identity(observer)
        return tuple(
            record.event_id
            for record in self.snapshot()
            if record.observer_identity == identity
        )

    def is_empty(self) -> bool:
        with self._lock:
            return not self._records

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __iter__(self) -> Iterator[RegistrationRecord]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


# ══════════════════════════════════════════════════════════════
# DEFAULT REGISTRY (shared by every notifier built without one)
# ══════════════════════════════════════════════════════════════

_default_registry: Optional[ObserverRegistry] = None
_default_registry_lock = Lock()


def get_default_registry() -> ObserverRegistry:
    """Process-wide registry, created on first use."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = ObserverRegistry()
        return _default_registry


def set_default_registry(registry: Optional[ObserverRegistry]) -> None:
    """Override the process-wide registry (None recreates it lazily)."""
    global _default_registry
    with _default_registry_lock:
        _default_registry = registry
