"""
Notifier Events — Public API
==============================
Observers register for event ids; notifiers announce them.
"""

from notifier.events.aliases import (
    DEFAULT_ALIASES,
    AliasTable,
    get_default_aliases,
    set_default_aliases,
)
from notifier.events.dispatcher import Notifier, match_event
from notifier.events.errors import (
    NotifierError,
    ObserverContractError,
    UnknownAliasError,
)
from notifier.events.naming import GENERIC_HANDLER, camelize, handler_name_for
from notifier.events.observer import Observer, handles, resolve_handler
from notifier.events.params import NotifyParams
from notifier.events.registry import (
    WILDCARD,
    ObserverRegistry,
    RegistrationRecord,
    get_default_registry,
    observer_identity,
    registration_key,
    set_default_registry,
)

__all__ = [
    "DEFAULT_ALIASES",
    "AliasTable",
    "get_default_aliases",
    "set_default_aliases",
    "Notifier",
    "match_event",
    "NotifierError",
    "ObserverContractError",
    "UnknownAliasError",
    "GENERIC_HANDLER",
    "camelize",
    "handler_name_for",
    "Observer",
    "handles",
    "resolve_handler",
    "NotifyParams",
    "WILDCARD",
    "ObserverRegistry",
    "RegistrationRecord",
    "get_default_registry",
    "set_default_registry",
    "observer_identity",
    "registration_key",
]
