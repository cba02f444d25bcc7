"""
Notifier — Public API
=======================
In-process notifier / observer dispatch.

    class Cart(Notifier):
        def add(self, item):
            self.notify("NOTIFY_CART_ADD", {"item": item})

    class StockWatcher(Observer):
        def updateNotifyCartAdd(self, notifier, event_id, params):
            ...

    cart = Cart()
    cart.attach(StockWatcher(), ["NOTIFY_CART_ADD"])
"""

from notifier.bootstrap import build_trace, configure
from notifier.config import NotifierSettings
from notifier.events import (
    WILDCARD,
    AliasTable,
    Notifier,
    NotifierError,
    NotifyParams,
    Observer,
    ObserverContractError,
    ObserverRegistry,
    RegistrationRecord,
    UnknownAliasError,
    get_default_registry,
    handler_name_for,
    handles,
    set_default_registry,
)
from notifier.trace import NotifierTrace, TraceMode

__all__ = [
    "build_trace",
    "configure",
    "NotifierSettings",
    "WILDCARD",
    "AliasTable",
    "Notifier",
    "NotifierError",
    "NotifyParams",
    "Observer",
    "ObserverContractError",
    "ObserverRegistry",
    "RegistrationRecord",
    "UnknownAliasError",
    "get_default_registry",
    "set_default_registry",
    "handler_name_for",
    "handles",
    "NotifierTrace",
    "TraceMode",
]
