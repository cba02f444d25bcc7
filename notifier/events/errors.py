"""
Notifier Events — Errors
==========================
Error types for the observer registry and dispatcher.

Registration never raises: duplicate attach replaces, detach of an
unknown key is a no-op. Failures raised inside observer handlers are
NOT wrapped here; they propagate to the notifying caller unchanged.
"""


class NotifierError(Exception):
    """Base error for notifier operations."""
    pass


class UnknownAliasError(NotifierError):
    """Alias substitution requested for a name that is not a legacy alias."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(
            f"Event id '{event_id}' is not a registered legacy alias."
        )


class ObserverContractError(NotifierError):
    """Observer exposes neither a specific handler nor a generic update()."""

    def __init__(self, observer_identity: str, event_id: str):
        self.observer_identity = observer_identity
        self.event_id = event_id
        super().__init__(
            f"Observer '{observer_identity}' has no callable handler "
            f"for event '{event_id}'."
        )
