"""
Notifier Events — Alias Table
===============================
Maps legacy event names to their canonical names.

An observer that registered under a legacy name still hears the
canonical event. Lookups run in the reverse direction at dispatch:
the dispatched (canonical) name is checked for aliases, then each
registration's stored (legacy) name is substituted and compared.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple

from notifier.events.errors import UnknownAliasError


DEFAULT_ALIASES: Dict[str, str] = {
    "NOTIFIY_ORDER_CART_SUBTOTAL_CALCULATE": "NOTIFY_ORDER_CART_SUBTOTAL_CALCULATE",
}


class AliasTable:
    """
    Static legacy → canonical event name mapping.

    Each legacy name maps to exactly one canonical name; several legacy
    names may share a canonical target.
    """

    def __init__(self, aliases: Optional[Mapping[str, str]] = None) -> None:
        source = DEFAULT_ALIASES if aliases is None else aliases
        self._aliases: Dict[str, str] = {}
        for legacy, canonical in source.items():
            if not legacy or not isinstance(legacy, str):
                raise ValueError("Alias names must be non-empty strings.")
            if not canonical or not isinstance(canonical, str):
                raise ValueError(
                    f"Alias '{legacy}' must target a non-empty string."
                )
            if legacy == canonical:
                raise ValueError(f"Alias '{legacy}' cannot target itself.")
            self._aliases[legacy] = canonical

    def has_alias(self, event_id: str) -> bool:
        """True if some legacy name targets event_id."""
        return event_id in self._aliases.values()

    def is_legacy(self, event_id: str) -> bool:
        return event_id in self._aliases

    def substitute(self, legacy_id: str) -> str:
        """
        Return the canonical name for a legacy name.

        Raises:
            UnknownAliasError: legacy_id is not a legacy alias.
                Guard with is_legacy() first.
        """
        try:
            return self._aliases[legacy_id]
        except KeyError:
            raise UnknownAliasError(legacy_id) from None

    def aliases_of(self, canonical_id: str) -> Tuple[str, ...]:
        return tuple(
            legacy
            for legacy, canonical in self._aliases.items()
            if canonical == canonical_id
        )

    def as_dict(self) -> Dict[str, str]:
        return dict(self._aliases)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)


# ══════════════════════════════════════════════════════════════
# DEFAULT ALIAS TABLE
# ══════════════════════════════════════════════════════════════

_default_aliases: AliasTable = AliasTable()


def set_default_aliases(table: AliasTable) -> None:
    """Replace the process-wide alias table."""
    global _default_aliases
    _default_aliases = table


def get_default_aliases() -> AliasTable:
    return _default_aliases
