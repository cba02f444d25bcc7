"""
Notifier Events — Parameter Bundle
====================================
The argument set handed to observers of one notify() call.

Rules:
- param1 is passed by value: each observer receives its own copy
  and nothing it does reaches other observers or the caller
- param2..param9 are shared slots: every observer of the call and
  the caller's bundle read and write the same storage
- None marks an unused slot

Copies follow value semantics for containers only: dicts, lists,
tuples and sets are copied recursively, any other object is shared.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Tuple

PARAM_POSITIONS = range(1, 10)

_UNSET = object()


def copy_value(value: Any) -> Any:
    """Copy containers recursively; leave other objects shared."""
    if isinstance(value, dict):
        return {key: copy_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [copy_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(copy_value(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return type(value)(value)
    return value


def _ref_property(position: int) -> property:
    def fget(self: "NotifyParams") -> Any:
        return self._refs[position - 2]

    def fset(self: "NotifyParams", value: Any) -> None:
        self._refs[position - 2] = value

    return property(fget, fset, doc=f"Shared slot param{position}.")


class NotifyParams:
    """param1 (own copy per observer) plus eight shared reference slots."""

    __slots__ = ("param1", "_refs")

    param2 = _ref_property(2)
    param3 = _ref_property(3)
    param4 = _ref_property(4)
    param5 = _ref_property(5)
    param6 = _ref_property(6)
    param7 = _ref_property(7)
    param8 = _ref_property(8)
    param9 = _ref_property(9)

    def __init__(self, param1: Any = _UNSET, *refs: Any) -> None:
        if len(refs) > 8:
            raise TypeError(f"NotifyParams takes at most 9 parameters, got {1 + len(refs)}.")
        self.param1 = {} if param1 is _UNSET else param1
        self._refs: List[Any] = list(refs) + [None] * (8 - len(refs))

    @classmethod
    def _sharing(cls, param1: Any, refs: List[Any]) -> "NotifyParams":
        bundle = cls.__new__(cls)
        bundle.param1 = param1
        bundle._refs = refs
        return bundle

    def for_observer(self) -> "NotifyParams":
        """Bundle for one observer: copied param1, the same shared slots."""
        return self._sharing(copy_value(self.param1), self._refs)

    @staticmethod
    def _check(position: int) -> None:
        if position not in PARAM_POSITIONS:
            raise IndexError(f"Parameter position must be 1-9, got {position}.")

    def __getitem__(self, position: int) -> Any:
        self._check(position)
        if position == 1:
            return self.param1
        return self._refs[position - 2]

    def __setitem__(self, position: int, value: Any) -> None:
        self._check(position)
        if position == 1:
            self.param1 = value
        else:
            self._refs[position - 2] = value

    def __iter__(self) -> Iterator[Any]:
        yield self.param1
        yield from self._refs

    def __repr__(self) -> str:
        return f"NotifyParams({', '.join(repr(v) for v in self)})"

    def as_tuple(self) -> Tuple[Any, ...]:
        return tuple(self)

    def present(self) -> Dict[str, Any]:
        """
        Slots worth reporting: every non-None slot, except an empty
        param1 collection.
        """
        result: Dict[str, Any] = {}
        if not _is_empty_collection(self.param1):
            result["param1"] = self.param1
        for position in range(2, 10):
            value = self[position]
            if value is not None:
                result[f"param{position}"] = value
        return result


def _is_empty_collection(value: Any) -> bool:
    return isinstance(value, (dict, list, tuple, set, frozenset)) and not value
