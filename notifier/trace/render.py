"""
Notifier Trace — Renderers
============================
Readable dumps of dispatch parameters, in the two layouts the trace
log has always used:

var_export:
    array (
      'param1' =>
      array (
        'order_id' => 42,
      ),
    )

print_r:
    Array
    (
        [param1] => Array
            (
                [order_id] => 42
            )

    )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Tuple


def _items(value: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple, set, frozenset))


def _object_state(value: Any) -> dict:
    return dict(getattr(value, "__dict__", {}))


def _has_state(value: Any) -> bool:
    return not _is_container(value) and hasattr(value, "__dict__") and not callable(value)


# ══════════════════════════════════════════════════════════════
# var_export
# ══════════════════════════════════════════════════════════════

def _quote(text: str) -> str:
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _export_scalar(value: Any) -> str:
    if value is None:
        return "NULL"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return _quote(value)
    return _quote(repr(value))


def _export_key(key: Any) -> str:
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    return _quote(str(key))


def render_var_export(value: Any, indent: str = "") -> str:
    if _has_state(value):
        name = type(value).__qualname__
        return (
            f"\\{name}::__set_state("
            + render_var_export(_object_state(value), indent)
            + ")"
        )
    if not _is_container(value):
        return _export_scalar(value)
    if isinstance(value, (set, frozenset)):
        value = sorted(value, key=repr)

    inner = indent + "  "
    lines = ["array ("]
    for key, item in _items(value):
        if _is_container(item) or _has_state(item):
            lines.append(f"{inner}{_export_key(key)} => ")
            lines.append(f"{inner}{render_var_export(item, inner)},")
        else:
            lines.append(f"{inner}{_export_key(key)} => {_export_scalar(item)},")
    lines.append(f"{indent})")
    return "\n".join(lines)


# ══════════════════════════════════════════════════════════════
# print_r
# ══════════════════════════════════════════════════════════════

def _print_scalar(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def render_print_r(value: Any, indent: str = "") -> str:
    if _has_state(value):
        header = f"{type(value).__qualname__} Object"
        value = _object_state(value)
    elif _is_container(value):
        header = "Array"
        if isinstance(value, (set, frozenset)):
            value = sorted(value, key=repr)
    else:
        return _print_scalar(value)

    inner = indent + "    "
    out = [f"{header}\n", f"{indent}(\n"]
    for key, item in _items(value):
        out.append(f"{inner}[{key}] => {render_print_r(item, inner + '    ')}\n")
    out.append(f"{indent})\n")
    return "".join(out)
