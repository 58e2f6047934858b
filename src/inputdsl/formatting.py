"""Human-readable rendering of input values for error messages."""

from __future__ import annotations

import json
from collections.abc import Mapping
from collections.abc import Set as AbstractSet
from typing import Any

from inputdsl.types import UNDEFINED, InputTypeDef, type_name

_MAX_ITEMS = 10
_MAX_DEPTH = 2


def inspect(value: Any) -> str:
    """Render a value the way it would be written as JSON-like input.

    Nested containers are cut off below a fixed depth and long lists are
    truncated, so the rendering stays on one readable line.
    """
    return _inspect(value, 0)


def _inspect(value: Any, depth: int) -> str:  # noqa: PLR0911
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, int | float):
        return repr(value)
    if isinstance(value, InputTypeDef):
        return type_name(value)
    if isinstance(value, Mapping):
        return _inspect_mapping(value, depth)
    if isinstance(value, list | tuple | AbstractSet):
        return _inspect_items(list(value), depth)
    if callable(value):
        name = getattr(value, "__name__", None)
        return f"[function {name}]" if name else "[function]"
    return repr(value)


def _inspect_mapping(value: Mapping[Any, Any], depth: int) -> str:
    if not value:
        return "{}"
    if depth >= _MAX_DEPTH:
        return "[Object]"
    entries = [f"{key}: {_inspect(item, depth + 1)}" for key, item in value.items()]
    return "{ " + ", ".join(entries) + " }"


def _inspect_items(items: list[Any], depth: int) -> str:
    if not items:
        return "[]"
    if depth >= _MAX_DEPTH:
        return "[Array]"
    rendered = [_inspect(item, depth + 1) for item in items[:_MAX_ITEMS]]
    remaining = len(items) - _MAX_ITEMS
    if remaining == 1:
        rendered.append("... 1 more item")
    elif remaining > 1:
        rendered.append(f"... {remaining} more items")
    return "[" + ", ".join(rendered) + "]"
