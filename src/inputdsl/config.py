"""CoercionConfig: the pluggable collaborators of the coercion engine.

The engine needs three decisions it does not make itself: which names to
suggest for a misspelling, which values count as lists, and which values
count as input objects. CoercionConfig bundles them in a frozen dataclass
so a single instance can be shared across calls and threads.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from inputdsl.suggestions import MAX_SUGGESTIONS, suggestion_list


def is_collection(value: Any) -> bool:
    """Return True if value should be coerced element-wise as a list.

    Strings, bytes and mappings are iterable but count as single values.
    """
    return isinstance(value, Iterable) and not isinstance(
        value,
        str | bytes | bytearray | Mapping,
    )


def is_object_like(value: Any) -> bool:
    """Return True if value can be read as an input object."""
    return isinstance(value, Mapping)


@dataclass(frozen=True, slots=True)
class CoercionConfig:
    """Immutable configuration for input coercion.

    Attributes:
        suggest: Ranks candidate names against a misspelled one, best first.
            Must not raise.
        is_collection: Decides whether a value is iterated as a list.
        is_object_like: Decides whether a value is read as an input object.
        max_suggestions: Upper bound on names shown in a did-you-mean hint.
    """

    suggest: Callable[[str, Sequence[str]], list[str]] = suggestion_list
    is_collection: Callable[[Any], bool] = is_collection
    is_object_like: Callable[[Any], bool] = is_object_like
    max_suggestions: int = MAX_SUGGESTIONS

    def __post_init__(self) -> None:
        if self.max_suggestions < 1:
            msg = f"max_suggestions must be >= 1, got {self.max_suggestions}"
            raise ValueError(msg)


DEFAULT_CONFIG = CoercionConfig()
