"""Immutable access paths from a root value to a nested coercion point."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Path:
    """One step of an access path, linked to the step before it.

    Paths are only ever extended, never modified, so sibling branches
    (e.g. the elements of one list) can share the same parent node.
    """

    prev: Path | None
    key: str | int

    def as_list(self) -> list[str | int]:
        """Return the keys from the root to this node."""
        keys: list[str | int] = []
        node: Path | None = self
        while node is not None:
            keys.append(node.key)
            node = node.prev
        keys.reverse()
        return keys


def add_path(prev: Path | None, key: str | int) -> Path:
    """Extend a possibly empty path by key."""
    return Path(prev, key)


def path_to_list(path: Path | None) -> list[str | int]:
    """Return the keys of a possibly empty path, root first."""
    return path.as_list() if path is not None else []


def print_path_list(keys: Iterable[str | int]) -> str:
    """Render keys as a locator: ["a", 0, "b"] → ".a[0].b"."""
    return "".join(f"[{key}]" if isinstance(key, int) else f".{key}" for key in keys)
