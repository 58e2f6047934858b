"""Error types produced while coercing input values.

Coercion reports every problem through an ``on_error`` callback as a
``(path, invalid_value, CoercionError)`` triple. ``ErrorReport`` captures
one such triple, and ``CoercionResult`` aggregates the reports of a
collect-all run together with the partially coerced value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from inputdsl.path import print_path_list


class CoercionError(Exception):
    """An input value does not satisfy its input type.

    Attributes:
        message: Human-readable description of the problem
        original_error: The low-level exception raised by a scalar parser,
            if this error wraps one

    """

    def __init__(
        self,
        message: str,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.original_error is not None:
            return (
                f"{type(self).__name__}({self.message!r}, "
                f"original_error={self.original_error!r})"
            )
        return f"{type(self).__name__}({self.message!r})"


@dataclass(frozen=True)
class ErrorReport:
    """A single coercion failure and where it happened."""

    path: tuple[str | int, ...]
    invalid_value: Any
    error: CoercionError

    @property
    def message(self) -> str:
        """Return the message of the reported error."""
        return self.error.message

    def __str__(self) -> str:
        return f"value{print_path_list(self.path)}: {self.error.message}"


@dataclass(frozen=True)
class CoercionResult:
    """Result of coercing a value while collecting every error.

    ``value`` is the coerced value even when errors were found; subtrees
    that failed hold ``UNDEFINED``.
    """

    value: Any
    errors: tuple[ErrorReport, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Return True if no coercion errors were found."""
        return len(self.errors) == 0

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if self.is_valid:
            return "CoercionResult: valid"
        error_lines = "\n  ".join(str(e) for e in self.errors)
        return f"CoercionResult: {len(self.errors)} error(s)\n  {error_lines}"
