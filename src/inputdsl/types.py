"""Runtime input type representation for value coercion."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import cached_property
from typing import (
    Any,
    ClassVar,
    Final,
    dataclass_transform,
)


class _Undefined:
    """Sentinel type for an absent value, distinct from ``None``."""

    _instance: ClassVar[_Undefined | None] = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class InputTypeDef:
    """Base for input type definitions."""

    tag: ClassVar[str]

    def __init_subclass__(cls, tag: str | None = None) -> None:
        """Make the subclass a frozen dataclass with automatic tag derivation."""
        dataclass(frozen=True)(cls)
        cls.tag = tag if tag is not None else cls.__name__

    def __str__(self) -> str:
        return type_name(self)


class NonNullType(InputTypeDef, tag="non_null"):
    """Non-null wrapper: Int! → NonNullType(of_type=Int)."""

    of_type: InputType

    def __post_init__(self) -> None:
        if isinstance(self.of_type, NonNullType):
            msg = f"Cannot wrap non-null type {type_name(self.of_type)} again."
            raise TypeError(msg)
        if not is_input_type(self.of_type):
            msg = f"Expected an input type, got {self.of_type!r}."
            raise TypeError(msg)


class ListType(InputTypeDef, tag="list"):
    """List wrapper: [Int] → ListType(of_type=Int)."""

    of_type: InputType

    def __post_init__(self) -> None:
        if not is_input_type(self.of_type):
            msg = f"Expected an input type, got {self.of_type!r}."
            raise TypeError(msg)


@dataclass(frozen=True)
class InputField:
    """A named field of an input object type.

    Attributes:
        name: Key under which the field appears in input and coerced values
        type: The field's input type
        default_value: Value used when the field is absent. ``UNDEFINED``
            means no default; ``None`` is a real default.
        description: Optional documentation string

    """

    name: str
    type: InputType
    default_value: Any = UNDEFINED
    description: str | None = None

    @property
    def has_default(self) -> bool:
        """Return True if a default value is declared."""
        return self.default_value is not UNDEFINED


type FieldsThunk = Callable[[], Sequence[InputField]]


class InputObjectType(InputTypeDef, tag="input_object"):
    """Composite input type with named fields.

    Fields may be given lazily as a zero-argument callable so that an input
    object can reference itself, e.g. a filter with nested ``and``/``or``
    clauses. The field map is resolved on first access and then cached.
    """

    name: str
    fields: Sequence[InputField] | FieldsThunk = field(compare=False)

    def get_fields(self) -> dict[str, InputField]:
        """Return declared fields keyed by name, in declaration order."""
        return self._field_map

    @cached_property
    def _field_map(self) -> dict[str, InputField]:
        declared = self.fields() if callable(self.fields) else self.fields
        field_map: dict[str, InputField] = {}
        for input_field in declared:
            if input_field.name in field_map:
                msg = (
                    f"Input object {self.name} declares field "
                    f"'{input_field.name}' more than once."
                )
                raise ValueError(msg)
            field_map[input_field.name] = input_field
        return field_map


class ScalarType(InputTypeDef, tag="scalar"):
    """Leaf type whose values are produced by a parse function.

    ``parse_value`` either returns the coerced value (``None`` included),
    returns ``UNDEFINED`` to reject the input, or raises.
    """

    name: str
    parse_value: Callable[[Any], Any] = field(compare=False)


@dataclass(frozen=True)
class EnumValue:
    """A named enum member; the value defaults to the name."""

    name: str
    value: Any = UNDEFINED
    description: str | None = None

    def __post_init__(self) -> None:
        if self.value is UNDEFINED:
            object.__setattr__(self, "value", self.name)


class EnumType(InputTypeDef, tag="enum"):
    """Leaf type accepting one of a fixed, ordered set of names."""

    name: str
    values: tuple[EnumValue, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for enum_value in self.values:
            if enum_value.name in seen:
                msg = (
                    f"Enum {self.name} declares value "
                    f"'{enum_value.name}' more than once."
                )
                raise ValueError(msg)
            seen.add(enum_value.name)

    def get_values(self) -> tuple[EnumValue, ...]:
        """Return declared values in declaration order."""
        return self.values

    def get_value(self, name: str) -> EnumValue | None:
        """Look up a declared value by exact name."""
        for enum_value in self.values:
            if enum_value.name == name:
                return enum_value
        return None


type InputType = NonNullType | ListType | InputObjectType | ScalarType | EnumType


def is_input_type(obj: Any) -> bool:
    """Return True if obj is one of the input type variants."""
    return isinstance(
        obj,
        NonNullType | ListType | InputObjectType | ScalarType | EnumType,
    )


def is_required_input_field(input_field: InputField) -> bool:
    """Return True if the field must be present in input values."""
    return isinstance(input_field.type, NonNullType) and not input_field.has_default


_TYPE_FORMATTERS: dict[type[InputTypeDef], Callable[[Any], str]] = {
    NonNullType: lambda t: f"{type_name(t.of_type)}!",
    ListType: lambda t: f"[{type_name(t.of_type)}]",
    InputObjectType: lambda t: t.name,
    ScalarType: lambda t: t.name,
    EnumType: lambda t: t.name,
}


def type_name(input_type: InputTypeDef) -> str:
    """Get a human-readable name for an input type."""
    if formatter := _TYPE_FORMATTERS.get(type(input_type)):
        return formatter(input_type)
    return input_type.tag
