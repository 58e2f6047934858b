"""Tests for inputdsl.types module."""

import pickle

import pytest

from inputdsl.scalars import Int, String
from inputdsl.types import (
    UNDEFINED,
    EnumType,
    EnumValue,
    InputField,
    InputObjectType,
    InputTypeDef,
    ListType,
    NonNullType,
    ScalarType,
    is_input_type,
    is_required_input_field,
    type_name,
)


class TestUndefined:
    """Test the UNDEFINED sentinel."""

    def test_distinct_from_none(self) -> None:
        """Test that UNDEFINED is not None."""
        assert UNDEFINED is not None
        assert UNDEFINED != None  # noqa: E711

    def test_falsy(self) -> None:
        assert not UNDEFINED

    def test_repr(self) -> None:
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_singleton(self) -> None:
        """Test that constructing the sentinel type returns the same object."""
        assert type(UNDEFINED)() is UNDEFINED

    def test_pickle_preserves_identity(self) -> None:
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED  # noqa: S301


class TestWrappingTypes:
    """Test NonNullType and ListType."""

    def test_non_null_tag(self) -> None:
        assert NonNullType(Int).tag == "non_null"

    def test_list_tag(self) -> None:
        assert ListType(Int).tag == "list"

    def test_non_null_of_non_null_rejected(self) -> None:
        """Test that a non-null type cannot wrap another non-null type."""
        with pytest.raises(TypeError, match="non-null"):
            NonNullType(NonNullType(Int))

    def test_non_input_type_rejected(self) -> None:
        with pytest.raises(TypeError, match="Expected an input type"):
            ListType("Int")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Test that wrapping types are immutable."""
        lt = ListType(Int)
        with pytest.raises((AttributeError, TypeError)):
            lt.of_type = String  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        assert ListType(NonNullType(Int)) == ListType(NonNullType(Int))
        assert ListType(Int) != NonNullType(Int)


class TestInputObjectType:
    """Test InputObjectType field resolution."""

    def test_fields_in_declaration_order(self) -> None:
        point = InputObjectType(
            "Point",
            [InputField("y", Int), InputField("x", Int)],
        )
        assert list(point.get_fields()) == ["y", "x"]

    def test_fields_thunk_allows_self_reference(self) -> None:
        """Test that lazily declared fields can refer to the type itself."""
        node: InputObjectType = InputObjectType(
            "TreeNode",
            lambda: [
                InputField("value", Int),
                InputField("children", ListType(NonNullType(node))),
            ],
        )
        children = node.get_fields()["children"]
        assert children.type == ListType(NonNullType(node))

    def test_fields_resolved_once(self) -> None:
        calls: list[int] = []

        def fields() -> list[InputField]:
            calls.append(1)
            return [InputField("a", Int)]

        obj = InputObjectType("Once", fields)
        obj.get_fields()
        obj.get_fields()
        assert len(calls) == 1

    def test_duplicate_field_rejected(self) -> None:
        obj = InputObjectType("Dup", [InputField("a", Int), InputField("a", String)])
        with pytest.raises(ValueError, match="more than once"):
            obj.get_fields()

    def test_has_default(self) -> None:
        """Test that an explicit None default counts as a default."""
        assert not InputField("a", Int).has_default
        assert InputField("a", Int, default_value=None).has_default
        assert InputField("a", Int, default_value=0).has_default

    def test_required_field(self) -> None:
        assert is_required_input_field(InputField("a", NonNullType(Int)))
        assert not is_required_input_field(
            InputField("a", NonNullType(Int), default_value=1),
        )
        assert not is_required_input_field(InputField("a", Int))


class TestEnumType:
    """Test EnumType value lookup."""

    def test_value_defaults_to_name(self) -> None:
        assert EnumValue("RED").value == "RED"

    def test_explicit_none_value_kept(self) -> None:
        assert EnumValue("NOTHING", None).value is None

    def test_get_value(self) -> None:
        color = EnumType("Color", (EnumValue("RED", 0), EnumValue("BLUE", 1)))
        red = color.get_value("RED")
        assert red is not None
        assert red.value == 0
        assert color.get_value("red") is None
        assert color.get_value("GREEN") is None

    def test_duplicate_value_rejected(self) -> None:
        with pytest.raises(ValueError, match="more than once"):
            EnumType("Color", (EnumValue("RED"), EnumValue("RED")))


class TestTypeName:
    """Test human-readable type names."""

    def test_named_types(self) -> None:
        assert type_name(Int) == "Int"
        assert type_name(EnumType("Color", (EnumValue("RED"),))) == "Color"
        assert type_name(InputObjectType("Point", [])) == "Point"

    def test_wrapped_types(self) -> None:
        assert type_name(NonNullType(Int)) == "Int!"
        assert type_name(ListType(Int)) == "[Int]"
        assert type_name(NonNullType(ListType(NonNullType(Int)))) == "[Int!]!"

    def test_str_uses_type_name(self) -> None:
        assert str(ListType(NonNullType(String))) == "[String!]"


class TestTags:
    """Test input type tag derivation."""

    def test_variant_tags(self) -> None:
        assert NonNullType.tag == "non_null"
        assert ListType.tag == "list"
        assert InputObjectType.tag == "input_object"
        assert ScalarType.tag == "scalar"
        assert EnumType.tag == "enum"

    def test_tag_defaults_to_class_name(self) -> None:
        class Opaque(InputTypeDef):
            name: str

        assert Opaque.tag == "Opaque"
        assert type_name(Opaque("x")) == "Opaque"

    def test_subclass_is_frozen_dataclass(self) -> None:
        class Opaque(InputTypeDef, tag="opaque"):
            name: str

        opaque = Opaque("x")
        with pytest.raises((AttributeError, TypeError)):
            opaque.name = "y"  # type: ignore[misc]


class TestIsInputType:
    """Test is_input_type()."""

    def test_variants(self) -> None:
        assert is_input_type(Int)
        assert is_input_type(ListType(Int))
        assert is_input_type(NonNullType(Int))
        assert is_input_type(InputObjectType("Point", []))
        assert is_input_type(EnumType("Color", ()))

    def test_non_types(self) -> None:
        assert not is_input_type(int)
        assert not is_input_type("Int")
        assert not is_input_type(None)
