"""Tests for the JSON format adapter."""

from typing import Any

import pytest

from inputdsl.errors import CoercionError
from inputdsl.formats.json import coerce_json
from inputdsl.scalars import Int, String
from inputdsl.types import (
    UNDEFINED,
    InputField,
    InputObjectType,
    ListType,
    NonNullType,
)

Filter = InputObjectType(
    "Filter",
    [
        InputField("name", NonNullType(String)),
        InputField("ids", ListType(NonNullType(Int))),
    ],
)


class TestCoerceJson:
    """Test coerce_json()."""

    def test_valid_document(self) -> None:
        assert coerce_json('{"name": "a", "ids": [1, "2"]}', Filter) == {
            "name": "a",
            "ids": [1, 2],
        }

    def test_bytes_document(self) -> None:
        assert coerce_json(b"[1, 2]", ListType(Int)) == [1, 2]

    def test_json_null(self) -> None:
        assert coerce_json("null", Filter) is None

    def test_invalid_json(self) -> None:
        with pytest.raises(CoercionError, match="Invalid JSON") as exc_info:
            coerce_json("{", Filter)
        assert exc_info.value.original_error is not None

    def test_coercion_error_raised(self) -> None:
        with pytest.raises(CoercionError, match=r'at "value\.ids\[0\]"'):
            coerce_json('{"name": "a", "ids": [null]}', Filter)

    def test_custom_on_error(self) -> None:
        paths: list[list[str | int]] = []
        coerce_json(
            '{"ids": [1, null]}',
            Filter,
            lambda path, _value, _error: paths.append(path),
        )
        assert paths == [[], ["ids", 1]]

    def test_falsy_on_error(self) -> None:
        class Errors(list[Any]):
            def __call__(self, *report: Any) -> None:
                self.append(report)

        errors = Errors()
        assert coerce_json("[null]", ListType(NonNullType(Int)), errors) == [UNDEFINED]
        assert [path for path, _, _ in errors] == [[0]]
