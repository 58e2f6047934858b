"""Built-in scalar types: Int, Float, String, Boolean and ID.

Parsers raise ``TypeError`` for values of the wrong kind and ``ValueError``
for values of the right kind that are out of range. The coercion engine
wraps either into a ``CoercionError`` that keeps the original exception.

Int and Float also accept numeric strings, since variables often arrive
from sources (query strings, environment, CSV) that only carry text.
"""

from __future__ import annotations

import math
import re
from typing import Any

from inputdsl.formatting import inspect
from inputdsl.types import ScalarType

# Int is a signed 32-bit integer.
MAX_INT = 2_147_483_647
MIN_INT = -2_147_483_648

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: Any) -> int:
    num: Any = value
    if isinstance(value, str) and _INT_LITERAL.fullmatch(value.strip()):
        num = int(value)
    elif isinstance(value, float) and math.isfinite(value) and value.is_integer():
        num = int(value)

    if isinstance(num, bool) or not isinstance(num, int):
        msg = f"Int cannot represent non-integer value: {inspect(value)}"
        raise TypeError(msg)
    if not MIN_INT <= num <= MAX_INT:
        msg = f"Int cannot represent non 32-bit signed integer value: {inspect(value)}"
        raise ValueError(msg)
    return num


def _parse_float(value: Any) -> float:
    num: Any = value
    if isinstance(value, str):
        try:
            num = float(value)
        except ValueError:
            num = value

    if isinstance(num, bool) or not isinstance(num, int | float):
        msg = f"Float cannot represent non numeric value: {inspect(value)}"
        raise TypeError(msg)
    try:
        num = float(num)
    except OverflowError:
        num = math.inf
    if not math.isfinite(num):
        msg = f"Float cannot represent non numeric value: {inspect(value)}"
        raise ValueError(msg)
    return num


def _parse_string(value: Any) -> str:
    if not isinstance(value, str):
        msg = f"String cannot represent a non string value: {inspect(value)}"
        raise TypeError(msg)
    return value


def _parse_boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        msg = f"Boolean cannot represent a non boolean value: {inspect(value)}"
        raise TypeError(msg)
    return value


def _parse_id(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    msg = f"ID cannot represent value: {inspect(value)}"
    raise TypeError(msg)


Int = ScalarType(name="Int", parse_value=_parse_int)
Float = ScalarType(name="Float", parse_value=_parse_float)
String = ScalarType(name="String", parse_value=_parse_string)
Boolean = ScalarType(name="Boolean", parse_value=_parse_boolean)
ID = ScalarType(name="ID", parse_value=_parse_id)

specified_scalar_types: tuple[ScalarType, ...] = (Int, Float, String, Boolean, ID)
