"""Coercion of runtime values against input types.

``coerce_input_value`` walks a value depth-first against an input type and
returns the coerced value. Every problem is handed to an ``on_error``
callback together with the path where it was found and the offending value.
The callback decides what happens next: raising aborts the whole coercion
(the default), returning lets the walk continue so that all errors can be
collected in one pass.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, assert_never

from inputdsl.config import DEFAULT_CONFIG, CoercionConfig
from inputdsl.errors import CoercionError, CoercionResult, ErrorReport
from inputdsl.formatting import inspect
from inputdsl.path import Path, add_path, path_to_list, print_path_list
from inputdsl.suggestions import did_you_mean
from inputdsl.types import (
    UNDEFINED,
    EnumType,
    InputObjectType,
    InputType,
    ListType,
    NonNullType,
    ScalarType,
    is_required_input_field,
    type_name,
)

logger = logging.getLogger(__name__)

type OnError = Callable[[list[str | int], Any, CoercionError], None]


def default_on_error(
    path: list[str | int],
    invalid_value: Any,
    error: CoercionError,
) -> None:
    """Raise the first error, prefixed with the offending value and its path."""
    error_prefix = f"Invalid value {inspect(invalid_value)}"
    if path:
        error_prefix += f' at "value{print_path_list(path)}"'
    msg = f"{error_prefix}: {error.message}"
    raise CoercionError(msg, original_error=error.original_error) from error


def coerce_input_value(
    value: Any,
    type_: InputType,
    on_error: OnError | None = None,
    *,
    config: CoercionConfig = DEFAULT_CONFIG,
) -> Any:
    """Coerce a Python value given an input type.

    Args:
        value: The raw input, e.g. decoded JSON variables
        type_: The input type the value must satisfy
        on_error: Called as ``on_error(path, invalid_value, error)`` for each
            problem, in discovery order. Defaults to raising the first one.
        config: Suggestion and shape predicates to use

    Returns:
        The coerced value. When ``on_error`` returns instead of raising,
        subtrees that failed are ``UNDEFINED``.

    Raises:
        CoercionError: From the default ``on_error`` on the first problem.

    """
    if on_error is None:
        on_error = default_on_error
    return _coerce(value, type_, on_error, None, config)


def coerce_value(
    value: Any,
    type_: InputType,
    *,
    config: CoercionConfig = DEFAULT_CONFIG,
) -> CoercionResult:
    """Coerce a value and collect every error instead of stopping at the first."""
    errors: list[ErrorReport] = []

    def on_error(
        path: list[str | int],
        invalid_value: Any,
        error: CoercionError,
    ) -> None:
        errors.append(ErrorReport(tuple(path), invalid_value, error))

    coerced = _coerce(value, type_, on_error, None, config)
    logger.debug(
        "Coerced value against %s with %d error(s)",
        type_name(type_),
        len(errors),
    )
    return CoercionResult(value=coerced, errors=tuple(errors))


def _coerce(  # noqa: PLR0911
    value: Any,
    type_: InputType,
    on_error: OnError,
    path: Path | None,
    config: CoercionConfig,
) -> Any:
    if isinstance(type_, NonNullType):
        if value is None or value is UNDEFINED:
            on_error(
                path_to_list(path),
                value,
                CoercionError(
                    f'Expected non-nullable type "{type_name(type_)}" not to be null.',
                ),
            )
            return UNDEFINED
        return _coerce(value, type_.of_type, on_error, path, config)

    if value is None or value is UNDEFINED:
        # Explicitly return the value None.
        return None

    match type_:
        case ListType(of_type=item_type):
            return _coerce_list(value, item_type, on_error, path, config)
        case InputObjectType():
            return _coerce_input_object(value, type_, on_error, path, config)
        case ScalarType():
            return _coerce_scalar(value, type_, on_error, path)
        case EnumType():
            return _coerce_enum(value, type_, on_error, path, config)
        case _:
            # Not reachable. All possible input types have been considered.
            assert_never(type_)


def _coerce_list(
    value: Any,
    item_type: InputType,
    on_error: OnError,
    path: Path | None,
    config: CoercionConfig,
) -> list[Any]:
    if config.is_collection(value):
        return [
            _coerce(item, item_type, on_error, add_path(path, index), config)
            for index, item in enumerate(value)
        ]
    # Lists accept a non-list value as a list of one.
    return [_coerce(value, item_type, on_error, path, config)]


def _coerce_input_object(
    value: Any,
    type_: InputObjectType,
    on_error: OnError,
    path: Path | None,
    config: CoercionConfig,
) -> Any:
    if not config.is_object_like(value):
        on_error(
            path_to_list(path),
            value,
            CoercionError(f'Expected type "{type_.name}" to be an object.'),
        )
        return UNDEFINED

    input_value: Mapping[Any, Any] = value
    coerced: dict[str, Any] = {}
    field_defs = type_.get_fields()

    for field in field_defs.values():
        field_value = input_value.get(field.name, UNDEFINED)

        if field_value is UNDEFINED:
            if field.has_default:
                coerced[field.name] = field.default_value
            elif is_required_input_field(field):
                on_error(
                    path_to_list(path),
                    value,
                    CoercionError(
                        f'Field "{field.name}" of required type '
                        f'"{type_name(field.type)}" was not provided.',
                    ),
                )
            continue

        coerced[field.name] = _coerce(
            field_value,
            field.type,
            on_error,
            add_path(path, field.name),
            config,
        )

    # Ensure every provided field is defined.
    for field_name in input_value:
        if field_name not in field_defs:
            suggestions = config.suggest(str(field_name), list(field_defs))
            on_error(
                path_to_list(path),
                value,
                CoercionError(
                    f'Field "{field_name}" is not defined by type "{type_.name}".'
                    + did_you_mean(
                        suggestions,
                        max_suggestions=config.max_suggestions,
                    ),
                ),
            )

    return coerced


def _coerce_scalar(
    value: Any,
    type_: ScalarType,
    on_error: OnError,
    path: Path | None,
) -> Any:
    # Scalars decide whether a value is valid via parse_value(), which can
    # raise to indicate failure. Keep a reference to the original error.
    try:
        parse_result = type_.parse_value(value)
    except CoercionError as error:
        on_error(path_to_list(path), value, error)
        return UNDEFINED
    except Exception as error:  # noqa: BLE001
        on_error(
            path_to_list(path),
            value,
            CoercionError(
                f'Expected type "{type_.name}". {error}',
                original_error=error,
            ),
        )
        return UNDEFINED

    if parse_result is UNDEFINED:
        on_error(
            path_to_list(path),
            value,
            CoercionError(f'Expected type "{type_.name}".'),
        )
    return parse_result


def _coerce_enum(
    value: Any,
    type_: EnumType,
    on_error: OnError,
    path: Path | None,
    config: CoercionConfig,
) -> Any:
    enum_value = type_.get_value(value) if isinstance(value, str) else None
    if enum_value is not None:
        return enum_value.value

    suggestions = config.suggest(
        str(value),
        [enum_value.name for enum_value in type_.get_values()],
    )
    on_error(
        path_to_list(path),
        value,
        CoercionError(
            f'Expected type "{type_.name}".'
            + did_you_mean(
                suggestions,
                "the enum value",
                max_suggestions=config.max_suggestions,
            ),
        ),
    )
    return UNDEFINED
