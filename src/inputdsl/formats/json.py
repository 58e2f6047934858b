"""JSON format adapter."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from inputdsl.coerce import coerce_input_value
from inputdsl.config import DEFAULT_CONFIG, CoercionConfig
from inputdsl.errors import CoercionError

if TYPE_CHECKING:
    from inputdsl.coerce import OnError
    from inputdsl.types import InputType


def coerce_json(
    s: str | bytes,
    type_: InputType,
    on_error: OnError | None = None,
    *,
    config: CoercionConfig = DEFAULT_CONFIG,
) -> Any:
    """Decode a JSON document and coerce it against an input type.

    Args:
        s: JSON text, e.g. a request's variables payload
        type_: The input type the decoded value must satisfy
        on_error: Error callback, see coerce_input_value
        config: Suggestion and shape predicates to use

    Returns:
        The coerced value

    Raises:
        CoercionError: If the text is not valid JSON, or from the default
            on_error on the first coercion problem

    """
    try:
        data = json.loads(s)
    except json.JSONDecodeError as error:
        msg = f"Invalid JSON: {error}"
        raise CoercionError(msg, original_error=error) from error
    return coerce_input_value(data, type_, on_error, config=config)
