"""inputDSL - Declarative input types and value coercion for Python 3.12+."""

from inputdsl.coerce import (
    coerce_input_value,
    coerce_value,
    default_on_error,
)
from inputdsl.config import (
    DEFAULT_CONFIG,
    CoercionConfig,
)
from inputdsl.errors import (
    CoercionError,
    CoercionResult,
    ErrorReport,
)
from inputdsl.formats.json import coerce_json
from inputdsl.formatting import inspect
from inputdsl.path import (
    Path,
    print_path_list,
)
from inputdsl.scalars import (
    ID,
    Boolean,
    Float,
    Int,
    String,
)
from inputdsl.suggestions import (
    did_you_mean,
    suggestion_list,
)
from inputdsl.types import (
    UNDEFINED,
    EnumType,
    EnumValue,
    InputField,
    InputObjectType,
    InputType,
    ListType,
    NonNullType,
    ScalarType,
    type_name,
)

__all__ = [
    "DEFAULT_CONFIG",
    # Built-in scalars
    "ID",
    # Types
    "UNDEFINED",
    "Boolean",
    # Configuration
    "CoercionConfig",
    # Errors
    "CoercionError",
    "CoercionResult",
    "EnumType",
    "EnumValue",
    "ErrorReport",
    "Float",
    "InputField",
    "InputObjectType",
    "InputType",
    "Int",
    "ListType",
    "NonNullType",
    # Paths and rendering
    "Path",
    "ScalarType",
    "String",
    # Coercion
    "coerce_input_value",
    "coerce_json",
    "coerce_value",
    "default_on_error",
    # Suggestions
    "did_you_mean",
    "inspect",
    "print_path_list",
    "suggestion_list",
    "type_name",
]
