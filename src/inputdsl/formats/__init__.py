"""Format adapters for coercion.

Each format module provides a coerce_<format> function that decodes text
and hands the resulting builtins to coerce_input_value.
"""

from inputdsl.formats.json import coerce_json

__all__ = ["coerce_json"]
