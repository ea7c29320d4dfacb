"""
Nullability and size annotations for generated Java fields.
"""

from ...core.schema import StructField
from .types import VECTOR_TYPES, JavaTypeConfig

NULLABLE = "@Nullable"
NON_NULL = "@NonNull"


def size_annotation(minimum: int) -> str:
    return f"{NON_NULL} @Size(min = {minimum})"


def infer_annotation(field: StructField, config: JavaTypeConfig = None) -> str:
    """
    Derive the annotation for a field, or "" when none applies.

    Rules are checked in order and the first match wins: null default,
    vector size, scoped-constant default. Fields with the scalar override
    never carry an annotation.
    """
    config = config or JavaTypeConfig()

    if field.scalar_override:
        return ""
    if field.default_value == config.null_token:
        return NULLABLE
    if field.type in VECTOR_TYPES:
        return size_annotation(VECTOR_TYPES[field.type])
    if config.scope_separator in field.default_value:
        return NON_NULL
    return ""
