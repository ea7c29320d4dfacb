"""
Java-specific type system for code generation.

Maps C++-style field declarations from the type model onto Java field types
and default-value literals.
"""

from dataclasses import dataclass
from typing import Optional

from ...core.config import GeneratorConfig
from ...core.schema import StructField

# Source types exposed to Java as float arrays
VECTOR_TYPES = {
    "math::float2": 2,
    "math::float3": 3,
    "math::float4": 4,
    "LinearColor": 3,
    "LinearColorA": 4,
}

BOOLEAN_TYPES = {"bool"}

# Java has no unsigned types; all of these widen to int.
UNSIGNED_INT_TYPES = {"uint8_t", "uint16_t", "uint32_t"}

FLOAT_TYPE = "float"


@dataclass
class JavaTypeConfig:
    """Target-side names and source-side tokens used by the mapper."""

    float_type: str = "float"
    float_array_type: str = "float[]"
    bool_type: str = "boolean"
    int_type: str = "int"
    null_literal: str = "null"
    float_suffix: str = "f"
    member_separator: str = "."

    # Tokens of the source model
    null_token: str = "nullptr"
    scope_separator: str = "::"
    pointer_marker: str = "*"

    @classmethod
    def from_generator_config(cls, config: GeneratorConfig) -> "JavaTypeConfig":
        custom = config.custom
        return cls(
            null_literal=custom.get("null_literal", "null"),
            float_suffix=custom.get("float_suffix", "f"),
            null_token=config.null_token,
            scope_separator=config.scope_separator,
        )


class JavaTypeMapper:
    """
    Converts struct fields into Java type names and value literals.

    Both mappings are pure; neither depends on the other.
    """

    def __init__(self, config: Optional[JavaTypeConfig] = None):
        """Initialize with type configuration."""
        self.config = config or JavaTypeConfig()

    def map_type(self, field: StructField) -> str:
        """Return the Java type for a field."""
        if field.scalar_override:
            return self.config.float_type
        if field.type in VECTOR_TYPES:
            return self.config.float_array_type
        if field.type in BOOLEAN_TYPES:
            return self.config.bool_type
        if field.type in UNSIGNED_INT_TYPES:
            return self.config.int_type
        return field.type.replace(self.config.pointer_marker, "").strip()

    def map_value(self, field: StructField) -> str:
        """Return the Java literal for a field's default value."""
        if field.scalar_override:
            # A vector forced to a scalar keeps only its first component.
            contents = field.default_value.strip(" []")
            first, _, _ = contents.partition(",")
            return first

        if field.default_value == self.config.null_token:
            return self.config.null_literal

        value = field.default_value.replace(
            self.config.scope_separator, self.config.member_separator
        )
        if field.type == FLOAT_TYPE:
            value += self.config.float_suffix
        elif len(value) > 1 and value[0] == "[" and value[-1] == "]":
            value = "{" + value[1:-1] + "}"
        return value
