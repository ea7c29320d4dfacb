"""
typesplice code generation module.

Generates target-language declarations from struct and enum definitions.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GeneratorError
from .core.schema import (
    DefinitionKind,
    EnumDefinition,
    EnumValue,
    StructDefinition,
    StructField,
    load_model,
)
from .core.config import GeneratorConfig, load_config
from .core.templates import TemplateError

__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GeneratorError",
    "DefinitionKind",
    "EnumDefinition",
    "EnumValue",
    "StructDefinition",
    "StructField",
    "GeneratorConfig",
    "TemplateError",
    "load_config",
    "load_model",
    "get_generator",
    "get_language_info",
    "list_supported_languages",
]
