"""
Core code generation components.

Provides the type model, base generator, configuration and templates
used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError
from .schema import (
    DefinitionKind,
    EnumDefinition,
    EnumValue,
    SchemaError,
    StructDefinition,
    StructField,
    TypeDefinition,
    load_definitions,
    load_model,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    # Type model
    "DefinitionKind",
    "EnumDefinition",
    "EnumValue",
    "SchemaError",
    "StructDefinition",
    "StructField",
    "TypeDefinition",
    "load_definitions",
    "load_model",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
