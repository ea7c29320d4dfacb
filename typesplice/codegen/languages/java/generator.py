"""
Java code generator implementation.

Generates static nested classes and enums from struct and enum definitions.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, GeneratorError
from ...core.schema import DefinitionKind, StructField, TypeDefinition
from .annotations import infer_annotation
from .comments import format_docblock
from .types import JavaTypeConfig, JavaTypeMapper

logger = get_logger(__name__)


class JavaGenerator(CodeGenerator):
    """Code generator for Java data-holder classes and enums."""

    templates = {
        DefinitionKind.RECORD: "struct.java.j2",
        DefinitionKind.ENUMERATION: "enum.java.j2",
    }

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Java generator with configuration."""
        config = config or GeneratorConfig()
        self.type_config = JavaTypeConfig.from_generator_config(config)
        self.type_mapper = JavaTypeMapper(self.type_config)
        super().__init__(config)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    def get_template_helpers(self) -> Dict[str, Any]:
        return {
            "indent": self.indent,
            "docblock": self.docblock,
            "annotation": self.annotation,
            "java_type": self.type_mapper.map_type,
            "java_value": self.type_mapper.map_value,
        }

    def indent(self, depth: int) -> str:
        return self.config.indent * depth

    def docblock(self, item: Any, depth: int) -> str:
        if not self.config.add_comments:
            return ""
        return format_docblock(item.doc, self.indent(depth))

    def annotation(self, field: StructField, depth: int) -> str:
        annotation = infer_annotation(field, self.type_config)
        if not annotation:
            return ""
        return annotation + "\n" + self.indent(depth)

    def generate_single_schema(self, definition: TypeDefinition) -> str:
        """Generate a Java declaration for one definition."""
        template_name = self.templates.get(getattr(definition, "kind", None))
        if template_name is None:
            raise GeneratorError(f"Cannot generate Java for {definition!r}")
        logger.debug("Rendering %s with %s", definition.name, template_name)
        return self.render_template(template_name, {"definition": definition})

