"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig
from .schema import DefinitionKind, TypeDefinition
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    # Template used for each declaration kind
    templates: Dict[DefinitionKind, str] = {}

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()
        self._check_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())
        self._template_engine.register_helpers(self.get_template_helpers())

    def _check_templates(self):
        """Fail before any output is produced if a template is missing."""
        for kind, template_name in self.templates.items():
            if not self.template_engine.template_exists(template_name):
                raise TemplateError(
                    f"{self.language_name} template for {kind.value} not found: "
                    f"{template_name}"
                )

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    def get_template_helpers(self) -> Dict[str, Any]:
        """Return functions made available to templates."""
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate_single_schema(self, definition: TypeDefinition) -> str:
        """
        Generate code for a single top-level definition.

        Args:
            definition: Struct or enum definition

        Returns:
            Generated declaration text
        """
        pass

    def generate_blocks(self, definitions: List[TypeDefinition]) -> List[str]:
        """
        Render every top-level definition, in model order.

        Nested definitions and unknown variants are skipped.
        """
        blocks = []
        for definition in definitions:
            kind = getattr(definition, "kind", None)
            if kind not in self.templates:
                logger.debug("Skipping unsupported definition %r", definition)
                continue
            if not definition.is_top_level:
                logger.debug(
                    "Skipping nested definition %s (parent %s)",
                    definition.name,
                    definition.parent,
                )
                continue
            blocks.append(self.generate_single_schema(definition))
        return blocks

    def generate(self, definitions: List[TypeDefinition]) -> str:
        """Generate code for all top-level definitions."""
        return "".join(self.generate_blocks(definitions))

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)
