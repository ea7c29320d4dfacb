"""Tests for rendering declarations through the Java templates."""

from pathlib import Path

import pytest

from typesplice.codegen.core.config import GeneratorConfig
from typesplice.codegen.core.schema import (
    EnumDefinition,
    EnumValue,
    StructDefinition,
    StructField,
)
from typesplice.codegen.core.templates import TemplateError
from typesplice.codegen.languages.java import JavaGenerator

BLOOM_OPTIONS_JAVA = (
    "\n"
    "    /**\n"
    "     * Options for bloom.\n"
    "     */\n"
    "    public static class BloomOptions {\n"
    "        /**\n"
    "         * Strength.\n"
    "         */\n"
    "        public float strength = 0.10f;\n"
    "        @NonNull @Size(min = 3)\n"
    "        public float[] tint = {1, 1, 1};\n"
    "        public boolean enabled = false;\n"
    "        @NonNull\n"
    "        public BlendMode blendMode = BlendMode.ADD;\n"
    "    }\n"
)

QUALITY_LEVEL_JAVA = (
    "\n"
    "    public enum QualityLevel {\n"
    "        LOW,\n"
    "        /**\n"
    "         * Best.\n"
    "         */\n"
    "        HIGH,\n"
    "    }\n"
)


class TestRenderDeclarations:
    """Struct and enum templates produce the expected Java."""

    def test_struct(self, generator, bloom_options) -> None:
        assert generator.generate_single_schema(bloom_options) == BLOOM_OPTIONS_JAVA

    def test_enum(self, generator, quality_level) -> None:
        assert generator.generate_single_schema(quality_level) == QUALITY_LEVEL_JAVA

    def test_scalar_override_field(self, generator) -> None:
        definition = StructDefinition(
            name="Fog",
            fields=(
                StructField(
                    type="math::float3",
                    name="density",
                    default_value="[0.1, 0.2, 0.3]",
                    scalar_override=True,
                ),
            ),
        )
        rendered = generator.generate_single_schema(definition)
        assert "        public float density = 0.1;\n" in rendered
        assert "@" not in rendered

    def test_comments_disabled(self, bloom_options) -> None:
        generator = JavaGenerator(GeneratorConfig(add_comments=False))
        rendered = generator.generate_single_schema(bloom_options)
        assert "/**" not in rendered
        assert "    public static class BloomOptions {\n" in rendered

    def test_indent_size(self, quality_level) -> None:
        generator = JavaGenerator(GeneratorConfig(indent_size=2))
        rendered = generator.generate_single_schema(quality_level)
        assert rendered.startswith("\n  public enum QualityLevel {\n    LOW,\n")

    def test_empty_struct(self, generator) -> None:
        rendered = generator.generate_single_schema(StructDefinition(name="Empty"))
        assert rendered == "\n    public static class Empty {\n    }\n"


class TestGenerateBlocks:
    """Only known top-level definitions are emitted, in model order."""

    def test_model_order(self, generator, bloom_options, quality_level) -> None:
        code = generator.generate([quality_level, bloom_options])
        assert code == QUALITY_LEVEL_JAVA + BLOOM_OPTIONS_JAVA

    def test_nested_definitions_are_skipped(self, generator, quality_level) -> None:
        nested = StructDefinition(name="Inner", parent="BloomOptions")
        nested_enum = EnumDefinition(
            name="InnerMode", values=(EnumValue("A"),), parent="BloomOptions"
        )
        blocks = generator.generate_blocks([nested, quality_level, nested_enum])
        assert blocks == [QUALITY_LEVEL_JAVA]

    def test_unknown_variants_are_skipped(self, generator, quality_level) -> None:
        blocks = generator.generate_blocks([object(), quality_level])
        assert blocks == [QUALITY_LEVEL_JAVA]


class TestTemplateFailures:
    """Template problems are fatal."""

    def test_missing_templates_fail_at_construction(self, tmp_path: Path) -> None:
        class BrokenGenerator(JavaGenerator):
            def get_template_directory(self):
                return tmp_path

        with pytest.raises(TemplateError, match="struct.java.j2"):
            BrokenGenerator()

    def test_malformed_field_fails_rendering(self, generator) -> None:
        definition = StructDefinition(name="Broken", fields=(EnumValue(name="oops"),))
        with pytest.raises(TemplateError, match="struct.java.j2"):
            generator.generate_single_schema(definition)
