"""Tests for the generator registry."""

import pytest

from typesplice.codegen.core.config import GeneratorConfig
from typesplice.codegen.core.generator import GeneratorError
from typesplice.codegen.languages.java import JavaGenerator
from typesplice.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_supported_languages,
)


class TestGlobalRegistry:
    def test_java_registered(self) -> None:
        assert list_supported_languages() == ["java"]

    def test_get_generator_with_dict_config(self) -> None:
        generator = get_generator("JAVA", {"marker": "CUT"})
        assert isinstance(generator, JavaGenerator)
        assert generator.config.marker == "CUT"

    def test_language_info(self) -> None:
        info = get_language_info("java")
        assert info["name"] == "java"
        assert info["file_extension"] == ".java"
        assert info["class"] == "JavaGenerator"

    def test_unknown_language(self) -> None:
        with pytest.raises(RegistryError, match="No generator registered"):
            get_generator("cobol")


class TestGeneratorRegistry:
    def test_lookup_ignores_case(self) -> None:
        registry = GeneratorRegistry()
        registry.register("Java", JavaGenerator)
        assert registry.resolve("JAVA") == "java"
        assert registry.list_languages() == ["java"]

    def test_rejects_non_generators(self) -> None:
        with pytest.raises(RegistryError):
            GeneratorRegistry().register("text", str)

    def test_config_instance_passed_through(self) -> None:
        registry = GeneratorRegistry()
        registry.register("java", JavaGenerator)
        config = GeneratorConfig(indent_size=2)
        assert registry.create_generator("java", config).config is config

    def test_invalid_config_type(self) -> None:
        registry = GeneratorRegistry()
        registry.register("java", JavaGenerator)
        with pytest.raises(RegistryError, match="Invalid config type"):
            registry.create_generator("java", 42)


class TestGenerateSingleSchema:
    def test_unknown_variant(self, generator) -> None:
        with pytest.raises(GeneratorError):
            generator.generate_single_schema(object())
