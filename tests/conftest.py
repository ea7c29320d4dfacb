"""Shared fixtures for typesplice tests."""

from pathlib import Path

import pytest

from typesplice.codegen.core.config import DEFAULT_MARKER, GeneratorConfig
from typesplice.codegen.core.schema import (
    EnumDefinition,
    EnumValue,
    StructDefinition,
    StructField,
)
from typesplice.codegen.languages.java import JavaGenerator

PREAMBLE = [
    "package com.example;",
    "",
    "import androidx.annotation.NonNull;",
    "",
    "public class Options {",
    "    public static final int VERSION = 1;",
]


@pytest.fixture
def generator() -> JavaGenerator:
    return JavaGenerator(GeneratorConfig())


@pytest.fixture
def bloom_options() -> StructDefinition:
    return StructDefinition(
        name="BloomOptions",
        doc="Options for bloom.",
        fields=(
            StructField(type="float", name="strength", default_value="0.10", doc="Strength."),
            StructField(type="LinearColor", name="tint", default_value="[1, 1, 1]"),
            StructField(type="bool", name="enabled", default_value="false"),
            StructField(type="BlendMode", name="blendMode", default_value="BlendMode::ADD"),
        ),
    )


@pytest.fixture
def quality_level() -> EnumDefinition:
    return EnumDefinition(
        name="QualityLevel",
        values=(EnumValue(name="LOW"), EnumValue(name="HIGH", doc="Best.")),
    )


@pytest.fixture
def target_file(tmp_path: Path) -> Path:
    path = tmp_path / "Options.java"
    lines = PREAMBLE + [
        f"    // {DEFAULT_MARKER}",
        "    stale generated code",
        "}",
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
