"""Tests for annotation inference and doc comments."""

import pytest

from typesplice.codegen.core.schema import StructField
from typesplice.codegen.languages.java import format_docblock, infer_annotation


class TestInferAnnotation:
    """First matching rule wins."""

    def test_nullable_beats_size(self) -> None:
        field = StructField(type="math::float3", name="x", default_value="nullptr")
        assert infer_annotation(field) == "@Nullable"

    @pytest.mark.parametrize(
        "source_type, size",
        [
            ("math::float2", 2),
            ("math::float3", 3),
            ("LinearColor", 3),
            ("math::float4", 4),
            ("LinearColorA", 4),
        ],
    )
    def test_vector_sizes(self, source_type, size) -> None:
        field = StructField(type=source_type, name="x", default_value="[0]")
        assert infer_annotation(field) == f"@NonNull @Size(min = {size})"

    def test_size_beats_scoped_default(self) -> None:
        field = StructField(type="math::float3", name="x", default_value="Vec::ZERO")
        assert infer_annotation(field) == "@NonNull @Size(min = 3)"

    def test_scoped_default_is_non_null(self) -> None:
        field = StructField(type="BlendMode", name="x", default_value="BlendMode::ADD")
        assert infer_annotation(field) == "@NonNull"

    def test_scalar_override_has_no_annotation(self) -> None:
        field = StructField(
            type="math::float3", name="x", default_value="nullptr", scalar_override=True
        )
        assert infer_annotation(field) == ""

    def test_plain_field_has_no_annotation(self) -> None:
        field = StructField(type="uint8_t", name="x", default_value="0")
        assert infer_annotation(field) == ""


class TestFormatDocblock:
    """Doc strings become Javadoc blocks."""

    def test_empty(self) -> None:
        assert format_docblock("", "    ") == ""

    def test_single_line(self) -> None:
        assert format_docblock("Hello.", "    ") == "/**\n     * Hello.\n     */\n    "

    def test_multi_line_is_reindented(self) -> None:
        doc = "/**\n * First.\n * Second.\n */\n"
        expected = "/**\n     * First.\n     * Second.\n     */\n    "
        assert format_docblock(doc, "    ") == expected
