"""
Java code generator module.

Generates static nested classes and enums, with nullability and size
annotations, from struct and enum definitions.
"""

from .annotations import infer_annotation
from .comments import format_docblock
from .generator import JavaGenerator
from .types import JavaTypeConfig, JavaTypeMapper

__all__ = [
    "JavaGenerator",
    "JavaTypeConfig",
    "JavaTypeMapper",
    "format_docblock",
    "infer_annotation",
]
