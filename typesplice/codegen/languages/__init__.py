"""
Language-specific code generators.
"""

from .java import JavaGenerator

__all__ = ["JavaGenerator"]
