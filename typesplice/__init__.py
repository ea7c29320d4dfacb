"""typesplice: generate Java declarations and splice them below a marker line."""

from .splice import (
    MarkerNotFoundError,
    SpliceError,
    SpliceResult,
    edit_file,
    splice_file,
)

__version__ = "0.1.0"

__all__ = [
    "MarkerNotFoundError",
    "SpliceError",
    "SpliceResult",
    "edit_file",
    "splice_file",
]
