"""Sequence record model: format parsing, transformations and comparison."""

from .errors import (
    SequenceError,
    UnknownFormatError,
    InvertedRangeError,
    SubstringExtractionError,
    InvalidFrameError,
)
from .formats import SequenceFormat, CompositionWarning, detect, check_composition
from .record import SequenceRecord, InstanceCounter, parse, reinitialize
from .compare import FirstMismatch, compare

__all__ = [
    # Errors
    "SequenceError",
    "UnknownFormatError",
    "InvertedRangeError",
    "SubstringExtractionError",
    "InvalidFrameError",
    # Parsing
    "SequenceFormat",
    "CompositionWarning",
    "detect",
    "check_composition",
    # Records
    "SequenceRecord",
    "InstanceCounter",
    "parse",
    "reinitialize",
    # Comparison
    "FirstMismatch",
    "compare",
]
