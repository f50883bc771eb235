"""
nucleotools: a nucleic-acid sequence utility.

Parses a single GenBank, EMBL, FASTA or raw sequence record and provides
complementation, translation in six frames, region extraction, composition
and CpG scoring, motif periodicity analysis and record comparison.
"""

__version__ = "1.0.0"

from nucleotools.sequence import (
    SequenceRecord,
    SequenceFormat,
    CompositionWarning,
    FirstMismatch,
    parse,
    reinitialize,
    compare,
)

__all__ = [
    "SequenceRecord",
    "SequenceFormat",
    "CompositionWarning",
    "FirstMismatch",
    "parse",
    "reinitialize",
    "compare",
]
