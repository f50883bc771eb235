"""Position-by-position comparison of two sequence records."""

from dataclasses import dataclass

from .record import SequenceRecord

GAP_SYMBOL = "-"


@dataclass(frozen=True)
class FirstMismatch:
    position: int  # 1-based
    symbol_a: str
    symbol_b: str


def compare(a: SequenceRecord, b: SequenceRecord) -> FirstMismatch | None:
    """
    Find the first position at which two sequences differ, ignoring case.

    When one sequence is a prefix of the other, the mismatch is reported at
    the first position past the shorter one with '-' on the missing side.

    Args:
        a: First record
        b: Second record

    Returns:
        FirstMismatch, or None if the sequences are identical
    """
    seq_a = a.sequence
    seq_b = b.sequence

    for i, (x, y) in enumerate(zip(seq_a, seq_b)):
        if x.lower() != y.lower():
            return FirstMismatch(i + 1, x, y)

    shorter = min(len(seq_a), len(seq_b))
    if len(seq_a) == len(seq_b):
        return None
    return FirstMismatch(
        shorter + 1,
        seq_a[shorter] if len(seq_a) > shorter else GAP_SYMBOL,
        seq_b[shorter] if len(seq_b) > shorter else GAP_SYMBOL,
    )
