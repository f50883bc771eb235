"""Output formatting for command results."""

import sys
from io import StringIO
from pathlib import Path

from Bio.Seq import Seq
from Bio.SeqIO.FastaIO import FastaWriter
from Bio.SeqRecord import SeqRecord


def format_fasta(definition: str, sequence: str, line_width: int = 60) -> str:
    """
    Format one sequence as FASTA text.

    Args:
        definition: Header text written after '>'
        sequence: Sequence letters
        line_width: Sequence line length; 0 writes a single line

    Returns:
        FASTA text ending with a newline
    """
    record = SeqRecord(Seq(sequence), id=definition, description="")
    handle = StringIO()
    FastaWriter(handle, wrap=line_width or None).write_file([record])
    return handle.getvalue()


def write_output(text: str, out: str | Path | None = None) -> None:
    """Write text to a file, or to stdout when no path is given."""
    if out:
        Path(out).write_text(text)
    else:
        sys.stdout.write(text)
