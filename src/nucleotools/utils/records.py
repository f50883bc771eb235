"""Loading a single sequence record from a file or stdin."""

import logging
import re
import sys
from pathlib import Path

from nucleotools.sequence import SequenceRecord, parse

logger = logging.getLogger(__name__)

_FASTA_HEADER_RE = re.compile(r"^>", re.M)
_TERMINATOR_RE = re.compile(r"^//[ \t\r]*$", re.M)


def read_text(path: str | Path) -> str:
    """Read a whole input file; '-' reads stdin."""
    if str(path) == "-":
        return sys.stdin.read()
    return Path(path).read_text()


def first_record(text: str) -> tuple[str, int]:
    """
    Cut multi-record input down to its first record.

    FASTA input is truncated before the second header. GenBank/EMBL input
    is returned as is since only the first record is parsed anyway.

    Returns:
        (text of the first record, number of records seen)
    """
    # Truncation is caller policy; parse() itself reads one record and never
    # splits FASTA, so a second header would otherwise end up in the sequence.
    if text.startswith(">"):
        headers = [m.start() for m in _FASTA_HEADER_RE.finditer(text)]
        if len(headers) > 1:
            return text[:headers[1]], len(headers)
        return text, 1

    return text, max(1, len(_TERMINATOR_RE.findall(text)))


def load_record(path: str | Path) -> SequenceRecord:
    """
    Load and parse the first sequence record of a file.

    Extra records and composition warnings are logged, not raised.

    Raises:
        UnknownFormatError: If the text is not GenBank, EMBL, raw or FASTA
    """
    text, num_records = first_record(read_text(path))
    if num_records > 1:
        logger.warning(
            "%s contains %d records; only the first one is considered", path, num_records
        )

    record = parse(text)
    if record.warning is not None:
        logger.warning("%s: %s", record.definition, record.warning.value)
    return record
