"""Format detection and sequence extraction for GenBank, EMBL, raw and FASTA text."""

import re
from enum import Enum
from typing import NamedTuple

from .errors import UnknownFormatError
from .tables import AMINO_ACID_ALPHABET, NUCLEOTIDE_ALPHABET


class SequenceFormat(str, Enum):
    GENBANK = "genbank"
    EMBL = "embl"
    FASTA = "fasta"
    RAW = "raw"


class CompositionWarning(str, Enum):
    POSSIBLY_AMINO_ACID = "it may be amino acid sequence"
    UNKNOWN_NUCLEOTIDE = "the sequence contains unknown nucleotides"


class ParsedText(NamedTuple):
    format: SequenceFormat
    definition: str
    sequence: str
    warning: CompositionWarning | None


RAW_DEFINITION = "sequence"

# Record body shared by the anchored and the embedded variants
_GENBANK_BODY = r"LOCUS +(\w+?) .+?\nORIGIN\s+1 (.+?)//\n"
_EMBL_BODY = r"ID +(\w+?);? .+?\nSQ\s+[^\n]+\n(.+?)//\n"

_GENBANK_PATTERNS = (
    re.compile(_GENBANK_BODY, re.S),
    re.compile(r"\n" + _GENBANK_BODY, re.S),
)
_EMBL_PATTERNS = (
    re.compile(_EMBL_BODY, re.S),
    re.compile(r"\n" + _EMBL_BODY, re.S),
)
_RAW_RE = re.compile(r"[a-z\s\-:,0-9]+", re.I)
_FASTA_RE = re.compile(r">([^\n]+)\n(.+)", re.S)
_NON_LETTER_RE = re.compile(r"[^A-Za-z]")


def letters_only(text: str) -> str:
    """Strip every character that is not an ASCII letter."""
    return _NON_LETTER_RE.sub("", text)


def _match_record(patterns, text: str) -> re.Match | None:
    anchored, embedded = patterns
    return anchored.match(text) or embedded.search(text)


def check_composition(sequence: str) -> CompositionWarning | None:
    """
    Classify a sequence against the nucleotide and amino-acid alphabets.

    Returns:
        None for a plain nucleotide sequence, otherwise the warning kind
    """
    symbols = set(sequence.lower())
    if symbols <= NUCLEOTIDE_ALPHABET:
        return None
    if symbols <= AMINO_ACID_ALPHABET:
        return CompositionWarning.POSSIBLY_AMINO_ACID
    return CompositionWarning.UNKNOWN_NUCLEOTIDE


def detect(text: str) -> ParsedText:
    """
    Detect the format of a single record and extract its sequence.

    Formats are tried in the order GenBank, EMBL, raw, FASTA; the first
    match wins. GenBank and EMBL records are also found after leading text.

    Args:
        text: Complete record text

    Returns:
        ParsedText with a letters-only, case-preserved sequence

    Raises:
        UnknownFormatError: If no format matches
    """
    raw = text == "" or _RAW_RE.fullmatch(text) is not None
    genbank = _match_record(_GENBANK_PATTERNS, text)
    embl = None if genbank else _match_record(_EMBL_PATTERNS, text)
    fasta = None if (genbank or embl or raw) else _FASTA_RE.fullmatch(text)

    if genbank:
        fmt, definition, body = SequenceFormat.GENBANK, genbank.group(1), genbank.group(2)
    elif embl:
        fmt, definition, body = SequenceFormat.EMBL, embl.group(1), embl.group(2)
    elif raw:
        fmt, definition, body = SequenceFormat.RAW, RAW_DEFINITION, text
    elif fasta:
        fmt, definition, body = SequenceFormat.FASTA, fasta.group(1), fasta.group(2)
    else:
        raise UnknownFormatError(text)

    sequence = letters_only(body)
    return ParsedText(fmt, definition, sequence, check_composition(sequence))
