"""Sequence record model and the operations built on it."""

import re
import weakref
from collections import Counter

from Bio.SeqUtils import gc_fraction

from .errors import InvalidFrameError, InvertedRangeError, SubstringExtractionError
from .formats import CompositionWarning, ParsedText, SequenceFormat, detect
from .tables import COMPLEMENT_TABLE, NUCLEOTIDE_ALPHABET, lookup_codon

PADDING_SYMBOL = "n"
DEFAULT_OLIGO = "CpG"
DEFAULT_MAX_WINDOW = 50
NUM_FRAMES = 6


class InstanceCounter:
    """Tracks live SequenceRecord instances for diagnostics."""

    def __init__(self):
        self._live = weakref.WeakSet()

    def register(self, record) -> None:
        self._live.add(record)

    @property
    def count(self) -> int:
        return len(self._live)


def normalize_oligo(oligo: str) -> str:
    """Lower-case a motif and drop letters outside the nucleotide alphabet (e.g. 'CpG' -> 'cg')."""
    return "".join(c for c in oligo.lower() if c in NUCLEOTIDE_ALPHABET)


def _occurrences(oligo: str, seq: str) -> list[int]:
    # Left-to-right, non-overlapping scan
    return [m.start() for m in re.finditer(re.escape(oligo), seq)]


class SequenceRecord:
    """
    A single nucleotide sequence parsed from GenBank, EMBL, FASTA or raw text.

    The format, definition and sequence are derived from the original text
    at construction and replaced together by reinitialize(). Only the
    definition may be changed on its own.
    """

    def __init__(self, original: str = "", counter: InstanceCounter | None = None):
        self._apply(original, detect(original))
        if counter is not None:
            counter.register(self)

    def _apply(self, original: str, parsed: ParsedText) -> None:
        self._original = original
        self._format = parsed.format
        self._definition = parsed.definition
        self._sequence = parsed.sequence
        self._warning = parsed.warning

    def reinitialize(self, original: str = "") -> "SequenceRecord":
        """Reset the record from new text; on failure the record is left unchanged."""
        self._apply(original, detect(original))
        return self

    @property
    def original(self) -> str:
        return self._original

    @property
    def format(self) -> SequenceFormat:
        return self._format

    @property
    def sequence(self) -> str:
        return self._sequence

    @property
    def warning(self) -> CompositionWarning | None:
        return self._warning

    @property
    def definition(self) -> str:
        return self._definition

    @definition.setter
    def definition(self, value: str) -> None:
        self._definition = value

    def __len__(self) -> int:
        return len(self._sequence)

    def __repr__(self) -> str:
        return (
            f"SequenceRecord(format={self._format.value!r}, "
            f"definition={self._definition!r}, length={len(self)})"
        )

    def length(self) -> int:
        return len(self._sequence)

    def complementary(self) -> str:
        """Return the reverse complement, preserving case and ambiguity codes."""
        return self._sequence[::-1].translate(COMPLEMENT_TABLE)

    def cpg_score(self) -> tuple[float, float]:
        """
        Calculate the CpG observed/expected score and G+C content.

        The score is n(CG) / (n(C) * n(G)) * length and is 0 when there is
        no C or no G. S counts towards G+C content.

        Returns:
            (cpg_score, gc_fraction)
        """
        length = self.length()
        if length == 0:
            return 0.0, 0.0

        gc = gc_fraction(self._sequence, ambiguous="ignore")
        seq = self._sequence.lower()
        n_c = seq.count("c")
        n_g = seq.count("g")
        if n_c == 0 or n_g == 0:
            return 0.0, gc
        return seq.count("cg") / n_c / n_g * length, gc

    def composition(self) -> dict[str, int]:
        """Count each symbol of the lower-cased sequence."""
        return dict(Counter(self._sequence.lower()))

    def _substr(self, begin: int, end: int) -> str:
        # 1-based inclusive
        if begin < 1 or begin - 1 > len(self._sequence) or end > len(self._sequence):
            raise SubstringExtractionError(
                f"Error in substr: {begin}, {end}, {self._definition}"
            )
        return self._sequence[begin - 1:end]

    def snip(self, begin: int, end: int) -> str:
        """
        Extract a 1-based inclusive region, clamping out-of-range bounds.

        If begin > end the bounds are swapped and the reverse complement of
        the region is returned, i.e. the opposite strand is read.

        Args:
            begin: First position (1-based)
            end: Last position (1-based, inclusive)

        Returns:
            The extracted region
        """
        length = self.length()
        complementary = begin > end
        if complementary:
            begin, end = end, begin

        if begin < 1:
            begin = 1
        elif begin > length:
            begin = length
        if end < 0:
            end = 1
        elif end > length:
            end = length

        if length == 0:
            return ""
        region = self._substr(begin, end)
        if complementary:
            region = region[::-1].translate(COMPLEMENT_TABLE)
        return region

    def snip_with_padding(self, begin: int, end: int) -> str:
        """
        Extract a 1-based inclusive region, filling positions beyond the sequence with 'n'.

        The result is always end - begin + 1 characters long.

        Raises:
            InvertedRangeError: If begin > end
        """
        if begin > end:
            raise InvertedRangeError(begin, end)

        length = self.length()
        first = max(begin, 1)
        last = min(end, length)
        if first > last:
            return PADDING_SYMBOL * (end - begin + 1)

        head = first - begin
        tail = end - last
        return PADDING_SYMBOL * head + self._substr(first, last) + PADDING_SYMBOL * tail

    def translate(self, frame: int = 0) -> str:
        """
        Translate one of six reading frames.

        Frames 0-2 read the forward strand from offset 0-2, frames 3-5 the
        complementary strand from offset 0-2. U is read as T. A trailing
        partial codon is dropped; unresolvable codons become 'X'.

        Raises:
            InvalidFrameError: If frame is not in 0..5
        """
        if frame not in range(NUM_FRAMES):
            raise InvalidFrameError(frame)

        if frame < 3:
            seq = self._sequence[frame:]
        else:
            seq = self.complementary()[frame - 3:]
        seq = seq.lower().replace("u", "t")

        return "".join(lookup_codon(seq[i:i + 3]) for i in range(0, len(seq) - 2, 3))

    def translate_all(self) -> list[str]:
        return [self.translate(frame) for frame in range(NUM_FRAMES)]

    def periodicity(self, oligo: str = DEFAULT_OLIGO, max_window: int = DEFAULT_MAX_WINDOW) -> list[int]:
        """
        Collect distances between nearby occurrences of an oligonucleotide.

        For each occurrence, a window of max_window + len(oligo) characters
        starting there is scanned and the offset of every further occurrence
        inside it is recorded.

        Args:
            oligo: Motif such as 'CpG'; non-nucleotide letters are ignored
            max_window: Largest distance to report

        Returns:
            Flat list of distances, one per pair found
        """
        oligo = normalize_oligo(oligo)
        if not oligo:
            return []

        seq = self._sequence.lower()
        span = max(max_window, 0) + len(oligo)
        distribution = []
        for start in _occurrences(oligo, seq):
            window = seq[start:start + span]
            distribution.extend(offset for offset in _occurrences(oligo, window) if offset)
        return distribution

    def period_ratio(self, oligo: str, period: int) -> float:
        """
        Fraction of oligo occurrences with another occurrence exactly `period` away.

        e.g. period_ratio('CpG', 8) is the share of CpGs involved in an
        8-bp periodicity.
        """
        oligo = normalize_oligo(oligo)
        if not oligo:
            return 0.0

        seq = self._sequence.lower()
        length = len(seq)
        width = len(oligo)
        positions = _occurrences(oligo, seq)
        periodic = 0
        for pos in positions:
            before = pos - period
            after = pos + period
            if 0 <= before < length and seq[before:before + width] == oligo:
                periodic += 1
            elif 0 <= after < length and seq[after:after + width] == oligo:
                periodic += 1

        if positions:
            return periodic / len(positions)
        return 0.0


def parse(text: str, counter: InstanceCounter | None = None) -> SequenceRecord:
    """
    Parse a single sequence record from text.

    Raises:
        UnknownFormatError: If the text is not GenBank, EMBL, raw or FASTA
    """
    return SequenceRecord(text, counter=counter)


def reinitialize(record: SequenceRecord, text: str) -> SequenceRecord:
    """Reset an existing record from new text in place."""
    return record.reinitialize(text)
