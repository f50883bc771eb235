"""Exceptions raised by the sequence record model."""


class SequenceError(Exception):
    """Base class for sequence record errors."""


class UnknownFormatError(SequenceError, ValueError):
    """Input text matches none of GenBank, EMBL, raw or FASTA."""

    def __init__(self, text: str):
        self.text = text
        preview = text if len(text) <= 60 else text[:57] + "..."
        super().__init__(f"Unknown format: {preview!r}")


class InvertedRangeError(SequenceError, ValueError):
    """Padded region requested with begin > end."""

    def __init__(self, begin: int, end: int):
        self.begin = begin
        self.end = end
        super().__init__(f"Position error in padded snip: {begin}-{end}")


class SubstringExtractionError(SequenceError, IndexError):
    """Slice bounds fell outside the sequence after range handling."""


class InvalidFrameError(SequenceError, ValueError):
    """Reading frame outside 0..5."""

    def __init__(self, frame):
        self.frame = frame
        super().__init__(f"Reading frame must be 0-5, got {frame!r}")
