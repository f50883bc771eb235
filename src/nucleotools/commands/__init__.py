"""CLI subcommand implementations."""

from . import (
    info,
    complement,
    reverse,
    translate,
    snip,
    content,
    cpg,
    period,
    compare,
    rename,
    codons,
)

__all__ = [
    "info",
    "complement",
    "reverse",
    "translate",
    "snip",
    "content",
    "cpg",
    "period",
    "compare",
    "rename",
    "codons",
]
