"""List the built-in reference tables."""

import pandas as pd

from nucleotools.sequence.tables import (
    GENETIC_CODE,
    TWO_LETTER_CODONS,
    NUCLEOTIDE_SYMBOLS,
    AMINO_ACID_NAMES,
)
from nucleotools.utils import write_output

TABLES = ("code", "symbols", "amino")


def register(subparsers):
    """Register the codons subcommand."""
    parser = subparsers.add_parser(
        "codons",
        help="Show the genetic code, nucleotide symbols or amino-acid names",
        description="Print one of the reference tables used for translation.",
    )
    parser.add_argument("--table", choices=TABLES, default="code", help="Table to print (default: code)")
    parser.add_argument("--out", help="Output TSV (default: stdout)")
    parser.set_defaults(func=run)


def reference_table(name: str) -> pd.DataFrame:
    """Build the named reference table."""
    if name == "code":
        codons = {**GENETIC_CODE, **TWO_LETTER_CODONS}
        return pd.DataFrame(sorted(codons.items()), columns=["codon", "amino_acid"])
    if name == "symbols":
        return pd.DataFrame(sorted(NUCLEOTIDE_SYMBOLS.items()), columns=["symbol", "bases"])
    if name == "amino":
        rows = [(letter, three, full) for letter, (three, full) in sorted(AMINO_ACID_NAMES.items())]
        return pd.DataFrame(rows, columns=["letter", "code", "name"])
    raise ValueError(f"Unknown table: {name}")


def run(args):
    """Run the codons command."""
    write_output(reference_table(args.table).to_csv(sep="\t", index=False), args.out)
