"""Compare two records position by position."""

from nucleotools.sequence import compare
from nucleotools.utils import load_record, write_output


def register(subparsers):
    """Register the compare subcommand."""
    parser = subparsers.add_parser(
        "compare",
        help="Report the first difference between two sequences",
        description="""
Compare two sequences case-insensitively, whatever their formats, and
report the first differing position with both symbols. A sequence that
ends early is shown as '-'. Nothing is written when they are identical.
""",
    )
    parser.add_argument("--in", dest="input", required=True, help="First record file ('-' for stdin)")
    parser.add_argument("--with", dest="other", required=True, help="Second record file")
    parser.add_argument("--out", help="Output file (default: stdout)")
    parser.set_defaults(func=run)


def run(args):
    """Run the compare command."""
    first = load_record(args.input)
    second = load_record(args.other)

    mismatch = compare(first, second)
    if mismatch is None:
        return
    write_output(f"{mismatch.position}\t{mismatch.symbol_a}\t{mismatch.symbol_b}\n", args.out)
