"""Report the detected format, definition and length of a record."""

from nucleotools.utils import load_record, write_output


def register(subparsers):
    """Register the info subcommand."""
    parser = subparsers.add_parser(
        "info",
        help="Show format, definition and length of a record",
        description="""
Detect the format of the input record (GenBank, EMBL, FASTA or raw) and
report its definition, sequence length and any composition warning.
""",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input record file ('-' for stdin)")
    parser.add_argument("--out", help="Output file (default: stdout)")
    parser.set_defaults(func=run)


def run(args):
    """Run the info command."""
    record = load_record(args.input)

    lines = [
        f"format\t{record.format.value}",
        f"definition\t{record.definition}",
        f"length\t{record.length()}",
    ]
    if record.warning is not None:
        lines.append(f"warning\t{record.warning.value}")

    write_output("\n".join(lines) + "\n", args.out)
