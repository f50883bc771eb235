"""Write the complementary strand of a record."""

from nucleotools.utils import (
    load_record,
    load_params,
    get_output_params,
    format_fasta,
    write_output,
)


def register(subparsers):
    """Register the complement subcommand."""
    parser = subparsers.add_parser(
        "complement",
        help="Write the complementary strand",
        description="""
Write the reverse complement of the input sequence as FASTA. Case and
IUPAC ambiguity codes are preserved.
""",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input record file ('-' for stdin)")
    parser.add_argument("--out", help="Output FASTA (default: stdout)")
    parser.add_argument("--params", dest="param_file", help="Parameters file")
    parser.set_defaults(func=run)


def run(args):
    """Run the complement command."""
    params = get_output_params(load_params(args.param_file))
    record = load_record(args.input)

    fasta = format_fasta(record.definition, record.complementary(), params["line_width"])
    write_output(fasta, args.out)
