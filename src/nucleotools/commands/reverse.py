"""Write a record's sequence in reverse order."""

from nucleotools.utils import (
    load_record,
    load_params,
    get_output_params,
    format_fasta,
    write_output,
)


def register(subparsers):
    """Register the reverse subcommand."""
    parser = subparsers.add_parser(
        "reverse",
        help="Write the reversed sequence (not complemented)",
        description="Write the input sequence reversed, without complementing it, as FASTA.",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input record file ('-' for stdin)")
    parser.add_argument("--out", help="Output FASTA (default: stdout)")
    parser.add_argument("--params", dest="param_file", help="Parameters file")
    parser.set_defaults(func=run)


def run(args):
    """Run the reverse command."""
    params = get_output_params(load_params(args.param_file))
    record = load_record(args.input)

    fasta = format_fasta(record.definition, record.sequence[::-1], params["line_width"])
    write_output(fasta, args.out)
