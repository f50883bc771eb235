"""Rewrite the definition line of a record."""

from nucleotools.utils import (
    load_record,
    load_params,
    get_output_params,
    format_fasta,
    write_output,
)


def register(subparsers):
    """Register the rename subcommand."""
    parser = subparsers.add_parser(
        "rename",
        help="Replace the definition and write the record as FASTA",
        description="Replace the definition of the input record and write it as FASTA.",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input record file ('-' for stdin)")
    parser.add_argument("--out", help="Output FASTA (default: stdout)")
    parser.add_argument("--params", dest="param_file", help="Parameters file")
    parser.add_argument("--definition", required=True, help="New definition line")
    parser.set_defaults(func=run)


def run(args):
    """Run the rename command."""
    params = get_output_params(load_params(args.param_file))
    record = load_record(args.input)

    record.definition = args.definition
    write_output(format_fasta(record.definition, record.sequence, params["line_width"]), args.out)
