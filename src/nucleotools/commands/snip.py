"""Extract a region of a record."""

from nucleotools.utils import (
    load_record,
    load_params,
    get_output_params,
    format_fasta,
    write_output,
)


def register(subparsers):
    """Register the snip subcommand."""
    parser = subparsers.add_parser(
        "snip",
        help="Extract a region by 1-based coordinates",
        description="""
Extract the region BEGIN..END (1-based, inclusive). If BEGIN > END the
complementary strand of END..BEGIN is returned. Coordinates beyond the
sequence are clamped, or filled with 'n' when --fill-n is given.
""",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input record file ('-' for stdin)")
    parser.add_argument("--out", help="Output FASTA (default: stdout)")
    parser.add_argument("--params", dest="param_file", help="Parameters file")
    parser.add_argument("--begin", type=int, required=True, help="First position (1-based)")
    parser.add_argument("--end", type=int, required=True, help="Last position (1-based, inclusive)")
    parser.add_argument("--fill-n", action="store_true", help="Pad out-of-range positions with 'n' instead of clamping")
    parser.set_defaults(func=run)


def run(args):
    """Run the snip command."""
    params = get_output_params(load_params(args.param_file))
    record = load_record(args.input)

    if args.fill_n:
        region = record.snip_with_padding(args.begin, args.end)
    else:
        region = record.snip(args.begin, args.end)

    definition = f"{record.definition} {args.begin}-{args.end}"
    write_output(format_fasta(definition, region, params["line_width"]), args.out)
