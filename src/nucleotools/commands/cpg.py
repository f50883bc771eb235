"""Report the CpG score and G+C content of a record."""

from nucleotools.utils import load_record, load_params, get_output_params, write_output


def register(subparsers):
    """Register the cpg subcommand."""
    parser = subparsers.add_parser(
        "cpg",
        help="Calculate CpG observed/expected score and G+C content",
        description="""
Calculate the CpG score, n(CG) / (n(C) * n(G)) * length, and the G+C
content of the sequence. The score is 0 when there is no C or no G.
""",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input record file ('-' for stdin)")
    parser.add_argument("--out", help="Output file (default: stdout)")
    parser.add_argument("--params", dest="param_file", help="Parameters file")
    parser.set_defaults(func=run)


def run(args):
    """Run the cpg command."""
    params = get_output_params(load_params(args.param_file))
    record = load_record(args.input)

    score, gc = record.cpg_score()
    decimals = params["decimals"]
    write_output(
        f"definition\t{record.definition}\n"
        f"cpg_score\t{round(score, decimals)}\n"
        f"gc_content\t{round(gc, decimals)}\n",
        args.out,
    )
