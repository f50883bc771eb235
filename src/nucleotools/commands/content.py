"""Report the symbol composition of a record."""

import pandas as pd

from nucleotools.utils import load_record, load_params, get_output_params, write_output


def register(subparsers):
    """Register the content subcommand."""
    parser = subparsers.add_parser(
        "content",
        help="Count each symbol in the sequence",
        description="Tabulate the count and fraction of every symbol (case-insensitive).",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input record file ('-' for stdin)")
    parser.add_argument("--out", help="Output TSV (default: stdout)")
    parser.add_argument("--params", dest="param_file", help="Parameters file")
    parser.set_defaults(func=run)


def composition_table(record) -> pd.DataFrame:
    """Build a symbol / count / fraction table sorted by symbol."""
    counts = record.composition()
    table = pd.DataFrame(sorted(counts.items()), columns=["symbol", "count"])
    table["fraction"] = table["count"] / max(record.length(), 1)
    return table


def run(args):
    """Run the content command."""
    params = get_output_params(load_params(args.param_file))
    record = load_record(args.input)

    table = composition_table(record).round(params["decimals"])
    write_output(table.to_csv(sep="\t", index=False), args.out)
