"""Periodicity analysis of an oligonucleotide motif."""

import argparse

import numpy as np
import pandas as pd

from nucleotools.utils import (
    load_record,
    load_params,
    get_output_params,
    get_period_params,
    write_output,
)


def register(subparsers):
    """Register the period subcommand."""
    parser = subparsers.add_parser(
        "period",
        help="Histogram of distances between nearby motif occurrences",
        description="""
For every occurrence of the motif (e.g. CpG), count further occurrences
within the next MAX positions and tabulate the distances. With --ratio,
report instead the fraction of occurrences that have a partner exactly
PERIOD positions away.
""",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input record file ('-' for stdin)")
    parser.add_argument("--out", help="Output TSV (default: stdout)")
    parser.add_argument("--params", dest="param_file", help="Parameters file")
    parser.add_argument("--oligo", help="Motif, 'p' is ignored (default: CpG)")
    parser.add_argument("--max", dest="max_window", type=non_negative_int, help="Largest distance (default: 50)")
    parser.add_argument("--ratio", dest="period", type=int, help="Report the ratio for this period")
    parser.set_defaults(func=run)


def non_negative_int(value: str) -> int:
    """Argparse type for window sizes."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def distance_histogram(distances: list[int], max_window: int) -> pd.DataFrame:
    """Count distances 1..max_window, including zero counts."""
    max_window = max(max_window, 0)
    counts = np.bincount(np.asarray(distances, dtype=int), minlength=max_window + 1)
    return pd.DataFrame({
        "distance": np.arange(1, max_window + 1),
        "count": counts[1:max_window + 1],
    })


def run(args):
    """Run the period command."""
    params = load_params(args.param_file)
    period_params = get_period_params(params)
    decimals = get_output_params(params)["decimals"]

    oligo = args.oligo or period_params["oligo"]
    if args.max_window is not None:
        max_window = args.max_window
    else:
        max_window = period_params["max_window"]

    record = load_record(args.input)

    if args.period is not None:
        ratio = record.period_ratio(oligo, args.period)
        write_output(f"{oligo}\t{args.period}\t{round(ratio, decimals)}\n", args.out)
        return

    table = distance_histogram(record.periodicity(oligo, max_window), max_window)
    write_output(table.to_csv(sep="\t", index=False), args.out)
