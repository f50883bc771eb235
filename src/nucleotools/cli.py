#!/usr/bin/env python
"""nucleotools - nucleic-acid sequence utility CLI."""

import argparse
import logging
import sys

from nucleotools import __version__
from nucleotools.sequence import SequenceError


def main(argv=None):
    """Main entry point for the nucleotools CLI."""
    parser = argparse.ArgumentParser(
        prog="nucleotools",
        description="Parse a GenBank, EMBL, FASTA or raw sequence and transform or analyze it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nucleotools info --in gene.gb
  nucleotools translate --in gene.fa --frame 3
  nucleotools snip --in gene.embl --begin 200 --end 101
  nucleotools period --in promoter.fa --oligo CpG --max 50

For more information on a specific command:
  nucleotools <command> --help
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress warnings")

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available subcommands",
        metavar="<command>",
    )

    # Import and register subcommands
    from nucleotools.commands import (
        info,
        complement,
        reverse,
        translate,
        snip,
        content,
        cpg,
        period,
        compare,
        rename,
        codons,
    )

    info.register(subparsers)
    complement.register(subparsers)
    reverse.register(subparsers)
    translate.register(subparsers)
    snip.register(subparsers)
    content.register(subparsers)
    cpg.register(subparsers)
    period.register(subparsers)
    compare.register(subparsers)
    rename.register(subparsers)
    codons.register(subparsers)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.ERROR if args.quiet else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    # Execute the subcommand
    try:
        args.func(args)
    except SequenceError as e:
        parser.exit(1, f"{parser.prog}: error: {e}\n")


if __name__ == "__main__":
    main()
