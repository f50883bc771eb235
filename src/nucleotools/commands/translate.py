"""Translate a record into amino acids."""

from nucleotools.sequence.record import NUM_FRAMES
from nucleotools.utils import (
    load_record,
    load_params,
    get_output_params,
    format_fasta,
    write_output,
)


def register(subparsers):
    """Register the translate subcommand."""
    parser = subparsers.add_parser(
        "translate",
        help="Translate the sequence in one or all six reading frames",
        description="""
Translate the input sequence using the standard genetic code. Frames 0-2
read the forward strand from offsets 0-2; frames 3-5 read the
complementary strand. Degenerate codons are resolved where the code
allows it; anything else becomes X.
""",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input record file ('-' for stdin)")
    parser.add_argument("--out", help="Output FASTA (default: stdout)")
    parser.add_argument("--params", dest="param_file", help="Parameters file")
    parser.add_argument(
        "--frame", type=int, default=0, choices=range(NUM_FRAMES),
        help="Reading frame 0-5 (default: 0)",
    )
    parser.add_argument("--all", dest="all_frames", action="store_true", help="Translate all six frames")
    parser.set_defaults(func=run)


def run(args):
    """Run the translate command."""
    params = get_output_params(load_params(args.param_file))
    record = load_record(args.input)

    if args.all_frames:
        frames = list(range(NUM_FRAMES))
    else:
        frames = [args.frame]

    chunks = []
    for frame in frames:
        definition = f"{record.definition} frame {frame}"
        chunks.append(format_fasta(definition, record.translate(frame), params["line_width"]))
    write_output("".join(chunks), args.out)
