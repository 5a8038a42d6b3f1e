"""Command-line tool to transpose a chord sheet between keys.

Usage:
    chord-transpose <input_file> --from <key> --to <key> [options]

Examples:
    chord-transpose song.txt --from C --to D
    chord-transpose song.txt --from G --to Eb --flats -o song_eb.txt
    cat intro.txt | chord-transpose - --from A --to B --instrumental --info
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chord_transposer.pitch_class import default_prefer_sharps
from chord_transposer.shape import chord_pairs, find_shape_mismatches
from chord_transposer.song import transpose_info
from chord_transposer.text import get_semitone_interval, transpose_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``chord-transpose``."""
    parser = argparse.ArgumentParser(
        prog="chord-transpose",
        description="Transpose the chord lines of a chord/lyric sheet.",
    )
    parser.add_argument("input", help="Input text file, or - for stdin")
    parser.add_argument("--from", dest="from_key", required=True, help="Current key (e.g. C, F#, Bb)")
    parser.add_argument("--to", dest="to_key", required=True, help="Target key")
    notation = parser.add_mutually_exclusive_group()
    notation.add_argument(
        "--sharps",
        dest="prefer_sharps",
        action="store_true",
        default=None,
        help="Spell with sharps (default follows the --from key)",
    )
    notation.add_argument("--flats", dest="prefer_sharps", action="store_false", help="Spell with flats")
    parser.add_argument(
        "--instrumental",
        action="store_true",
        help="Treat every line as a chord line (no lyric lines)",
    )
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--info", action="store_true", help="Print interval and capo summary to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.input == "-":
        text = sys.stdin.read()
    else:
        input_path = Path(args.input)
        if not input_path.exists():
            print(f"Error: Input file not found: {args.input}", file=sys.stderr)
            return 1
        text = input_path.read_text(encoding="utf-8")

    prefer_sharps = args.prefer_sharps
    if prefer_sharps is None:
        prefer_sharps = default_prefer_sharps(args.from_key)

    result = transpose_text(text, args.from_key, args.to_key, prefer_sharps, instrumental=args.instrumental)
    semitones = get_semitone_interval(args.from_key, args.to_key)
    if semitones:
        find_shape_mismatches(chord_pairs(text, result, instrumental=args.instrumental), semitones)

    if args.info:
        info = transpose_info(args.from_key, args.to_key)
        print(f"{args.from_key} -> {args.to_key}: {info.interval_name} ({info.capo_text})", file=sys.stderr)

    if args.output:
        Path(args.output).write_text(result, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
