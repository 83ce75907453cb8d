#!/usr/bin/env python3
"""CLI tool to transpose a chord/lyric sheet and export to JSON or text.

Usage:
    python examples/transpose_sheet.py <input_file> --from G --to A

Examples:
    python examples/transpose_sheet.py song.txt --from G --to Bb --flats
    python examples/transpose_sheet.py song.txt --from G --to A --json -o out.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from chord_transposer import describe_transposition, parse_chord_lyric_block, transpose_text
from chord_transposer.sheet import ChordLyricBlock


def block_to_dict(block: ChordLyricBlock) -> dict[str, Any]:
    """Convert a ChordLyricBlock to a JSON-serializable dict."""
    return {
        "lines": [
            {
                "lyric": lyric,
                "chords": [
                    {"text": p.chord, "position": p.char_index}
                    for p in block.placements
                    if p.line_index == index
                ],
            }
            for index, lyric in enumerate(block.lyric_lines)
        ],
    }


def transpose_file(input_path: Path, from_key: str, to_key: str, prefer_sharps: bool) -> str:
    """Read a sheet and return its transposed text."""
    text = input_path.read_text()
    return transpose_text(text, from_key, to_key, prefer_sharps)


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Transpose a chord/lyric sheet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s song.txt --from G --to A
  %(prog)s song.txt --from G --to Bb --flats
  %(prog)s song.txt --from G --to A --json --pretty
        """,
    )
    parser.add_argument("input", type=Path, help="Input sheet to transpose")
    parser.add_argument("--from", dest="from_key", required=True, help="Current key")
    parser.add_argument("--to", dest="to_key", required=True, help="Target key")
    parser.add_argument("--flats", action="store_true", help="Spell accidentals with flats")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument("--json", action="store_true", help="Export chord placements as JSON")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    info = describe_transposition(args.from_key, args.to_key)
    if info is None:
        print(f"Error: Unknown key in {args.from_key!r} -> {args.to_key!r}", file=sys.stderr)
        return 1

    transposed = transpose_file(args.input, args.from_key, args.to_key, not args.flats)

    if args.json:
        data = {
            "from_key": args.from_key,
            "to_key": args.to_key,
            "semitones": info.semitones,
            "capo": info.capo_text,
            "interval": info.interval_label,
            **block_to_dict(parse_chord_lyric_block(transposed)),
        }
        output = json.dumps(data, indent=2 if args.pretty else None, ensure_ascii=False)
    else:
        output = transposed

    if args.output:
        args.output.write_text(output)
        print(f"Wrote output to {args.output}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
