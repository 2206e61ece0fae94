"""Main CLI entry point for banusave."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.inspect import inspect_file
from ..config import DecodeOptions
from ..envelope.container import decode_envelope, encode, encode_legacy
from ..exceptions import BanUSaveError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the banusave CLI."""
    parser = argparse.ArgumentParser(
        prog="banusave",
        description="banusave: BanUSave archive codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  banusave encode save.json --game-id mygame -o save.bin    Create an archive
  banusave decode save.bin                                  Print archive as JSON
  banusave inspect save.bin                                 Show archive layout
  banusave --version                                        Show version
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"banusave {__version__}",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    encode_parser = subparsers.add_parser("encode", help="Encode a JSON file into an archive")
    encode_parser.add_argument("input", metavar="FILE", type=Path, help="JSON input file")
    encode_parser.add_argument("--game-id", help="Game ID to embed (required unless --legacy)")
    encode_parser.add_argument("-o", "--output", type=Path, help="Output archive (default: FILE.bin)")
    encode_parser.add_argument(
        "--legacy",
        action="store_true",
        help="Write a version 1 (BANUSAVE) archive without game ID",
    )

    decode_parser = subparsers.add_parser("decode", help="Decode an archive to JSON")
    decode_parser.add_argument("input", metavar="FILE", type=Path, help="Archive file")
    decode_parser.add_argument("-o", "--output", type=Path, help="Output JSON file (default: stdout)")
    decode_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Ignore trailing bytes after the value",
    )
    decode_parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")

    inspect_parser = subparsers.add_parser("inspect", help="Show archive layout")
    inspect_parser.add_argument("input", metavar="FILE", type=Path, help="Archive file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the banusave CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    if not args.input.exists():
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    try:
        if args.command == "encode":
            return _encode_command(args)
        if args.command == "decode":
            return _decode_command(args)
        inspect_file(args.input)
        return 0
    except (BanUSaveError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _encode_command(args: argparse.Namespace) -> int:
    value = json.loads(args.input.read_text(encoding="utf-8"))

    if args.legacy:
        data = encode_legacy(value)
    elif args.game_id is None:
        print("Error: --game-id is required unless --legacy is given", file=sys.stderr)
        return 1
    else:
        data = encode(value, args.game_id)

    output = args.output or args.input.with_suffix(".bin")
    output.write_bytes(data)
    logger.debug("Wrote %d bytes to %s", len(data), output)
    return 0


def _decode_command(args: argparse.Namespace) -> int:
    options = DecodeOptions(strict=not args.lenient)
    envelope = decode_envelope(args.input.read_bytes(), options)

    text = json.dumps(
        {"game_id": envelope.game_id, "value": envelope.value},
        indent=args.indent,
        ensure_ascii=False,
        allow_nan=False,
    )

    if args.output is None:
        print(text)
    else:
        args.output.write_text(text + "\n", encoding="utf-8")
        logger.debug("Wrote decoded archive to %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
