"""Main CLI entry point for wkbdecode."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .. import __version__
from ..codec import parse
from ..config import DecoderConfig
from ..exceptions import WkbError


def _read_file(path: Path) -> bytes | str:
    """Return raw EWKB bytes, or the file's text if it holds hex.

    A leading 0x00 or 0x01 byte is a byte order marker; anything else is
    read as hex text, with an optional UTF-8 byte order mark.
    """
    raw = path.read_bytes()
    if raw[:1] in (b"\x00", b"\x01"):
        return raw
    return raw.decode("utf-8-sig", errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the wkbdecode CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="wkbdecode",
        description="wkbdecode: WKB/EWKB Geometry Decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wkbdecode 0101000020E6100000000000000000F83F00000000000002C0
  wkbdecode --file geometry.wkb          Decode raw or hex EWKB from a file
  wkbdecode --version                    Show version
        """,
    )

    parser.add_argument(
        "hex",
        nargs="?",
        metavar="HEX",
        help="Hex-encoded WKB/EWKB geometry",
    )

    parser.add_argument(
        "--file",
        metavar="FILE",
        type=str,
        help=(
            "Read the geometry from a file. A file starting with byte 0x00 or 0x01 "
            "is raw EWKB, anything else is read as hex text"
        ),
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        default=DecoderConfig.max_depth,
        help="Maximum geometry nesting depth (default: %(default)s)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject trailing bytes after the geometry",
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent JSON output by N spaces",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"wkbdecode {__version__}",
    )

    args = parser.parse_args(argv)

    if args.hex and args.file:
        print("Error: Give either HEX or --file, not both", file=sys.stderr)
        return 1

    data: bytes | str
    if args.file:
        file_path = Path(args.file)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1
        data = _read_file(file_path)
    elif args.hex:
        data = args.hex
    else:
        # If no input specified, show help
        parser.print_help()
        return 0

    try:
        config = DecoderConfig(max_depth=args.max_depth, allow_trailing_data=not args.strict)
        result = parse(data, config=config)
    except (WkbError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result.to_dict(), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
