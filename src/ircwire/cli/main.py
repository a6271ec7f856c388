"""Main CLI entry point for ircwire."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .. import __version__
from ..cli.lines import decode_file, decode_stream, encode_json
from ..config import CodecConfig
from ..exceptions import IrcwireError


def main() -> int:
    """Main entry point for the ircwire CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="ircwire: IRC Protocol Message Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ircwire --decode session.log           Decode each line of a capture
  ircwire --decode -                      Decode lines from stdin
  ircwire --encode '{"command": "PRIVMSG", "params": ["#test", "hi there"]}'
  ircwire --version                       Show version
        """,
    )

    parser.add_argument(
        "--decode",
        metavar="FILE",
        type=str,
        help="Decode protocol lines from FILE ('-' for stdin) and print them as JSON",
    )

    parser.add_argument(
        "--encode",
        metavar="JSON",
        type=str,
        help="Encode a JSON message object to a protocol line",
    )

    parser.add_argument(
        "--repr",
        action="store_true",
        help="With --encode, print the line as a Python bytes literal",
    )

    parser.add_argument(
        "--max-length",
        metavar="N",
        type=int,
        default=None,
        help="Maximum line length in bytes, CRLF included (default 512)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ircwire {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = (
            CodecConfig(max_line_length=args.max_length)
            if args.max_length is not None
            else CodecConfig()
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # Handle --decode
    if args.decode:
        if args.decode == "-":
            failures = decode_stream(sys.stdin.buffer, config)
            return 1 if failures else 0

        file_path = Path(args.decode)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        failures = decode_file(file_path, config)
        return 1 if failures else 0

    # Handle --encode
    if args.encode:
        try:
            encode_json(args.encode, config, as_repr=args.repr)
            return 0
        except ValidationError as e:
            print(f"Error: invalid message: {e}", file=sys.stderr)
            return 1
        except IrcwireError as e:
            print(f"Error: {e.kind.value}: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
