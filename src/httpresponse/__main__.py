r"""
=============================================================================
HTTPRESPONSE CLI ENTRY POINT
=============================================================================

Parses a saved HTTP response and prints what was found in it.

=============================================================================
USAGE
=============================================================================

    # Summary: status line, headers, body size
    python -m httpresponse response.txt

    # Read from stdin
    printf 'HTTP/1.1 200 OK\nServer: x\n\nhi' | python -m httpresponse -

    # A single header (exact name match, exit code 1 if missing)
    python -m httpresponse response.txt --header Content-Type

    # Machine-readable output
    python -m httpresponse response.txt --json

=============================================================================
EXIT CODES
=============================================================================

    0   Parsed successfully
    1   --header given and no header has that name
    2   Input unreadable, invalid configuration, or response rejected

=============================================================================
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ParserConfig, LOG_LEVELS
from .http.errors import HTTPParseError, HeaderNotFoundError
from .http.response import ResponseParser

logger = logging.getLogger(__name__)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()

    # newline="" keeps CRLF line endings as they were captured
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Configuration is read from the environment first (ParserConfig.from_env)
    and then overridden by any command-line flags.
    """
    parser = argparse.ArgumentParser(
        prog="httpresponse",
        description="Parse a raw HTTP/1.x response and show its parts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m httpresponse response.txt                   # Summary
  python -m httpresponse response.txt -H Content-Type   # One header
  python -m httpresponse response.txt --json            # JSON output
  cat response.txt | python -m httpresponse -           # From stdin
        """
    )

    parser.add_argument(
        "file",
        help="File containing the raw response, or - for stdin"
    )

    # ─────────────────────────────────────────────────────────────────────
    # OUTPUT ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    output = parser.add_mutually_exclusive_group()

    output.add_argument(
        "--header", "-H",
        metavar="NAME",
        default=None,
        help="Print only the value of this header (case-sensitive)"
    )

    output.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed response as JSON"
    )

    output.add_argument(
        "--body", "-b",
        action="store_true",
        help="Print the body after the headers"
    )

    # ─────────────────────────────────────────────────────────────────────
    # PARSER ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--max-size",
        type=int,
        default=None,
        help="Reject responses longer than this many characters (default: 10 MB)"
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"httpresponse {__version__}"
    )

    args = parser.parse_args(argv)

    # =========================================================================
    # BUILD CONFIGURATION
    # =========================================================================

    try:
        config = ParserConfig.from_env()
        if args.max_size is not None:
            config.max_response_size = args.max_size
        if args.log_level is not None:
            config.log_level = args.log_level
        config.validate()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # =========================================================================
    # READ AND PARSE
    # =========================================================================

    try:
        raw = _read_input(args.file)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.info(f"Read {len(raw)} characters from {args.file}")

    try:
        response = ResponseParser.from_config(config).parse(raw)
    except HTTPParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # =========================================================================
    # OUTPUT
    # =========================================================================

    if args.header is not None:
        try:
            print(response.header_value(args.header))
        except HeaderNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    if args.json:
        print(json.dumps(response.to_dict(), indent=2))
        return 0

    print(response.status_line)
    for header in response.headers:
        print(header)
    print()

    if args.body:
        print(response.body)
    else:
        print(f"({len(response.body)} characters of body)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
