"""Command-line driver: tokenize a file and print one line per token.

Usage:
    tinylex [--strict] [--comments-anywhere] [-v] FILE

Options:
    --strict             Stop with exit code 1 at the first invalid token
    --comments-anywhere  Recognize // comments at any token boundary
    -v, --verbose        Enable debug logging on stderr

Reads FILE (or stdin for "-") and prints, until END:

    Found token 'int' of type: TOKEN_KEYWORD on line 1 at col 1

Invalid characters are reported inline on stdout, in the order met.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from tinylex import __version__
from tinylex.config import LexConfig
from tinylex.errors import LexError, SourceReadError
from tinylex.lexer import Lexer
from tinylex.source import read_source, read_stream
from tinylex.tokens import Token, token_name
from tinylex.utils.logger import get_logger

logger = get_logger(__name__)

STDIN_NAME = "<stdin>"


def format_token(token: Token) -> str:
    """Format one driver output line for token."""
    return (
        f"Found token '{token.value}' of type: {token_name(token)} "
        f"on line {token.lineno} at col {token.col}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinylex",
        description="Tokenize a source file and print its tokens.",
    )
    parser.add_argument("file", help='Source file to tokenize ("-" for stdin)')
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 at the first invalid token",
    )
    parser.add_argument(
        "--comments-anywhere",
        action="store_true",
        help="Recognize // comments at any token boundary",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the driver. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    source_file = STDIN_NAME if args.file == "-" else args.file
    try:
        if args.file == "-":
            source = read_stream(sys.stdin, STDIN_NAME)
        else:
            source = read_source(args.file)
    except SourceReadError as e:
        print(f"Error: {e}")
        return 1

    config = LexConfig(
        comments_anywhere=args.comments_anywhere,
        fail_on_invalid=args.strict,
    )
    lexer = Lexer(source, source_file=source_file, config=config)

    count = 0
    try:
        for token in lexer.tokenize():
            if token.is_end:
                break
            print(format_token(token))
            count += 1
    except LexError as e:
        print(f"Error: {e}")
        return 1

    logger.debug("Emitted %d tokens from %s", count, source_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
