#!/usr/bin/env python3
"""Dump every character of standard input with its bytes and name."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import BinaryIO, List, Optional, TextIO

from .coding import ByteCursor
from .config import load_config
from .decoding import CHARSETS, UnknownCharset, decoder_for_charset, iter_tokens
from .render import write_tokens

logger = logging.getLogger(__name__)


def build_parser(default_charset: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chardump",
        description="Decode standard input and print one line per character",
    )
    parser.add_argument(
        "-c",
        "--charset",
        default=default_charset,
        help=f"select character set ({' | '.join(CHARSETS)})",
    )
    parser.add_argument(
        "--trace",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Log decoder diagnostics to stderr (default: $CHARDUMP_TRACE)",
    )
    return parser


def _configure_logging(trace: bool) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if trace else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def run(
    charset: str,
    stdin: BinaryIO,
    stdout: TextIO,
    chunk_size: int,
) -> int:
    cursor = ByteCursor(stdin, chunk_size=chunk_size)
    decoder = decoder_for_charset(cursor, charset)
    count = write_tokens(iter_tokens(decoder), stdout)
    stdout.flush()
    if not cursor.at_end():
        logger.debug("partial unit left undecoded after offset %d", cursor.get_pos())
    logger.debug("wrote %d lines for %d bytes", count, cursor.get_pos())
    return count


def main(argv: Optional[List[str]] = None) -> int:
    config = load_config()
    parser = build_parser(config.charset)
    args = parser.parse_args(argv)

    trace = config.trace if args.trace is None else args.trace
    _configure_logging(trace)

    try:
        run(args.charset, sys.stdin.buffer, sys.stdout, config.chunk_size)
    except UnknownCharset as exc:
        parser.print_help(sys.stderr)
        print(f"\nchardump: {exc}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        # stdout closed early, e.g. piped into head
        _silence_stdout()
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
