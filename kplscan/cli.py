"""Command-line entry point: print the tokens of a source file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .charcode import Dialect
from .errors import ScanError
from .reader import read_source
from .scanner import Scanner


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scanner",
        description="Print the tokens of a source file, one per line.",
    )
    parser.add_argument("file", nargs="?", help="source file to scan")
    parser.add_argument(
        "--dialect",
        choices=[dialect.value for dialect in Dialect],
        default=Dialect.CLASSIC.value,
        help="language dialect to scan (default: %(default)s)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Scan the named file and print its tokens; return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.file is None:
        print("scanner: no input file.")
        return -1

    try:
        text = read_source(args.file)
    except OSError:
        print("Can't read input file!")
        return -1

    scanner = Scanner(text, Dialect(args.dialect))
    try:
        for token in scanner:
            print(token.describe())
    except ScanError as err:
        print(err)
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())