from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import RunOptions, run
from .errors import BFIError
from .interpreter import DEFAULT_MEMORY_SIZE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfi",
        description="Brainfuck interpreter with a circular tape of wrapping 8-bit cells.",
    )
    parser.add_argument("input_file", help="Path to the file to be interpreted")
    parser.add_argument(
        "-m", "--memory-size", type=int, default=DEFAULT_MEMORY_SIZE,
        help=f"Number of cells in the memory (default {DEFAULT_MEMORY_SIZE})",
    )
    parser.add_argument("--encoding", default="utf-8", help="Source file encoding (default utf-8)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log interpreter activity to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = RunOptions(memory_size=args.memory_size, encoding=args.encoding)
        run(args.input_file, sys.stdin.buffer, sys.stdout.buffer, options=options)
    except BFIError as e:
        sys.stdout.flush()
        hint = getattr(e, "hint", None)
        hint_block = f"\nHint: {hint}" if hint else ""
        print(f"bfi: error: {e}{hint_block}", file=sys.stderr)
        return 1
    finally:
        sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
