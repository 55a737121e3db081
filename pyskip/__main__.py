"""Demo driver: build a list of odd keys, toggle random keys, print it.

Usage::

    python -m pyskip ELEMENTS [--operations N] [--seed S] [--verbose]
"""
from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from .skiplist import SkipList

_DEFAULT_OPERATIONS = 10


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyskip", description="Exercise a skip list and draw the result.")
    parser.add_argument("elements", type=_positive_int, help="Number of odd keys inserted up front")
    parser.add_argument("--operations", type=int, default=_DEFAULT_OPERATIONS, help="Number of random insert/delete toggles")
    parser.add_argument("--seed", type=int, default=None, help="Seed for key choice and tower heights")
    parser.add_argument("--verbose", action="store_true", help="Log level changes to stderr")
    return parser


def run(elements: int, operations: int, seed: Optional[int] = None) -> SkipList[int]:
    """Insert 1, 3, ..., 2*elements-1 then flip membership of random keys."""
    rng = random.Random(seed)
    skiplist: SkipList[int] = SkipList(rng=random.Random(rng.getrandbits(64)))
    present = [False] * (2 * elements)
    for i in range(elements):
        present[2 * i + 1] = True
        skiplist.insert(2 * i + 1)

    for _ in range(operations):
        key = rng.randrange(2 * elements)
        if present[key]:
            skiplist.delete(key)
        else:
            skiplist.insert(key)
        present[key] = not present[key]
    return skiplist


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")
    skiplist = run(args.elements, args.operations, args.seed)
    print(skiplist.render(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
