"""Command line entry point: windowed visualizer or a headless run."""
from __future__ import annotations

import argparse
import asyncio
import logging
import random
from typing import Sequence

from sortviz.constants import DEFAULT_ARRAY_SIZE
from sortviz.errors import ArrayInputError, InvalidCount
from sortviz.headless import run_headless
from sortviz.sorting.catalog import SORTERS
from sortviz.utils.array_source import format_value, parse_values, random_values
from sortviz.utils.log import setup_logging

logger = logging.getLogger(__name__)


def array_size(text: str) -> int:
    try:
        count = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid array size: {text!r}") from None
    if count < 0:
        raise argparse.ArgumentTypeError(str(InvalidCount(count)))
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sortviz", description="Animated comparison sorts.")
    parser.add_argument("--values", help="numbers separated by commas or spaces")
    parser.add_argument("--count", type=array_size, default=DEFAULT_ARRAY_SIZE,
                        help="size of the random array when --values is not given")
    parser.add_argument("--seed", type=int, help="seed for random arrays")
    parser.add_argument("--headless", metavar="ALGORITHM", choices=sorted(SORTERS),
                        help="run one sort without a window and print the result")
    parser.add_argument("--fast", action="store_true",
                        help="headless only: do not wait in real time")
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    rng = random.Random(args.seed)

    if args.headless is None:
        from sortviz.app import run_window
        run_window(values_text=args.values, count=args.count, rng=rng)
        return 0

    try:
        values = parse_values(args.values) if args.values else random_values(args.count, rng)
    except ArrayInputError as exc:
        parser.error(str(exc))
    result, final = asyncio.run(run_headless(values, args.headless, fast=args.fast, rng=rng))
    print(" ".join(format_value(v) for v in final))
    print(f"{SORTERS[args.headless].label}: {result.exchanges} exchanges")
    if not result.ok:
        logger.error("Run failed: %s", result.error)
        return 1
    return 0
