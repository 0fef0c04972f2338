"""Command-line front end for the array algorithms."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from arrayalgos.rearrange import sort_colors
from arrayalgos.subarray import leaders, max_profit, max_subarray_sum, two_sum_pairs


def _joined(values: Sequence[int]) -> list[str]:
    return [" ".join(str(v) for v in values)]


def _sort_colors(args: argparse.Namespace) -> list[str]:
    return _joined(sort_colors(args.values))


def _two_sum(args: argparse.Namespace) -> list[str]:
    return [f"{a} and {b}" for a, b in two_sum_pairs(args.values, args.target)]


def _max_profit(args: argparse.Namespace) -> list[str]:
    return [str(max_profit(args.values))]


def _max_subarray(args: argparse.Namespace) -> list[str]:
    return [str(max_subarray_sum(args.values))]


def _leaders(args: argparse.Namespace) -> list[str]:
    return _joined(leaders(args.values))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arrayalgos", description="Run classic array algorithms."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def add(name: str, help_text: str, handler) -> argparse.ArgumentParser:
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("values", nargs="+", type=int)
        sub.set_defaults(handler=handler)
        return sub

    add("sort-colors", "sort a sequence of 0s, 1s and 2s", _sort_colors)
    two_sum = add("two-sum", "list pairs summing to a target", _two_sum)
    two_sum.add_argument("--target", type=int, required=True)
    add("max-profit", "best profit from one buy and one sale", _max_profit)
    add("max-subarray", "largest contiguous subarray sum", _max_subarray)
    add("leaders", "values greater than all to their right", _leaders)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the chosen algorithm and print its result."""
    args = _build_parser().parse_args(argv)
    try:
        lines = args.handler(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())