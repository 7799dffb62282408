#!/usr/bin/env python3
"""
Command line entry point.

With no arguments, checks the built-in sample strategies and prints one
True/False per sample. --strategy/--n checks a single named strategy.
"""

import argparse
import sys
from typing import List, Optional, Tuple

from nhats.strategies import SAMPLES, STRATEGIES, build_strategy
from nhats.verifier import verify


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='nhats-verify',
        description="Exhaustively verify strategies for the n-hats puzzle.",
    )
    parser.add_argument('--strategy', '-s', choices=sorted(STRATEGIES),
                        help="Strategy to verify (default: run the built-in samples)")
    parser.add_argument('--n', '-n', type=int,
                        help="Number of participants, required with --strategy")
    parser.add_argument('--list', action='store_true',
                        help="List the available strategies and exit")
    parser.add_argument('--summary', action='store_true',
                        help="Print a summary after the results")
    return parser


def list_strategies() -> None:
    for name in sorted(STRATEGIES):
        _, sizes = STRATEGIES[name]
        supported = 'any n' if sizes is None else 'n=' + ', '.join(str(s) for s in sizes)
        print(f"{name:12s} {supported}")


def print_summary(results: List[Tuple[str, int, bool]]) -> None:
    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    for name, n, ok in results:
        status = "✅" if ok else "❌"
        print(f"{status} {name}: n={n}, {n ** n} assignments")
    print("=" * 60)

    failed = sum(1 for _, _, ok in results if not ok)
    if failed:
        print(f"❌ {failed} of {len(results)} strategies can lose")
    else:
        print(f"✅ All {len(results)} strategies always win")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        list_strategies()
        return 0

    if args.strategy is None:
        if args.n is not None:
            parser.error("--n requires --strategy")
        runs = list(SAMPLES)
    else:
        if args.n is None:
            parser.error("--strategy requires --n")
        runs = [(args.strategy, args.n)]

    results = []
    for name, n in runs:
        try:
            strategy = build_strategy(name, n)
        except ValueError as e:
            parser.error(str(e))
        ok = verify(strategy, n)
        print(ok)
        results.append((name, n, ok))

    if args.summary:
        print_summary(results)

    return 0 if all(ok for _, _, ok in results) else 1


if __name__ == "__main__":
    sys.exit(main())
