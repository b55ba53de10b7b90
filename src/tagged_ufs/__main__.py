"""Command line entry point for the tagged_ufs benchmark."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .bench import DEFAULT_SCALES, MODES, BenchmarkConfig, run_benchmark
from .runner import benchmark_to_file
from .structures import UnionStrategy


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Time the insert-then-unite workload on tagged union-find sets.")
    parser.add_argument(
        "--scales",
        type=int,
        nargs="+",
        default=list(DEFAULT_SCALES),
        help="Element counts to benchmark",
    )
    parser.add_argument("--repeats", type=int, default=3, help="Timed runs per scale (default: 3)")
    parser.add_argument("--mode", choices=MODES, default="tagged", help="Structure to benchmark (default: tagged)")
    parser.add_argument(
        "--union-by",
        choices=[strategy.value for strategy in UnionStrategy],
        default=os.getenv("TAGGED_UFS_UNION_BY", UnionStrategy.SIZE.value),
        help="Union heuristic (default: $TAGGED_UFS_UNION_BY or size)",
    )
    parser.add_argument("--output", type=Path, help="Optional .csv or .json path for the timings")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        config = BenchmarkConfig(
            scales=args.scales,
            repeats=args.repeats,
            mode=args.mode,
            union_by=args.union_by,
            use_tqdm=not args.disable_tqdm,
            verbose=True,
        )
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 2

    if args.output is None:
        results = run_benchmark(config)
    else:
        results = benchmark_to_file(args.output, config)
        if results is None:
            return 1
        print(f"\n   Results saved to '{args.output}'")

    print(results.to_string(index=False))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
