import argparse
import logging
import sys
from typing import Optional, Sequence

from lookup_bench.benchmarks.benchmark_runner import Benchmark
from lookup_bench.utils.errors import BenchmarkError

# 900 and 1500 straddle the point where the hash-backed views resize.
DATA_SIZES = [10, 100, 900, 1000, 1500, 10_000]
ITERATIONS = 10_000
SEED = None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lookup-bench",
        description="Compare key lookups in a list, a hash map and a dict",
    )
    parser.add_argument("--sizes", type=int, nargs="+", default=DATA_SIZES,
                        help=f"Dataset sizes to test (default: {DATA_SIZES})")
    parser.add_argument("--iterations", type=int, default=ITERATIONS,
                        help=f"Lookups per structure per size (default: {ITERATIONS})")
    parser.add_argument("--seed", type=int, default=SEED,
                        help="Seed for dataset and query generation (default: random)")
    parser.add_argument("--verbose", action="store_true", help="Log stage transitions to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        Benchmark(args.sizes, args.iterations, rng=args.seed).run()
    except BenchmarkError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
