# Command line entry point: strategy comparison or wall-clock benchmark.
from __future__ import annotations

import argparse
import logging
import sys

from tape_sim.cli.report import format_results_table, format_speedups, write_benchmark_csv
from tape_sim.components.factory import STRATEGY_NAMES, create_strategy
from tape_sim.core.config import DEFAULT_BLOCK_COUNT, DEFAULT_QUERY_COUNT, TapeConfig
from tape_sim.core.simulator import TapeSimulator


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tape-sim", description="Compare index strategies on a simulated tape"
    )
    p.add_argument(
        "mode",
        nargs="?",
        choices=("compare", "benchmark"),
        default="compare",
        help="compare simulated costs (default) or benchmark wall-clock time",
    )
    p.add_argument(
        "--blocks", type=int, default=DEFAULT_BLOCK_COUNT, help="Data blocks per workload"
    )
    p.add_argument(
        "--queries", type=int, default=DEFAULT_QUERY_COUNT, help="Number of query ids"
    )
    p.add_argument("--block-size", type=int, default=4096, help="Block size in bytes")
    p.add_argument("--seed", type=int, help="Seed for workload and query generation")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def run_compare(args: argparse.Namespace) -> None:
    simulator = TapeSimulator(TapeConfig(block_size=args.block_size), seed=args.seed)
    queries = simulator.generate_queries(args.queries)

    print(
        f"Starting tape storage simulation with {args.blocks} blocks "
        f"and {args.queries} queries..."
    )
    results = simulator.run_comparison(args.blocks, queries, STRATEGY_NAMES)

    print("\nSimulation Results:\n")
    print(format_results_table(simulator.results))

    print("\nPerformance Analysis:")
    for line in format_speedups(results):
        print(line)


def run_benchmark(args: argparse.Namespace) -> None:
    simulator = TapeSimulator(TapeConfig(block_size=args.block_size), seed=args.seed)
    queries = simulator.generate_queries(args.queries)

    rows = []
    for name in STRATEGY_NAMES:
        simulator.set_strategy(create_strategy(name))
        build_ms = simulator.benchmark_index_build(args.blocks)
        query_ms = simulator.benchmark_queries(queries)
        rows.append((name, build_ms, query_ms))

    write_benchmark_csv(rows, sys.stdout)


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.mode == "benchmark":
        try:
            run_benchmark(args)
        except Exception as e:
            print(f"Benchmark failed: {e}", file=sys.stderr)
            return 1
        return 0

    try:
        run_compare(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
