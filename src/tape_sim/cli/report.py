# Console rendering for simulation and benchmark results.
from __future__ import annotations

import csv
from collections.abc import Iterable, Sequence
from typing import TextIO

from tape_sim.core.simulator import SimulationResult

TABLE_WIDTH = 110
BENCHMARK_HEADER = ("strategy", "index_build_time_ms", "query_time_ms")


def format_results_table(results: Iterable[SimulationResult]) -> str:
    lines = [
        f"{'Strategy':<30}{'Index Build Time (s)':<20}{'Avg Access Time (s)':<20}"
        f"{'Total Seeks':<15}{'Total Access Time (s)':<20}",
        "-" * TABLE_WIDTH,
    ]
    for r in results:
        lines.append(
            f"{r.strategy_name:<30}{r.index_build_time:<20.6f}{r.average_access_time:<20.6f}"
            f"{r.total_seeks:<15}{r.total_access_time:<20.6f}"
        )
    return "\n".join(lines)


def format_speedups(results: Sequence[SimulationResult]) -> list[str]:
    """One line per indexed strategy, relative to the first (no-index) result."""
    if not results:
        return []
    baseline = results[0].average_access_time
    lines = []
    for r in results[1:]:
        speedup = baseline / r.average_access_time if r.average_access_time > 0 else float("inf")
        lines.append(f"{r.strategy_name} is {speedup:.2f}x faster than no index strategy")
    return lines


def write_benchmark_csv(rows: Iterable[tuple[str, float, float]], out: TextIO) -> None:
    w = csv.writer(out, lineterminator="\n")
    w.writerow(BENCHMARK_HEADER)
    for name, build_ms, query_ms in rows:
        w.writerow([name, f"{build_ms:.6f}", f"{query_ms:.6f}"])
