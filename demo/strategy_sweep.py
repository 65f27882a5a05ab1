#!/usr/bin/env python3
"""Index Strategy Sweep

Runs a strategy comparison at several workload sizes and plots how build
cost and average access cost scale for each strategy.

Usage:
    python demo/strategy_sweep.py --sizes 500 1000 2000 4000 --queries 200
    python demo/strategy_sweep.py --out sweep.png
"""

from __future__ import annotations

import argparse

import matplotlib.pyplot as plt

from tape_sim import STRATEGY_NAMES, TapeSimulator


def run_sweep(sizes: list[int], query_count: int, seed: int | None) -> dict[str, dict[str, list[float]]]:
    """Return per-strategy series of build and average access times."""
    series: dict[str, dict[str, list[float]]] = {}

    for size in sizes:
        simulator = TapeSimulator(seed=seed)
        queries = simulator.generate_queries(query_count)
        results = simulator.run_comparison(size, queries, STRATEGY_NAMES)
        for r in results:
            s = series.setdefault(r.strategy_name, {"build": [], "access": [], "hits": []})
            s["build"].append(r.index_build_time)
            s["access"].append(r.average_access_time)
            s["hits"].append(r.hits / r.total_queries if r.total_queries else 0.0)
        print(f"size={size}: " + ", ".join(f"{r.strategy_name}={r.average_access_time:.4f}s" for r in results))

    return series


def plot_sweep(sizes: list[int], series: dict[str, dict[str, list[float]]], output_path: str | None = None) -> None:
    fig, axes = plt.subplots(3, 1, figsize=(10, 10), sharex=True)

    for name, s in series.items():
        axes[0].plot(sizes, s["build"], marker="o", label=name, linewidth=2)
        axes[1].plot(sizes, s["access"], marker="o", label=name, linewidth=2)
        axes[2].plot(sizes, s["hits"], marker="o", label=name, linewidth=2)

    axes[0].set_ylabel("Index build (s)")
    axes[0].set_title("Index build cost")
    axes[1].set_ylabel("Avg access (s)")
    axes[1].set_yscale("log")
    axes[1].set_title("Average query cost")
    axes[2].set_ylabel("Hit rate")
    axes[2].set_xlabel("Data blocks")
    axes[2].set_title("Queries resolved")

    for ax in axes:
        ax.grid(True, alpha=0.3)
        ax.legend(loc="best")

    fig.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150)
        print(f"Saved plot to {output_path}")
    else:
        plt.show()


def main() -> None:
    ap = argparse.ArgumentParser(description="Sweep workload sizes across index strategies")
    ap.add_argument("--sizes", type=int, nargs="+", default=[500, 1000, 2000, 4000])
    ap.add_argument("--queries", type=int, default=200)
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--out", help="Save plot to this path instead of showing it")
    args = ap.parse_args()

    series = run_sweep(args.sizes, args.queries, args.seed)
    plot_sweep(args.sizes, series, args.out)


if __name__ == "__main__":
    main()
