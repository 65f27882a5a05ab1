"""Unit tests for console report rendering."""

import io

from tape_sim import SimulationResult
from tape_sim.cli.report import format_results_table, format_speedups, write_benchmark_csv


def make_result(name, avg, build=1.5, seeks=3):
    return SimulationResult(
        strategy_name=name,
        index_build_time=build,
        total_access_time=avg * 4,
        average_access_time=avg,
        total_seeks=seeks,
        total_queries=4,
        hits=seeks,
    )


def test_table_layout():
    """Test header, rule and fixed-point rows."""
    table = format_results_table([make_result("No Index", 2.0, build=0.0)])
    lines = table.splitlines()

    assert lines[0].startswith("Strategy")
    assert "Index Build Time (s)" in lines[0]
    assert "Total Access Time (s)" in lines[0]
    assert lines[1] == "-" * 110
    assert lines[2].startswith("No Index".ljust(30))
    assert "0.000000" in lines[2]
    assert "2.000000" in lines[2]
    assert "8.000000" in lines[2]


def test_table_without_results():
    assert len(format_results_table([]).splitlines()) == 2


def test_speedups_relative_to_first_result():
    results = [make_result("No Index", 4.0), make_result("Fixed Interval Index", 0.5)]
    assert format_speedups(results) == ["Fixed Interval Index is 8.00x faster than no index strategy"]


def test_speedup_with_zero_cost_strategy():
    results = [make_result("No Index", 4.0), make_result("Fixed Interval Index", 0.0)]
    assert format_speedups(results) == ["Fixed Interval Index is infx faster than no index strategy"]


def test_speedups_empty():
    assert format_speedups([]) == []


def test_benchmark_csv():
    out = io.StringIO()
    write_benchmark_csv([("none", 12.5, 300.25), ("fixed", 1.0, 0.125)], out)

    assert out.getvalue().splitlines() == [
        "strategy,index_build_time_ms,query_time_ms",
        "none,12.500000,300.250000",
        "fixed,1.000000,0.125000",
    ]
