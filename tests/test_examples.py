"""Smoke tests for example scripts.

These tests ensure that the example scripts run their main execution paths
without raising exceptions.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def _run(name: str) -> subprocess.CompletedProcess:
    script = ROOT / "examples" / name
    assert script.exists(), f"Example script not found: {script}"

    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=30,
    )
    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )
    return result


def test_flight_routes_example_runs() -> None:
    """Test that examples/flight_routes.py runs successfully."""
    result = _run("flight_routes.py")
    assert "JFK -> LAS: JFK -> ORD -> DEN -> LAS (3 hops)" in result.stdout
    assert "Route planning complete" in result.stdout


def test_scheduling_and_arbitrage_example_runs() -> None:
    """Test that examples/scheduling_and_arbitrage.py runs successfully."""
    result = _run("scheduling_and_arbitrage.py")
    assert "Finish time: 173.0" in result.stdout
    assert "Stake multiplier" in result.stdout


@pytest.mark.parametrize("name", ["bench_scc.py", "bench_shortest_paths.py", "bench_mst.py"])
def test_benchmarks_run(name: str) -> None:
    """Test that the benchmark scripts complete on their default sizes."""
    script = ROOT / "benchmarks" / name
    result = subprocess.run(
        [sys.executable, str(script), "--quick"],
        capture_output=True,
        text=True,
        check=False,
        timeout=60,
    )
    assert result.returncode == 0, result.stderr
