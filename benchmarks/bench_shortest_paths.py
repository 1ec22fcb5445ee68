"""Benchmark single-source and all-pairs shortest paths."""

import sys
import time
from typing import Callable, Dict

import numpy as np

from graphclassics import BellmanFordSP, DijkstraAllPairsSP, DijkstraSP, FloydWarshall
from graphclassics.generators import random_edge_weighted_digraph


def _time(fn: Callable[[], object], repeats: int) -> float:
    best = float("inf")
    for _ in range(repeats):
        start = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - start)
    return best


def benchmark_single_source(V: int, E: int, repeats: int = 3) -> Dict[str, float]:
    """Compare Dijkstra with queue-based Bellman-Ford from vertex 0."""
    G = random_edge_weighted_digraph(V, E, rng=np.random.default_rng(0))
    return {
        "dijkstra_sec": _time(lambda: DijkstraSP(G, 0), repeats),
        "bellman_ford_sec": _time(lambda: BellmanFordSP(G, 0), repeats),
    }


def benchmark_all_pairs(V: int, E: int, repeats: int = 1) -> Dict[str, float]:
    """Compare V runs of Dijkstra with Floyd-Warshall."""
    G = random_edge_weighted_digraph(V, E, rng=np.random.default_rng(0))
    return {
        "dijkstra_all_pairs_sec": _time(lambda: DijkstraAllPairsSP(G), repeats),
        "floyd_warshall_sec": _time(lambda: FloydWarshall(G), repeats),
    }


if __name__ == "__main__":
    quick = "--quick" in sys.argv
    V, E = (200, 1000) if quick else (5000, 50000)
    print(f"Benchmarking single-source shortest paths ({V} vertices, {E} edges)...")
    for name, seconds in benchmark_single_source(V, E).items():
        print(f"  {name}: {seconds * 1e3:.2f} ms")

    V, E = (40, 200) if quick else (200, 2000)
    print(f"Benchmarking all-pairs shortest paths ({V} vertices, {E} edges)...")
    for name, seconds in benchmark_all_pairs(V, E).items():
        print(f"  {name}: {seconds * 1e3:.2f} ms")
