"""Benchmark the four minimum spanning forest algorithms."""

import sys
import time
from typing import Dict

import numpy as np

from graphclassics import minimum_spanning_forest
from graphclassics.generators import random_edge_weighted_graph


def benchmark_mst(V: int, E: int, algorithm: str, repeats: int = 3) -> Dict[str, float]:
    """Benchmark one MST algorithm on a random edge-weighted graph.

    Returns:
        Dictionary with timing results and the forest weight, which must agree
        across algorithms.
    """
    G = random_edge_weighted_graph(V, E, rng=np.random.default_rng(0))

    best = float("inf")
    for _ in range(repeats):
        start = time.perf_counter()
        mst = minimum_spanning_forest(G, algorithm)
        best = min(best, time.perf_counter() - start)

    return {"V": V, "E": E, "weight": mst.weight(), "time_sec": best}


if __name__ == "__main__":
    quick = "--quick" in sys.argv
    V, E = (200, 1000) if quick else (10000, 100000)
    print(f"Benchmarking MST ({V} vertices, {E} edges)...")
    for algorithm in ("lazy_prim", "prim", "kruskal", "boruvka"):
        results = benchmark_mst(V, E, algorithm)
        print(f"  {algorithm:>9}: {results['time_sec'] * 1e3:8.2f} ms, weight {results['weight']:.5f}")
