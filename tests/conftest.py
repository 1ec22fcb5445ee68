"""Pytest configuration and shared fixtures for graphclassics tests.

This module provides:
- A deterministic numpy RNG fixture for the random graph generators
- Small named graphs reused across test modules
"""

import os

import numpy as np
import pytest

from graphclassics import Digraph, EdgeWeightedDigraph, EdgeWeightedGraph, Graph
from graphclassics.diagnostics import set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture that switches debug mode off after every test."""
    yield
    set_debug_enabled(False)


@pytest.fixture
def triangle() -> Graph:
    """Undirected triangle 0-1, 1-2, 2-0."""
    return Graph(3, [(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def weighted_triangle() -> EdgeWeightedGraph:
    """Triangle with weights 1, 2, 3."""
    return EdgeWeightedGraph(3, [(0, 1, 1.0), (1, 2, 2.0), (2, 0, 3.0)])


@pytest.fixture
def directed_triangle() -> Digraph:
    """Directed cycle 0->1->2->0."""
    return Digraph(3, [(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def small_dag() -> EdgeWeightedDigraph:
    """DAG 0->1 (1), 1->2 (2), 0->2 (5)."""
    return EdgeWeightedDigraph(3, [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 5.0)])


@pytest.fixture
def tiny_ewd() -> EdgeWeightedDigraph:
    """Classic 8-vertex edge-weighted digraph with non-negative weights."""
    edges = [
        (4, 5, 0.35),
        (5, 4, 0.35),
        (4, 7, 0.37),
        (5, 7, 0.28),
        (7, 5, 0.28),
        (5, 1, 0.32),
        (0, 4, 0.38),
        (0, 2, 0.26),
        (7, 3, 0.39),
        (1, 3, 0.29),
        (2, 7, 0.34),
        (6, 2, 0.40),
        (3, 6, 0.52),
        (6, 0, 0.58),
        (6, 4, 0.93),
    ]
    return EdgeWeightedDigraph(8, edges)


@pytest.fixture
def tiny_ewg() -> EdgeWeightedGraph:
    """Classic 8-vertex edge-weighted graph (MST weight 1.81)."""
    edges = [
        (4, 5, 0.35),
        (4, 7, 0.37),
        (5, 7, 0.28),
        (0, 7, 0.16),
        (1, 5, 0.32),
        (0, 4, 0.38),
        (2, 3, 0.17),
        (1, 7, 0.19),
        (0, 2, 0.26),
        (1, 2, 0.36),
        (1, 3, 0.29),
        (2, 7, 0.34),
        (6, 2, 0.40),
        (3, 6, 0.52),
        (6, 0, 0.58),
        (6, 4, 0.93),
    ]
    return EdgeWeightedGraph(8, edges)


@pytest.fixture
def tiny_digraph() -> Digraph:
    """Classic 13-vertex digraph with five strong components."""
    edges = [
        (4, 2), (2, 3), (3, 2), (6, 0), (0, 1), (2, 0), (11, 12), (12, 9),
        (9, 10), (9, 11), (7, 9), (10, 12), (11, 4), (4, 3), (3, 5), (6, 8),
        (8, 6), (5, 4), (0, 5), (6, 4), (6, 9), (7, 6),
    ]
    return Digraph(13, edges)
