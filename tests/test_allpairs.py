"""Tests for all-pairs shortest path algorithms."""

import math

import numpy as np
import pytest

from graphclassics import (
    AdjMatrixEdgeWeightedDigraph,
    BellmanFordSP,
    DijkstraAllPairsSP,
    EdgeWeightedDigraph,
    FloydWarshall,
)
from graphclassics.diagnostics import check_all_pairs, check_negative_cycle, debug_context
from graphclassics.generators import random_adj_matrix_digraph, random_edge_weighted_digraph


def _as_matrix(G) -> AdjMatrixEdgeWeightedDigraph:
    return AdjMatrixEdgeWeightedDigraph(G.V, G.edges())


class TestFloydWarshall:
    """Tests for Floyd-Warshall."""

    def test_simple_chain(self):
        """Test the 0->1->2 chain."""
        G = AdjMatrixEdgeWeightedDigraph(3, [(0, 1, 1.0), (1, 2, 2.0)])
        fw = FloydWarshall(G)
        assert fw.dist(0, 2) == 3.0
        assert fw.dist(1, 1) == 0.0
        assert fw.has_path(0, 2)
        assert not fw.has_path(2, 0)
        assert fw.dist(2, 0) == math.inf
        assert fw.path(2, 0) is None

    def test_tiny_ewd(self, tiny_ewd):
        """Test agreement with Dijkstra from every source."""
        fw = FloydWarshall(_as_matrix(tiny_ewd))
        ap = DijkstraAllPairsSP(tiny_ewd)
        for s in range(tiny_ewd.V):
            for t in range(tiny_ewd.V):
                assert fw.dist(s, t) == pytest.approx(ap.dist(s, t))
        check_all_pairs(tiny_ewd, fw)

    def test_path(self, tiny_ewd):
        fw = FloydWarshall(_as_matrix(tiny_ewd))
        path = fw.path(0, 6)
        assert path[0].from_() == 0
        assert path[-1].to() == 6
        assert sum(e.weight for e in path) == pytest.approx(1.51)
        assert fw.path(3, 3) == []

    def test_negative_weights(self):
        """Test agreement with Bellman-Ford when weights are negative."""
        edges = [
            (4, 5, 0.35), (5, 4, 0.35), (4, 7, 0.37), (5, 7, 0.28), (7, 5, 0.28),
            (5, 1, 0.32), (0, 4, 0.38), (0, 2, 0.26), (7, 3, 0.39), (1, 3, 0.29),
            (2, 7, 0.34), (6, 2, -1.20), (3, 6, 0.52), (6, 0, -1.40), (6, 4, -1.25),
        ]
        G = EdgeWeightedDigraph(8, edges)
        fw = FloydWarshall(AdjMatrixEdgeWeightedDigraph(8, edges))
        assert not fw.has_negative_cycle()
        for s in range(8):
            bf = BellmanFordSP(G, s)
            for t in range(8):
                assert fw.dist(s, t) == pytest.approx(bf.dist_to(t))

    def test_negative_cycle(self):
        G = AdjMatrixEdgeWeightedDigraph(3, [(0, 1, -5.0), (1, 0, 1.0), (1, 2, 1.0)])
        fw = FloydWarshall(G)
        assert fw.has_negative_cycle()
        check_negative_cycle(fw.negative_cycle())
        with pytest.raises(RuntimeError):
            fw.dist(0, 1)
        with pytest.raises(RuntimeError):
            fw.path(0, 1)

    def test_negative_self_loop(self):
        fw = FloydWarshall(AdjMatrixEdgeWeightedDigraph(2, [(0, 1, 1.0), (1, 1, -1.0)]))
        assert fw.has_negative_cycle()
        assert [(e.from_(), e.to()) for e in fw.negative_cycle()] == [(1, 1)]

    def test_positive_self_loop_ignored(self):
        fw = FloydWarshall(AdjMatrixEdgeWeightedDigraph(1, [(0, 0, 2.0)]))
        assert fw.dist(0, 0) == 0.0
        assert fw.path(0, 0) == []

    def test_parallel_edges_take_minimum(self):
        """Test that the lightest parallel edge of an adjacency-list digraph wins."""
        G = EdgeWeightedDigraph(2, [(0, 1, 3.0), (0, 1, 1.0)])
        assert FloydWarshall(G).dist(0, 1) == 1.0

    def test_dist_matrix_read_only(self):
        fw = FloydWarshall(AdjMatrixEdgeWeightedDigraph(2, [(0, 1, 1.0)]))
        np.testing.assert_array_equal(fw.dist_matrix, np.array([[0.0, 1.0], [np.inf, 0.0]]))
        with pytest.raises(ValueError):
            fw.dist_matrix[0, 0] = 5.0

    def test_invalid_vertex(self):
        fw = FloydWarshall(AdjMatrixEdgeWeightedDigraph(2))
        with pytest.raises(IndexError):
            fw.dist(0, 2)

    def test_random_matrix_digraphs(self, rng):
        with debug_context(True):
            for _ in range(5):
                FloydWarshall(random_adj_matrix_digraph(8, 25, rng=rng))


class TestDijkstraAllPairsSP:
    """Tests for repeated Dijkstra."""

    def test_dist_and_path(self, small_dag):
        ap = DijkstraAllPairsSP(small_dag)
        assert ap.dist(0, 2) == 3.0
        assert ap.has_path(1, 2)
        assert not ap.has_path(2, 0)
        assert ap.path(2, 0) is None
        assert [(e.from_(), e.to()) for e in ap.path(0, 2)] == [(0, 1), (1, 2)]

    def test_random_agreement(self, rng):
        """Test that both all-pairs algorithms agree on random digraphs."""
        for _ in range(5):
            G = random_edge_weighted_digraph(8, 20, rng=rng)
            fw = FloydWarshall(G)
            ap = DijkstraAllPairsSP(G)
            for s in range(G.V):
                for t in range(G.V):
                    assert fw.dist(s, t) == pytest.approx(ap.dist(s, t))

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            DijkstraAllPairsSP(EdgeWeightedDigraph(2, [(0, 1, -1.0)]))

    def test_invalid_vertex(self, small_dag):
        with pytest.raises(IndexError):
            DijkstraAllPairsSP(small_dag).dist(3, 0)
