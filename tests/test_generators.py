"""Tests for random and structured graph generators."""

import numpy as np
import pytest

from graphclassics import (
    CC,
    Bipartite,
    Cycle,
    DirectedCycle,
    DirectedDFS,
    TarjanSCC,
    Topological,
)
from graphclassics import generators as gen


def _degrees(G):
    return [G.degree(v) for v in range(G.V)]


class TestReproducibility:
    """Tests for explicit RNG threading."""

    def test_same_seed_same_graph(self):
        a = gen.simple_graph(10, 15, rng=np.random.default_rng(7))
        b = gen.simple_graph(10, 15, rng=np.random.default_rng(7))
        assert a.edges() == b.edges()

    def test_default_rng_is_deterministic(self):
        assert gen.dag(8, 10).edges() == gen.dag(8, 10).edges()

    def test_global_state_untouched(self):
        """Test that generators never draw from numpy's global RNG."""
        np.random.seed(123)
        expected = np.random.random()
        np.random.seed(123)
        gen.erdos_renyi_graph(10, 0.5)
        assert np.random.random() == expected


class TestUndirectedGenerators:
    """Tests for undirected graph generators."""

    def test_simple_graph(self, rng):
        G = gen.simple_graph(10, 20, rng=rng)
        assert G.E == 20
        assert G.is_simple()

    def test_simple_graph_limits(self, rng):
        assert gen.simple_graph(5, 10, rng=rng).E == 10
        with pytest.raises(ValueError, match="Too many edges"):
            gen.simple_graph(5, 11, rng=rng)
        with pytest.raises(ValueError, match="Too few edges"):
            gen.simple_graph(5, -1, rng=rng)

    def test_erdos_renyi(self, rng):
        assert gen.erdos_renyi_graph(6, 0.0, rng=rng).E == 0
        assert gen.erdos_renyi_graph(6, 1.0, rng=rng).E == 15
        assert gen.erdos_renyi_graph(20, 0.3, rng=rng).is_simple()
        with pytest.raises(ValueError):
            gen.erdos_renyi_graph(5, 1.5, rng=rng)

    def test_complete_graph(self):
        G = gen.complete_graph(6)
        assert G.E == 15
        assert set(_degrees(G)) == {5}

    def test_bipartite(self, rng):
        G = gen.bipartite_graph(4, 5, 12, rng=rng)
        assert G.V == 9
        assert G.E == 12
        assert G.is_simple()
        assert Bipartite(G).is_bipartite()
        with pytest.raises(ValueError):
            gen.bipartite_graph(2, 2, 5, rng=rng)

    def test_bipartite_p(self, rng):
        G = gen.bipartite_graph_p(3, 4, 1.0, rng=rng)
        assert G.E == 12
        assert Bipartite(G).is_bipartite()

    def test_complete_bipartite(self, rng):
        G = gen.complete_bipartite_graph(3, 3, rng=rng)
        assert G.E == 9
        assert set(_degrees(G)) == {3}

    def test_path(self, rng):
        G = gen.path_graph(8, rng=rng)
        assert G.E == 7
        assert sorted(_degrees(G)) == [1, 1] + [2] * 6
        assert CC(G).count() == 1

    def test_binary_tree(self, rng):
        G = gen.binary_tree_graph(7, rng=rng)
        assert G.E == 6
        assert sorted(_degrees(G)) == [1, 1, 1, 1, 2, 3, 3]
        assert not Cycle(G).has_cycle()

    def test_cycle(self, rng):
        G = gen.cycle_graph(6, rng=rng)
        assert G.E == 6
        assert set(_degrees(G)) == {2}
        assert Cycle(G).has_cycle()

    def test_wheel(self, rng):
        G = gen.wheel_graph(6, rng=rng)
        assert G.E == 10
        assert sorted(_degrees(G)) == [3, 3, 3, 3, 3, 5]
        with pytest.raises(ValueError):
            gen.wheel_graph(1, rng=rng)

    def test_star(self, rng):
        G = gen.star_graph(5, rng=rng)
        assert G.E == 4
        assert sorted(_degrees(G)) == [1, 1, 1, 1, 4]
        with pytest.raises(ValueError):
            gen.star_graph(0, rng=rng)

    def test_regular(self, rng):
        G = gen.regular_graph(10, 3, rng=rng)
        assert G.E == 15
        assert set(_degrees(G)) == {3}
        with pytest.raises(ValueError):
            gen.regular_graph(5, 3, rng=rng)

    @pytest.mark.parametrize("V", [1, 2, 3, 10, 40])
    def test_tree(self, V, rng):
        G = gen.tree_graph(V, rng=rng)
        assert G.E == V - 1
        assert CC(G).count() == 1
        assert not Cycle(G).has_cycle()

    def test_eulerian_cycle_graph(self, rng):
        G = gen.eulerian_cycle_graph(6, 10, rng=rng)
        assert G.E == 10
        assert all(d % 2 == 0 for d in _degrees(G))
        with pytest.raises(ValueError):
            gen.eulerian_cycle_graph(6, 0, rng=rng)

    def test_eulerian_path_graph(self, rng):
        G = gen.eulerian_path_graph(6, 9, rng=rng)
        assert G.E == 9
        assert sum(d % 2 for d in _degrees(G)) in (0, 2)
        with pytest.raises(ValueError):
            gen.eulerian_path_graph(0, 3, rng=rng)


class TestDirectedGenerators:
    """Tests for digraph generators."""

    def test_simple_digraph(self, rng):
        D = gen.simple_digraph(6, 30, rng=rng)
        assert D.E == 30
        assert len(set(D.edges())) == 30
        assert all(v != w for v, w in D.edges())
        with pytest.raises(ValueError):
            gen.simple_digraph(6, 31, rng=rng)

    def test_erdos_renyi_digraph(self, rng):
        assert gen.erdos_renyi_digraph(5, 1.0, rng=rng).E == 20
        with pytest.raises(ValueError):
            gen.erdos_renyi_digraph(5, -0.1, rng=rng)

    def test_complete_digraph(self, rng):
        D = gen.complete_digraph(4, rng=rng)
        assert D.E == 12
        assert TarjanSCC(D).count() == 1

    def test_dag(self, rng):
        D = gen.dag(10, 30, rng=rng)
        assert D.E == 30
        assert len(set(D.edges())) == 30
        assert Topological(D).has_order()
        with pytest.raises(ValueError):
            gen.dag(4, 7, rng=rng)

    def test_tournament(self, rng):
        D = gen.tournament(6, rng=rng)
        assert D.E == 15
        pairs = {frozenset(e) for e in D.edges()}
        assert len(pairs) == 15

    @pytest.mark.parametrize("factory", [gen.rooted_in_dag, gen.rooted_out_dag])
    def test_rooted_dag_shape(self, factory, rng):
        D = factory(10, 20, rng=rng)
        assert D.E == 20
        assert Topological(D).has_order()
        with pytest.raises(ValueError, match="Too few edges"):
            factory(10, 8, rng=rng)

    def test_rooted_in_dag_reaches_root(self, rng):
        """Test that exactly one vertex has no outgoing edge and all reach it."""
        D = gen.rooted_in_dag(12, 25, rng=rng)
        sinks = [v for v in range(D.V) if D.outdegree(v) == 0]
        assert len(sinks) == 1
        assert DirectedDFS(D.reverse(), sinks[0]).count() == D.V

    def test_rooted_out_dag_reaches_all(self, rng):
        D = gen.rooted_out_dag(12, 25, rng=rng)
        roots = [v for v in range(D.V) if D.indegree(v) == 0]
        assert len(roots) == 1
        assert DirectedDFS(D, roots[0]).count() == D.V

    def test_rooted_trees(self, rng):
        assert gen.rooted_in_tree(9, rng=rng).E == 8
        out_tree = gen.rooted_out_tree(9, rng=rng)
        assert all(out_tree.indegree(v) <= 1 for v in range(9))

    def test_path_digraph(self, rng):
        D = gen.path_digraph(5, rng=rng)
        assert D.E == 4
        assert Topological(D).has_order()

    def test_binary_tree_digraph(self, rng):
        D = gen.binary_tree_digraph(7, rng=rng)
        assert D.E == 6
        assert sorted(D.outdegree(v) for v in range(7)) == [0, 1, 1, 1, 1, 1, 1]

    def test_cycle_digraph(self, rng):
        D = gen.cycle_digraph(5, rng=rng)
        assert D.E == 5
        assert DirectedCycle(D).has_cycle()
        assert TarjanSCC(D).count() == 1

    def test_eulerian_digraphs(self, rng):
        D = gen.eulerian_cycle_digraph(5, 12, rng=rng)
        assert all(D.indegree(v) == D.outdegree(v) for v in range(5))
        P = gen.eulerian_path_digraph(5, 12, rng=rng)
        assert P.E == 12

    def test_strong_digraph(self, rng):
        """Test that c labels give at most c strong components."""
        D = gen.strong_digraph(15, 40, 3, rng=rng)
        assert D.E == 40
        assert 1 <= TarjanSCC(D).count() <= 3

    def test_strong_digraph_limits(self, rng):
        with pytest.raises(ValueError):
            gen.strong_digraph(5, 10, 5, rng=rng)
        with pytest.raises(ValueError):
            gen.strong_digraph(5, 6, 2, rng=rng)
        with pytest.raises(ValueError):
            gen.strong_digraph(5, 11, 2, rng=rng)


class TestWeightedGenerators:
    """Tests for edge-weighted generators."""

    def test_weighted_graph(self, rng):
        G = gen.random_edge_weighted_graph(8, 20, rng=rng)
        assert G.E == 20
        for e in G.edges():
            assert 0.0 <= e.weight < 1.0
            assert round(e.weight, 2) == e.weight

    def test_weighted_digraph(self, rng):
        D = gen.random_edge_weighted_digraph(8, 20, rng=rng)
        assert D.E == 20
        assert all(0.0 <= e.weight < 1.0 for e in D.edges())

    def test_adj_matrix_digraph(self, rng):
        D = gen.random_adj_matrix_digraph(4, 16, rng=rng)
        assert D.E == 16
        with pytest.raises(ValueError):
            gen.random_adj_matrix_digraph(2, 5, rng=rng)

    def test_negative_edge_count(self, rng):
        with pytest.raises(ValueError):
            gen.random_edge_weighted_graph(3, -1, rng=rng)
