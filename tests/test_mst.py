"""Tests for minimum spanning forest algorithms."""

import pytest

from graphclassics import (
    BoruvkaMST,
    EdgeWeightedGraph,
    KruskalMST,
    LazyPrimMST,
    MinimumSpanningForest,
    PrimMST,
    minimum_spanning_forest,
)
from graphclassics.diagnostics import check_mst, debug_context
from graphclassics.generators import random_edge_weighted_graph

MST_CLASSES = [LazyPrimMST, PrimMST, KruskalMST, BoruvkaMST]


def _endpoints(edges):
    return {frozenset((e.either(), e.other(e.either()))) for e in edges}


class TestMinimumSpanningForest:
    """Tests shared by all four algorithms."""

    @pytest.mark.parametrize("cls", MST_CLASSES)
    def test_triangle(self, cls, weighted_triangle):
        """Test that the two cheapest triangle edges are chosen."""
        mst = cls(weighted_triangle)
        assert mst.weight() == 3.0
        assert _endpoints(mst.edges()) == {frozenset((0, 1)), frozenset((1, 2))}

    @pytest.mark.parametrize("cls", MST_CLASSES)
    def test_tiny_ewg(self, cls, tiny_ewg):
        mst = cls(tiny_ewg)
        assert len(mst.edges()) == 7
        assert mst.weight() == pytest.approx(1.81)
        check_mst(tiny_ewg, mst)

    @pytest.mark.parametrize("cls", MST_CLASSES)
    def test_disconnected_forest(self, cls):
        """Test components of sizes 3 and 2 give a forest of 3 edges."""
        G = EdgeWeightedGraph(
            5,
            [(0, 1, 0.5), (1, 2, 0.25), (2, 0, 0.75), (3, 4, 1.5)],
        )
        mst = cls(G)
        assert len(mst.edges()) == 3
        assert mst.weight() == pytest.approx(2.25)

    @pytest.mark.parametrize("cls", MST_CLASSES)
    def test_empty_and_single_vertex(self, cls):
        assert cls(EdgeWeightedGraph(0)).edges() == []
        assert cls(EdgeWeightedGraph(1)).weight() == 0

    @pytest.mark.parametrize("cls", MST_CLASSES)
    def test_self_loops_and_parallel_edges(self, cls):
        """Test that self-loops are never chosen and the lighter parallel edge is."""
        G = EdgeWeightedGraph(2, [(0, 0, 0.01), (0, 1, 0.9), (1, 0, 0.3)])
        mst = cls(G)
        assert [e.weight for e in mst.edges()] == [0.3]

    @pytest.mark.parametrize("cls", MST_CLASSES)
    def test_equal_weights(self, cls):
        """Test a graph where every edge ties."""
        G = EdgeWeightedGraph(4, [(0, 1, 1.0), (1, 2, 1.0), (2, 3, 1.0), (3, 0, 1.0), (0, 2, 1.0)])
        mst = cls(G)
        assert len(mst.edges()) == 3
        check_mst(G, mst)

    @pytest.mark.parametrize("cls", MST_CLASSES)
    def test_weight_recomputed_from_edges(self, cls, tiny_ewg):
        mst = cls(tiny_ewg)
        assert mst.weight() == pytest.approx(sum(e.weight for e in mst.edges()))
        assert isinstance(mst, MinimumSpanningForest)

    def test_algorithms_agree(self, rng):
        """Test equal total weight across algorithms on random graphs."""
        for _ in range(10):
            G = random_edge_weighted_graph(15, 30, rng=rng)
            weights = [cls(G).weight() for cls in MST_CLASSES]
            assert weights == pytest.approx([weights[0]] * 4)

    @pytest.mark.parametrize("cls", MST_CLASSES)
    def test_debug_mode(self, cls, rng):
        """Test that random forests pass cut-optimality certification."""
        with debug_context(True):
            for _ in range(5):
                cls(random_edge_weighted_graph(12, 20, rng=rng))


class TestKruskalMST:
    """Kruskal-specific behaviour."""

    def test_discovery_order(self, tiny_ewg):
        """Test that edges are accepted in weight order."""
        weights = [e.weight for e in KruskalMST(tiny_ewg).edges()]
        assert weights == [0.16, 0.17, 0.19, 0.26, 0.28, 0.35, 0.40]


class TestFactory:
    """Tests for minimum_spanning_forest."""

    @pytest.mark.parametrize(
        "name, cls",
        [("lazy_prim", LazyPrimMST), ("prim", PrimMST), ("kruskal", KruskalMST), ("boruvka", BoruvkaMST)],
    )
    def test_by_name(self, name, cls, weighted_triangle):
        assert isinstance(minimum_spanning_forest(weighted_triangle, name), cls)

    def test_default(self, weighted_triangle):
        assert isinstance(minimum_spanning_forest(weighted_triangle), KruskalMST)

    def test_unknown(self, weighted_triangle):
        with pytest.raises(ValueError, match="Unknown MST algorithm"):
            minimum_spanning_forest(weighted_triangle, "reverse_delete")
