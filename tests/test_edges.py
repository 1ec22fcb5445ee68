"""Tests for edge value types."""

import math

import pytest

from graphclassics import DirectedEdge, DirectedPair, UndirectedPair, WeightedEdge


class TestUndirectedPair:
    """Tests for UndirectedPair."""

    def test_order_independent(self):
        """Test that endpoints are normalized so {3, 1} == {1, 3}."""
        assert UndirectedPair(3, 1) == UndirectedPair(1, 3)
        assert hash(UndirectedPair(3, 1)) == hash(UndirectedPair(1, 3))
        assert tuple(UndirectedPair(3, 1)) == (1, 3)

    def test_set_deduplication(self):
        """Test that pairs collapse in a set."""
        pairs = {UndirectedPair(0, 1), UndirectedPair(1, 0), UndirectedPair(1, 2)}
        assert len(pairs) == 2

    def test_lexicographic_order(self):
        """Test ordering by (v, w)."""
        assert UndirectedPair(0, 5) < UndirectedPair(1, 2)
        assert sorted([UndirectedPair(2, 1), UndirectedPair(0, 3)])[0] == UndirectedPair(0, 3)

    def test_negative_endpoint(self):
        """Test that a negative endpoint raises IndexError."""
        with pytest.raises(IndexError):
            UndirectedPair(-1, 2)

    def test_str(self):
        assert str(UndirectedPair(4, 2)) == "2-4"


class TestDirectedPair:
    """Tests for DirectedPair."""

    def test_direction_matters(self):
        """Test that (v, w) and (w, v) are different."""
        assert DirectedPair(0, 1) != DirectedPair(1, 0)
        assert len({DirectedPair(0, 1), DirectedPair(1, 0), DirectedPair(0, 1)}) == 2

    def test_negative_endpoint(self):
        with pytest.raises(IndexError):
            DirectedPair(0, -3)

    def test_str(self):
        assert str(DirectedPair(2, 4)) == "2->4"


class TestWeightedEdge:
    """Tests for WeightedEdge."""

    def test_either_other(self):
        """Test endpoint accessors."""
        e = WeightedEdge(0, 7, 0.16)
        v = e.either()
        assert v == 0
        assert e.other(v) == 7
        assert e.other(7) == 0

    def test_other_self_loop(self):
        """Test that other() returns the vertex itself for a self-loop."""
        assert WeightedEdge(3, 3, 1.0).other(3) == 3

    def test_other_illegal_endpoint(self):
        """Test that other() rejects a non-endpoint."""
        with pytest.raises(ValueError, match="Illegal endpoint"):
            WeightedEdge(0, 1, 1.0).other(2)

    def test_nan_weight(self):
        with pytest.raises(ValueError, match="NaN"):
            WeightedEdge(0, 1, math.nan)

    def test_infinite_weight(self):
        with pytest.raises(ValueError):
            WeightedEdge(0, 1, math.inf)

    def test_negative_endpoint(self):
        with pytest.raises(IndexError):
            WeightedEdge(-1, 1, 1.0)

    def test_compare_by_weight(self):
        """Test that edges order by weight."""
        light = WeightedEdge(5, 6, 0.1)
        heavy = WeightedEdge(0, 1, 0.9)
        assert light < heavy
        assert heavy > light
        assert sorted([heavy, light]) == [light, heavy]

    def test_non_strict_comparisons(self):
        """Test that <= and >= compare by weight, including equal weights."""
        a = WeightedEdge(0, 1, 1.0)
        b = WeightedEdge(1, 2, 2.0)
        tie = WeightedEdge(3, 4, 1.0)
        assert a <= b
        assert b >= a
        assert not a >= b
        assert a <= tie and a >= tie
        assert not a < tie

    def test_identity_equality(self):
        """Test that parallel edges of equal weight stay distinct."""
        e = WeightedEdge(0, 1, 1.0)
        f = WeightedEdge(0, 1, 1.0)
        assert e != f
        assert len({e, f}) == 2

    def test_immutable(self):
        e = WeightedEdge(0, 1, 1.0)
        with pytest.raises(AttributeError):
            e.weight = 2.0

    def test_str(self):
        assert str(WeightedEdge(0, 7, 0.16)) == "0-7 0.16"


class TestDirectedEdge:
    """Tests for DirectedEdge."""

    def test_endpoints(self):
        e = DirectedEdge(4, 5, 0.35)
        assert e.from_() == 4
        assert e.to() == 5
        assert e.weight == 0.35

    def test_negative_weight_allowed(self):
        """Test that negative (finite) weights are accepted."""
        assert DirectedEdge(0, 1, -5.0).weight == -5.0

    def test_nan_weight(self):
        with pytest.raises(ValueError):
            DirectedEdge(0, 1, float("nan"))

    def test_negative_endpoint(self):
        with pytest.raises(IndexError):
            DirectedEdge(0, -1, 1.0)

    def test_immutable(self):
        e = DirectedEdge(0, 1, 1.0)
        with pytest.raises(AttributeError):
            e.v = 3

    def test_compare_by_weight(self):
        """Test all four ordering operators on directed edges."""
        a = DirectedEdge(0, 1, -1.0)
        b = DirectedEdge(1, 0, 0.5)
        tie = DirectedEdge(2, 3, 0.5)
        assert a < b and a <= b
        assert b > a and b >= a
        assert b <= tie and b >= tie
        assert not b < tie and not b > tie
        assert min([b, a]) is a

    def test_str(self):
        assert str(DirectedEdge(4, 5, 0.35)) == "4->5 0.35"
