"""Tests for symbol graphs and degrees of separation."""

import pytest

from graphclassics import SymbolDigraph, SymbolGraph, degrees_of_separation

ROUTES = [
    "JFK MCO", "ORD DEN", "ORD HOU", "DFW PHX", "JFK ATL", "ORD DFW",
    "ORD PHX", "ATL HOU", "DEN PHX", "PHX LAX", "JFK ORD", "DEN LAS",
    "DFW HOU", "ORD ATL", "LAS LAX", "ATL MCO", "HOU MCO", "LAS PHX",
]

MOVIES = [
    "Movie A/Kevin/Ann",
    "Movie B/Ann/Bob",
    "Movie C/Carol/Dave",
]


class TestSymbolGraph:
    """Tests for SymbolGraph."""

    def test_indices_by_first_appearance(self):
        sg = SymbolGraph(ROUTES)
        assert sg.graph.V == 10
        assert sg.graph.E == 18
        assert sg.index_of("JFK") == 0
        assert sg.index_of("LAS") == 9
        assert sg.name_of(2) == "ORD"

    def test_contains(self):
        sg = SymbolGraph(ROUTES)
        assert sg.contains("LAX")
        assert "LAX" in sg
        assert "SFO" not in sg

    def test_neighbors_by_name(self):
        sg = SymbolGraph(ROUTES)
        names = [sg.name_of(w) for w in sg.graph.adj(sg.index_of("JFK"))]
        assert names == ["MCO", "ATL", "ORD"]

    def test_first_name_joined_to_rest(self):
        """Test that a line links its first name to every other name."""
        sg = SymbolGraph(MOVIES, "/")
        movie = sg.index_of("Movie A")
        assert sorted(sg.name_of(w) for w in sg.graph.adj(movie)) == ["Ann", "Kevin"]
        assert sg.graph.E == 6

    def test_empty_fields_dropped(self):
        sg = SymbolGraph(["a//b", ""], "/")
        assert sg.graph.V == 2
        assert sg.graph.E == 1

    def test_line_endings_stripped(self):
        """Test lines read from a file keep no trailing newline in names."""
        sg = SymbolGraph(["JFK MCO\n", "MCO ORD\r\n"])
        assert sg.graph.V == 3
        assert "MCO" in sg
        assert sg.name_of(2) == "ORD"

    def test_line_endings_stripped_for_digraphs(self):
        sd = SymbolDigraph(["a b\n", "b a\n"])
        assert sd.graph.V == 2
        assert sd.graph.E == 2

    def test_unknown_name(self):
        sg = SymbolGraph(ROUTES)
        with pytest.raises(KeyError):
            sg.index_of("SFO")

    def test_invalid_index(self):
        with pytest.raises(IndexError):
            SymbolGraph(ROUTES).name_of(10)


class TestSymbolDigraph:
    """Tests for SymbolDigraph."""

    def test_direction(self):
        sd = SymbolDigraph(["a b c", "c a"])
        a, b, c = (sd.index_of(x) for x in "abc")
        assert list(sd.graph.adj(a)) == [b, c]
        assert list(sd.graph.adj(b)) == []
        assert list(sd.graph.adj(c)) == [a]
        assert sd.graph.indegree(a) == 1


class TestDegreesOfSeparation:
    """Tests for degrees_of_separation."""

    def test_movies(self):
        assert degrees_of_separation(MOVIES, "/", "Kevin", "Bob") == [
            "Kevin", "Movie A", "Ann", "Movie B", "Bob",
        ]

    def test_routes(self):
        assert degrees_of_separation(ROUTES, " ", "JFK", "LAS") == ["JFK", "ORD", "DEN", "LAS"]

    def test_same_name(self):
        assert degrees_of_separation(MOVIES, "/", "Ann", "Ann") == ["Ann"]

    def test_not_connected(self):
        assert degrees_of_separation(MOVIES, "/", "Kevin", "Carol") is None

    def test_unknown_sink(self):
        assert degrees_of_separation(MOVIES, "/", "Kevin", "Nobody") is None

    def test_unknown_source(self):
        with pytest.raises(KeyError):
            degrees_of_separation(MOVIES, "/", "Nobody", "Kevin")
