"""Certification checks for algorithm results.

Each function re-derives an optimality or consistency condition from scratch
and raises ``ValueError`` when the result object violates it. Algorithms call
them at the end of construction when debug mode is on; tests call them
directly as oracles.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core import Digraph, neighbors
from ..edges import DirectedEdge
from ..utils import UnionFind

EPSILON = 1e-9


def _arcs(graph) -> Iterator[Tuple[int, int, float, object]]:
    # undirected edges are relaxed in both directions
    for e in graph.edges():
        if isinstance(e, DirectedEdge):
            yield e.from_(), e.to(), e.weight, e
        else:
            v = e.either()
            w = e.other(v)
            yield v, w, e.weight, e
            yield w, v, e.weight, e


def _tail(e, head: int) -> int:
    if isinstance(e, DirectedEdge):
        return e.from_()
    return e.other(head)


def check_shortest_paths(graph, sp, sources: Iterable[int], longest: bool = False) -> None:
    """
    Verify the optimality conditions of a single-source path result.

    Parameters
    ----------
    graph:
        EdgeWeightedDigraph or EdgeWeightedGraph the result was built from.
    sp:
        Object exposing ``dist_to``, ``edge_to`` and ``has_path_to``.
    sources:
        Source vertices; each must sit at distance 0 with no tree edge.
    longest:
        Check longest-path conditions (relaxation inequality reversed).

    Raises
    ------
    ValueError
        If a source is misplaced, an edge is still relaxable, or a tree edge
        is not tight.
    """
    sources = list(sources)
    for s in sources:
        if sp.dist_to(s) != 0.0 or sp.edge_to(s) is not None:
            raise ValueError(f"source {s}: dist_to = {sp.dist_to(s)}, edge_to = {sp.edge_to(s)}")

    source_set = set(sources)
    for v in range(graph.V):
        if v in source_set:
            continue
        if sp.edge_to(v) is None and sp.has_path_to(v):
            raise ValueError(f"vertex {v} is reachable but has no tree edge")

    for v, w, weight, e in _arcs(graph):
        candidate = sp.dist_to(v) + weight
        if longest:
            violated = candidate > sp.dist_to(w) + EPSILON
        else:
            violated = candidate < sp.dist_to(w) - EPSILON
        if violated:
            raise ValueError(f"edge {e} is not relaxed: {sp.dist_to(v)} + {weight} vs {sp.dist_to(w)}")

    for w in range(graph.V):
        e = sp.edge_to(w)
        if e is None:
            continue
        v = _tail(e, w)
        if abs(sp.dist_to(v) + e.weight - sp.dist_to(w)) > EPSILON:
            raise ValueError(f"tree edge {e} is not tight")


def check_all_pairs(graph, ap) -> None:
    """
    Verify that no edge can shorten any ``dist(i, w)``.

    Parameters
    ----------
    graph:
        Weighted digraph (adjacency-list or matrix form).
    ap:
        Object exposing ``dist`` and ``has_path``.
    """
    for i in range(graph.V):
        if ap.dist(i, i) > EPSILON:
            raise ValueError(f"dist({i}, {i}) = {ap.dist(i, i)} is positive")
        for v, w, weight, e in _arcs(graph):
            if not ap.has_path(i, v):
                continue
            if ap.dist(i, v) + weight < ap.dist(i, w) - EPSILON:
                raise ValueError(f"edge {e} shortens dist({i}, {w}) = {ap.dist(i, w)}")


def check_negative_cycle(cycle: Sequence[DirectedEdge]) -> None:
    """
    Verify that ``cycle`` is a closed chain of directed edges of negative weight.
    """
    if not cycle:
        raise ValueError("negative cycle is empty")
    for e, f in zip(cycle, list(cycle[1:]) + [cycle[0]]):
        if e.to() != f.from_():
            raise ValueError(f"edges {e} and {f} are not consecutive")
    weight = sum(e.weight for e in cycle)
    if weight >= 0.0:
        raise ValueError(f"cycle weight {weight} is not negative")


def check_mst(graph, mst) -> None:
    """
    Verify a minimum spanning forest.

    Checks that ``weight()`` matches the edge sum, that the edges form a forest
    spanning every component of ``graph``, and the cut optimality condition:
    removing any forest edge ``e`` leaves no crossing graph edge lighter
    than ``e``.

    Raises
    ------
    ValueError
        On the first violated condition.
    """
    forest = list(mst.edges())
    total = sum(e.weight for e in forest)
    if abs(total - mst.weight()) > EPSILON:
        raise ValueError(f"weight of edges {total} does not equal weight() {mst.weight()}")

    uf = UnionFind(graph.V)
    for e in forest:
        v = e.either()
        if not uf.union(v, e.other(v)):
            raise ValueError(f"forest contains a cycle through {e}")

    for e in graph.edges():
        v = e.either()
        if not uf.connected(v, e.other(v)):
            raise ValueError(f"forest does not span edge {e}")

    for e in forest:
        uf = UnionFind(graph.V)
        for f in forest:
            if f is not e:
                x = f.either()
                uf.union(x, f.other(x))
        for f in graph.edges():
            x = f.either()
            y = f.other(x)
            if not uf.connected(x, y) and f.weight < e.weight:
                raise ValueError(f"edge {f} violates cut optimality of {e}")


def check_scc(digraph: Digraph, scc) -> None:
    """
    Verify an SCC partition against the transitive closure of ``digraph``.
    """
    from ..traversal import TransitiveClosure

    tc = TransitiveClosure(digraph)
    for v in range(digraph.V):
        for w in range(digraph.V):
            expected = tc.reachable(v, w) and tc.reachable(w, v)
            if scc.strongly_connected(v, w) != expected:
                raise ValueError(f"vertices {v} and {w}: strongly_connected disagrees with reachability")
    ids = {scc.id(v) for v in range(digraph.V)}
    if len(ids) != scc.count():
        raise ValueError(f"{len(ids)} distinct ids but count() = {scc.count()}")


def check_topological(digraph, topo) -> None:
    """
    Verify that ``order()`` and ``rank()`` describe the same topological order.
    """
    if not topo.has_order():
        return
    order = list(topo.order())
    if len(order) != digraph.V:
        raise ValueError(f"order has {len(order)} vertices, expected {digraph.V}")
    if sorted(topo.rank(v) for v in range(digraph.V)) != list(range(digraph.V)):
        raise ValueError("ranks are not a permutation of 0 .. V-1")
    for i, v in enumerate(order):
        if topo.rank(v) != i:
            raise ValueError(f"order()[{i}] = {v} but rank({v}) = {topo.rank(v)}")
    for v in range(digraph.V):
        for w in neighbors(digraph, v):
            if topo.rank(v) >= topo.rank(w):
                raise ValueError(f"edge {v}->{w} points backwards in the order")


def check_cycle(graph, cycle: Optional[List[int]]) -> None:
    """
    Verify a vertex cycle: first equals last, each step is an edge of ``graph``.
    """
    if cycle is None:
        return
    if len(cycle) < 2 or cycle[0] != cycle[-1]:
        raise ValueError(f"cycle {cycle} does not begin and end at the same vertex")
    for v, w in zip(cycle, cycle[1:]):
        if w not in set(neighbors(graph, v)):
            raise ValueError(f"cycle step {v}-{w} is not an edge")


def check_bipartite(graph, bip) -> None:
    """
    Verify a bipartition (proper 2-coloring) or its odd-cycle certificate.
    """
    if bip.is_bipartite():
        for v in range(graph.V):
            for w in graph.adj(v):
                if bip.color(v) == bip.color(w):
                    raise ValueError(f"edge {v}-{w} with both endpoints the same color")
        return
    cycle = bip.odd_cycle()
    check_cycle(graph, cycle)
    if (len(cycle) - 1) % 2 == 0:
        raise ValueError(f"cycle {cycle} has even length")


def check_eulerian(graph, walk: Optional[List[int]], closed: bool) -> None:
    """
    Verify that ``walk`` traverses every edge of ``graph`` exactly once.

    Parameters
    ----------
    graph:
        Graph or Digraph.
    walk:
        Vertex sequence or None (nothing to check).
    closed:
        Require the walk to end where it starts.
    """
    if walk is None:
        return
    if len(walk) != graph.E + 1:
        raise ValueError(f"walk has {len(walk)} vertices, expected E + 1 = {graph.E + 1}")
    if closed and walk[0] != walk[-1]:
        raise ValueError(f"walk {walk} is not closed")

    directed = isinstance(graph, Digraph)

    def key(v: int, w: int) -> Tuple[int, int]:
        return (v, w) if directed or v <= w else (w, v)

    expected = Counter(key(v, w) for v, w in graph.edges())
    used = Counter(key(v, w) for v, w in zip(walk, walk[1:]))
    if used != expected:
        raise ValueError("walk does not use every edge exactly once")


def check_depth_first_order(dfo) -> None:
    """
    Verify that ``pre(v)`` / ``post(v)`` agree with the recorded sequences.
    """
    for i, v in enumerate(dfo.preorder()):
        if dfo.pre(v) != i:
            raise ValueError(f"pre({v}) = {dfo.pre(v)}, expected {i}")
    for i, v in enumerate(dfo.postorder()):
        if dfo.post(v) != i:
            raise ValueError(f"post({v}) = {dfo.post(v)}, expected {i}")


__all__ = [
    "EPSILON",
    "check_shortest_paths",
    "check_all_pairs",
    "check_negative_cycle",
    "check_mst",
    "check_scc",
    "check_topological",
    "check_cycle",
    "check_bipartite",
    "check_eulerian",
    "check_depth_first_order",
]
