"""
Random and structured graph generators.

Every generator takes an explicit ``rng`` (a ``numpy.random.Generator``); when
it is omitted ``np.random.default_rng(0)`` is used, so results are
reproducible and no global random state is touched. Structured families
(paths, cycles, trees, ...) relabel their vertices with a random permutation.

Random simple graphs reject duplicate candidates by keeping the edges drawn so
far in a set of :class:`~graphclassics.edges.UndirectedPair` /
:class:`~graphclassics.edges.DirectedPair` values.
"""

import heapq
from typing import List, Optional, Set

import numpy as np

from .core import AdjMatrixEdgeWeightedDigraph, Digraph, EdgeWeightedDigraph, EdgeWeightedGraph, Graph
from .edges import DirectedEdge, DirectedPair, UndirectedPair, WeightedEdge
from .logging import get_logger

logger = get_logger(__name__)


def _default(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return np.random.default_rng(0) if rng is None else rng


def _uniform(rng: np.random.Generator, low: int, high: Optional[int] = None) -> int:
    """Integer uniform in ``[0, low)`` or ``[low, high)``."""
    if high is None:
        return int(rng.integers(low))
    return int(rng.integers(low, high))


def _bernoulli(rng: np.random.Generator, p: float) -> bool:
    return bool(rng.random() < p)


def _permutation(rng: np.random.Generator, n: int) -> List[int]:
    return [int(x) for x in rng.permutation(n)]


def _check_probability(p: float) -> None:
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Probability must be between 0 and 1, got {p}")


def _check_edge_count(E: int, limit: int) -> None:
    if E > limit:
        raise ValueError(f"Too many edges: {E} > {limit}")
    if E < 0:
        raise ValueError(f"Too few edges: {E}")


def _random_weight(rng: np.random.Generator) -> float:
    # two decimals in [0, 1)
    return int(100 * rng.random()) / 100.0


# ---------------------------------------------------------------------------
# Undirected graphs
# ---------------------------------------------------------------------------


def simple_graph(V: int, E: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """
    Random simple graph with exactly ``E`` edges.

    Args:
        V: Number of vertices.
        E: Number of edges, at most ``V (V - 1) / 2``.
        rng: Random number generator. If None, uses default_rng(0).

    Raises:
        ValueError: If ``E`` is negative or too large.

    Example:
        >>> G = simple_graph(5, 4, rng=np.random.default_rng(1))
        >>> G.E, G.is_simple()
        (4, True)
    """
    _check_edge_count(E, V * (V - 1) // 2)
    rng = _default(rng)
    G = Graph(V)
    seen: Set[UndirectedPair] = set()
    while G.E < E:
        v = _uniform(rng, V)
        w = _uniform(rng, V)
        pair = UndirectedPair(v, w)
        if v == w or pair in seen:
            continue
        seen.add(pair)
        G.add_edge(v, w)
    return G


def erdos_renyi_graph(V: int, p: float, rng: Optional[np.random.Generator] = None) -> Graph:
    """Random simple graph with each of the ``V (V - 1) / 2`` edges present with probability ``p``."""
    _check_probability(p)
    rng = _default(rng)
    G = Graph(V)
    for v in range(V):
        for w in range(v + 1, V):
            if _bernoulli(rng, p):
                G.add_edge(v, w)
    return G


def complete_graph(V: int, rng: Optional[np.random.Generator] = None) -> Graph:
    return erdos_renyi_graph(V, 1.0, rng)


def bipartite_graph(V1: int, V2: int, E: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """
    Random simple bipartite graph with sides of ``V1`` and ``V2`` vertices and ``E`` edges.

    Vertices are shuffled, so the two sides are not contiguous index ranges.
    """
    _check_edge_count(E, V1 * V2)
    rng = _default(rng)
    G = Graph(V1 + V2)
    vertices = _permutation(rng, V1 + V2)
    seen: Set[UndirectedPair] = set()
    while G.E < E:
        i = _uniform(rng, V1)
        j = V1 + _uniform(rng, V2)
        pair = UndirectedPair(vertices[i], vertices[j])
        if pair in seen:
            continue
        seen.add(pair)
        G.add_edge(vertices[i], vertices[j])
    return G


def bipartite_graph_p(V1: int, V2: int, p: float, rng: Optional[np.random.Generator] = None) -> Graph:
    """Random bipartite graph with each of the ``V1 * V2`` crossing edges present with probability ``p``."""
    _check_probability(p)
    rng = _default(rng)
    vertices = _permutation(rng, V1 + V2)
    G = Graph(V1 + V2)
    for i in range(V1):
        for j in range(V2):
            if _bernoulli(rng, p):
                G.add_edge(vertices[i], vertices[V1 + j])
    return G


def complete_bipartite_graph(V1: int, V2: int, rng: Optional[np.random.Generator] = None) -> Graph:
    return bipartite_graph(V1, V2, V1 * V2, rng)


def path_graph(V: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """Path on ``V`` vertices in random order."""
    rng = _default(rng)
    G = Graph(V)
    vertices = _permutation(rng, V)
    for i in range(V - 1):
        G.add_edge(vertices[i], vertices[i + 1])
    return G


def binary_tree_graph(V: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """Complete binary tree on ``V`` vertices (heap-shaped), randomly labelled."""
    rng = _default(rng)
    G = Graph(V)
    vertices = _permutation(rng, V)
    for i in range(1, V):
        G.add_edge(vertices[i], vertices[(i - 1) // 2])
    return G


def cycle_graph(V: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """Cycle on ``V`` vertices in random order."""
    if V < 1:
        raise ValueError(f"Number of vertices must be at least 1, got {V}")
    rng = _default(rng)
    G = Graph(V)
    vertices = _permutation(rng, V)
    for i in range(V - 1):
        G.add_edge(vertices[i], vertices[i + 1])
    G.add_edge(vertices[V - 1], vertices[0])
    return G


def wheel_graph(V: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """
    Wheel: a hub joined to every vertex of a cycle on the other ``V - 1`` vertices.

    Raises:
        ValueError: If ``V < 2``.
    """
    if V <= 1:
        raise ValueError("Number of vertices must be at least 2")
    rng = _default(rng)
    G = Graph(V)
    vertices = _permutation(rng, V)

    # simple cycle on V-1 vertices
    for i in range(1, V - 1):
        G.add_edge(vertices[i], vertices[i + 1])
    G.add_edge(vertices[V - 1], vertices[1])

    # connect the hub to every vertex on the cycle
    for i in range(1, V):
        G.add_edge(vertices[0], vertices[i])
    return G


def star_graph(V: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """Star: one center joined to the other ``V - 1`` vertices."""
    if V <= 0:
        raise ValueError("Number of vertices must be at least 1")
    rng = _default(rng)
    G = Graph(V)
    vertices = _permutation(rng, V)
    for i in range(1, V):
        G.add_edge(vertices[0], vertices[i])
    return G


def regular_graph(V: int, k: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """
    Random ``k``-regular multigraph: a random perfect matching on ``k`` copies of each vertex.

    Self-loops and parallel edges may appear; every vertex has degree ``k``.

    Raises:
        ValueError: If ``V * k`` is odd.
    """
    if V * k % 2 != 0:
        raise ValueError("Number of vertices * k must be even")
    rng = _default(rng)
    G = Graph(V)
    copies = [v for _ in range(k) for v in range(V)]
    order = _permutation(rng, len(copies))
    copies = [copies[i] for i in order]
    for i in range(V * k // 2):
        G.add_edge(copies[2 * i], copies[2 * i + 1])
    return G


def tree_graph(V: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """
    Uniformly random labelled tree on ``V`` vertices.

    Decodes a random Pruefer sequence of length ``V - 2``: repeatedly join the
    smallest remaining leaf to the next sequence entry.
    """
    rng = _default(rng)
    G = Graph(V)
    if V <= 1:
        return G

    prufer = [_uniform(rng, V) for _ in range(V - 2)]

    # degree of v = 1 + occurrences of v in the sequence
    degree = [1] * V
    for x in prufer:
        degree[x] += 1

    leaves = [v for v in range(V) if degree[v] == 1]
    heapq.heapify(leaves)
    for x in prufer:
        leaf = heapq.heappop(leaves)
        G.add_edge(leaf, x)
        degree[leaf] -= 1
        degree[x] -= 1
        if degree[x] == 1:
            heapq.heappush(leaves, x)
    G.add_edge(heapq.heappop(leaves), heapq.heappop(leaves))
    return G


def eulerian_cycle_graph(V: int, E: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """
    Random graph with an Eulerian cycle: a closed random walk of ``E`` steps.

    Raises:
        ValueError: If ``E <= 0`` or ``V <= 0``.
    """
    if E <= 0:
        raise ValueError("An Eulerian cycle must have at least one edge")
    if V <= 0:
        raise ValueError("An Eulerian cycle must have at least one vertex")
    rng = _default(rng)
    G = Graph(V)
    vertices = [_uniform(rng, V) for _ in range(E)]
    for i in range(E - 1):
        G.add_edge(vertices[i], vertices[i + 1])
    G.add_edge(vertices[E - 1], vertices[0])
    return G


def eulerian_path_graph(V: int, E: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """
    Random graph with an Eulerian path: a random walk of ``E`` steps.

    Raises:
        ValueError: If ``E < 0`` or ``V <= 0``.
    """
    if E < 0:
        raise ValueError("negative number of edges")
    if V <= 0:
        raise ValueError("An Eulerian path must have at least one vertex")
    rng = _default(rng)
    G = Graph(V)
    vertices = [_uniform(rng, V) for _ in range(E + 1)]
    for i in range(E):
        G.add_edge(vertices[i], vertices[i + 1])
    return G


# ---------------------------------------------------------------------------
# Digraphs
# ---------------------------------------------------------------------------


def simple_digraph(V: int, E: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    """Random simple digraph with exactly ``E`` edges (no self-loops or parallel edges)."""
    _check_edge_count(E, V * (V - 1))
    rng = _default(rng)
    G = Digraph(V)
    seen: Set[DirectedPair] = set()
    while G.E < E:
        v = _uniform(rng, V)
        w = _uniform(rng, V)
        pair = DirectedPair(v, w)
        if v != w and pair not in seen:
            seen.add(pair)
            G.add_edge(v, w)
    return G


def erdos_renyi_digraph(V: int, p: float, rng: Optional[np.random.Generator] = None) -> Digraph:
    """Random simple digraph with each of the ``V (V - 1)`` edges present with probability ``p``."""
    _check_probability(p)
    rng = _default(rng)
    G = Digraph(V)
    for v in range(V):
        for w in range(V):
            if v != w and _bernoulli(rng, p):
                G.add_edge(v, w)
    return G


def complete_digraph(V: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    return simple_digraph(V, V * (V - 1), rng)


def dag(V: int, E: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    """
    Random simple DAG with ``E`` edges.

    Edges run forward in a hidden random topological order.
    """
    _check_edge_count(E, V * (V - 1) // 2)
    rng = _default(rng)
    G = Digraph(V)
    seen: Set[DirectedPair] = set()
    vertices = _permutation(rng, V)
    while G.E < E:
        v = _uniform(rng, V)
        w = _uniform(rng, V)
        pair = DirectedPair(v, w)
        if v < w and pair not in seen:
            seen.add(pair)
            G.add_edge(vertices[v], vertices[w])
    return G


def tournament(V: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    """Random tournament: every pair joined by exactly one edge, in a random direction."""
    rng = _default(rng)
    G = Digraph(V)
    for v in range(V):
        for w in range(v + 1, V):
            if _bernoulli(rng, 0.5):
                G.add_edge(v, w)
            else:
                G.add_edge(w, v)
    return G


def _rooted_dag(V: int, E: int, rng: Optional[np.random.Generator], inward: bool) -> Digraph:
    if E > V * (V - 1) // 2:
        raise ValueError(f"Too many edges: {E}")
    if E < V - 1:
        raise ValueError(f"Too few edges: {E}")
    rng = _default(rng)
    G = Digraph(V)
    seen: Set[DirectedPair] = set()

    def add(v: int, w: int) -> bool:
        # v < w in the hidden topological order; inward edges point towards the root
        pair = DirectedPair(v, w) if inward else DirectedPair(w, v)
        if pair in seen:
            return False
        seen.add(pair)
        if inward:
            G.add_edge(vertices[v], vertices[w])
        else:
            G.add_edge(vertices[w], vertices[v])
        return True

    # fix a topological order; the root is vertices[V-1]
    vertices = _permutation(rng, V)

    # one edge from each non-root vertex to a later one
    for v in range(V - 1):
        add(v, _uniform(rng, v + 1, V))

    while G.E < E:
        v = _uniform(rng, V)
        w = _uniform(rng, V)
        if v < w:
            add(v, w)
    return G


def rooted_in_dag(V: int, E: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    """Random DAG with ``E`` edges in which every vertex reaches a single root."""
    return _rooted_dag(V, E, rng, inward=True)


def rooted_out_dag(V: int, E: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    """Random DAG with ``E`` edges in which a single root reaches every vertex."""
    return _rooted_dag(V, E, rng, inward=False)


def rooted_in_tree(V: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    return rooted_in_dag(V, V - 1, rng)


def rooted_out_tree(V: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    return rooted_out_dag(V, V - 1, rng)


def path_digraph(V: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    rng = _default(rng)
    G = Digraph(V)
    vertices = _permutation(rng, V)
    for i in range(V - 1):
        G.add_edge(vertices[i], vertices[i + 1])
    return G


def binary_tree_digraph(V: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    """Complete binary tree with every edge pointing towards the root."""
    rng = _default(rng)
    G = Digraph(V)
    vertices = _permutation(rng, V)
    for i in range(1, V):
        G.add_edge(vertices[i], vertices[(i - 1) // 2])
    return G


def cycle_digraph(V: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    if V < 1:
        raise ValueError(f"Number of vertices must be at least 1, got {V}")
    rng = _default(rng)
    G = Digraph(V)
    vertices = _permutation(rng, V)
    for i in range(V - 1):
        G.add_edge(vertices[i], vertices[i + 1])
    G.add_edge(vertices[V - 1], vertices[0])
    return G


def eulerian_cycle_digraph(V: int, E: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    """Random digraph with an Eulerian cycle: a closed random walk of ``E`` steps."""
    if E <= 0:
        raise ValueError("An Eulerian cycle must have at least one edge")
    if V <= 0:
        raise ValueError("An Eulerian cycle must have at least one vertex")
    rng = _default(rng)
    G = Digraph(V)
    vertices = [_uniform(rng, V) for _ in range(E)]
    for i in range(E - 1):
        G.add_edge(vertices[i], vertices[i + 1])
    G.add_edge(vertices[E - 1], vertices[0])
    return G


def eulerian_path_digraph(V: int, E: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    """Random digraph with an Eulerian path: a random walk of ``E`` steps."""
    if E < 0:
        raise ValueError("negative number of edges")
    if V <= 0:
        raise ValueError("An Eulerian path must have at least one vertex")
    rng = _default(rng)
    G = Digraph(V)
    vertices = [_uniform(rng, V) for _ in range(E + 1)]
    for i in range(E):
        G.add_edge(vertices[i], vertices[i + 1])
    return G


def strong_digraph(V: int, E: int, c: int, rng: Optional[np.random.Generator] = None) -> Digraph:
    """
    Random simple digraph with ``E`` edges and (at most) ``c`` strong components.

    Each vertex gets a random label in ``[0, c)``. Vertices sharing a label are
    made strongly connected by a rooted in-tree plus a rooted out-tree on the
    same root; the remaining edges only go from a lower to a higher-or-equal
    label, so distinct labels are never merged. A label drawn by no vertex
    yields fewer than ``c`` components.

    Raises:
        ValueError: Unless ``0 < c < V`` and ``2 (V - c) < E <= V (V - 1) / 2``.
    """
    if c >= V or c <= 0:
        raise ValueError("Number of components must be between 1 and V")
    if E <= 2 * (V - c):
        raise ValueError("Number of edges must be at least 2(V-c)")
    if E > V * (V - 1) // 2:
        raise ValueError("Too many edges")
    rng = _default(rng)
    G = Digraph(V)
    seen: Set[DirectedPair] = set()
    label = [_uniform(rng, c) for _ in range(V)]

    for i in range(c):
        members = [v for v in range(V) if label[v] == i]
        order = _permutation(rng, len(members))
        members = [members[k] for k in order]
        count = len(members)

        # rooted-in tree with root members[count-1]
        for v in range(count - 1):
            w = _uniform(rng, v + 1, count)
            seen.add(DirectedPair(members[w], members[v]))
            G.add_edge(members[w], members[v])

        # rooted-out tree with the same root
        for v in range(count - 1):
            w = _uniform(rng, v + 1, count)
            seen.add(DirectedPair(members[v], members[w]))
            G.add_edge(members[v], members[w])

    while G.E < E:
        v = _uniform(rng, V)
        w = _uniform(rng, V)
        pair = DirectedPair(v, w)
        if pair not in seen and v != w and label[v] <= label[w]:
            seen.add(pair)
            G.add_edge(v, w)

    logger.debug("strong digraph: %d vertices, %d edges, %d labels", V, G.E, c)
    return G


# ---------------------------------------------------------------------------
# Edge-weighted graphs
# ---------------------------------------------------------------------------


def random_edge_weighted_graph(V: int, E: int, rng: Optional[np.random.Generator] = None) -> EdgeWeightedGraph:
    """
    Random edge-weighted graph with ``E`` edges (self-loops and parallel edges allowed).

    Weights have two decimals in ``[0, 1)``.
    """
    if E < 0:
        raise ValueError("Number of edges must be nonnegative")
    rng = _default(rng)
    G = EdgeWeightedGraph(V)
    for _ in range(E):
        v = _uniform(rng, V)
        w = _uniform(rng, V)
        G.add_edge(WeightedEdge(v, w, _random_weight(rng)))
    return G


def random_edge_weighted_digraph(V: int, E: int, rng: Optional[np.random.Generator] = None) -> EdgeWeightedDigraph:
    """Random edge-weighted digraph with ``E`` edges and weights in ``[0, 1)``."""
    if E < 0:
        raise ValueError("Number of edges must be nonnegative")
    rng = _default(rng)
    G = EdgeWeightedDigraph(V)
    for _ in range(E):
        v = _uniform(rng, V)
        w = _uniform(rng, V)
        G.add_edge(DirectedEdge(v, w, _random_weight(rng)))
    return G


def random_adj_matrix_digraph(
    V: int, E: int, rng: Optional[np.random.Generator] = None
) -> AdjMatrixEdgeWeightedDigraph:
    """
    Random matrix digraph with ``E`` distinct ordered pairs (self-loops allowed).

    Raises:
        ValueError: If ``E`` is negative or exceeds ``V * V``.
    """
    _check_edge_count(E, V * V)
    rng = _default(rng)
    G = AdjMatrixEdgeWeightedDigraph(V)
    while G.E < E:
        v = _uniform(rng, V)
        w = _uniform(rng, V)
        G.add_edge(DirectedEdge(v, w, _random_weight(rng)))
    return G


__all__ = [
    "simple_graph",
    "erdos_renyi_graph",
    "complete_graph",
    "bipartite_graph",
    "bipartite_graph_p",
    "complete_bipartite_graph",
    "path_graph",
    "binary_tree_graph",
    "cycle_graph",
    "wheel_graph",
    "star_graph",
    "regular_graph",
    "tree_graph",
    "eulerian_cycle_graph",
    "eulerian_path_graph",
    "simple_digraph",
    "erdos_renyi_digraph",
    "complete_digraph",
    "dag",
    "tournament",
    "rooted_in_dag",
    "rooted_out_dag",
    "rooted_in_tree",
    "rooted_out_tree",
    "path_digraph",
    "binary_tree_digraph",
    "cycle_digraph",
    "eulerian_cycle_digraph",
    "eulerian_path_digraph",
    "strong_digraph",
    "random_edge_weighted_graph",
    "random_edge_weighted_digraph",
    "random_adj_matrix_digraph",
]
