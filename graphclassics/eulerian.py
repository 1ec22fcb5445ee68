"""
Eulerian cycles and paths in undirected graphs and digraphs.

Construction is Hierholzer's algorithm with an explicit vertex stack: follow
unused edges until stuck, emitting a vertex only once all of its edges are
used. Undirected edges are numbered and consumed through a set of used
indices owned by the algorithm object, so neither the graph nor its edges are
ever modified and the same graph can be walked any number of times.

A result is accepted only if the walk has ``E + 1`` vertices; otherwise the
edges are not all in one connected piece and ``cycle()`` / ``path()`` return
None. A graph with no edges has no Eulerian cycle, and its Eulerian path is
the single vertex ``[0]``.

References:
    - Hierholzer, C. "Ueber die Moeglichkeit, einen Linienzug ohne
      Wiederholung und ohne Unterbrechung zu umfahren" (1873).
"""

from collections import deque
from typing import Deque, List, Optional, Tuple

from .core import Digraph, Graph
from .diagnostics import check_eulerian, is_debug_enabled
from .logging import get_logger
from .traversal import BreadthFirstPaths

logger = get_logger(__name__)


def _non_isolated_vertex(G) -> int:
    """Return the first vertex with an incident (or outgoing) edge, or -1."""
    for v in range(G.V):
        if len(G.adj(v)) > 0:
            return v
    return -1


def _edges_connected(G) -> bool:
    """Return True if all non-isolated vertices of the undirected ``G`` are connected."""
    s = _non_isolated_vertex(G)
    if s == -1:
        return True
    bfs = BreadthFirstPaths(G, s)
    return all(bfs.has_path_to(v) for v in range(G.V) if G.degree(v) > 0)


def _odd_vertices(G) -> List[int]:
    return [v for v in range(G.V) if G.degree(v) % 2 != 0]


def _surplus(G) -> Tuple[int, int]:
    """Return ``(total out-minus-in excess, last vertex with an excess)``."""
    deficit = 0
    start = -1
    for v in range(G.V):
        if G.outdegree(v) > G.indegree(v):
            deficit += G.outdegree(v) - G.indegree(v)
            start = v
    return deficit, start


def has_eulerian_cycle(G) -> bool:
    """
    Return True if ``G`` (Graph or Digraph) has an Eulerian cycle.

    Requires at least one edge, balanced degrees (every degree even, or
    indegree equal to outdegree) and all edges in one connected piece.
    """
    if G.E == 0:
        return False
    if isinstance(G, Digraph):
        if any(G.outdegree(v) != G.indegree(v) for v in range(G.V)):
            return False
        return _edges_connected(Graph.from_digraph(G))
    if _odd_vertices(G):
        return False
    return _edges_connected(G)


def has_eulerian_path(G) -> bool:
    """
    Return True if ``G`` (Graph or Digraph) has an Eulerian path.

    Requires at most two odd-degree vertices (at most one vertex with
    outdegree exceeding indegree, by one) and all edges in one connected piece.
    """
    if G.V == 0:
        return False
    if G.E == 0:
        return True
    if isinstance(G, Digraph):
        deficit, _ = _surplus(G)
        if deficit > 1:
            return False
        return _edges_connected(Graph.from_digraph(G))
    if len(_odd_vertices(G)) > 2:
        return False
    return _edges_connected(G)


class _UndirectedWalk:
    """Hierholzer walk over a Graph with per-vertex queues of edge indices."""

    def __init__(self, G: Graph):
        self._ends: List[Tuple[int, int]] = []
        self._queues: List[Deque[int]] = [deque() for _ in range(G.V)]
        self._used: set = set()

        for v in range(G.V):
            self_loops = 0
            for w in G.adj(v):
                if v == w:
                    # both copies of a self-loop in adj(v) share one edge index
                    if self_loops % 2 == 0:
                        idx = self._add(v, v)
                        self._queues[v].append(idx)
                    self_loops += 1
                elif v < w:
                    idx = self._add(v, w)
                    self._queues[w].append(idx)

    def _add(self, v: int, w: int) -> int:
        idx = len(self._ends)
        self._ends.append((v, w))
        self._queues[v].append(idx)
        return idx

    def _next_unused(self, v: int) -> Optional[int]:
        queue = self._queues[v]
        while queue:
            idx = queue.popleft()
            if idx not in self._used:
                self._used.add(idx)
                return idx
        return None

    def walk(self, s: int) -> List[int]:
        path: List[int] = []
        stack = [s]
        while stack:
            v = stack.pop()
            idx = self._next_unused(v)
            while idx is not None:
                stack.append(v)
                a, b = self._ends[idx]
                v = b if v == a else a
                idx = self._next_unused(v)
            path.append(v)
        path.reverse()
        return path


def _directed_walk(G: Digraph, s: int) -> List[int]:
    iterators = [iter(G.adj(v)) for v in range(G.V)]
    path: List[int] = []
    stack = [s]
    while stack:
        v = stack.pop()
        w = next(iterators[v], None)
        while w is not None:
            stack.append(v)
            v = w
            w = next(iterators[v], None)
        path.append(v)
    path.reverse()
    return path


class _EulerianResult:
    def __init__(self, G, walk: Optional[List[int]], closed: bool):
        if walk is not None and len(walk) != G.E + 1:
            logger.debug("walk covers %d of %d edges; edges are not connected", len(walk) - 1, G.E)
            walk = None
        self._walk = walk
        if is_debug_enabled():
            check_eulerian(G, self._walk, closed)


class EulerianCycle(_EulerianResult):
    """
    Eulerian cycle of an undirected graph (self-loops and parallel edges allowed).

    Args:
        G: Graph.

    Example:
        >>> from graphclassics import Graph
        >>> ec = EulerianCycle(Graph(3, [(0, 1), (1, 2), (2, 0)]))
        >>> ec.cycle()
        [0, 1, 2, 0]
    """

    def __init__(self, G: Graph):
        walk = None
        if G.E > 0 and not _odd_vertices(G):
            walk = _UndirectedWalk(G).walk(_non_isolated_vertex(G))
        super().__init__(G, walk, closed=True)

    def has_eulerian_cycle(self) -> bool:
        return self._walk is not None

    def cycle(self) -> Optional[List[int]]:
        """Return the cycle as ``[s, ..., s]`` with ``E + 1`` vertices, or None."""
        return None if self._walk is None else list(self._walk)


class EulerianPath(_EulerianResult):
    """
    Eulerian path of an undirected graph.

    Starts at an odd-degree vertex when there is one, otherwise at the first
    non-isolated vertex.

    Args:
        G: Graph.
    """

    def __init__(self, G: Graph):
        walk = None
        odd = _odd_vertices(G)
        if G.V > 0 and len(odd) <= 2:
            s = odd[0] if odd else _non_isolated_vertex(G)
            if s == -1:
                s = 0
            walk = _UndirectedWalk(G).walk(s)
        super().__init__(G, walk, closed=False)

    def has_eulerian_path(self) -> bool:
        return self._walk is not None

    def path(self) -> Optional[List[int]]:
        """Return the path with ``E + 1`` vertices, or None."""
        return None if self._walk is None else list(self._walk)


class DirectedEulerianCycle(_EulerianResult):
    """
    Eulerian cycle of a digraph.

    Args:
        G: Digraph.
    """

    def __init__(self, G: Digraph):
        walk = None
        if G.E > 0 and all(G.outdegree(v) == G.indegree(v) for v in range(G.V)):
            walk = _directed_walk(G, _non_isolated_vertex(G))
        super().__init__(G, walk, closed=True)

    def has_eulerian_cycle(self) -> bool:
        return self._walk is not None

    def cycle(self) -> Optional[List[int]]:
        return None if self._walk is None else list(self._walk)


class DirectedEulerianPath(_EulerianResult):
    """
    Eulerian path of a digraph.

    Starts at the vertex whose outdegree exceeds its indegree, if any,
    otherwise at the first vertex with an outgoing edge.

    Args:
        G: Digraph.
    """

    def __init__(self, G: Digraph):
        walk = None
        deficit, s = _surplus(G)
        if G.V > 0 and deficit <= 1:
            if s == -1:
                s = _non_isolated_vertex(G)
            if s == -1:
                s = 0
            walk = _directed_walk(G, s)
        super().__init__(G, walk, closed=False)

    def has_eulerian_path(self) -> bool:
        return self._walk is not None

    def path(self) -> Optional[List[int]]:
        return None if self._walk is None else list(self._walk)


__all__ = [
    "has_eulerian_cycle",
    "has_eulerian_path",
    "EulerianCycle",
    "EulerianPath",
    "DirectedEulerianCycle",
    "DirectedEulerianPath",
]
