"""
Single-source shortest (and longest) paths in edge-weighted graphs.

- DijkstraSP / DijkstraUndirectedSP: non-negative weights, indexed heap.
- BellmanFordSP: arbitrary weights, queue-based, detects negative cycles.
- AcyclicSP / AcyclicLP: DAGs only, one relaxation pass in topological order.

All results share the :class:`ShortestPaths` accessors. ``path_to(v)`` returns
the edges of the path from the source to ``v`` (empty for the source itself)
or None when ``v`` is unreachable.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.1 (Bellman-Ford), 24.2 (DAG shortest paths), 24.3 (Dijkstra).
"""

import math
from collections import deque
from typing import List, Optional

from .core import EdgeWeightedDigraph
from .cycles import EdgeWeightedDirectedCycle, Topological
from .diagnostics import check_negative_cycle, check_shortest_paths, is_debug_enabled
from .logging import get_logger
from .utils import IndexMinPQ, directed_edge_path, undirected_edge_path

logger = get_logger(__name__)


class ShortestPaths:
    """
    Common accessors for a shortest-path tree rooted at one source.

    Subclasses fill ``_dist_to`` and ``_edge_to`` in their constructor.
    Unreached vertices keep the distance ``_unreached`` (``inf``, or ``-inf``
    for longest paths).
    """

    _unreached = math.inf

    def __init__(self, G, s: int):
        G.validate_vertex(s)
        self._s = s
        self._dist_to: List[float] = [self._unreached] * G.V
        self._edge_to: List[Optional[object]] = [None] * G.V
        self._dist_to[s] = 0.0

    def _validate(self, v: int) -> None:
        if not 0 <= v < len(self._dist_to):
            raise IndexError(f"vertex {v} is not between 0 and {len(self._dist_to) - 1}")

    @property
    def source(self) -> int:
        return self._s

    def dist_to(self, v: int) -> float:
        """Return the length of the best path from the source to ``v``."""
        self._validate(v)
        return self._dist_to[v]

    def has_path_to(self, v: int) -> bool:
        """Return True if there is a path from the source to ``v``."""
        self._validate(v)
        return self._dist_to[v] != self._unreached

    def edge_to(self, v: int):
        """Return the last edge on the best path to ``v`` (None for the source)."""
        self._validate(v)
        return self._edge_to[v]

    def path_to(self, v: int) -> Optional[list]:
        """Return the edges of the best path from the source to ``v``, or None."""
        if not self.has_path_to(v):
            return None
        return directed_edge_path(self._edge_to, v)


def _reject_negative_weights(G) -> None:
    for e in G.edges():
        if e.weight < 0:
            logger.debug("negative edge %s rejected", e)
            raise ValueError(f"edge {e} has negative weight")


class DijkstraSP(ShortestPaths):
    """
    Dijkstra's algorithm on an edge-weighted digraph.

    Args:
        G: EdgeWeightedDigraph with non-negative weights.
        s: Source vertex.

    Raises:
        ValueError: If any edge weight is negative (checked before searching).
        IndexError: If ``s`` is outside ``[0, V)``.

    Complexity: O(E log V) with an indexed binary heap.

    Example:
        >>> from graphclassics import EdgeWeightedDigraph
        >>> G = EdgeWeightedDigraph(3, [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 5.0)])
        >>> DijkstraSP(G, 0).dist_to(2)
        3.0
    """

    def __init__(self, G, s: int):
        _reject_negative_weights(G)
        super().__init__(G, s)

        pq = IndexMinPQ(G.V)
        pq.insert(s, 0.0)
        while not pq.is_empty():
            v = pq.del_min()
            for e in G.adj(v):
                self._relax(pq, v, e.to(), e)

        if is_debug_enabled():
            check_shortest_paths(G, self, [s])

    def _relax(self, pq: IndexMinPQ, v: int, w: int, e) -> None:
        candidate = self._dist_to[v] + e.weight
        if self._dist_to[w] > candidate:
            self._dist_to[w] = candidate
            self._edge_to[w] = e
            if w in pq:
                pq.decrease_key(w, candidate)
            else:
                pq.insert(w, candidate)


class DijkstraUndirectedSP(DijkstraSP):
    """
    Dijkstra's algorithm on an edge-weighted undirected graph.

    Each edge is relaxed towards whichever endpoint is opposite the vertex
    being scanned.

    Args:
        G: EdgeWeightedGraph with non-negative weights.
        s: Source vertex.
    """

    def __init__(self, G, s: int):
        _reject_negative_weights(G)
        ShortestPaths.__init__(self, G, s)

        pq = IndexMinPQ(G.V)
        pq.insert(s, 0.0)
        while not pq.is_empty():
            v = pq.del_min()
            for e in G.adj(v):
                self._relax(pq, v, e.other(v), e)

        if is_debug_enabled():
            check_shortest_paths(G, self, [s])

    def path_to(self, v: int) -> Optional[list]:
        if not self.has_path_to(v):
            return None
        return undirected_edge_path(self._edge_to, v)


class BellmanFordSP(ShortestPaths):
    """
    Queue-based Bellman-Ford on an edge-weighted digraph.

    A vertex is enqueued only when its distance improves and it is not
    already queued. Every ``V`` edge examinations the current shortest-path
    tree (the edges in ``edge_to``) is searched for a cycle; such a cycle is
    necessarily negative, and relaxation stops as soon as one is found.

    Args:
        G: EdgeWeightedDigraph (any finite weights).
        s: Source vertex.

    Raises:
        IndexError: If ``s`` is outside ``[0, V)``.

    Complexity: O(E V) worst case, typically O(E + V).

    Example:
        >>> from graphclassics import EdgeWeightedDigraph
        >>> G = EdgeWeightedDigraph(2, [(0, 1, -5.0), (1, 0, 1.0)])
        >>> BellmanFordSP(G, 0).has_negative_cycle()
        True
    """

    def __init__(self, G, s: int):
        super().__init__(G, s)
        self._cycle: Optional[list] = None
        self._cost = 0
        on_queue = [False] * G.V
        queue = deque([s])
        on_queue[s] = True

        while queue and self._cycle is None:
            v = queue.popleft()
            on_queue[v] = False
            self._relax(G, v, queue, on_queue)

        if self._cycle is not None:
            logger.debug(
                "negative cycle of weight %g reachable from %d: %s",
                sum(e.weight for e in self._cycle),
                s,
                " ".join(str(e) for e in self._cycle),
            )

        if is_debug_enabled():
            if self._cycle is not None:
                check_negative_cycle(self._cycle)
            else:
                check_shortest_paths(G, self, [s])

    def _relax(self, G, v: int, queue: deque, on_queue: List[bool]) -> None:
        for e in G.adj(v):
            w = e.to()
            candidate = self._dist_to[v] + e.weight
            if self._dist_to[w] > candidate:
                self._dist_to[w] = candidate
                self._edge_to[w] = e
                if not on_queue[w]:
                    queue.append(w)
                    on_queue[w] = True
            if self._cost % G.V == 0:
                self._find_negative_cycle(G.V)
                if self._cycle is not None:
                    return
            self._cost += 1

    def _find_negative_cycle(self, V: int) -> None:
        spt = EdgeWeightedDigraph(V)
        for e in self._edge_to:
            if e is not None:
                spt.add_edge(e)
        self._cycle = EdgeWeightedDirectedCycle(spt).cycle()

    def has_negative_cycle(self) -> bool:
        """Return True if a negative cycle is reachable from the source."""
        return self._cycle is not None

    def negative_cycle(self) -> Optional[list]:
        """Return the edges of a negative cycle reachable from the source, or None."""
        return None if self._cycle is None else list(self._cycle)

    def _require_no_negative_cycle(self) -> None:
        if self._cycle is not None:
            raise RuntimeError("Negative cost cycle exists")

    def dist_to(self, v: int) -> float:
        """
        Return the shortest distance to ``v``.

        Raises:
            RuntimeError: If a negative cycle is reachable from the source.
        """
        self._validate(v)
        self._require_no_negative_cycle()
        return self._dist_to[v]

    def path_to(self, v: int) -> Optional[list]:
        """
        Return the edges of a shortest path to ``v``, or None.

        Raises:
            RuntimeError: If a negative cycle is reachable from the source.
        """
        self._validate(v)
        self._require_no_negative_cycle()
        return super().path_to(v)


class AcyclicSP(ShortestPaths):
    """
    Shortest paths in an edge-weighted DAG (weights may be negative).

    Args:
        G: Acyclic EdgeWeightedDigraph.
        s: Source vertex.

    Raises:
        ValueError: If ``G`` has a directed cycle (checked before relaxing).

    Complexity: O(V + E).
    """

    longest = False

    def __init__(self, G, s: int):
        super().__init__(G, s)
        topological = Topological(G)
        if not topological.has_order():
            logger.debug("%s rejected a cyclic digraph", type(self).__name__)
            raise ValueError("Digraph is not acyclic")

        for v in topological.order():
            for e in G.adj(v):
                self._relax(e)

        if is_debug_enabled():
            check_shortest_paths(G, self, [s], longest=self.longest)

    def _relax(self, e) -> None:
        v, w = e.from_(), e.to()
        if self._dist_to[w] > self._dist_to[v] + e.weight:
            self._dist_to[w] = self._dist_to[v] + e.weight
            self._edge_to[w] = e


class AcyclicLP(AcyclicSP):
    """
    Longest paths in an edge-weighted DAG.

    Unreachable vertices have ``dist_to == -inf``.

    Example:
        >>> from graphclassics import EdgeWeightedDigraph
        >>> G = EdgeWeightedDigraph(3, [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 5.0)])
        >>> AcyclicLP(G, 0).dist_to(2)
        5.0
    """

    _unreached = -math.inf
    longest = True

    def _relax(self, e) -> None:
        v, w = e.from_(), e.to()
        if self._dist_to[w] < self._dist_to[v] + e.weight:
            self._dist_to[w] = self._dist_to[v] + e.weight
            self._edge_to[w] = e


__all__ = [
    "ShortestPaths",
    "DijkstraSP",
    "DijkstraUndirectedSP",
    "BellmanFordSP",
    "AcyclicSP",
    "AcyclicLP",
]
