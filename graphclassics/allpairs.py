"""
All-pairs shortest paths: Floyd-Warshall and repeated Dijkstra.

Computes shortest paths between every ordered pair of vertices. Floyd-Warshall
keeps its distances in a dense numpy matrix and stops at the first negative
self-distance; Dijkstra all-pairs simply holds one :class:`DijkstraSP` per
source.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import List, Optional

import numpy as np

from .core import EdgeWeightedDigraph
from .cycles import EdgeWeightedDirectedCycle
from .diagnostics import check_all_pairs, check_negative_cycle, is_debug_enabled
from .logging import get_logger
from .shortest import DijkstraSP

logger = get_logger(__name__)


class DijkstraAllPairsSP:
    """
    All-pairs shortest paths by running Dijkstra from every vertex.

    Args:
        G: EdgeWeightedDigraph with non-negative weights.

    Raises:
        ValueError: If any edge weight is negative.

    Complexity: O(E V log V) time, O(V^2) space.
    """

    def __init__(self, G):
        self._V = G.V
        self._all: List[DijkstraSP] = [DijkstraSP(G, v) for v in range(G.V)]

    def _validate(self, v: int) -> None:
        if not 0 <= v < self._V:
            raise IndexError(f"vertex {v} is not between 0 and {self._V - 1}")

    def dist(self, s: int, t: int) -> float:
        """Return the length of a shortest path from ``s`` to ``t`` (``inf`` if none)."""
        self._validate(s)
        return self._all[s].dist_to(t)

    def has_path(self, s: int, t: int) -> bool:
        self._validate(s)
        return self._all[s].has_path_to(t)

    def path(self, s: int, t: int) -> Optional[list]:
        """Return the edges of a shortest path from ``s`` to ``t``, or None."""
        self._validate(s)
        return self._all[s].path_to(t)


class FloydWarshall:
    """
    Floyd-Warshall all-pairs shortest paths with negative-cycle detection.

    Distances live in a ``V x V`` float matrix; the last edge of each best
    path is kept in a parallel list-of-lists. When intermediate vertex ``i``
    is processed, sources ``v`` with no path to ``i`` are skipped and each
    remaining row is relaxed in one vectorized step. The computation stops as
    soon as some ``dist(v, v)`` turns negative.

    Args:
        G: AdjMatrixEdgeWeightedDigraph (an EdgeWeightedDigraph also works;
            among parallel edges the lightest is used).

    Complexity: O(V^3) time, O(V^2) space.

    Example:
        >>> from graphclassics import AdjMatrixEdgeWeightedDigraph
        >>> G = AdjMatrixEdgeWeightedDigraph(3, [(0, 1, 1.0), (1, 2, 2.0)])
        >>> fw = FloydWarshall(G)
        >>> fw.dist(0, 2), fw.has_path(2, 0)
        (3.0, False)
    """

    def __init__(self, G):
        V = G.V
        self._V = V
        self._dist = np.full((V, V), np.inf)
        self._edge_to: List[List[Optional[object]]] = [[None] * V for _ in range(V)]
        self._cycle: Optional[list] = None

        # Initialize with direct edges
        for e in G.edges():
            v, w = e.from_(), e.to()
            if e.weight < self._dist[v, w]:
                self._dist[v, w] = e.weight
                self._edge_to[v][w] = e

        # Self-loops of non-negative weight never beat the empty path
        for v in range(V):
            if self._dist[v, v] >= 0.0:
                self._dist[v, v] = 0.0
                self._edge_to[v][v] = None

        for i in range(V):
            for v in range(V):
                if self._edge_to[v][i] is None:
                    continue
                candidate = self._dist[v, i] + self._dist[i]
                improved = np.flatnonzero(candidate < self._dist[v])
                if improved.size:
                    self._dist[v, improved] = candidate[improved]
                    for w in improved:
                        self._edge_to[v][w] = self._edge_to[i][w]
                if self._dist[v, v] < 0.0:
                    self._find_negative_cycle(v)
                    break
            if self._cycle is not None:
                break

        if is_debug_enabled():
            if self._cycle is not None:
                check_negative_cycle(self._cycle)
            else:
                check_all_pairs(G, self)

    def _find_negative_cycle(self, v: int) -> None:
        spt = EdgeWeightedDigraph(self._V)
        for e in self._edge_to[v]:
            if e is not None:
                spt.add_edge(e)
        self._cycle = EdgeWeightedDirectedCycle(spt).cycle()
        logger.debug("negative cycle through %d: %s", v, self._cycle)

    def _validate(self, v: int) -> None:
        if not 0 <= v < self._V:
            raise IndexError(f"vertex {v} is not between 0 and {self._V - 1}")

    def _require_no_negative_cycle(self) -> None:
        if self._cycle is not None:
            raise RuntimeError("Negative cost cycle exists")

    def has_negative_cycle(self) -> bool:
        return self._cycle is not None

    def negative_cycle(self) -> Optional[list]:
        """Return the edges of a negative cycle, or None."""
        return None if self._cycle is None else list(self._cycle)

    def has_path(self, s: int, t: int) -> bool:
        """Return True if ``t`` is reachable from ``s``."""
        self._validate(s)
        self._validate(t)
        return bool(np.isfinite(self._dist[s, t]))

    def dist(self, s: int, t: int) -> float:
        """
        Return the length of a shortest path from ``s`` to ``t``.

        Raises:
            RuntimeError: If a negative cycle was found.
        """
        self._validate(s)
        self._validate(t)
        self._require_no_negative_cycle()
        return float(self._dist[s, t])

    def path(self, s: int, t: int) -> Optional[list]:
        """
        Return the edges of a shortest path from ``s`` to ``t``, or None.

        Raises:
            RuntimeError: If a negative cycle was found.
        """
        self._validate(s)
        self._validate(t)
        self._require_no_negative_cycle()
        if not self.has_path(s, t):
            return None
        path = []
        e = self._edge_to[s][t]
        while e is not None:
            path.append(e)
            e = self._edge_to[s][e.from_()]
        path.reverse()
        return path

    @property
    def dist_matrix(self) -> np.ndarray:
        """Read-only copy-free view of the distance matrix."""
        view = self._dist.view()
        view.flags.writeable = False
        return view


__all__ = ["DijkstraAllPairsSP", "FloydWarshall"]
