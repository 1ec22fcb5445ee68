"""
Minimum spanning forest algorithms: lazy Prim, eager Prim, Kruskal, Boruvka.

All four implement :class:`MinimumSpanningForest` over an
:class:`~graphclassics.core.EdgeWeightedGraph`. A disconnected graph yields a
forest with one tree per component, i.e. ``V - c`` edges for ``c``
components. Kruskal and Boruvka use union-find; both Prim variants use a
priority queue.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
    - Boruvka, O. "O jistem problemu minimalnim" (1926).
"""

import heapq
import itertools
import math
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple, Type

from .diagnostics import check_mst, is_debug_enabled
from .edges import WeightedEdge
from .logging import get_logger
from .utils import IndexMinPQ, UnionFind

logger = get_logger(__name__)


class MinimumSpanningForest(ABC):
    """
    Minimum spanning forest of an edge-weighted undirected graph.

    Subclasses append forest edges to ``self._edges`` in the order they are
    discovered.

    Args:
        G: EdgeWeightedGraph.
    """

    def __init__(self, G):
        self._edges: List[WeightedEdge] = []
        self._compute(G)

        logger.debug(
            "%s: %d forest edges over %d vertices, weight %g",
            type(self).__name__,
            len(self._edges),
            G.V,
            self.weight(),
        )
        if is_debug_enabled():
            check_mst(G, self)

    @abstractmethod
    def _compute(self, G) -> None:
        """Fill ``self._edges``."""

    def edges(self) -> List[WeightedEdge]:
        """Return the forest edges in discovery order."""
        return list(self._edges)

    def weight(self) -> float:
        """Return the total weight of :meth:`edges`."""
        return sum(e.weight for e in self._edges)


class LazyPrimMST(MinimumSpanningForest):
    """
    Prim's algorithm with lazy deletion.

    The heap holds every edge with at least one endpoint in the tree; edges
    whose endpoints are both in the tree by the time they surface are dropped.

    Complexity: O(E log E) time, O(E) space.
    """

    def _compute(self, G) -> None:
        self._marked = [False] * G.V
        # (weight, insertion counter, edge): the counter keeps heap order total
        self._pq: List[Tuple[float, int, WeightedEdge]] = []
        self._counter = itertools.count()

        for s in range(G.V):
            if not self._marked[s]:
                self._prim(G, s)

    def _prim(self, G, s: int) -> None:
        self._scan(G, s)
        while self._pq:
            _, _, e = heapq.heappop(self._pq)
            v = e.either()
            w = e.other(v)
            if self._marked[v] and self._marked[w]:
                continue
            self._edges.append(e)
            if not self._marked[v]:
                self._scan(G, v)
            if not self._marked[w]:
                self._scan(G, w)

    def _scan(self, G, v: int) -> None:
        self._marked[v] = True
        for e in G.adj(v):
            if not self._marked[e.other(v)]:
                heapq.heappush(self._pq, (e.weight, next(self._counter), e))


class PrimMST(MinimumSpanningForest):
    """
    Prim's algorithm with an indexed priority queue (eager version).

    Each non-tree vertex keeps only its lightest known connection to the tree,
    lowered with ``decrease_key`` instead of queuing duplicates.

    Complexity: O(E log V) time, O(V) extra space.
    """

    def _compute(self, G) -> None:
        self._edge_to: List[Optional[WeightedEdge]] = [None] * G.V
        self._dist_to = [math.inf] * G.V
        self._marked = [False] * G.V
        pq = IndexMinPQ(G.V)

        for s in range(G.V):
            if self._marked[s]:
                continue
            self._dist_to[s] = 0.0
            pq.insert(s, 0.0)
            while not pq.is_empty():
                v = pq.del_min()
                if self._edge_to[v] is not None:
                    self._edges.append(self._edge_to[v])
                self._scan(G, v, pq)

    def _scan(self, G, v: int, pq: IndexMinPQ) -> None:
        self._marked[v] = True
        for e in G.adj(v):
            w = e.other(v)
            if self._marked[w]:
                continue
            if e.weight < self._dist_to[w]:
                self._dist_to[w] = e.weight
                self._edge_to[w] = e
                if w in pq:
                    pq.decrease_key(w, e.weight)
                else:
                    pq.insert(w, e.weight)


class KruskalMST(MinimumSpanningForest):
    """
    Kruskal's algorithm.

    Edges leave a min-heap in weight order and are kept when they join two
    different union-find sets. Stops once ``V - 1`` edges are accepted.

    Complexity: O(E log E) time.

    Example:
        >>> from graphclassics import EdgeWeightedGraph
        >>> G = EdgeWeightedGraph(3, [(0, 1, 1.0), (1, 2, 2.0), (2, 0, 3.0)])
        >>> KruskalMST(G).weight()
        3.0
    """

    def _compute(self, G) -> None:
        pq = [(e.weight, i, e) for i, e in enumerate(G.edges())]
        heapq.heapify(pq)

        uf = UnionFind(G.V)
        while pq and len(self._edges) < G.V - 1:
            _, _, e = heapq.heappop(pq)
            v = e.either()
            if uf.union(v, e.other(v)):
                self._edges.append(e)


class BoruvkaMST(MinimumSpanningForest):
    """
    Boruvka's algorithm.

    Each round finds, for every current tree, its lightest edge to a different
    tree and adds all of them at once; at least half of the trees merge per
    round. Ties go to the edge that comes first in ``G.edges()``, which keeps
    the per-round choices consistent.

    Complexity: O(E log V) time.
    """

    def _compute(self, G) -> None:
        edges = G.edges()
        uf = UnionFind(G.V)
        t = 1
        while t < G.V and len(self._edges) < G.V - 1:
            # Lightest edge leaving each tree, indexed by union-find root
            closest: Dict[int, WeightedEdge] = {}
            for e in edges:
                v = e.either()
                w = e.other(v)
                i, j = uf.find(v), uf.find(w)
                if i == j:
                    continue
                if i not in closest or e < closest[i]:
                    closest[i] = e
                if j not in closest or e < closest[j]:
                    closest[j] = e

            if not closest:
                break

            for root in sorted(closest):
                e = closest[root]
                v = e.either()
                if uf.union(v, e.other(v)):
                    self._edges.append(e)
            t += t


_MST_ALGORITHMS: Dict[str, Type[MinimumSpanningForest]] = {
    "lazy_prim": LazyPrimMST,
    "prim": PrimMST,
    "kruskal": KruskalMST,
    "boruvka": BoruvkaMST,
}


def minimum_spanning_forest(G, algorithm: str = "kruskal") -> MinimumSpanningForest:
    """
    Compute a minimum spanning forest with the named algorithm.

    Args:
        G: EdgeWeightedGraph.
        algorithm: ``"kruskal"`` (default), ``"prim"``, ``"lazy_prim"`` or
            ``"boruvka"``.

    Raises:
        ValueError: For an unknown algorithm name.

    Example:
        >>> from graphclassics import EdgeWeightedGraph
        >>> G = EdgeWeightedGraph(4, [(0, 1, 0.5), (2, 3, 0.25)])
        >>> len(minimum_spanning_forest(G, "boruvka").edges())
        2
    """
    try:
        cls = _MST_ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown MST algorithm {algorithm!r}; expected one of {sorted(_MST_ALGORITHMS)}"
        ) from None
    return cls(G)


__all__ = [
    "MinimumSpanningForest",
    "LazyPrimMST",
    "PrimMST",
    "KruskalMST",
    "BoruvkaMST",
    "minimum_spanning_forest",
]
