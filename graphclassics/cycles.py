"""
Cycle detection and topological order.

- Cycle: undirected, DFS with parent tracking after the self-loop and
  parallel-edge witnesses reported by the container.
- DirectedCycle / EdgeWeightedDirectedCycle: DFS with an on-stack marker.
- DirectedCycleX: Kahn peeling of indegree-0 vertices, then a predecessor walk
  through whatever is left.
- Topological / TopologicalX: reverse postorder, or Kahn emission order.

Cycles are returned as vertex lists whose first and last entries coincide
(edge lists for the weighted directed finder).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.4 (topological sort).
    - Kahn, A. B. "Topological sorting of large networks" (1962).
"""

from collections import deque
from typing import List, Optional

from .core import neighbors
from .diagnostics import check_cycle, check_topological, is_debug_enabled
from .edges import DirectedEdge
from .logging import get_logger
from .traversal import DepthFirstOrder

logger = get_logger(__name__)


def _trace_back(edge_to: List[Optional[int]], v: int, w: int) -> List[int]:
    """Return ``[w, ..., v, w]`` following tree edges from ``w`` down to ``v``."""
    path = []
    x = v
    while x != w:
        path.append(x)
        x = edge_to[x]
    path.append(w)
    path.reverse()
    path.append(w)
    return path


class Cycle:
    """
    Find a cycle in an undirected graph, if one exists.

    A self-loop ``v-v`` is reported as ``[v, v]`` and a pair of parallel edges
    ``v-w`` as ``[v, w, v]``; otherwise a depth-first search looks for an
    edge back to a marked vertex other than the parent.

    Args:
        G: Graph.

    Example:
        >>> from graphclassics import Graph
        >>> Cycle(Graph(3, [(0, 1), (1, 2), (2, 0)])).has_cycle()
        True
    """

    def __init__(self, G):
        self._cycle: Optional[List[int]] = None

        v = G.self_loop()
        if v is not None:
            self._cycle = [v, v]
        else:
            pair = G.parallel_edge()
            if pair is not None:
                v, w = pair
                self._cycle = [v, w, v]
            else:
                self._search(G)

        logger.debug("undirected cycle: %s", self._cycle)
        if is_debug_enabled():
            check_cycle(G, self._cycle)

    def _search(self, G) -> None:
        marked = [False] * G.V
        edge_to: List[Optional[int]] = [None] * G.V
        for root in range(G.V):
            if marked[root]:
                continue
            marked[root] = True
            stack = [(root, iter(G.adj(root)))]
            while stack:
                v, it = stack[-1]
                for w in it:
                    if not marked[w]:
                        marked[w] = True
                        edge_to[w] = v
                        stack.append((w, iter(G.adj(w))))
                        break
                    if w != edge_to[v]:
                        self._cycle = _trace_back(edge_to, v, w)
                        return
                else:
                    stack.pop()

    def has_cycle(self) -> bool:
        return self._cycle is not None

    def cycle(self) -> Optional[List[int]]:
        """Return a cycle as ``[v0, v1, ..., v0]``, or None."""
        return None if self._cycle is None else list(self._cycle)


class DirectedCycle:
    """
    Find a directed cycle by depth-first search with an on-stack marker.

    Args:
        G: Digraph or EdgeWeightedDigraph.

    Complexity: O(V + E).
    """

    def __init__(self, G):
        self._cycle: Optional[List[int]] = None
        marked = [False] * G.V
        on_stack = [False] * G.V
        edge_to: List[Optional[int]] = [None] * G.V

        for root in range(G.V):
            if marked[root] or self._cycle is not None:
                continue
            marked[root] = on_stack[root] = True
            stack = [(root, neighbors(G, root))]
            while stack and self._cycle is None:
                v, it = stack[-1]
                for w in it:
                    if not marked[w]:
                        marked[w] = on_stack[w] = True
                        edge_to[w] = v
                        stack.append((w, neighbors(G, w)))
                        break
                    if on_stack[w]:
                        self._cycle = _trace_back(edge_to, v, w)
                        break
                else:
                    on_stack[v] = False
                    stack.pop()

        logger.debug("directed cycle: %s", self._cycle)
        if is_debug_enabled():
            check_cycle(G, self._cycle)

    def has_cycle(self) -> bool:
        return self._cycle is not None

    def cycle(self) -> Optional[List[int]]:
        """Return a directed cycle as ``[v0, v1, ..., v0]``, or None."""
        return None if self._cycle is None else list(self._cycle)


class DirectedCycleX:
    """
    Find a directed cycle by repeatedly deleting vertices of indegree 0.

    Every vertex that survives the peeling has a surviving predecessor, so
    walking predecessors from any survivor must revisit a vertex, and that
    vertex lies on a cycle.

    Args:
        G: Digraph or EdgeWeightedDigraph.

    Complexity: O(V + E).
    """

    def __init__(self, G):
        self._cycle: Optional[List[int]] = None
        indegree = [G.indegree(v) for v in range(G.V)]
        queue = deque(v for v in range(G.V) if indegree[v] == 0)
        while queue:
            v = queue.popleft()
            for w in neighbors(G, v):
                indegree[w] -= 1
                if indegree[w] == 0:
                    queue.append(w)

        # Predecessor of each surviving vertex among the survivors
        edge_to: List[Optional[int]] = [None] * G.V
        root = -1
        for v in range(G.V):
            if indegree[v] == 0:
                continue
            root = v
            for w in neighbors(G, v):
                if indegree[w] > 0:
                    edge_to[w] = v

        if root != -1:
            visited = [False] * G.V
            while not visited[root]:
                visited[root] = True
                root = edge_to[root]

            cycle = [root]
            x = edge_to[root]
            while x != root:
                cycle.append(x)
                x = edge_to[x]
            cycle.append(root)
            cycle.reverse()
            self._cycle = cycle

        logger.debug("directed cycle (peeling): %s", self._cycle)
        if is_debug_enabled():
            check_cycle(G, self._cycle)

    def has_cycle(self) -> bool:
        return self._cycle is not None

    def cycle(self) -> Optional[List[int]]:
        return None if self._cycle is None else list(self._cycle)


class EdgeWeightedDirectedCycle:
    """
    Find a directed cycle in an edge-weighted digraph, returned as edges.

    Args:
        G: EdgeWeightedDigraph (or any container whose ``adj`` yields
            DirectedEdge objects).
    """

    def __init__(self, G):
        self._cycle: Optional[List[DirectedEdge]] = None
        marked = [False] * G.V
        on_stack = [False] * G.V
        edge_to: List[Optional[DirectedEdge]] = [None] * G.V

        for root in range(G.V):
            if marked[root] or self._cycle is not None:
                continue
            marked[root] = on_stack[root] = True
            stack = [(root, iter(G.adj(root)))]
            while stack and self._cycle is None:
                v, it = stack[-1]
                for e in it:
                    w = e.to()
                    if not marked[w]:
                        marked[w] = on_stack[w] = True
                        edge_to[w] = e
                        stack.append((w, iter(G.adj(w))))
                        break
                    if on_stack[w]:
                        cycle = [e]
                        f = edge_to[v]
                        x = v
                        while x != w:
                            cycle.append(f)
                            x = f.from_()
                            f = edge_to[x]
                        cycle.reverse()
                        self._cycle = cycle
                        break
                else:
                    on_stack[v] = False
                    stack.pop()

    def has_cycle(self) -> bool:
        return self._cycle is not None

    def cycle(self) -> Optional[List[DirectedEdge]]:
        """Return the cycle's edges in traversal order, or None."""
        return None if self._cycle is None else list(self._cycle)


class _Order:
    """Accessors shared by both topological-order constructions."""

    def __init__(self, V: int):
        self._V = V
        self._order: Optional[List[int]] = None
        self._rank: List[int] = [-1] * V

    def _set_order(self, order: List[int]) -> None:
        self._order = order
        for i, v in enumerate(order):
            self._rank[v] = i

    def has_order(self) -> bool:
        """Return True if the digraph is acyclic."""
        return self._order is not None

    def is_dag(self) -> bool:
        return self.has_order()

    def order(self) -> Optional[List[int]]:
        """Return the vertices in topological order, or None if there is a cycle."""
        return None if self._order is None else list(self._order)

    def rank(self, v: int) -> int:
        """Return the position of ``v`` in the order, or -1 if there is none."""
        if not 0 <= v < self._V:
            raise IndexError(f"vertex {v} is not between 0 and {self._V - 1}")
        return self._rank[v]


class Topological(_Order):
    """
    Topological order as the reverse postorder of a depth-first search.

    Args:
        G: Digraph or EdgeWeightedDigraph.

    Example:
        >>> from graphclassics import Digraph
        >>> Topological(Digraph(3, [(0, 1), (1, 2), (2, 0)])).has_order()
        False
    """

    def __init__(self, G):
        super().__init__(G.V)
        finder = DirectedCycle(G)
        if not finder.has_cycle():
            self._set_order(DepthFirstOrder(G).reverse_postorder())
        else:
            logger.debug("no topological order: cycle %s", finder.cycle())

        if is_debug_enabled():
            check_topological(G, self)


class TopologicalX(_Order):
    """
    Topological order by Kahn's algorithm (queue of indegree-0 vertices).

    The order exists exactly when every vertex is emitted.

    Args:
        G: Digraph or EdgeWeightedDigraph.
    """

    def __init__(self, G):
        super().__init__(G.V)
        indegree = [G.indegree(v) for v in range(G.V)]
        queue = deque(v for v in range(G.V) if indegree[v] == 0)
        order: List[int] = []
        while queue:
            v = queue.popleft()
            order.append(v)
            for w in neighbors(G, v):
                indegree[w] -= 1
                if indegree[w] == 0:
                    queue.append(w)

        if len(order) == G.V:
            self._set_order(order)
        else:
            logger.debug("no topological order: %d of %d vertices emitted", len(order), G.V)

        if is_debug_enabled():
            check_topological(G, self)


__all__ = [
    "Cycle",
    "DirectedCycle",
    "DirectedCycleX",
    "EdgeWeightedDirectedCycle",
    "Topological",
    "TopologicalX",
]
