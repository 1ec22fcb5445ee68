"""
Graph traversal: depth-first and breadth-first search.

Every depth-first search here keeps an explicit stack of adjacency iterators
instead of recursing, so traversal depth is bounded by memory rather than by
the interpreter's recursion limit. Neighbors are visited in adjacency
(insertion) order.

Works on any container: ``Graph`` and ``Digraph`` as well as the weighted
forms, whose edges are followed to their other endpoint / head.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS), 22.3 (DFS) and 25.2 (transitive closure).
"""

import math
from collections import deque
from typing import Iterable, List, Optional, Union

import numpy as np

from .core import neighbors
from .diagnostics import check_depth_first_order, is_debug_enabled
from .logging import get_logger
from .utils import as_sources, vertex_path

logger = get_logger(__name__)


def explore(G, s: int, marked: List[bool], edge_to: Optional[List[Optional[int]]] = None) -> List[int]:
    """
    Mark every unmarked vertex reachable from ``s`` in depth-first order.

    Returns:
        The newly marked vertices in discovery order.
    """
    marked[s] = True
    reached = [s]
    stack: List[tuple] = [(s, neighbors(G, s))]
    while stack:
        v, it = stack[-1]
        for w in it:
            if not marked[w]:
                marked[w] = True
                reached.append(w)
                if edge_to is not None:
                    edge_to[w] = v
                stack.append((w, neighbors(G, w)))
                break
        else:
            stack.pop()
    return reached


class DepthFirstSearch:
    """
    Vertices connected to (reachable from) a source vertex.

    Pops a vertex, marks it and pushes its unmarked neighbors.

    Args:
        G: Graph or Digraph.
        s: Source vertex.

    Raises:
        IndexError: If ``s`` is outside ``[0, V)``.

    Complexity: O(V + E) time, O(V + E) stack in the worst case.
    """

    def __init__(self, G, s: int):
        G.validate_vertex(s)
        self._marked = [False] * G.V
        self._count = 0

        stack = [s]
        while stack:
            v = stack.pop()
            if self._marked[v]:
                continue
            self._marked[v] = True
            self._count += 1
            for w in neighbors(G, v):
                if not self._marked[w]:
                    stack.append(w)

    def marked(self, v: int) -> bool:
        """Return True if ``v`` is connected to the source."""
        if not 0 <= v < len(self._marked):
            raise IndexError(f"vertex {v} is not between 0 and {len(self._marked) - 1}")
        return self._marked[v]

    def count(self) -> int:
        """Return the number of vertices connected to the source."""
        return self._count


class NonrecursiveDFS(DepthFirstSearch):
    """
    Depth-first search over a stack of lazy adjacency iterators.

    Same surface as :class:`DepthFirstSearch`, but vertices are marked in the
    exact order a recursive search would discover them.
    """

    def __init__(self, G, s: int):
        G.validate_vertex(s)
        self._marked = [False] * G.V
        self._count = len(explore(G, s, self._marked))


class DepthFirstPaths:
    """
    Paths from a source vertex along the depth-first search tree.

    Args:
        G: Graph or Digraph.
        s: Source vertex.

    Example:
        >>> from graphclassics import Graph
        >>> dfp = DepthFirstPaths(Graph(4, [(0, 1), (1, 2)]), 0)
        >>> dfp.path_to(2), dfp.path_to(3)
        ([0, 1, 2], None)
    """

    def __init__(self, G, s: int):
        G.validate_vertex(s)
        self._s = s
        self._marked = [False] * G.V
        self._edge_to: List[Optional[int]] = [None] * G.V
        explore(G, s, self._marked, self._edge_to)

    def _validate(self, v: int) -> None:
        if not 0 <= v < len(self._marked):
            raise IndexError(f"vertex {v} is not between 0 and {len(self._marked) - 1}")

    def has_path_to(self, v: int) -> bool:
        self._validate(v)
        return self._marked[v]

    def path_to(self, v: int) -> Optional[List[int]]:
        """Return the vertices of the tree path from the source to ``v``, or None."""
        if not self.has_path_to(v):
            return None
        return vertex_path(self._edge_to, lambda x: x == self._s, v)


class BreadthFirstPaths:
    """
    Shortest (fewest-edge) paths from one or more sources.

    Works for both Graph and Digraph. With several sources, ``dist_to(v)`` is
    the distance to the nearest of them.

    Args:
        G: Graph or Digraph.
        sources: A single source vertex or an iterable of them.

    Raises:
        IndexError: If a source is outside ``[0, V)``.
        ValueError: If ``sources`` is an empty iterable.

    Complexity: O(V + E).

    Example:
        >>> from graphclassics import Digraph
        >>> bfs = BreadthFirstPaths(Digraph(3, [(0, 1), (1, 2), (0, 2)]), 0)
        >>> bfs.dist_to(2), bfs.path_to(2)
        (1, [0, 2])
    """

    def __init__(self, G, sources: Union[int, Iterable[int]]):
        self._sources = as_sources(G.V, sources)
        self._dist_to: List[float] = [math.inf] * G.V
        self._edge_to: List[Optional[int]] = [None] * G.V

        # Initialize all sources at distance 0
        queue = deque()
        for s in self._sources:
            if self._dist_to[s] != 0:
                self._dist_to[s] = 0
                queue.append(s)

        while queue:
            v = queue.popleft()
            for w in neighbors(G, v):
                if self._dist_to[w] == math.inf:
                    self._edge_to[w] = v
                    self._dist_to[w] = self._dist_to[v] + 1
                    queue.append(w)

    def _validate(self, v: int) -> None:
        if not 0 <= v < len(self._dist_to):
            raise IndexError(f"vertex {v} is not between 0 and {len(self._dist_to) - 1}")

    def has_path_to(self, v: int) -> bool:
        self._validate(v)
        return self._dist_to[v] != math.inf

    def dist_to(self, v: int) -> float:
        """Return the number of edges on a shortest path, or ``math.inf``."""
        self._validate(v)
        return self._dist_to[v]

    def path_to(self, v: int) -> Optional[List[int]]:
        """Return the vertices of a shortest path from a source to ``v``, or None."""
        if not self.has_path_to(v):
            return None
        return vertex_path(self._edge_to, lambda x: self._dist_to[x] == 0, v)


class DirectedDFS:
    """
    Vertices reachable from one or more sources in a digraph.

    Args:
        G: Digraph (or EdgeWeightedDigraph).
        sources: A single source vertex or an iterable of them.
    """

    def __init__(self, G, sources: Union[int, Iterable[int]]):
        self._marked = [False] * G.V
        self._count = 0
        for s in as_sources(G.V, sources):
            if not self._marked[s]:
                self._count += len(explore(G, s, self._marked))

    def marked(self, v: int) -> bool:
        """Return True if ``v`` is reachable from a source."""
        if not 0 <= v < len(self._marked):
            raise IndexError(f"vertex {v} is not between 0 and {len(self._marked) - 1}")
        return self._marked[v]

    def count(self) -> int:
        return self._count


class DepthFirstOrder:
    """
    Preorder, postorder and reverse postorder of a depth-first search.

    The search restarts from every unmarked vertex in increasing order, so all
    ``V`` vertices are numbered.

    Args:
        G: Digraph or EdgeWeightedDigraph.

    Complexity: O(V + E).
    """

    def __init__(self, G):
        V = G.V
        self._pre = [0] * V
        self._post = [0] * V
        self._preorder: List[int] = []
        self._postorder: List[int] = []
        marked = [False] * V

        for root in range(V):
            if marked[root]:
                continue
            marked[root] = True
            self._visit_pre(root)
            stack: List[tuple] = [(root, neighbors(G, root))]
            while stack:
                v, it = stack[-1]
                for w in it:
                    if not marked[w]:
                        marked[w] = True
                        self._visit_pre(w)
                        stack.append((w, neighbors(G, w)))
                        break
                else:
                    stack.pop()
                    self._post[v] = len(self._postorder)
                    self._postorder.append(v)

        if is_debug_enabled():
            check_depth_first_order(self)

    def _visit_pre(self, v: int) -> None:
        self._pre[v] = len(self._preorder)
        self._preorder.append(v)

    def _validate(self, v: int) -> None:
        if not 0 <= v < len(self._pre):
            raise IndexError(f"vertex {v} is not between 0 and {len(self._pre) - 1}")

    def pre(self, v: int) -> int:
        """Return the preorder number of ``v``."""
        self._validate(v)
        return self._pre[v]

    def post(self, v: int) -> int:
        """Return the postorder number of ``v``."""
        self._validate(v)
        return self._post[v]

    def preorder(self) -> List[int]:
        return list(self._preorder)

    def postorder(self) -> List[int]:
        return list(self._postorder)

    def reverse_postorder(self) -> List[int]:
        return self._postorder[::-1]


class TransitiveClosure:
    """
    All-pairs reachability of a digraph.

    Runs a depth-first search from every vertex into a boolean ``V x V`` numpy
    matrix, so ``reachable(v, w)`` is a single lookup afterwards.

    Args:
        G: Digraph or EdgeWeightedDigraph.

    Complexity: O(V (V + E)) time, O(V^2) space.

    Example:
        >>> from graphclassics import Digraph
        >>> tc = TransitiveClosure(Digraph(3, [(0, 1), (1, 2)]))
        >>> tc.reachable(0, 2), tc.reachable(2, 0)
        (True, False)
    """

    def __init__(self, G):
        V = G.V
        self._matrix = np.zeros((V, V), dtype=bool)
        for v in range(V):
            marked = [False] * V
            explore(G, v, marked)
            self._matrix[v] = marked
        logger.debug("transitive closure of %d vertices has %d pairs", V, int(self._matrix.sum()))

    def reachable(self, v: int, w: int) -> bool:
        """Return True if there is a directed path from ``v`` to ``w``."""
        V = self._matrix.shape[0]
        for x in (v, w):
            if not 0 <= x < V:
                raise IndexError(f"vertex {x} is not between 0 and {V - 1}")
        return bool(self._matrix[v, w])

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the reachability matrix."""
        view = self._matrix.view()
        view.flags.writeable = False
        return view


__all__ = [
    "DepthFirstSearch",
    "NonrecursiveDFS",
    "DepthFirstPaths",
    "BreadthFirstPaths",
    "DirectedDFS",
    "DepthFirstOrder",
    "TransitiveClosure",
]
