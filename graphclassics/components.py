"""
Connectivity: connected components, bipartiteness, strongly connected components.

All searches use explicit stacks or queues. The three SCC algorithms share
the :class:`StronglyConnectedComponents` interface and always produce the same
partition; ``id(v)`` is the vertex that closed the component, which can differ
between algorithms, so compare partitions with ``strongly_connected``.

References:
    - Tarjan, R. "Depth-first search and linear graph algorithms" (1972).
    - Sharir, M. "A strong-connectivity algorithm and its applications in
      data flow analysis" (1981).
    - Gabow, H. "Path-based depth-first search for strong and biconnected
      components" (2000).
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import List, Optional

from .core import neighbors
from .diagnostics import check_bipartite, check_scc, is_debug_enabled
from .logging import get_logger
from .traversal import DepthFirstOrder, explore

logger = get_logger(__name__)


def _check_index(v: int, V: int) -> None:
    if not 0 <= v < V:
        raise IndexError(f"vertex {v} is not between 0 and {V - 1}")


class CC:
    """
    Connected components of an undirected graph.

    Components are discovered by scanning vertices in increasing order, so
    ``id(v)`` is the lowest-index vertex of the component containing ``v``.

    Args:
        G: Graph or EdgeWeightedGraph.

    Complexity: O(V + E) preprocessing, O(1) per query.

    Example:
        >>> from graphclassics import Graph
        >>> cc = CC(Graph(5, [(0, 1), (1, 2), (3, 4)]))
        >>> cc.count(), cc.id(2), cc.size(4)
        (2, 0, 2)
    """

    def __init__(self, G):
        self._V = G.V
        self._id: List[int] = [-1] * G.V
        self._size: List[int] = [0] * G.V
        self._components: List[List[int]] = []
        marked = [False] * G.V

        for s in range(G.V):
            if marked[s]:
                continue
            members = explore(G, s, marked)
            for v in members:
                self._id[v] = s
            self._size[s] = len(members)
            self._components.append(members)

        logger.debug("found %d connected components over %d vertices", len(self._components), G.V)

    def id(self, v: int) -> int:
        """Return the representative (lowest-index vertex) of ``v``'s component."""
        _check_index(v, self._V)
        return self._id[v]

    def size(self, v: int) -> int:
        """Return the number of vertices in ``v``'s component."""
        _check_index(v, self._V)
        return self._size[self._id[v]]

    def count(self) -> int:
        return len(self._components)

    def connected(self, v: int, w: int) -> bool:
        """Return True if ``v`` and ``w`` are in the same component."""
        return self.id(v) == self.id(w)

    def components(self) -> List[List[int]]:
        """Return the vertex list of each component in discovery order."""
        return [list(c) for c in self._components]


class _Bipartition:
    """Shared accessors for the DFS and BFS bipartiteness tests."""

    def __init__(self, G):
        self._V = G.V
        self._color: List[bool] = [False] * G.V
        self._marked: List[bool] = [False] * G.V
        self._edge_to: List[Optional[int]] = [None] * G.V
        self._cycle: Optional[List[int]] = None

    def is_bipartite(self) -> bool:
        return self._cycle is None

    def color(self, v: int) -> bool:
        """
        Return the side of the bipartition containing ``v``.

        Raises:
            RuntimeError: If the graph is not bipartite.
        """
        _check_index(v, self._V)
        if not self.is_bipartite():
            raise RuntimeError("graph is not bipartite")
        return self._color[v]

    def odd_cycle(self) -> Optional[List[int]]:
        """Return an odd-length cycle (first vertex repeated at the end), or None."""
        return None if self._cycle is None else list(self._cycle)


class Bipartite(_Bipartition):
    """
    Two-coloring of an undirected graph by depth-first search.

    Stops at the first edge joining two vertices of the same color and
    records the odd cycle it closes.

    Args:
        G: Graph.
    """

    def __init__(self, G):
        super().__init__(G)
        for s in range(G.V):
            if not self._marked[s]:
                self._search(G, s)
                if self._cycle is not None:
                    break

        logger.debug("bipartite: %s", self.is_bipartite())
        if is_debug_enabled():
            check_bipartite(G, self)

    def _search(self, G, s: int) -> None:
        self._marked[s] = True
        stack = [(s, iter(G.adj(s)))]
        while stack:
            v, it = stack[-1]
            for w in it:
                if not self._marked[w]:
                    self._marked[w] = True
                    self._edge_to[w] = v
                    self._color[w] = not self._color[v]
                    stack.append((w, iter(G.adj(w))))
                    break
                if self._color[w] == self._color[v]:
                    # w is an ancestor of v (or v itself for a self-loop)
                    cycle = [w]
                    x = v
                    while x != w:
                        cycle.append(x)
                        x = self._edge_to[x]
                    cycle.append(w)
                    self._cycle = cycle
                    return
            else:
                stack.pop()


class BipartiteX(_Bipartition):
    """
    Two-coloring of an undirected graph by breadth-first search.

    On a conflict both endpoints sit at the same depth, so the odd cycle is
    traced by walking both up the BFS tree to their common ancestor.

    Args:
        G: Graph.
    """

    def __init__(self, G):
        super().__init__(G)
        for s in range(G.V):
            if not self._marked[s]:
                self._search(G, s)
                if self._cycle is not None:
                    break

        logger.debug("bipartite: %s", self.is_bipartite())
        if is_debug_enabled():
            check_bipartite(G, self)

    def _search(self, G, s: int) -> None:
        self._marked[s] = True
        queue = deque([s])
        while queue:
            v = queue.popleft()
            for w in G.adj(v):
                if not self._marked[w]:
                    self._marked[w] = True
                    self._edge_to[w] = v
                    self._color[w] = not self._color[v]
                    queue.append(w)
                elif self._color[w] == self._color[v]:
                    from_v: List[int] = []
                    from_w: List[int] = []
                    x, y = v, w
                    while x != y:
                        from_v.append(x)
                        from_w.append(y)
                        x = self._edge_to[x]
                        y = self._edge_to[y]
                    from_v.append(x)
                    self._cycle = from_v + from_w[::-1] + [v]
                    return


class StronglyConnectedComponents(ABC):
    """
    Strongly connected components of a digraph.

    Subclasses run their search in :meth:`_compute` and report each finished
    component through :meth:`_close`.

    Args:
        G: Digraph or EdgeWeightedDigraph.
    """

    def __init__(self, G):
        self._V = G.V
        self._id: List[int] = [-1] * G.V
        self._components: List[List[int]] = []
        self._compute(G)

        logger.debug(
            "%s found %d strongly connected components", type(self).__name__, len(self._components)
        )
        if is_debug_enabled():
            check_scc(G, self)

    @abstractmethod
    def _compute(self, G) -> None:
        """Run the search, calling ``_close`` once per component."""

    def _close(self, members: List[int], representative: int) -> None:
        for v in members:
            self._id[v] = representative
        self._components.append(members)

    def count(self) -> int:
        """Return the number of strongly connected components."""
        return len(self._components)

    def id(self, v: int) -> int:
        """Return the representative vertex of ``v``'s component."""
        _check_index(v, self._V)
        return self._id[v]

    def strongly_connected(self, v: int, w: int) -> bool:
        """Return True if ``v`` and ``w`` are mutually reachable."""
        return self.id(v) == self.id(w)

    def components(self) -> List[List[int]]:
        """Return the vertex list of each component, in the order they closed."""
        return [list(c) for c in self._components]


class TarjanSCC(StronglyConnectedComponents):
    """
    Tarjan's algorithm: one depth-first search with low-link values.

    A vertex closes a component when its low-link equals its own preorder
    number; the component is then popped off the vertex stack. Closed vertices
    get low-link ``V`` so later cross edges into them are ignored.

    Complexity: O(V + E).
    """

    def _compute(self, G) -> None:
        V = G.V
        pre = [-1] * V
        low = [0] * V
        counter = 0
        stack: List[int] = []

        for root in range(V):
            if pre[root] != -1:
                continue
            pre[root] = low[root] = counter
            counter += 1
            stack.append(root)
            calls = [(root, neighbors(G, root))]
            while calls:
                v, it = calls[-1]
                descended = False
                for w in it:
                    if pre[w] == -1:
                        pre[w] = low[w] = counter
                        counter += 1
                        stack.append(w)
                        calls.append((w, neighbors(G, w)))
                        descended = True
                        break
                    low[v] = min(low[v], low[w])
                if descended:
                    continue

                calls.pop()
                if low[v] == pre[v]:
                    members = []
                    while True:
                        x = stack.pop()
                        low[x] = V
                        members.append(x)
                        if x == v:
                            break
                    self._close(members, v)
                if calls:
                    parent = calls[-1][0]
                    low[parent] = min(low[parent], low[v])


class KosarajuSharirSCC(StronglyConnectedComponents):
    """
    Kosaraju-Sharir: two depth-first searches.

    The first computes a reverse postorder of the reversed digraph; the second
    searches the original digraph in that order, and each search tree is one
    component.

    Complexity: O(V + E).
    """

    def _compute(self, G) -> None:
        order = DepthFirstOrder(G.reverse()).reverse_postorder()
        marked = [False] * G.V
        for s in order:
            if not marked[s]:
                self._close(explore(G, s, marked), s)


class GabowSCC(StronglyConnectedComponents):
    """
    Gabow's path-based algorithm: one depth-first search with two stacks.

    The second stack holds the boundaries of the current path; an edge into a
    vertex of an unfinished component pops boundaries above it, collapsing a
    loop. A vertex still on top of the boundary stack when it finishes closes
    a component.

    Complexity: O(V + E).
    """

    def _compute(self, G) -> None:
        V = G.V
        pre = [-1] * V
        counter = 0
        stack1: List[int] = []
        stack2: List[int] = []

        for root in range(V):
            if pre[root] != -1:
                continue
            pre[root] = counter
            counter += 1
            stack1.append(root)
            stack2.append(root)
            calls = [(root, neighbors(G, root))]
            while calls:
                v, it = calls[-1]
                for w in it:
                    if pre[w] == -1:
                        pre[w] = counter
                        counter += 1
                        stack1.append(w)
                        stack2.append(w)
                        calls.append((w, neighbors(G, w)))
                        break
                    if self._id[w] == -1:
                        while pre[stack2[-1]] > pre[w]:
                            stack2.pop()
                else:
                    calls.pop()
                    if stack2[-1] == v:
                        stack2.pop()
                        members = []
                        while True:
                            x = stack1.pop()
                            members.append(x)
                            if x == v:
                                break
                        self._close(members, v)


_SCC_ALGORITHMS = {
    "tarjan": TarjanSCC,
    "kosaraju": KosarajuSharirSCC,
    "gabow": GabowSCC,
}


def strongly_connected_components(G, algorithm: str = "tarjan") -> StronglyConnectedComponents:
    """
    Compute strongly connected components with the named algorithm.

    Args:
        G: Digraph or EdgeWeightedDigraph.
        algorithm: One of ``"tarjan"``, ``"kosaraju"``, ``"gabow"``.

    Raises:
        ValueError: For an unknown algorithm name.
    """
    try:
        cls = _SCC_ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown SCC algorithm {algorithm!r}; expected one of {sorted(_SCC_ALGORITHMS)}"
        ) from None
    return cls(G)


__all__ = [
    "CC",
    "Bipartite",
    "BipartiteX",
    "StronglyConnectedComponents",
    "TarjanSCC",
    "KosarajuSharirSCC",
    "GabowSCC",
    "strongly_connected_components",
]
