"""
Core graph containers.

Provides five adjacency representations over the dense vertex set
``0 .. V-1``:

- Graph: undirected, unweighted (adjacency lists of ints).
- Digraph: directed, unweighted (adjacency lists of ints + indegree counters).
- EdgeWeightedGraph: undirected, lists of WeightedEdge shared by both endpoints.
- EdgeWeightedDigraph: directed, lists of DirectedEdge.
- AdjMatrixEdgeWeightedDigraph: dense V x V matrix of DirectedEdge slots.

``V`` is fixed at construction; ``add_edge`` is the only mutator. Adjacency is
kept in insertion order. Parallel edges and self-loops are permitted except in
the matrix form, which keeps the first edge between an ordered pair.

Complexity:
    - add_edge: O(1)
    - adj(v): O(1) to obtain, O(deg(v)) to iterate (O(V) for the matrix form)
    - degree / outdegree / indegree: O(1)
    - edges(): O(V + E)
"""

from collections.abc import Sequence
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .edges import DirectedEdge, WeightedEdge


class AdjacencyView(Sequence):
    """Read-only, restartable view over one vertex's adjacency list."""

    __slots__ = ("_items",)

    def __init__(self, items: list):
        self._items = items

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"AdjacencyView({self._items!r})"


class _VertexIndexed:
    """Shared vertex-count bookkeeping for all containers."""

    def __init__(self, V: int):
        if V < 0:
            raise ValueError(f"Number of vertices must be nonnegative, got {V}")
        self._V = V
        self._E = 0

    @property
    def V(self) -> int:
        """Number of vertices."""
        return self._V

    @property
    def E(self) -> int:
        """Number of edges."""
        return self._E

    def validate_vertex(self, v: int) -> None:
        """
        Check that ``v`` names a vertex of this graph.

        Raises:
            IndexError: Unless ``0 <= v < V``.
        """
        if not 0 <= v < self._V:
            raise IndexError(f"vertex {v} is not between 0 and {self._V - 1}")

    def vertices(self) -> range:
        """Return the vertex range ``0 .. V-1``."""
        return range(self._V)

    def _format(self, rows: Iterable[Iterable[object]], sep: str) -> str:
        lines = [f"{self._V} {self._E}"]
        for v, row in zip(range(self._V), rows):
            lines.append(f"{v}: " + sep.join(str(x) for x in row))
        return "\n".join(lines) + "\n"


class Graph(_VertexIndexed):
    """
    Undirected graph with adjacency-list representation.

    Args:
        V: Number of vertices.
        edges: Optional iterable of ``(v, w)`` pairs (tuples or
            :class:`~graphclassics.edges.UndirectedPair`) added in order.

    Raises:
        ValueError: If ``V`` is negative.
        IndexError: If an edge endpoint is outside ``[0, V)``.

    Example:
        >>> G = Graph(3, [(0, 1), (1, 2)])
        >>> list(G.adj(1))
        [0, 2]
    """

    def __init__(self, V: int, edges: Optional[Iterable[Tuple[int, int]]] = None):
        super().__init__(V)
        self._adj: List[List[int]] = [[] for _ in range(V)]
        if edges is not None:
            for v, w in edges:
                self.add_edge(v, w)

    @classmethod
    def from_digraph(cls, digraph: "Digraph") -> "Graph":
        """Return the underlying undirected graph of a digraph (one edge per arc)."""
        G = cls(digraph.V)
        for v in range(digraph.V):
            for w in digraph.adj(v):
                G.add_edge(v, w)
        return G

    def add_edge(self, v: int, w: int) -> None:
        """
        Add the undirected edge v-w.

        A self-loop ``v-v`` appears twice in ``adj(v)``.
        """
        self.validate_vertex(v)
        self.validate_vertex(w)
        self._E += 1
        self._adj[v].append(w)
        self._adj[w].append(v)

    def adj(self, v: int) -> AdjacencyView:
        """Return the vertices adjacent to ``v`` in insertion order."""
        self.validate_vertex(v)
        return AdjacencyView(self._adj[v])

    def degree(self, v: int) -> int:
        """Return the degree of ``v`` (a self-loop counts twice)."""
        self.validate_vertex(v)
        return len(self._adj[v])

    def edges(self) -> List[Tuple[int, int]]:
        """
        Return each edge once as ``(v, w)`` with ``v <= w``.

        Parallel edges are reported once per copy; each self-loop once.
        """
        result: List[Tuple[int, int]] = []
        for v in range(self._V):
            self_loops = 0
            for w in self._adj[v]:
                if w > v:
                    result.append((v, w))
                elif w == v:
                    # both copies of a self-loop sit in adj[v]
                    if self_loops % 2 == 0:
                        result.append((v, v))
                    self_loops += 1
        return result

    def self_loop(self) -> Optional[int]:
        """Return the first vertex carrying a self-loop, or None."""
        for v in range(self._V):
            if v in self._adj[v]:
                return v
        return None

    def parallel_edge(self) -> Optional[Tuple[int, int]]:
        """Return the first ``(v, w)`` joined by two or more edges, or None."""
        for v in range(self._V):
            seen = set()
            for w in self._adj[v]:
                if w == v:
                    continue
                if w in seen:
                    return (v, w)
                seen.add(w)
        return None

    def is_simple(self) -> bool:
        """Return True if the graph has neither self-loops nor parallel edges."""
        return self.self_loop() is None and self.parallel_edge() is None

    def copy(self) -> "Graph":
        """Return a deep copy with identical adjacency order."""
        G = Graph(self._V)
        G._E = self._E
        G._adj = [list(neighbors) for neighbors in self._adj]
        return G

    def __str__(self) -> str:
        return self._format(self._adj, " ")


class Digraph(_VertexIndexed):
    """
    Directed graph with adjacency-list representation.

    Args:
        V: Number of vertices.
        edges: Optional iterable of ``(v, w)`` arcs added in order.

    Raises:
        ValueError: If ``V`` is negative.
        IndexError: If an endpoint is outside ``[0, V)``.
    """

    def __init__(self, V: int, edges: Optional[Iterable[Tuple[int, int]]] = None):
        super().__init__(V)
        self._adj: List[List[int]] = [[] for _ in range(V)]
        self._indegree: List[int] = [0] * V
        if edges is not None:
            for v, w in edges:
                self.add_edge(v, w)

    def add_edge(self, v: int, w: int) -> None:
        """Add the directed edge v->w."""
        self.validate_vertex(v)
        self.validate_vertex(w)
        self._adj[v].append(w)
        self._indegree[w] += 1
        self._E += 1

    def adj(self, v: int) -> AdjacencyView:
        """Return the heads of the edges leaving ``v`` in insertion order."""
        self.validate_vertex(v)
        return AdjacencyView(self._adj[v])

    def outdegree(self, v: int) -> int:
        self.validate_vertex(v)
        return len(self._adj[v])

    def indegree(self, v: int) -> int:
        self.validate_vertex(v)
        return self._indegree[v]

    def edges(self) -> List[Tuple[int, int]]:
        """Return every arc as ``(v, w)``, grouped by tail."""
        return [(v, w) for v in range(self._V) for w in self._adj[v]]

    def reverse(self) -> "Digraph":
        """Return a new digraph with every edge reversed."""
        R = Digraph(self._V)
        for v in range(self._V):
            for w in self._adj[v]:
                R.add_edge(w, v)
        return R

    def copy(self) -> "Digraph":
        D = Digraph(self._V)
        D._E = self._E
        D._adj = [list(heads) for heads in self._adj]
        D._indegree = list(self._indegree)
        return D

    def __str__(self) -> str:
        return self._format(self._adj, " ")


def _as_weighted_edge(item: Union[WeightedEdge, Tuple[int, int, float]]) -> WeightedEdge:
    if isinstance(item, WeightedEdge):
        return item
    v, w, weight = item
    return WeightedEdge(v, w, weight)


def _as_directed_edge(item: Union[DirectedEdge, Tuple[int, int, float]]) -> DirectedEdge:
    if isinstance(item, DirectedEdge):
        return item
    v, w, weight = item
    return DirectedEdge(v, w, weight)


class EdgeWeightedGraph(_VertexIndexed):
    """
    Edge-weighted undirected graph.

    Each :class:`WeightedEdge` object is stored in the adjacency lists of both
    endpoints (twice in the list of its vertex for a self-loop).

    Args:
        V: Number of vertices.
        edges: Optional iterable of WeightedEdge objects or ``(v, w, weight)``
            tuples.

    Raises:
        ValueError: If ``V`` is negative or a weight is NaN.
        IndexError: If an endpoint is outside ``[0, V)``.

    Example:
        >>> G = EdgeWeightedGraph(3, [(0, 1, 1.0), (1, 2, 2.0)])
        >>> G.E
        2
    """

    def __init__(self, V: int, edges: Optional[Iterable] = None):
        super().__init__(V)
        self._adj: List[List[WeightedEdge]] = [[] for _ in range(V)]
        if edges is not None:
            for item in edges:
                self.add_edge(_as_weighted_edge(item))

    def add_edge(self, e: WeightedEdge) -> None:
        """Add the undirected edge ``e``."""
        v = e.either()
        w = e.other(v)
        self.validate_vertex(v)
        self.validate_vertex(w)
        self._adj[v].append(e)
        self._adj[w].append(e)
        self._E += 1

    def adj(self, v: int) -> AdjacencyView:
        """Return the edges incident to ``v`` in insertion order."""
        self.validate_vertex(v)
        return AdjacencyView(self._adj[v])

    def degree(self, v: int) -> int:
        self.validate_vertex(v)
        return len(self._adj[v])

    def edges(self) -> List[WeightedEdge]:
        """Return each edge object once (one copy per self-loop)."""
        result: List[WeightedEdge] = []
        for v in range(self._V):
            self_loops = 0
            for e in self._adj[v]:
                w = e.other(v)
                if w > v:
                    result.append(e)
                elif w == v:
                    if self_loops % 2 == 0:
                        result.append(e)
                    self_loops += 1
        return result

    def self_loop(self) -> Optional[int]:
        """Return the first vertex carrying a self-loop, or None."""
        for v in range(self._V):
            if any(e.other(v) == v for e in self._adj[v]):
                return v
        return None

    def parallel_edge(self) -> Optional[Tuple[int, int]]:
        """Return the first ``(v, w)`` joined by two or more edges, or None."""
        for v in range(self._V):
            seen = set()
            for e in self._adj[v]:
                w = e.other(v)
                if w == v:
                    continue
                if w in seen:
                    return (v, w)
                seen.add(w)
        return None

    def is_simple(self) -> bool:
        return self.self_loop() is None and self.parallel_edge() is None

    def copy(self) -> "EdgeWeightedGraph":
        G = EdgeWeightedGraph(self._V)
        G._E = self._E
        G._adj = [list(incident) for incident in self._adj]
        return G

    def __str__(self) -> str:
        return self._format(self._adj, "  ")


class EdgeWeightedDigraph(_VertexIndexed):
    """
    Edge-weighted directed graph.

    Args:
        V: Number of vertices.
        edges: Optional iterable of DirectedEdge objects or ``(v, w, weight)``
            tuples.

    Raises:
        ValueError: If ``V`` is negative or a weight is NaN.
        IndexError: If an endpoint is outside ``[0, V)``.
    """

    def __init__(self, V: int, edges: Optional[Iterable] = None):
        super().__init__(V)
        self._adj: List[List[DirectedEdge]] = [[] for _ in range(V)]
        self._indegree: List[int] = [0] * V
        if edges is not None:
            for item in edges:
                self.add_edge(_as_directed_edge(item))

    def add_edge(self, e: DirectedEdge) -> None:
        """Add the directed edge ``e``."""
        v = e.from_()
        w = e.to()
        self.validate_vertex(v)
        self.validate_vertex(w)
        self._adj[v].append(e)
        self._indegree[w] += 1
        self._E += 1

    def adj(self, v: int) -> AdjacencyView:
        """Return the edges leaving ``v`` in insertion order."""
        self.validate_vertex(v)
        return AdjacencyView(self._adj[v])

    def outdegree(self, v: int) -> int:
        self.validate_vertex(v)
        return len(self._adj[v])

    def indegree(self, v: int) -> int:
        self.validate_vertex(v)
        return self._indegree[v]

    def edges(self) -> List[DirectedEdge]:
        return [e for v in range(self._V) for e in self._adj[v]]

    def reverse(self) -> "EdgeWeightedDigraph":
        """Return a new digraph with every edge reversed (same weights)."""
        R = EdgeWeightedDigraph(self._V)
        for e in self.edges():
            R.add_edge(DirectedEdge(e.to(), e.from_(), e.weight))
        return R

    def copy(self) -> "EdgeWeightedDigraph":
        D = EdgeWeightedDigraph(self._V)
        D._E = self._E
        D._adj = [list(out) for out in self._adj]
        D._indegree = list(self._indegree)
        return D

    def __str__(self) -> str:
        return self._format(self._adj, "  ")


class AdjMatrixEdgeWeightedDigraph(_VertexIndexed):
    """
    Edge-weighted digraph stored as a dense V x V matrix of edge slots.

    Parallel edges are disallowed: adding a second edge between the same
    ordered pair is silently ignored. Self-loops are permitted.

    Args:
        V: Number of vertices.
        edges: Optional iterable of DirectedEdge objects or ``(v, w, weight)``
            tuples.

    Complexity:
        O(V^2) space; adj(v) iterates all V columns of row v.
    """

    def __init__(self, V: int, edges: Optional[Iterable] = None):
        super().__init__(V)
        self._matrix: List[List[Optional[DirectedEdge]]] = [[None] * V for _ in range(V)]
        if edges is not None:
            for item in edges:
                self.add_edge(_as_directed_edge(item))

    def add_edge(self, e: DirectedEdge) -> None:
        """Add ``e`` unless an edge ``e.from_() -> e.to()`` already exists."""
        v = e.from_()
        w = e.to()
        self.validate_vertex(v)
        self.validate_vertex(w)
        if self._matrix[v][w] is not None:
            return
        self._matrix[v][w] = e
        self._E += 1

    def edge(self, v: int, w: int) -> Optional[DirectedEdge]:
        """Return the edge v->w, or None."""
        self.validate_vertex(v)
        self.validate_vertex(w)
        return self._matrix[v][w]

    def adj(self, v: int) -> AdjacencyView:
        """Return the edges leaving ``v``, ordered by head vertex."""
        self.validate_vertex(v)
        return AdjacencyView([e for e in self._matrix[v] if e is not None])

    def outdegree(self, v: int) -> int:
        self.validate_vertex(v)
        return sum(1 for e in self._matrix[v] if e is not None)

    def indegree(self, v: int) -> int:
        self.validate_vertex(v)
        return sum(1 for row in self._matrix if row[v] is not None)

    def edges(self) -> List[DirectedEdge]:
        return [e for row in self._matrix for e in row if e is not None]

    def __str__(self) -> str:
        return self._format((self.adj(v) for v in range(self._V)), "  ")


def neighbors(G, v: int) -> Iterator[int]:
    """
    Yield the vertices reached from ``v`` along each entry of ``G.adj(v)``.

    Works uniformly for every container: plain ints are yielded as-is,
    directed edges yield their head and undirected edges their other endpoint.
    """
    for x in G.adj(v):
        if isinstance(x, DirectedEdge):
            yield x.to()
        elif isinstance(x, WeightedEdge):
            yield x.other(v)
        else:
            yield x


__all__ = [
    "neighbors",
    "AdjacencyView",
    "Graph",
    "Digraph",
    "EdgeWeightedGraph",
    "EdgeWeightedDigraph",
    "AdjMatrixEdgeWeightedDigraph",
]
