"""
Supporting data structures and helpers for the graph algorithms.

Provides:
- UnionFind: disjoint sets over ``0 .. n-1`` (Kruskal, Boruvka, MST checks).
- IndexMinPQ: indexed min-priority queue with decrease-key (Dijkstra, Prim).
- Path reconstruction from ``edge_to`` / ``parent`` arrays.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 6.5 (priority queues) and 21.3 (disjoint-set forests).
"""

import heapq
from numbers import Integral
from typing import Iterable, List, Optional, Sequence, Tuple, Union


class UnionFind:
    """
    Union-Find (Disjoint Set) over the integers ``0 .. n-1``.

    Uses path compression and union by rank.

    Args:
        n: Number of elements.

    Raises:
        ValueError: If ``n`` is negative.

    Example:
        >>> uf = UnionFind(3)
        >>> uf.union(0, 2)
        True
        >>> uf.connected(0, 2), uf.count
        (True, 2)
    """

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"Number of elements must be nonnegative, got {n}")
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self.count = n

    def _validate(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise IndexError(f"element {x} is not between 0 and {len(self.parent) - 1}")

    def find(self, x: int) -> int:
        """
        Find the root of ``x``, compressing the path behind it.

        Raises:
            IndexError: If ``x`` is outside ``[0, n)``.
        """
        self._validate(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def connected(self, x: int, y: int) -> bool:
        """Return True if ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing ``x`` and ``y``.

        Returns:
            True if a merge happened, False if they were already joined.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        # Union by rank
        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        self.count -= 1
        return True


class IndexMinPQ:
    """
    Indexed min-priority queue over the indices ``0 .. capacity-1``.

    Each index carries one key. ``decrease_key`` pushes a fresh heap entry and
    the superseded one is skipped when it surfaces, so every operation is
    O(log n) amortized on top of :mod:`heapq`. Equal keys come out in
    increasing index order.

    Args:
        capacity: Number of valid indices.

    Example:
        >>> pq = IndexMinPQ(4)
        >>> pq.insert(2, 5.0)
        >>> pq.insert(3, 1.0)
        >>> pq.decrease_key(2, 0.5)
        >>> pq.del_min()
        2
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"Capacity must be nonnegative, got {capacity}")
        self._capacity = capacity
        self._keys: dict = {}
        self._heap: List[Tuple[float, int]] = []

    def _validate(self, i: int) -> None:
        if not 0 <= i < self._capacity:
            raise IndexError(f"index {i} is not between 0 and {self._capacity - 1}")

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, i: int) -> bool:
        return i in self._keys

    def is_empty(self) -> bool:
        return not self._keys

    def key_of(self, i: int) -> float:
        """Return the key currently associated with ``i``."""
        self._validate(i)
        if i not in self._keys:
            raise KeyError(f"index {i} is not in the priority queue")
        return self._keys[i]

    def insert(self, i: int, key: float) -> None:
        """
        Associate ``key`` with index ``i``.

        Raises:
            ValueError: If ``i`` is already in the queue.
        """
        self._validate(i)
        if i in self._keys:
            raise ValueError(f"index {i} is already in the priority queue")
        self._keys[i] = key
        heapq.heappush(self._heap, (key, i))

    def decrease_key(self, i: int, key: float) -> None:
        """
        Lower the key of index ``i``.

        Raises:
            KeyError: If ``i`` is not in the queue.
            ValueError: If ``key`` is not strictly below the current key.
        """
        current = self.key_of(i)
        if key >= current:
            raise ValueError(f"new key {key} does not decrease current key {current}")
        self._keys[i] = key
        heapq.heappush(self._heap, (key, i))

    def _discard_stale(self) -> None:
        while self._heap:
            key, i = self._heap[0]
            if self._keys.get(i) == key:
                return
            heapq.heappop(self._heap)

    def min_index(self) -> int:
        if not self._keys:
            raise IndexError("priority queue underflow")
        self._discard_stale()
        return self._heap[0][1]

    def del_min(self) -> int:
        """
        Remove the index with the smallest key and return it.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._keys:
            raise IndexError("priority queue underflow")
        self._discard_stale()
        _, i = heapq.heappop(self._heap)
        del self._keys[i]
        return i


def as_sources(V: int, sources: Union[int, Iterable[int]]) -> List[int]:
    """
    Normalize a single source or an iterable of sources to a validated list.

    Raises:
        ValueError: If the iterable is empty.
        IndexError: If a source is outside ``[0, V)``.
    """
    if isinstance(sources, Integral):
        vertices = [int(sources)]
    else:
        vertices = list(sources)
        if not vertices:
            raise ValueError("zero source vertices")
    for s in vertices:
        if not 0 <= s < V:
            raise IndexError(f"vertex {s} is not between 0 and {V - 1}")
    return vertices


def vertex_path(parent: Sequence[Optional[int]], source_test, v: int) -> List[int]:
    """
    Walk ``parent`` back from ``v`` to a vertex accepted by ``source_test``.

    Args:
        parent: Predecessor array (``None`` or self for roots).
        source_test: Callable that returns True for path origins.
        v: Target vertex, assumed reachable.

    Returns:
        Vertices from the origin to ``v`` inclusive.
    """
    path = [v]
    x = v
    while not source_test(x):
        x = parent[x]
        path.append(x)
    path.reverse()
    return path


def directed_edge_path(edge_to: Sequence, v: int) -> list:
    """Return the DirectedEdge chain ending at ``v``, first edge first."""
    path = []
    e = edge_to[v]
    while e is not None:
        path.append(e)
        e = edge_to[e.from_()]
    path.reverse()
    return path


def undirected_edge_path(edge_to: Sequence, v: int) -> list:
    """Return the WeightedEdge chain ending at ``v``, first edge first."""
    path = []
    x = v
    e = edge_to[x]
    while e is not None:
        path.append(e)
        x = e.other(x)
        e = edge_to[x]
    path.reverse()
    return path


__all__ = [
    "UnionFind",
    "IndexMinPQ",
    "as_sources",
    "vertex_path",
    "directed_edge_path",
    "undirected_edge_path",
]
