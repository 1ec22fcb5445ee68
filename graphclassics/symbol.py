"""
Symbol graphs: graphs whose vertices are named by strings.

Each input line is split on a delimiter; the first name on a line is joined
to every other name on it. Names are indexed in order of first appearance,
so the graph is built in two passes over the lines.
"""

from typing import Dict, Iterable, List, Optional

from .core import Digraph, Graph
from .logging import get_logger
from .traversal import BreadthFirstPaths

logger = get_logger(__name__)


class _SymbolIndex:
    def __init__(self, lines: Iterable[str], delimiter: str, graph_type):
        rows = [[name for name in line.rstrip("\r\n").split(delimiter) if name] for line in lines]

        # First pass: assign indices in order of first appearance
        self._index: Dict[str, int] = {}
        for row in rows:
            for name in row:
                if name not in self._index:
                    self._index[name] = len(self._index)
        self._keys: List[str] = list(self._index)

        # Second pass: connect the first name on each line to the rest
        self._graph = graph_type(len(self._keys))
        for row in rows:
            if not row:
                continue
            v = self._index[row[0]]
            for name in row[1:]:
                self._graph.add_edge(v, self._index[name])

        logger.debug("symbol graph with %d names and %d edges", self._graph.V, self._graph.E)

    def contains(self, name: str) -> bool:
        """Return True if ``name`` is a vertex name."""
        return name in self._index

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def index_of(self, name: str) -> int:
        """
        Return the vertex index of ``name``.

        Raises:
            KeyError: If ``name`` does not appear in the input.
        """
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"{name!r} is not a vertex name") from None

    def name_of(self, v: int) -> str:
        """Return the name of vertex ``v``."""
        self._graph.validate_vertex(v)
        return self._keys[v]


class SymbolGraph(_SymbolIndex):
    """
    Undirected graph over string names.

    Args:
        lines: Text lines, e.g. ``"movie/actor/actor"``.
        delimiter: Separator between names on a line. Empty fields are
            dropped.

    Example:
        >>> sg = SymbolGraph(["JFK ORD", "ORD DEN"], " ")
        >>> sg.graph.V, sg.index_of("DEN")
        (3, 2)
    """

    def __init__(self, lines: Iterable[str], delimiter: str = " "):
        super().__init__(lines, delimiter, Graph)

    @property
    def graph(self) -> Graph:
        return self._graph


class SymbolDigraph(_SymbolIndex):
    """
    Digraph over string names: the first name on a line points to the others.

    Args:
        lines: Text lines.
        delimiter: Separator between names on a line.
    """

    def __init__(self, lines: Iterable[str], delimiter: str = " "):
        super().__init__(lines, delimiter, Digraph)

    @property
    def graph(self) -> Digraph:
        return self._graph


def degrees_of_separation(
    lines: Iterable[str], delimiter: str, source: str, sink: str
) -> Optional[List[str]]:
    """
    Find a shortest chain of names linking ``source`` to ``sink``.

    Args:
        lines: Symbol-graph input lines.
        delimiter: Separator between names on a line.
        source: Starting name.
        sink: Target name.

    Returns:
        Names from ``source`` to ``sink`` inclusive, or None when ``sink`` is
        unknown or not connected to ``source``.

    Raises:
        KeyError: If ``source`` is not a vertex name.

    Example:
        >>> lines = ["Movie A/Kevin/Ann", "Movie B/Ann/Bob"]
        >>> degrees_of_separation(lines, "/", "Kevin", "Bob")
        ['Kevin', 'Movie A', 'Ann', 'Movie B', 'Bob']
    """
    sg = SymbolGraph(lines, delimiter)
    bfs = BreadthFirstPaths(sg.graph, sg.index_of(source))
    if not sg.contains(sink):
        return None
    path = bfs.path_to(sg.index_of(sink))
    if path is None:
        return None
    return [sg.name_of(v) for v in path]


__all__ = ["SymbolGraph", "SymbolDigraph", "degrees_of_separation"]
