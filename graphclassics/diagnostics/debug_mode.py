"""Debug mode switch for graphclassics.

With debug mode on, algorithm constructors certify their own result before
returning and raise ``ValueError`` on the first violated condition:

=============================================  ==============================
Algorithm                                      Check
=============================================  ==============================
DijkstraSP, DijkstraUndirectedSP, AcyclicSP    ``check_shortest_paths``
AcyclicLP                                      ``check_shortest_paths(longest=True)``
BellmanFordSP, FloydWarshall                   ``check_negative_cycle`` when a
                                               cycle is found, otherwise the
                                               path / all-pairs check
LazyPrimMST, PrimMST, KruskalMST, BoruvkaMST   ``check_mst``
TarjanSCC, KosarajuSharirSCC, GabowSCC         ``check_scc``
Topological, TopologicalX                      ``check_topological``
Cycle, DirectedCycle, DirectedCycleX           ``check_cycle``
Bipartite, BipartiteX                          ``check_bipartite``
Eulerian cycles and paths                      ``check_eulerian``
DepthFirstOrder                                ``check_depth_first_order``
=============================================  ==============================

Several checks are quadratic or worse (``check_scc`` builds a transitive
closure, ``check_mst`` rebuilds a union-find per forest edge), so the mode is
off unless ``GRAPHCLASSICS_DEBUG`` is set to a truthy value or it is switched
on in code.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "GRAPHCLASSICS_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")


def _read_environment() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _read_environment()


def is_debug_enabled() -> bool:
    """Return whether algorithm results are certified on construction."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn result certification on or off for every algorithm built afterwards.

    Objects already constructed are not re-checked.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Certify (or skip certifying) algorithm results inside a ``with`` block.

    The previous setting is restored on exit, also when the block raises,
    for example with a certification failure.

    Example
    -------
    >>> from graphclassics import Digraph, TarjanSCC
    >>> with debug_context(True):
    ...     scc = TarjanSCC(Digraph(3, [(0, 1), (1, 0)]))
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = previous
