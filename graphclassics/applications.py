"""
Applications built on the shortest-path algorithms.

- CriticalPathScheduler: parallel precedence-constrained job scheduling by the
  critical path method, reduced to longest paths in a DAG (AcyclicLP).
- Arbitrage: currency arbitrage detection, reduced to finding a negative
  cycle under ``-ln(rate)`` weights (BellmanFordSP).
"""

import math
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .core import EdgeWeightedDigraph
from .edges import DirectedEdge
from .logging import get_logger
from .shortest import AcyclicLP, BellmanFordSP

logger = get_logger(__name__)


class CriticalPathScheduler:
    """
    Critical path method for parallel job scheduling.

    Job ``j`` becomes the edge ``j -> j + n`` weighted by its duration in a
    network with a global source ``2n`` and sink ``2n + 1``. The longest path
    to ``j`` is its earliest start time and the longest path to the sink is
    the makespan.

    Args:
        durations: Duration of each job ``0 .. n-1``.
        precedences: Pairs ``(i, j)`` meaning job ``i`` must finish before
            job ``j`` starts.

    Raises:
        ValueError: If a duration is negative or the precedences are cyclic.
        IndexError: If a precedence names a job outside ``[0, n)``.

    Example:
        >>> cpm = CriticalPathScheduler([3.0, 2.0, 4.0], [(0, 1), (0, 2)])
        >>> cpm.start_time(2), cpm.finish_time()
        (3.0, 7.0)
    """

    def __init__(self, durations: Sequence[float], precedences: Iterable[Tuple[int, int]] = ()):
        n = len(durations)
        for j, d in enumerate(durations):
            if d < 0:
                raise ValueError(f"job {j} has negative duration {d}")

        self._n = n
        self._durations = [float(d) for d in durations]
        self._source = 2 * n
        self._sink = 2 * n + 1

        G = EdgeWeightedDigraph(2 * n + 2)
        for j, d in enumerate(self._durations):
            G.add_edge(DirectedEdge(self._source, j, 0.0))
            G.add_edge(DirectedEdge(j + n, self._sink, 0.0))
            G.add_edge(DirectedEdge(j, j + n, d))
        for i, j in precedences:
            for job in (i, j):
                if not 0 <= job < n:
                    raise IndexError(f"job {job} is not between 0 and {n - 1}")
            G.add_edge(DirectedEdge(i + n, j, 0.0))
        # the empty schedule finishes at time 0
        G.add_edge(DirectedEdge(self._source, self._sink, 0.0))

        self._graph = G
        self._lp = AcyclicLP(G, self._source)
        logger.debug("scheduled %d jobs, finish time %g", n, self.finish_time())

    @property
    def graph(self) -> EdgeWeightedDigraph:
        """The job network."""
        return self._graph

    def start_time(self, j: int) -> float:
        """Return the earliest start time of job ``j``."""
        if not 0 <= j < self._n:
            raise IndexError(f"job {j} is not between 0 and {self._n - 1}")
        return self._lp.dist_to(j)

    def finish_time(self) -> float:
        """Return the earliest time at which every job is done."""
        return self._lp.dist_to(self._sink)

    def schedule(self) -> List[Tuple[int, float, float]]:
        """Return ``(job, start, finish)`` for every job, in job order."""
        return [
            (j, self.start_time(j), self.start_time(j) + self._durations[j])
            for j in range(self._n)
        ]

    def critical_path(self) -> List[int]:
        """Return the jobs on a longest source-to-sink path, in execution order."""
        return [
            e.from_()
            for e in self._lp.path_to(self._sink)
            if e.from_() < self._n and e.to() == e.from_() + self._n
        ]


class Arbitrage:
    """
    Detect an arbitrage opportunity in an exchange-rate table.

    ``rates[v][w]`` is the amount of currency ``w`` one unit of ``v`` buys.
    Each pair ``v != w`` becomes an edge weighted ``-ln(rates[v][w])``, so a
    cycle whose rates multiply to more than 1 is a negative cycle.

    Args:
        rates: Square matrix of positive exchange rates.
        currencies: Optional names used by :meth:`describe`.
        source: Currency to search from.

    Raises:
        ValueError: If ``rates`` is not square or has a non-positive entry.

    Example:
        >>> arb = Arbitrage([[1.0, 0.9], [1.2, 1.0]])
        >>> arb.has_opportunity(), round(arb.stake_multiplier(), 2)
        (True, 1.08)
    """

    def __init__(
        self,
        rates,
        currencies: Optional[Sequence[str]] = None,
        source: int = 0,
    ):
        table = np.asarray(rates, dtype=float)
        if table.ndim != 2 or table.shape[0] != table.shape[1]:
            raise ValueError(f"rates must be a square matrix, got shape {table.shape}")
        if not np.all(table > 0):
            raise ValueError("exchange rates must be positive")
        V = table.shape[0]
        if currencies is not None and len(currencies) != V:
            raise ValueError(f"expected {V} currency names, got {len(currencies)}")

        self._V = V
        self._currencies = list(currencies) if currencies is not None else None
        G = EdgeWeightedDigraph(V)
        for v in range(V):
            for w in range(V):
                if v != w:
                    G.add_edge(DirectedEdge(v, w, -math.log(table[v, w])))
        self._spt = BellmanFordSP(G, source)

    def has_opportunity(self) -> bool:
        return self._spt.has_negative_cycle()

    def cycle(self) -> Optional[List[DirectedEdge]]:
        """Return the trades of an arbitrage cycle as edges, or None."""
        return self._spt.negative_cycle()

    def stake_multiplier(self) -> float:
        """Return the factor a stake grows by around the cycle (1.0 if none)."""
        cycle = self.cycle()
        if cycle is None:
            return 1.0
        return math.exp(-sum(e.weight for e in cycle))

    def describe(self) -> List[str]:
        """Return one line per trade, ``"<stake> <from> = <stake'> <to>"``."""
        cycle = self.cycle()
        if cycle is None:
            return []
        names = self._currencies or [str(v) for v in range(self._V)]
        stake = 1000.0
        lines = []
        for e in cycle:
            after = stake * math.exp(-e.weight)
            lines.append(f"{stake:10.5f} {names[e.from_()]} = {after:10.5f} {names[e.to()]}")
            stake = after
        return lines


__all__ = ["CriticalPathScheduler", "Arbitrage"]
