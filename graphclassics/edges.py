"""
Edge value types.

Four immutable records cover the shapes used by the containers:

- UndirectedPair: unweighted ``{v, w}``, order-independent.
- DirectedPair: unweighted ``(v, w)``, tail then head.
- WeightedEdge: undirected ``{v, w}`` with a weight.
- DirectedEdge: ``v -> w`` with a weight.

Unweighted pairs compare and hash by endpoints, so they can be collected in
sets to reject duplicate candidates. Weighted edges compare by weight and keep
identity equality, so two parallel edges of equal weight remain distinct.
"""

import math
from dataclasses import dataclass
from typing import Iterator


def _validate_endpoint(x: int) -> None:
    if x < 0:
        raise IndexError(f"Vertex name must be a nonnegative integer, got {x}")


def _validate_weight(weight: float) -> float:
    if math.isnan(weight):
        raise ValueError("Weight is NaN")
    if math.isinf(weight):
        raise ValueError(f"Weight must be finite, got {weight}")
    return float(weight)


@dataclass(frozen=True, order=True)
class UndirectedPair:
    """
    Unweighted undirected edge ``{v, w}``.

    The endpoints are stored with ``v <= w``, so ``UndirectedPair(3, 1)``
    equals ``UndirectedPair(1, 3)``.

    Raises:
        IndexError: If either endpoint is negative.
    """

    v: int
    w: int

    def __post_init__(self):
        _validate_endpoint(self.v)
        _validate_endpoint(self.w)
        if self.v > self.w:
            lo, hi = self.w, self.v
            object.__setattr__(self, "v", lo)
            object.__setattr__(self, "w", hi)

    def __iter__(self) -> Iterator[int]:
        yield self.v
        yield self.w

    def __str__(self) -> str:
        return f"{self.v}-{self.w}"


@dataclass(frozen=True, order=True)
class DirectedPair:
    """
    Unweighted directed edge ``v -> w``.

    Raises:
        IndexError: If either endpoint is negative.
    """

    v: int
    w: int

    def __post_init__(self):
        _validate_endpoint(self.v)
        _validate_endpoint(self.w)

    def __iter__(self) -> Iterator[int]:
        yield self.v
        yield self.w

    def __str__(self) -> str:
        return f"{self.v}->{self.w}"


class WeightedEdge:
    """
    Weighted undirected edge.

    Attributes:
        v: One endpoint (the one returned by :meth:`either`).
        w: The other endpoint.
        weight: Finite edge weight.

    Raises:
        IndexError: If either endpoint is negative.
        ValueError: If the weight is NaN or infinite.

    Example:
        >>> e = WeightedEdge(0, 7, 0.16)
        >>> e.other(e.either())
        7
    """

    __slots__ = ("v", "w", "weight")

    def __init__(self, v: int, w: int, weight: float):
        _validate_endpoint(v)
        _validate_endpoint(w)
        self.v = v
        self.w = w
        self.weight = _validate_weight(weight)

    def __setattr__(self, name, value):
        if hasattr(self, name):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def either(self) -> int:
        """Return either endpoint of this edge."""
        return self.v

    def other(self, vertex: int) -> int:
        """
        Return the endpoint that is not ``vertex``.

        For a self-loop both endpoints coincide and ``vertex`` is returned.

        Raises:
            ValueError: If ``vertex`` is not an endpoint of this edge.
        """
        if vertex == self.v:
            return self.w
        if vertex == self.w:
            return self.v
        raise ValueError(f"Illegal endpoint {vertex} for edge {self}")

    def __lt__(self, other: "WeightedEdge") -> bool:
        return self.weight < other.weight

    def __le__(self, other: "WeightedEdge") -> bool:
        return self.weight <= other.weight

    def __gt__(self, other: "WeightedEdge") -> bool:
        return self.weight > other.weight

    def __ge__(self, other: "WeightedEdge") -> bool:
        return self.weight >= other.weight

    def __repr__(self) -> str:
        return f"WeightedEdge({self.v}, {self.w}, {self.weight!r})"

    def __str__(self) -> str:
        return f"{self.v}-{self.w} {self.weight:.2f}"


class DirectedEdge:
    """
    Weighted directed edge ``v -> w``.

    Raises:
        IndexError: If either endpoint is negative.
        ValueError: If the weight is NaN or infinite.
    """

    __slots__ = ("v", "w", "weight")

    def __init__(self, v: int, w: int, weight: float):
        _validate_endpoint(v)
        _validate_endpoint(w)
        self.v = v
        self.w = w
        self.weight = _validate_weight(weight)

    def __setattr__(self, name, value):
        if hasattr(self, name):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def from_(self) -> int:
        """Return the tail vertex."""
        return self.v

    def to(self) -> int:
        """Return the head vertex."""
        return self.w

    def __lt__(self, other: "DirectedEdge") -> bool:
        return self.weight < other.weight

    def __le__(self, other: "DirectedEdge") -> bool:
        return self.weight <= other.weight

    def __gt__(self, other: "DirectedEdge") -> bool:
        return self.weight > other.weight

    def __ge__(self, other: "DirectedEdge") -> bool:
        return self.weight >= other.weight

    def __repr__(self) -> str:
        return f"DirectedEdge({self.v}, {self.w}, {self.weight!r})"

    def __str__(self) -> str:
        return f"{self.v}->{self.w} {self.weight:.2f}"
