"""Diagnostics and debugging utilities for graphclassics."""

from .checks import (
    check_all_pairs,
    check_bipartite,
    check_cycle,
    check_depth_first_order,
    check_eulerian,
    check_mst,
    check_negative_cycle,
    check_scc,
    check_shortest_paths,
    check_topological,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "check_shortest_paths",
    "check_all_pairs",
    "check_negative_cycle",
    "check_mst",
    "check_scc",
    "check_topological",
    "check_cycle",
    "check_bipartite",
    "check_eulerian",
    "check_depth_first_order",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
