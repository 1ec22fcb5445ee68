"""
graphclassics - classical graph algorithms over dense integer vertex sets.

This package provides canonical textbook graph algorithms including:
- Edge value types and five graph containers (adjacency lists and matrix)
- Traversal (DFS, BFS, reachability, depth-first order, transitive closure)
- Connectivity (connected components, bipartiteness, Tarjan / Kosaraju-Sharir /
  Gabow strongly connected components)
- Cycle detection and topological order
- Shortest paths (Dijkstra, Bellman-Ford, acyclic shortest/longest paths)
- All-pairs shortest paths (Floyd-Warshall, repeated Dijkstra)
- Minimum spanning forests (lazy Prim, Prim, Kruskal, Boruvka)
- Eulerian cycles and paths
- Applications (critical path scheduling, arbitrage) and symbol graphs
- Random and structured graph generators with an explicit RNG

Every DFS uses an explicit stack, and neighbors are visited in insertion
order, so results are deterministic for a given graph.
"""

__version__ = "0.1.0"

from .allpairs import DijkstraAllPairsSP, FloydWarshall
from .applications import Arbitrage, CriticalPathScheduler
from .components import (
    CC,
    Bipartite,
    BipartiteX,
    GabowSCC,
    KosarajuSharirSCC,
    StronglyConnectedComponents,
    TarjanSCC,
    strongly_connected_components,
)
from .core import (
    AdjacencyView,
    AdjMatrixEdgeWeightedDigraph,
    Digraph,
    EdgeWeightedDigraph,
    EdgeWeightedGraph,
    Graph,
    neighbors,
)
from .cycles import (
    Cycle,
    DirectedCycle,
    DirectedCycleX,
    EdgeWeightedDirectedCycle,
    Topological,
    TopologicalX,
)
from .edges import DirectedEdge, DirectedPair, UndirectedPair, WeightedEdge
from .eulerian import (
    DirectedEulerianCycle,
    DirectedEulerianPath,
    EulerianCycle,
    EulerianPath,
    has_eulerian_cycle,
    has_eulerian_path,
)
from .mst import (
    BoruvkaMST,
    KruskalMST,
    LazyPrimMST,
    MinimumSpanningForest,
    PrimMST,
    minimum_spanning_forest,
)
from .shortest import AcyclicLP, AcyclicSP, BellmanFordSP, DijkstraSP, DijkstraUndirectedSP, ShortestPaths
from .symbol import SymbolDigraph, SymbolGraph, degrees_of_separation
from .traversal import (
    BreadthFirstPaths,
    DepthFirstOrder,
    DepthFirstPaths,
    DepthFirstSearch,
    DirectedDFS,
    NonrecursiveDFS,
    TransitiveClosure,
)
from .utils import IndexMinPQ, UnionFind

__all__ = [
    "__version__",
    # Edges and containers
    "UndirectedPair",
    "DirectedPair",
    "WeightedEdge",
    "DirectedEdge",
    "AdjacencyView",
    "Graph",
    "Digraph",
    "EdgeWeightedGraph",
    "EdgeWeightedDigraph",
    "AdjMatrixEdgeWeightedDigraph",
    "neighbors",
    # Supporting structures
    "UnionFind",
    "IndexMinPQ",
    # Traversal
    "DepthFirstSearch",
    "NonrecursiveDFS",
    "DepthFirstPaths",
    "BreadthFirstPaths",
    "DirectedDFS",
    "DepthFirstOrder",
    "TransitiveClosure",
    # Connectivity
    "CC",
    "Bipartite",
    "BipartiteX",
    "StronglyConnectedComponents",
    "TarjanSCC",
    "KosarajuSharirSCC",
    "GabowSCC",
    "strongly_connected_components",
    # Cycles and order
    "Cycle",
    "DirectedCycle",
    "DirectedCycleX",
    "EdgeWeightedDirectedCycle",
    "Topological",
    "TopologicalX",
    # Shortest paths
    "ShortestPaths",
    "DijkstraSP",
    "DijkstraUndirectedSP",
    "BellmanFordSP",
    "AcyclicSP",
    "AcyclicLP",
    "DijkstraAllPairsSP",
    "FloydWarshall",
    # Minimum spanning forests
    "MinimumSpanningForest",
    "LazyPrimMST",
    "PrimMST",
    "KruskalMST",
    "BoruvkaMST",
    "minimum_spanning_forest",
    # Eulerian
    "has_eulerian_cycle",
    "has_eulerian_path",
    "EulerianCycle",
    "EulerianPath",
    "DirectedEulerianCycle",
    "DirectedEulerianPath",
    # Applications
    "CriticalPathScheduler",
    "Arbitrage",
    "SymbolGraph",
    "SymbolDigraph",
    "degrees_of_separation",
]

# Example usage:
# from graphclassics import EdgeWeightedDigraph, DijkstraSP
#
# G = EdgeWeightedDigraph(3, [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 5.0)])
# sp = DijkstraSP(G, 0)
# sp.dist_to(2)                              # 3.0
# [str(e) for e in sp.path_to(2)]           # ['0->1 1.00', '1->2 2.00']
