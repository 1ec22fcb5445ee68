"""Example: Flight Route Planning with graphclassics

Builds a symbol graph from airport pairs, finds fewest-hop itineraries with
breadth-first search, and cheapest fares with Dijkstra's algorithm.
"""

from graphclassics import (
    BreadthFirstPaths,
    CC,
    DijkstraSP,
    DirectedEdge,
    EdgeWeightedDigraph,
    SymbolGraph,
    degrees_of_separation,
)

ROUTES = [
    "JFK MCO", "ORD DEN", "ORD HOU", "DFW PHX", "JFK ATL", "ORD DFW",
    "ORD PHX", "ATL HOU", "DEN PHX", "PHX LAX", "JFK ORD", "DEN LAS",
    "DFW HOU", "ORD ATL", "LAS LAX", "ATL MCO", "HOU MCO", "LAS PHX",
]

FARES = {
    ("JFK", "ORD"): 180.0, ("JFK", "ATL"): 120.0, ("ATL", "HOU"): 95.0,
    ("ORD", "DEN"): 140.0, ("DEN", "LAS"): 85.0, ("HOU", "PHX"): 110.0,
    ("PHX", "LAS"): 60.0, ("ORD", "PHX"): 210.0, ("JFK", "MCO"): 90.0,
    ("MCO", "HOU"): 70.0,
}


def example_fewest_hops():
    """Example: Fewest connections between two airports."""
    print("=" * 60)
    print("Example 1: Fewest Hops (Breadth-First Search)")
    print("=" * 60)

    sg = SymbolGraph(ROUTES)
    G = sg.graph
    print(f"{G.V} airports, {G.E} routes, {CC(G).count()} connected component(s)")

    bfs = BreadthFirstPaths(G, sg.index_of("JFK"))
    for airport in ("LAS", "LAX", "HOU"):
        route = [sg.name_of(v) for v in bfs.path_to(sg.index_of(airport))]
        print(f"  JFK -> {airport}: {' -> '.join(route)} ({len(route) - 1} hops)")

    print(f"Degrees of separation: {degrees_of_separation(ROUTES, ' ', 'MCO', 'LAX')}")
    print()


def example_cheapest_fares():
    """Example: Cheapest itinerary over one-way fares."""
    print("=" * 60)
    print("Example 2: Cheapest Fares (Dijkstra)")
    print("=" * 60)

    sg = SymbolGraph(ROUTES)
    G = EdgeWeightedDigraph(sg.graph.V)
    for (a, b), fare in FARES.items():
        G.add_edge(DirectedEdge(sg.index_of(a), sg.index_of(b), fare))

    sp = DijkstraSP(G, sg.index_of("JFK"))
    for airport in ("LAS", "PHX", "LAX"):
        v = sg.index_of(airport)
        if not sp.has_path_to(v):
            print(f"  JFK -> {airport}: no fare available")
            continue
        legs = [f"{sg.name_of(e.from_())}->{sg.name_of(e.to())}" for e in sp.path_to(v)]
        print(f"  JFK -> {airport}: ${sp.dist_to(v):.2f} via {', '.join(legs)}")

    print()


if __name__ == "__main__":
    example_fewest_hops()
    example_cheapest_fares()
    print("Route planning complete")
