"""Example: Project Scheduling and Currency Arbitrage with graphclassics

Solves a precedence-constrained scheduling problem with the critical path
method (longest paths in a DAG), then searches an exchange-rate table for an
arbitrage opportunity (a negative cycle under -ln weights).
"""

from graphclassics import Arbitrage, CriticalPathScheduler


def example_critical_path():
    """Example: Earliest start times for ten jobs."""
    print("=" * 60)
    print("Example 1: Critical Path Method")
    print("=" * 60)

    durations = [41.0, 51.0, 50.0, 36.0, 38.0, 45.0, 21.0, 32.0, 32.0, 29.0]
    # (before, after): job `before` must finish before `after` starts
    successors = {0: [1, 7, 9], 1: [2], 6: [3, 8], 7: [3, 8], 8: [2], 9: [4, 6]}
    precedences = [(i, j) for i, js in successors.items() for j in js]

    cpm = CriticalPathScheduler(durations, precedences)
    print(f"{'job':>4} {'start':>8} {'finish':>8}")
    for job, start, finish in cpm.schedule():
        print(f"{job:>4} {start:>8.1f} {finish:>8.1f}")
    print(f"Finish time: {cpm.finish_time():.1f}")
    print(f"Critical path: {cpm.critical_path()}")
    print()


def example_arbitrage():
    """Example: Detecting arbitrage in an exchange-rate table."""
    print("=" * 60)
    print("Example 2: Currency Arbitrage (Bellman-Ford)")
    print("=" * 60)

    currencies = ["USD", "EUR", "GBP", "CHF", "CAD"]
    rates = [
        [1.0, 0.741, 0.657, 1.061, 1.005],
        [1.349, 1.0, 0.888, 1.433, 1.366],
        [1.521, 1.126, 1.0, 1.614, 1.538],
        [0.942, 0.698, 0.619, 1.0, 0.953],
        [0.995, 0.732, 0.650, 1.049, 1.0],
    ]

    arb = Arbitrage(rates, currencies)
    if not arb.has_opportunity():
        print("No arbitrage opportunity")
    else:
        for line in arb.describe():
            print(f"  {line}")
        print(f"Stake multiplier: {arb.stake_multiplier():.5f}")
    print()


if __name__ == "__main__":
    example_critical_path()
    example_arbitrage()
    print("Scheduling and arbitrage complete")
