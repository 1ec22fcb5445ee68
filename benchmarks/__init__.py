"""Performance benchmarks for graphclassics.

This package contains microbenchmarks that compare the interchangeable
implementations of each algorithm family (strong components, shortest paths,
minimum spanning forests) on random inputs.
"""
