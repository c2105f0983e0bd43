"""
algolab: a laboratory of classic sorting and searching algorithms.

Every algorithm returns the number of basic operations it performed, so the
benchmark harness can tabulate empirical cost next to wall-clock time.
"""

__version__ = "0.1.0"
