"""Benchmark sequential and threaded array summation, report timing statistics and speed-up, and keep small on-disk repositories."""

__version__ = "0.1.0"