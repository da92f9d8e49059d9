"""Benchmark classic sorting algorithms on generated arrays."""

__version__ = "0.1.0"