"""Timing benchmarks for summation, quicksort and element-wise array and grid arithmetic."""

__version__ = "0.1.0"
__all__ = ["data", "summation", "quicksort", "elementwise", "grid"]