"""Quicksort with Lomuto partitioning, sequential or across threads."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import MutableSequence, Sequence
from concurrent.futures import ThreadPoolExecutor

from arraybench.data import _check_threads, random_values
from arraybench.summation import _BenchOptions, _print_timing, _run, _timed

DEFAULT_SIZE = 100000


def partition(values: MutableSequence[float], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around its last element.

    Returns the final index of the pivot; smaller items end up before it.
    """
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1


def _sort_range(values: MutableSequence[float], low: int, high: int) -> None:
    pending = [(low, high)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(values, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))


def quicksort(values: MutableSequence[float]) -> None:
    """Sort ``values`` in place."""
    _sort_range(values, 0, len(values) - 1)


def parallel_quicksort(values: MutableSequence[float], threads: int) -> None:
    """Sort ``values`` in place, sorting independent ranges on worker threads."""
    _check_threads(threads)
    target = threads * 2
    queue = deque([(0, len(values) - 1)])
    ranges: list[tuple[int, int]] = []
    while queue:
        low, high = queue.popleft()
        if low >= high:
            continue
        if len(queue) + len(ranges) + 1 < target:
            pivot = partition(values, low, high)
            queue.append((low, pivot - 1))
            queue.append((pivot + 1, high))
        else:
            ranges.append((low, high))
    with ThreadPoolExecutor(max_workers=threads) as pool:
        for _ in pool.map(lambda span: _sort_range(values, *span), ranges):
            pass


def _sort_job(options: _BenchOptions) -> None:
    values = random_values(options.size, scale=1000.0)
    _, elapsed = _timed(options, quicksort, parallel_quicksort, values)
    _print_timing(options, elapsed)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorting benchmark and print its timing."""
    return _run(
        argv,
        "Time quicksort on a random array.",
        DEFAULT_SIZE,
        "Error: Thread count must be positive.",
        _sort_job,
    )


if __name__ == "__main__":
    sys.exit(main())