"""Element-wise arithmetic on two arrays, sequentially or across threads."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, fields

from arraybench.data import _check_threads, _chunk_bounds, random_values
from arraybench.summation import _BenchOptions, _print_timing, _run, _timed

DEFAULT_SIZE = 10000000


@dataclass
class ArrayResults:
    """Sums, differences, products and quotients of paired elements."""

    sums: list[float] = field(default_factory=list)
    differences: list[float] = field(default_factory=list)
    products: list[float] = field(default_factory=list)
    quotients: list[float] = field(default_factory=list)

    def extend(self, other: ArrayResults) -> None:
        """Append every column of ``other`` to the matching column here."""
        for column in fields(self):
            getattr(self, column.name).extend(getattr(other, column.name))


def _check_lengths(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(f"arrays differ in length: {len(a)} and {len(b)}")


def array_operations(a: Sequence[float], b: Sequence[float]) -> ArrayResults:
    """Combine ``a`` and ``b`` element by element; division by zero gives 0.0."""
    _check_lengths(a, b)
    pairs = list(zip(a, b))
    return ArrayResults(
        sums=[x + y for x, y in pairs],
        differences=[x - y for x, y in pairs],
        products=[x * y for x, y in pairs],
        quotients=[x / y if y != 0.0 else 0.0 for x, y in pairs],
    )


def parallel_array_operations(
    a: Sequence[float], b: Sequence[float], threads: int
) -> ArrayResults:
    """Like :func:`array_operations`, with chunks handled on worker threads."""
    _check_threads(threads)
    _check_lengths(a, b)
    bounds = list(_chunk_bounds(len(a), threads))
    result = ArrayResults()
    with ThreadPoolExecutor(max_workers=threads) as pool:
        for part in pool.map(lambda span: array_operations(a[slice(*span)], b[slice(*span)]), bounds):
            result.extend(part)
    return result


def _elementwise_job(options: _BenchOptions) -> None:
    a = random_values(options.size, scale=100.0, offset=1.0)
    b = random_values(options.size, scale=100.0, offset=1.0)
    _, elapsed = _timed(options, array_operations, parallel_array_operations, a, b)
    _print_timing(options, elapsed)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the element-wise benchmark and print its timing."""
    return _run(
        argv,
        "Time element-wise arithmetic on two arrays.",
        DEFAULT_SIZE,
        "Error: Number of threads must be positive.",
        _elementwise_job,
    )


if __name__ == "__main__":
    sys.exit(main())