"""Element-wise arithmetic on two random grids, one operation at a time."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from enum import Enum

from arraybench.data import (
    _check_threads,
    _chunk_bounds,
    _default_threads,
    positive_int,
    random_values,
)

MIN_SIZE = 100000

Grid = list[list[float]]


class Operation(Enum):
    """An arithmetic operation applied to paired grid cells."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def apply(self, x: float, y: float) -> float:
        """Apply the operation; division by zero gives 0.0."""
        if self is Operation.ADD:
            return x + y
        if self is Operation.SUBTRACT:
            return x - y
        if self is Operation.MULTIPLY:
            return x * y
        return x / y if y != 0.0 else 0.0


_LABELS = {
    Operation.ADD: "Addition",
    Operation.SUBTRACT: "Subtraction",
    Operation.MULTIPLY: "Multiplication",
    Operation.DIVIDE: "Division",
}


def grid_shape(n: int) -> tuple[int, int]:
    """Return ``(rows, cols)`` of a near-square grid holding at least ``n`` cells."""
    if n < 1:
        raise ValueError(f"cell count must be positive, got {n}")
    rows = math.isqrt(n)
    cols = n // rows
    if rows * cols < n:
        cols += 1
    return rows, cols


def random_grid(rows: int, cols: int, rng: random.Random | None = None) -> Grid:
    """Return a ``rows`` x ``cols`` grid of random values in ``[1, 101]``."""
    if rng is None:
        rng = random.Random()
    return [random_values(cols, scale=100.0, offset=1.0, rng=rng) for _ in range(rows)]


def _check_shapes(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> None:
    if len(a) != len(b) or any(len(ra) != len(rb) for ra, rb in zip(a, b)):
        raise ValueError("grids differ in shape")


def apply_operation(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]], op: Operation | str
) -> Grid:
    """Combine two equally shaped grids cell by cell with ``op``."""
    op = Operation(op)
    _check_shapes(a, b)
    return [[op.apply(x, y) for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def parallel_apply_operation(
    a: Sequence[Sequence[float]],
    b: Sequence[Sequence[float]],
    op: Operation | str,
    threads: int,
) -> Grid:
    """Like :func:`apply_operation`, with bands of rows handled on worker threads."""
    op = Operation(op)
    _check_threads(threads)
    _check_shapes(a, b)
    bounds = list(_chunk_bounds(len(a), threads))
    result: Grid = []
    with ThreadPoolExecutor(max_workers=threads) as pool:
        bands = pool.map(
            lambda span: apply_operation(a[span[0]:span[1]], b[span[0]:span[1]], op), bounds
        )
        for band in bands:
            result.extend(band)
    return result


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Time element-wise arithmetic on two grids.")
    parser.add_argument("-n", dest="size", metavar="number_of_elements")
    parser.add_argument("-s", "--sequential", action="store_true", help="run on one thread")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run each grid operation in turn and print its timing."""
    args = _parser().parse_args(argv)
    size = MIN_SIZE
    if args.size is not None:
        try:
            size = positive_int(args.size)
        except ValueError:
            size = 0
        if size < MIN_SIZE:
            print(f"Array size must be at least {MIN_SIZE}. Using default {MIN_SIZE}.")
            size = MIN_SIZE

    rows, cols = grid_shape(size)
    rng = random.Random()
    a = random_grid(rows, cols, rng)
    b = random_grid(rows, cols, rng)

    for op in Operation:
        print(f"\nOperation: {op.label}")
        if args.sequential:
            start = time.process_time()
            apply_operation(a, b, op)
            elapsed = time.process_time() - start
            print(f"Sequential time: {elapsed:.5f} seconds")
        else:
            start = time.perf_counter()
            parallel_apply_operation(a, b, op, _default_threads())
            elapsed = time.perf_counter() - start
            print(f"Parallel time: {elapsed:.5f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())