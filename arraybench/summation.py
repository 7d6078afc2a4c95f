"""Summation of a random array, sequentially or split across threads."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from arraybench.data import (
    _check_threads,
    _chunk_bounds,
    _default_threads,
    positive_int,
    random_values,
)

DEFAULT_SIZE = 100000


def sequential_sum(values: Sequence[float]) -> float:
    """Add the values from left to right."""
    return sum(values, 0.0)


def parallel_sum(values: Sequence[float], threads: int) -> float:
    """Sum the values by reducing chunks on ``threads`` worker threads."""
    _check_threads(threads)
    bounds = list(_chunk_bounds(len(values), threads))
    with ThreadPoolExecutor(max_workers=threads) as pool:
        partials = pool.map(lambda span: sequential_sum(values[span[0]:span[1]]), bounds)
        return sum(partials, 0.0)


@dataclass(frozen=True)
class _BenchOptions:
    size: int
    threads: int
    sequential: bool


def _bench_options(
    argv: Sequence[str] | None, description: str, default_size: int, thread_error: str
) -> _BenchOptions:
    """Parse the shared benchmark options; raise ValueError with the message to show."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("-n", dest="size", default=str(default_size), metavar="array_size")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-t", dest="threads", metavar="num_threads")
    mode.add_argument("-s", "--sequential", action="store_true", help="run on one thread")
    args = parser.parse_args(argv)
    try:
        size = positive_int(args.size)
    except ValueError:
        raise ValueError("Error: N must be a positive integer.") from None
    threads = _default_threads()
    if args.threads is not None:
        try:
            threads = positive_int(args.threads)
        except ValueError:
            raise ValueError(thread_error) from None
    return _BenchOptions(size=size, threads=threads, sequential=args.sequential)


def _run(
    argv: Sequence[str] | None,
    description: str,
    default_size: int,
    thread_error: str,
    job: Callable[[_BenchOptions], None],
) -> int:
    """Parse options and run ``job``; return the process exit status."""
    try:
        options = _bench_options(argv, description, default_size, thread_error)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    job(options)
    return 0


def _timed(
    options: _BenchOptions,
    sequential: Callable[..., Any],
    parallel: Callable[..., Any],
    *args: Any,
) -> tuple[Any, float]:
    """Run the sequential or the parallel variant and return its result and duration."""
    if options.sequential:
        start = time.process_time()
        result = sequential(*args)
        return result, time.process_time() - start
    start = time.perf_counter()
    result = parallel(*args, options.threads)
    return result, time.perf_counter() - start


def _print_timing(options: _BenchOptions, elapsed: float) -> None:
    if options.sequential:
        print(f"Sequential time: {elapsed:.5f} seconds")
    else:
        print(f"Parallel time: {elapsed:.5f} seconds")
        print(f"Threads used: {options.threads}")


def _sum_job(options: _BenchOptions) -> None:
    values = random_values(options.size)
    total, elapsed = _timed(options, sequential_sum, parallel_sum, values)
    if options.sequential:
        print(f"Sequential sum: {total:.6f}")
    else:
        print(f"Parallel sum: {total:.6f}")
        print(f"Threads used: {options.threads}")
    print(f"Time: {elapsed:.5f} seconds")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the summation benchmark and print the result and timing."""
    return _run(
        argv,
        "Time the summation of a random array.",
        DEFAULT_SIZE,
        "Error: Thread count must be positive.",
        _sum_job,
    )


if __name__ == "__main__":
    sys.exit(main())