"""Random input generation and command-line argument helpers."""

from __future__ import annotations

import os
import random
import re
from collections.abc import Iterator

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def random_values(
    n: int,
    scale: float = 1.0,
    offset: float = 0.0,
    rng: random.Random | None = None,
) -> list[float]:
    """Return ``n`` uniform random floats in ``[offset, offset + scale]``."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if rng is None:
        rng = random.Random()
    return [rng.random() * scale + offset for _ in range(n)]


def positive_int(text: str) -> int:
    """Parse the leading integer of ``text`` and require it to be positive.

    Trailing garbage is ignored and text without a leading number counts
    as zero, so ``"12abc"`` gives 12 while ``"abc"`` is rejected.
    """
    match = _LEADING_INT.match(text)
    value = int(match.group(1)) if match else 0
    if value <= 0:
        raise ValueError(f"expected a positive integer, got {text!r}")
    return value


def _default_threads() -> int:
    return os.cpu_count() or 1


def _check_threads(threads: int) -> None:
    if threads < 1:
        raise ValueError(f"thread count must be positive, got {threads}")


def _chunk_bounds(length: int, parts: int) -> Iterator[tuple[int, int]]:
    """Yield ``(start, stop)`` spans splitting ``length`` items into near-equal parts."""
    parts = max(1, min(parts, length))
    base, extra = divmod(length, parts)
    start = 0
    for k in range(parts):
        stop = start + base + (1 if k < extra else 0)
        yield start, stop
        start = stop