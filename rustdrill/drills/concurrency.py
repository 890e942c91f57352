"""Summing shared numbers from several threads."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor


def sum_with_offset(numbers: Iterable[int], offset: int, step: int = 8) -> int:
    """Sum the numbers whose remainder modulo ``step`` equals ``offset``."""
    return sum(n for n in numbers if n % step == offset)


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum every offset class in its own thread, indexed by offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(sum_with_offset, shared, offset, workers)
            for offset in range(workers)
        ]
        return [future.result() for future in futures]