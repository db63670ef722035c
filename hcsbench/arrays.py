"""Summation of sequence elements: sequential, threaded and parallel-for."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor


def _bounds(data: Sequence, start: int, end: int | None) -> tuple[int, int]:
    """Validate an inclusive index range, filling in the default end."""
    if end is None:
        end = len(data) - 1
    if start < 0:
        raise IndexError(f"start index {start} is negative")
    if end >= len(data):
        raise IndexError(f"end index {end} is out of range for length {len(data)}")
    return start, end


def _accumulate(data: Sequence, lo: int, hi: int):
    """Add ``data[lo..hi]`` one element at a time, left to right."""
    total = 0
    for value in data[lo : hi + 1]:
        total += value
    return total


def _check_threads(threads: int) -> None:
    if threads < 1:
        raise ValueError(f"number of threads must be positive, got {threads}")


def _check_blocks(blocks: int) -> None:
    if blocks < 1:
        raise ValueError(f"number of blocks must be positive, got {blocks}")


def _reduce(data: Sequence, chunks: list[tuple[int, int]], threads: int):
    with ThreadPoolExecutor(max_workers=threads) as pool:
        partials = list(pool.map(lambda c: _accumulate(data, *c), chunks))
    total = 0
    for partial in partials:
        total += partial
    return total


def _equal_blocks(start: int, end: int, parts: int) -> Iterator[tuple[int, int]]:
    """Blocks of equal size; the last one also takes the remainder."""
    block = (end - start + 1) // parts
    for i in range(parts):
        lo = start + i * block
        hi = end if i == parts - 1 else lo + block - 1
        yield lo, hi


def _balanced_blocks(start: int, end: int, parts: int) -> Iterator[tuple[int, int]]:
    """Contiguous blocks whose sizes differ by at most one."""
    base, extra = divmod(end - start + 1, parts)
    lo = start
    for i in range(parts):
        size = base + (1 if i < extra else 0)
        yield lo, lo + size - 1
        lo += size


def array_sum(data: Sequence, start: int = 0, end: int | None = None):
    """Sequential sum of ``data[start..end]`` (end inclusive)."""
    start, end = _bounds(data, start, end)
    return _accumulate(data, start, end)


def threaded_sum(data: Sequence, start: int = 0, end: int | None = None, threads: int = 1):
    """Sum of ``data[start..end]`` split into equal blocks, one per thread."""
    _check_threads(threads)
    start, end = _bounds(data, start, end)
    if end < start:
        return 0
    return _reduce(data, list(_equal_blocks(start, end, threads)), threads)


def parallel_for_sum(
    data: Sequence, start: int = 0, end: int | None = None, threads: int = 1
):
    """Parallel-for reduction of ``data[start..end]`` with a static schedule."""
    _check_threads(threads)
    start, end = _bounds(data, start, end)
    if end < start:
        return 0
    return _reduce(data, list(_balanced_blocks(start, end, threads)), threads)


def cuda_sum(
    data: Sequence, start: int = 0, end: int | None = None, blocks: int = 1, threads: int = 1
):
    """Sum on a CUDA device.

    The launch parameters and the index range are validated first; since no
    CUDA device can be driven from here, a valid request raises RuntimeError.
    """
    _check_blocks(blocks)
    _check_threads(threads)
    _bounds(data, start, end)
    raise RuntimeError("CUDA not supported!")