"""Timed summation runs and repeated numerical experiments."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TextIO

from hcsbench.arrays import array_sum, cuda_sum, parallel_for_sum, threaded_sum
from hcsbench.devices import is_cuda_supported


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


@dataclass(frozen=True)
class FuncResult:
    """Outcome of one timed computation; ``time`` is in microseconds."""

    status: bool
    result: Any
    time: int

    def describe(self) -> str:
        return f"[val: {_format_value(self.result)}; time: {self.time}]"


@dataclass
class TestParams:
    """Parameters of a numerical experiment."""

    __test__ = False

    iter_num: int = 20


def _timed(compute: Callable[[], Any]) -> FuncResult:
    begin = time.perf_counter_ns()
    value = compute()
    elapsed = (time.perf_counter_ns() - begin) // 1000
    return FuncResult(True, value, elapsed)


def timed_sum(vector, start: int = 0, end: int | None = None) -> FuncResult:
    """Sequential sum of the vector, timed."""
    return _timed(lambda: array_sum(vector.data, start, end))


def timed_threaded_sum(
    vector, threads: int, start: int = 0, end: int | None = None
) -> FuncResult:
    """Thread-per-block sum of the vector, timed."""
    return _timed(lambda: threaded_sum(vector.data, start, end, threads))


def timed_parallel_for_sum(
    vector, threads: int, start: int = 0, end: int | None = None
) -> FuncResult:
    """Parallel-for reduction of the vector, timed."""
    return _timed(lambda: parallel_for_sum(vector.data, start, end, threads))


def timed_cuda_sum(
    vector, blocks: int, threads: int, start: int = 0, end: int | None = None
) -> FuncResult:
    """Sum on a CUDA device, timed."""
    return _timed(lambda: cuda_sum(vector.data, start, end, blocks, threads))


def _repeat(
    title: str,
    run: Callable[[], FuncResult],
    params: TestParams | None,
    out: TextIO | None,
    enabled: bool = True,
) -> list[FuncResult]:
    params = TestParams() if params is None else params
    stream = sys.stdout if out is None else out
    stream.write(f"-------{title} Start ------\n")
    results = [run() for _ in range(params.iter_num)] if enabled else []
    stream.write(f"-------{title} End --------\n")
    return results


def launch_sum(vector, params: TestParams | None = None, out: TextIO | None = None):
    """Repeat the sequential sum ``params.iter_num`` times."""
    return _repeat("LaunchSum(v)", lambda: timed_sum(vector), params, out)


def launch_threaded_sum(
    vector, threads: int, params: TestParams | None = None, out: TextIO | None = None
):
    """Repeat the threaded sum ``params.iter_num`` times."""
    return _repeat(
        "LaunchSum(v, Nthreads)",
        lambda: timed_threaded_sum(vector, threads),
        params,
        out,
    )


def launch_parallel_for_sum(
    vector, threads: int, params: TestParams | None = None, out: TextIO | None = None
):
    """Repeat the parallel-for reduction ``params.iter_num`` times."""
    return _repeat(
        "LaunchSumOpenMP(v, Nthreads)",
        lambda: timed_parallel_for_sum(vector, threads),
        params,
        out,
    )


def launch_cuda_sum(
    vector,
    blocks: int,
    threads: int,
    params: TestParams | None = None,
    out: TextIO | None = None,
):
    """Repeat the CUDA sum; yields no results when CUDA is unavailable."""
    return _repeat(
        "LaunchSumCuda(v, NumBlocks, Nthreads)",
        lambda: timed_cuda_sum(vector, blocks, threads),
        params,
        out,
        enabled=is_cuda_supported(),
    )