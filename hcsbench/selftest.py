"""Self-checks of the summation routines and the benchmark run over them."""

from __future__ import annotations

import sys
from typing import TextIO

from hcsbench.arrays import cuda_sum, parallel_for_sum
from hcsbench.results import (
    TestParams,
    launch_cuda_sum,
    launch_parallel_for_sum,
    launch_sum,
    launch_threaded_sum,
)
from hcsbench.statistics import CalculationStatistics, ParallelCalcIndicators
from hcsbench.vectors import VectorGpu, VectorRam

DEFAULT_SUM_SIZE = 1_000_000
DEFAULT_THREADS = 4
_GPU_BLOCKS = 10
_ELEMENT_VALUE = 0.001


def _streams(out: TextIO | None, err: TextIO | None) -> tuple[TextIO, TextIO]:
    return (sys.stdout if out is None else out, sys.stderr if err is None else err)


def check_array_helper(out: TextIO | None = None, err: TextIO | None = None) -> bool:
    """Sum ten elements of 0.1 with the parallel-for reduction and report it."""
    stream, errors = _streams(out, err)
    data = [0.1] * 10
    try:
        total = parallel_for_sum(data, 0, None, DEFAULT_THREADS)
    except (RuntimeError, ValueError, IndexError) as exc:
        errors.write(f"{exc}\n")
        return False
    stream.write(f"ArrayRamHelper::SumOpenMP(v.data, 0, v.size): {total:g}\n")
    return True


def check_vector_gpu(out: TextIO | None = None, err: TextIO | None = None) -> bool:
    """Sum a GPU vector with every grid of 1..5 blocks by 1..5 threads."""
    stream, errors = _streams(out, err)
    try:
        vector = VectorGpu(350000)
        vector.init_by_val(_ELEMENT_VALUE)
        for blocks in range(1, 6):
            for threads in range(1, 6):
                total = cuda_sum(vector.data, 0, None, blocks, threads)
                stream.write(f"{blocks}, {threads}: {total:g}\n")
    except (RuntimeError, ValueError) as exc:
        errors.write(f"{exc}\n")
        return False
    return True


def _report(stream: TextIO, label: str, results) -> None:
    stream.write(f"{label} = {len(results)}\n")
    for res in results:
        stream.write(res.describe() + "\n")


def check_sum(
    out: TextIO | None = None,
    err: TextIO | None = None,
    size: int = DEFAULT_SUM_SIZE,
    threads: int = DEFAULT_THREADS,
    params: TestParams | None = None,
) -> bool:
    """Benchmark every summation backend and report statistics and speed-ups."""
    stream, errors = _streams(out, err)
    params = TestParams() if params is None else params

    vector = VectorRam(size)
    vector.init_by_val(_ELEMENT_VALUE)

    gpu_vector = None
    try:
        gpu_vector = VectorGpu(size)
        gpu_vector.init_by_val(_ELEMENT_VALUE)
    except (RuntimeError, ValueError) as exc:
        errors.write(f"{exc}\n")

    seq = launch_sum(vector, params, stream)
    _report(stream, "Seq: testResults_seq size", seq)
    par = launch_threaded_sum(vector, threads, params, stream)
    _report(stream, "Parallel: testResults size", par)
    par_for = launch_parallel_for_sum(vector, threads, params, stream)
    _report(stream, "Parallel OpenMP: testResults size", par_for)
    par_cuda = launch_cuda_sum(gpu_vector, _GPU_BLOCKS, threads, params, stream)
    _report(stream, "Parallel CUDA: testResults size", par_cuda)

    stat_seq = CalculationStatistics.from_results(seq)
    stream.write("CalculationStatistics seq: \n" + stat_seq.describe() + "\n")
    stat_par = CalculationStatistics.from_results(par)
    stream.write(
        "CalculationStatistics parallel std::thread: \n" + stat_par.describe() + "\n"
    )

    stat_par_for = CalculationStatistics()
    try:
        stat_par_for = CalculationStatistics.from_results(par_for)
        stream.write(
            "CalculationStatistics parallel OpenMP: \n" + stat_par_for.describe() + "\n"
        )
    except ValueError as exc:
        errors.write(f"{exc}\n")

    stat_par_cuda = CalculationStatistics()
    try:
        stat_par_cuda = CalculationStatistics.from_results(par_cuda)
        stream.write(
            "CalculationStatistics parallel Cuda: \n" + stat_par_cuda.describe() + "\n"
        )
    except ValueError as exc:
        errors.write(f"{exc}\n")

    sections = [
        ("std::thread", stat_par, threads),
        ("OpenMP", stat_par_for, threads),
        ("CUDA", stat_par_cuda, _GPU_BLOCKS * threads),
    ]
    for title, stats, workers in sections:
        stream.write(f"--- {title} ---\n")
        indicators = ParallelCalcIndicators.from_statistics(stat_seq, stats, workers)
        stream.write(indicators.describe() + "\n")
    return True