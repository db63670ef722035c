import io

import pytest

from hcsbench.results import (
    FuncResult,
    TestParams,
    launch_cuda_sum,
    launch_parallel_for_sum,
    launch_sum,
    launch_threaded_sum,
    timed_cuda_sum,
    timed_parallel_for_sum,
    timed_sum,
    timed_threaded_sum,
)
from hcsbench.vectors import VectorRam


@pytest.fixture
def vector():
    v = VectorRam(10)
    v.data = [float(i) for i in range(10)]
    return v


def test_default_iterations_is_twenty():
    assert TestParams().iter_num == 20


def test_func_result_describe():
    assert FuncResult(True, 1.5, 42).describe() == "[val: 1.5; time: 42]"


def test_timed_sum_result(vector):
    res = timed_sum(vector)
    assert res.status is True
    assert res.result == sum(vector.data)
    assert res.time >= 0


def test_timed_sum_subrange(vector):
    res = timed_sum(vector, 2, 5)
    assert res.result == sum(vector.data[2:6])


@pytest.mark.parametrize("threads", [1, 3, 4, 10])
def test_threaded_matches_sequential(vector, threads):
    assert timed_threaded_sum(vector, threads).result == timed_sum(vector).result


@pytest.mark.parametrize("threads", [1, 2, 4])
def test_parallel_for_matches_sequential(vector, threads):
    assert timed_parallel_for_sum(vector, threads).result == timed_sum(vector).result


def test_threaded_rejects_zero_threads(vector):
    with pytest.raises(ValueError):
        timed_threaded_sum(vector, 0)


def test_timed_cuda_sum_raises(vector):
    with pytest.raises(RuntimeError, match="CUDA not supported"):
        timed_cuda_sum(vector, 2, 2)


def test_launch_sum_repeats(vector):
    out = io.StringIO()
    results = launch_sum(vector, TestParams(iter_num=3), out)
    assert len(results) == 3
    assert {r.result for r in results} == {sum(vector.data)}
    text = out.getvalue()
    assert "Start" in text and "End" in text


def test_launch_threaded_sum_repeats(vector):
    results = launch_threaded_sum(vector, 2, TestParams(iter_num=4), io.StringIO())
    assert len(results) == 4
    assert all(r.result == sum(vector.data) for r in results)


def test_launch_parallel_for_sum_repeats(vector):
    results = launch_parallel_for_sum(vector, 3, TestParams(iter_num=2), io.StringIO())
    assert [r.result for r in results] == [sum(vector.data)] * 2


def test_launch_cuda_sum_is_empty_without_cuda(vector):
    out = io.StringIO()
    results = launch_cuda_sum(vector, 10, 4, TestParams(iter_num=5), out)
    assert results == []
    assert "LaunchSumCuda" in out.getvalue()