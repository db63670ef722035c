import io

import pytest

from hcsbench.results import TestParams
from hcsbench.selftest import check_array_helper, check_sum, check_vector_gpu


def test_check_array_helper_reports_sum():
    out, err = io.StringIO(), io.StringIO()
    assert check_array_helper(out, err) is True
    assert "ArrayRamHelper::SumOpenMP(v.data, 0, v.size): 1\n" in out.getvalue()
    assert err.getvalue() == ""


def test_check_vector_gpu_fails_without_cuda():
    out, err = io.StringIO(), io.StringIO()
    assert check_vector_gpu(out, err) is False
    assert "CUDA not supported!" in err.getvalue()
    assert out.getvalue() == ""


@pytest.mark.parametrize("iterations", [1, 3])
def test_check_sum_runs_all_backends(iterations):
    out, err = io.StringIO(), io.StringIO()
    ok = check_sum(out, err, size=1000, threads=4, params=TestParams(iter_num=iterations))
    assert ok is True
    text = out.getvalue()
    assert f"Seq: testResults_seq size = {iterations}\n" in text
    assert f"Parallel: testResults size = {iterations}\n" in text
    assert f"Parallel OpenMP: testResults size = {iterations}\n" in text
    assert "Parallel CUDA: testResults size = 0\n" in text
    assert "--- std::thread ---" in text
    assert "--- OpenMP ---" in text
    assert "--- CUDA ---" in text
    assert "N threads: 40" in text
    assert "results size is 0" in err.getvalue()
    assert "CUDA not supported!" in err.getvalue()


def test_check_sum_reports_every_result_line():
    out = io.StringIO()
    check_sum(out, io.StringIO(), size=200, threads=2, params=TestParams(iter_num=2))
    lines = [line for line in out.getvalue().splitlines() if line.startswith("[val: ")]
    assert len(lines) == 6