import os

from hcsbench.algresults import (
    AlgTestingResult,
    AlgTestingResultRepository,
    Task,
    TaskGroup,
)
from hcsbench.statistics import CalculationStatistics


def test_default_line_has_seventeen_zero_fields():
    line = AlgTestingResult().to_line()
    assert line.endswith(" \n")
    fields = line.split()
    assert len(fields) == 17
    assert set(fields) == {"0"}


def test_line_carries_fields_in_order():
    stats = CalculationStatistics(
        num_iter=20, min_value=1.0, max_value=4.0, avg=2.5, median=2.0,
        percentile_95=3.5, std_dev=0.5,
    )
    result = AlgTestingResult(
        id=7,
        comp_system_id=8,
        task_group_id=TaskGroup.VEC_VEC,
        task_id=Task.SUM,
        algorithm_id=9,
        algorithm_data_type_length=8,
        algorithm_type=3,
        threads_num_cpu=4,
        calculation_statistics=stats,
    )
    fields = result.to_line().split()
    assert fields[:10] == ["7", "8", str(int(TaskGroup.VEC_VEC)), str(int(Task.SUM)),
                           "9", "8", "3", "4", "0", "0"]
    assert fields[10:] == ["1", "2", "2.5", "3.5", "4", "0.5", "20"]


def test_repository_creates_directory(tmp_path):
    path = tmp_path / "results"
    AlgTestingResultRepository(str(path))
    assert path.is_dir()


def test_write_appends_records(tmp_path):
    repo = AlgTestingResultRepository(str(tmp_path / "results"))
    first = AlgTestingResult(id=1)
    second = AlgTestingResult(id=2)
    assert repo.write(first)
    assert repo.write(second)
    with open(os.path.join(str(tmp_path / "results"), "1.txt"), encoding="utf-8") as f:
        content = f.read()
    assert content == first.to_line() + second.to_line()


def test_write_sample(tmp_path):
    repo = AlgTestingResultRepository(str(tmp_path / "results"))
    repo.write_sample()
    with open(repo.records_path, encoding="utf-8") as f:
        fields = f.read().split()
    assert fields[:2] == ["111", "222"]