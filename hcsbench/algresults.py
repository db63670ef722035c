"""Results of algorithm test runs and the file repository that stores them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from hcsbench.filesystem import combine_path, create_dir, dir_exists
from hcsbench.statistics import CalculationStatistics


class TaskGroup(IntEnum):
    """Groups of tasks."""

    NONE = 0
    VECTOR = 1
    VEC_VEC = 2
    MATRIX = 3
    MAT_VEC = 4
    VEC_MAT = 5
    MAT_MAT = 6


class Task(IntEnum):
    """Tasks within a group."""

    NONE = 0
    INIT = 1
    COPY = 2
    SUM = 3
    MIN = 4
    MAX = 5


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class AlgTestingResult:
    """One test run of an algorithm on a computing system.

    ``algorithm_type``: 1 sequential CPU, 2 sequential GPU, 3 threaded CPU,
    4 parallel-for CPU, 5 parallel CUDA.
    """

    id: int = 0
    comp_system_id: int = 0
    task_group_id: int = 0
    task_id: int = 0
    algorithm_id: int = 0
    algorithm_data_type_length: int = 0
    algorithm_type: int = 0
    threads_num_cpu: int = 0
    thread_blocks_num_gpu: int = 0
    threads_num_gpu: int = 0
    calculation_statistics: CalculationStatistics = field(
        default_factory=CalculationStatistics
    )

    def to_line(self) -> str:
        """The record as written to the repository file, newline included."""
        stats = self.calculation_statistics
        fields = [
            str(int(self.id)),
            str(int(self.comp_system_id)),
            str(int(self.task_group_id)),
            str(int(self.task_id)),
            str(int(self.algorithm_id)),
            str(int(self.algorithm_data_type_length)),
            str(int(self.algorithm_type)),
            str(int(self.threads_num_cpu)),
            str(int(self.thread_blocks_num_gpu)),
            str(int(self.threads_num_gpu)),
            _fmt(stats.min_value),
            _fmt(stats.median),
            _fmt(stats.avg),
            _fmt(stats.percentile_95),
            _fmt(stats.max_value),
            _fmt(stats.std_dev),
            str(int(stats.num_iter)),
        ]
        return "".join(f"{item} " for item in fields) + "\n"


@dataclass
class AlgTestingResultRepository:
    """Directory of algorithm test-run records."""

    dir_name: str = "AlgTestingResultRepository"
    file_name: str = "data.txt"
    cache: list[AlgTestingResult] = field(default_factory=list)
    comp_system_index: dict[int, list[int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not dir_exists(self.dir_name):
            create_dir(self.dir_name)

    @property
    def records_path(self) -> str:
        return combine_path(self.dir_name, "1.txt")

    def write(self, result: AlgTestingResult) -> bool:
        """Append ``result`` to the records file."""
        with open(self.records_path, "a", encoding="utf-8") as fout:
            fout.write(result.to_line())
        return True

    def write_sample(self) -> bool:
        """Append a sample record (run 111 on system 222)."""
        return self.write(AlgTestingResult(id=111, comp_system_id=222))