"""Statistics of repeated timings and parallel speed-up indicators."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from hcsbench.results import FuncResult

_TOLERANCE = 0.0001


def _fmt(value: float) -> str:
    return f"{value:g}"


def _ratio(a: float, b: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


@dataclass
class CalculationStatistics:
    """Timing statistics (microseconds) of a numerical experiment."""

    num_iter: int = 0
    min_value: float = 0.0
    max_value: float = 0.0
    avg: float = 0.0
    median: float = 0.0
    percentile_95: float = 0.0
    std_dev: float = 0.0

    @classmethod
    def from_results(cls, results: Sequence[FuncResult]) -> "CalculationStatistics":
        """Compute statistics; every run must succeed and agree on the value."""
        if not results:
            raise ValueError("results size is 0")
        reference = results[0].result
        for res in results[1:]:
            if not res.status:
                raise ValueError("results[i].Status = 0")
            diff = res.result - reference
            relative = _ratio(diff, float(reference))
            if math.isinf(relative) or abs(relative) > _TOLERANCE:
                raise ValueError(
                    "fabs((results[i]._result - results[0]._result)"
                    " / results[0].Result) > 0.0001"
                )

        times = sorted(res.time for res in results)
        n = len(times)
        if n % 2 == 0:
            median = float((int(times[n // 2 - 1]) + int(times[n // 2])) // 2)
        else:
            median = float(times[n // 2])

        avg = sum(times) / n
        std_dev = math.sqrt(sum((t - avg) ** 2 for t in times) / n)

        rank = 0.95 * (n - 1) + 1
        low = math.floor(rank)
        below = times[low - 1]
        above = times[low] if low < n else below
        percentile_95 = below + (rank - low) * (above - below)

        return cls(
            num_iter=n,
            min_value=float(times[0]),
            max_value=float(times[-1]),
            avg=avg,
            median=median,
            percentile_95=percentile_95,
            std_dev=std_dev,
        )

    def describe(self) -> str:
        return (
            f"minValue: {_fmt(self.min_value)}; "
            f"median: {_fmt(self.median)}; "
            f"avg: {_fmt(self.avg)}; "
            f"percentile_95: {_fmt(self.percentile_95)}; "
            f"maxValue: {_fmt(self.max_value)}; "
            f"stdDev: {_fmt(self.std_dev)}; "
        )


@dataclass
class ParallelCalcIndicators:
    """Speed-up (S) and efficiency (E) of a parallel run over a sequential one."""

    threads: int
    s_min: float
    s_max: float
    s_avg: float
    s_median: float
    s_perc95: float
    e_min: float
    e_max: float
    e_avg: float
    e_median: float
    e_perc95: float

    @classmethod
    def from_statistics(
        cls, seq: CalculationStatistics, par: CalculationStatistics, threads: int
    ) -> "ParallelCalcIndicators":
        s_min = _ratio(seq.min_value, par.min_value)
        s_max = _ratio(seq.max_value, par.max_value)
        s_avg = _ratio(seq.avg, par.avg)
        s_median = _ratio(seq.median, par.median)
        s_perc95 = _ratio(seq.percentile_95, par.percentile_95)
        return cls(
            threads=threads,
            s_min=s_min,
            s_max=s_max,
            s_avg=s_avg,
            s_median=s_median,
            s_perc95=s_perc95,
            e_min=_ratio(s_min, threads),
            e_max=_ratio(s_max, threads),
            e_avg=_ratio(s_avg, threads),
            e_median=_ratio(s_median, threads),
            e_perc95=_ratio(s_perc95, threads),
        )

    def describe(self) -> str:
        rows = [
            ("N threads", str(self.threads)),
            ("Smin", _fmt(self.s_min)),
            ("Smax", _fmt(self.s_max)),
            ("Savg", _fmt(self.s_avg)),
            ("Smedian", _fmt(self.s_median)),
            ("Sperc95", _fmt(self.s_perc95)),
            ("Emin", _fmt(self.e_min)),
            ("Emax", _fmt(self.e_max)),
            ("Eavg", _fmt(self.e_avg)),
            ("Emedian", _fmt(self.e_median)),
            ("Eperc95", _fmt(self.e_perc95)),
        ]
        return "\n".join(f"{label}: {value}" for label, value in rows)