"""
Driver loop: fit + metrics per dataset with timing/allocation diagnostics.

A failing dataset is recorded on its outcome and the loop moves on.
Totals live on the returned RunSummary, never in module state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import time
import tracemalloc
from typing import Callable, Iterable, Optional

from anscombe.utils.datasets import Series
from anscombe.utils.regression import FitResult, MetricsResult, RegressionError, fit, metrics


@dataclass
class DatasetOutcome:
    index: int              # 1-based position in the quartet
    name: str
    fit: Optional[FitResult] = None
    metrics: Optional[MetricsResult] = None
    seconds: float = 0.0
    peak_bytes: int = 0
    plot_path: Optional[Path] = None
    error: Optional[RegressionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunSummary:
    outcomes: list[DatasetOutcome] = field(default_factory=list)
    total_seconds: float = 0.0
    total_bytes: int = 0

    def add(self, outcome: DatasetOutcome) -> None:
        self.outcomes.append(outcome)
        self.total_seconds += outcome.seconds
        self.total_bytes += outcome.peak_bytes

    @property
    def failures(self) -> list[DatasetOutcome]:
        return [o for o in self.outcomes if not o.ok]


def _score(series: Series) -> tuple[FitResult, MetricsResult]:
    result = fit(series.x, series.y)
    return result, metrics(series.x, series.y, result.slope, result.intercept)


def analyse(series: Series) -> tuple[FitResult, MetricsResult, float, int]:
    """
    Fit and score one series; returns (fit, metrics, seconds, peak_bytes).

    Timing comes from a first pass without tracemalloc, the allocation peak
    from a second, traced pass.
    """
    start = time.perf_counter()
    result, scores = _score(series)
    seconds = time.perf_counter() - start

    owner = not tracemalloc.is_tracing()
    if owner:
        tracemalloc.start()
    tracemalloc.reset_peak()
    base, _ = tracemalloc.get_traced_memory()
    try:
        _score(series)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        if owner:
            tracemalloc.stop()
    return result, scores, seconds, max(peak - base, 0)


def run_quartet(
    datasets: Iterable[tuple[int, Series]],
    plot: Callable[[int, Series, FitResult], Path] | None = None,
    report: Callable[[DatasetOutcome], None] | None = None,
) -> RunSummary:
    """
    Process each (index, series) pair in order.

    plot/report are called once per successful dataset (report also for
    failures) so the caller chooses where images and text go.
    """
    summary = RunSummary()
    for index, series in datasets:
        outcome = DatasetOutcome(index=index, name=series.name)
        try:
            outcome.fit, outcome.metrics, outcome.seconds, outcome.peak_bytes = analyse(series)
        except RegressionError as e:
            outcome.error = e
        else:
            if plot is not None:
                outcome.plot_path = plot(index, series, outcome.fit)
        summary.add(outcome)
        if report is not None:
            report(outcome)
    return summary
