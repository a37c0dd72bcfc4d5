"""
Human-readable run report: per-dataset block, totals, summary table.
"""
from __future__ import annotations

import pandas as pd

from anscombe.utils.glossary import METRIC_TOOLTIPS
from anscombe.utils.runner import DatasetOutcome, RunSummary

RULE = "-" * 50


def _duration(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


def format_outcome(o: DatasetOutcome) -> str:
    if not o.ok:
        return f"{o.name}: regression error: {o.error}"
    lines = [
        f"{o.name}:",
        f"  slope = {o.fit.slope:.5f}",
        f"  intercept = {o.fit.intercept:.5f}",
        f"  R-squared = {o.metrics.r2:.4f}",
        f"  Residual Std Error = {o.metrics.rse:.4f}",
        f"  F-statistic = {o.metrics.f_statistic:.4f}",
        f"  execution time = {_duration(o.seconds)}",
        f"  Memory used = {o.peak_bytes:,} bytes ({o.peak_bytes / 1024.0:.2f} KB)",
    ]
    return "\n".join(lines) + "\n"


def print_outcome(o: DatasetOutcome) -> None:
    print(format_outcome(o))


def summary_frame(summary: RunSummary) -> pd.DataFrame:
    rows = []
    for o in summary.outcomes:
        row = {"dataset": o.name, "status": "ok" if o.ok else type(o.error).__name__}
        if o.ok:
            row.update(
                slope=o.fit.slope,
                intercept=o.fit.intercept,
                r2=o.metrics.r2,
                rse=o.metrics.rse,
                f_statistic=o.metrics.f_statistic,
                seconds=o.seconds,
                peak_bytes=o.peak_bytes,
            )
        rows.append(row)
    cols = ["dataset", "status", "slope", "intercept", "r2", "rse", "f_statistic", "seconds", "peak_bytes"]
    return pd.DataFrame(rows).reindex(columns=cols)


def format_summary(summary: RunSummary, legend: bool = False) -> str:
    lines = [
        RULE,
        "Summary for All Sets:",
        f"  Total Execution Time = {_duration(summary.total_seconds)}",
        f"  Total Memory Used = {summary.total_bytes:,} bytes ({summary.total_bytes / 1024.0:.2f} KB)",
        RULE,
    ]
    if summary.outcomes:
        df = summary_frame(summary).set_index("dataset")
        lines.append(df.drop(columns=["seconds", "peak_bytes"]).to_string(float_format=lambda v: f"{v:.4f}"))
    if legend:
        lines.append("")
        lines.extend(f"  {k}: {v}" for k, v in METRIC_TOOLTIPS.items())
    return "\n".join(lines)
