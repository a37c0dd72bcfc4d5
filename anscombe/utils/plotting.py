"""
Scatter + fitted-line images for each dataset, plus a 2x2 overview.
Headless (Agg), so it runs in CI without a display.
"""
from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from anscombe.utils.datasets import Series  # noqa: E402
from anscombe.utils.regression import FitResult  # noqa: E402


def _draw(ax, series: Series, fit: FitResult | None, opts: dict) -> None:
    x_lo, x_hi = opts["x_range"]
    y_lo, y_hi = opts["y_range"]
    # marker_size is a radius; matplotlib wants the diameter
    ax.plot(series.x, series.y, "o", markersize=2 * opts["marker_size"], color="tab:blue")
    if fit is not None:
        ax.plot([x_lo, x_hi], list(fit.predict([x_lo, x_hi])), "-", color="tab:red", linewidth=1)
    ax.set_title(series.name)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_xlim(x_lo, x_hi)
    ax.set_ylim(y_lo, y_hi)


def save_plot(series: Series, fit: FitResult, out: Path, opts: dict) -> Path:
    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig = plt.figure(figsize=(opts["width_in"], opts["height_in"]))
    _draw(fig.add_subplot(1, 1, 1), series, fit, opts)
    fig.tight_layout()
    fig.savefig(out, dpi=opts["dpi"])
    plt.close(fig)
    print(f"[plot] Wrote {out}")
    return out


def save_overview(panels: list[tuple[Series, FitResult | None]], out: Path, opts: dict) -> Path:
    """All datasets side by side; a panel without a fit shows points only."""
    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig, axes = plt.subplots(2, 2, figsize=(2 * opts["width_in"], 2 * opts["height_in"]))
    flat = list(axes.flat)
    for ax, (series, fit) in zip(flat, panels):
        _draw(ax, series, fit, opts)
    for ax in flat[len(panels):]:
        ax.set_visible(False)
    fig.suptitle("Anscombe's Quartet")
    fig.tight_layout()
    fig.savefig(out, dpi=opts["dpi"])
    plt.close(fig)
    print(f"[plot] Wrote {out}")
    return out
