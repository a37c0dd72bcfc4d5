#!/usr/bin/env python3
"""
Fit and score the Anscombe Quartet, print diagnostics, write plots.

Usage:
  python scripts/run_quartet.py
  python scripts/run_quartet.py --out-dir artifacts --sets I IV --strict
Env (optional):
  QUARTET_CONFIG (default: config/config.yaml)
  QUARTET_OUT_DIR (overrides output_dir from the config)
Outputs:
  <out-dir>/<prefix>_<n>.png   one per dataset
  <out-dir>/<prefix>_overview.png
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from anscombe.utils.config import load_cfg
from anscombe.utils.datasets import select
from anscombe.utils.plotting import save_overview, save_plot
from anscombe.utils.report import format_summary, print_outcome
from anscombe.utils.runner import run_quartet


def eprint(*a, **k):
    print(*a, file=sys.stderr, **k)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="OLS fit + diagnostics for the Anscombe Quartet")
    p.add_argument("--config", default=None, help="YAML config (default: config/config.yaml if present)")
    p.add_argument("--out-dir", default=None, help="Directory for PNG output")
    p.add_argument("--prefix", default=None, help="Image file prefix")
    p.add_argument("--sets", nargs="+", default=None, help="Subset to run, e.g. I III or 'Set II'")
    p.add_argument("--no-plots", action="store_true", help="Skip writing images")
    p.add_argument("--legend", action="store_true", help="Explain each metric after the summary")
    p.add_argument("--strict", action="store_true", help="Exit 3 if any dataset fails")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    cfg = load_cfg(args.config)
    out_dir = Path(args.out_dir or cfg["output_dir"])
    prefix = args.prefix or cfg["file_prefix"]
    opts = cfg["plots"]

    try:
        datasets = select(args.sets)
    except ValueError as e:
        eprint(f"[ERROR] {e}")
        return 2
    print(f"[quartet] sets={','.join(s.name for _, s in datasets)} out={out_dir} plots={not args.no_plots}")

    plot = None
    if not args.no_plots:
        def plot(index, series, fit):
            return save_plot(series, fit, out_dir / f"{prefix}_{index}.png", opts)

    summary = run_quartet(datasets, plot=plot, report=print_outcome)

    if not args.no_plots and cfg.get("overview", True):
        fits = {o.name: o.fit for o in summary.outcomes}
        save_overview([(s, fits.get(s.name)) for _, s in datasets], out_dir / f"{prefix}_overview.png", opts)

    print(format_summary(summary, legend=args.legend))

    if summary.failures:
        eprint(f"[ERROR] {len(summary.failures)} dataset(s) failed: "
               + ", ".join(o.name for o in summary.failures))
        if args.strict:
            return 3
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except FileNotFoundError as e:
        eprint(f"[ERROR] {e}")
        sys.exit(2)
    except Exception as e:
        eprint(f"[FATAL] {type(e).__name__}: {e}")
        sys.exit(1)
