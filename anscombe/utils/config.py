"""
Run configuration: defaults, optional YAML file, environment overrides.
"""
from __future__ import annotations

import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(os.environ.get("QUARTET_CONFIG", "config/config.yaml"))

DEFAULTS: dict = {
    "output_dir": "artifacts",
    "file_prefix": "anscombe_set",
    "overview": True,
    "plots": {
        "x_range": [2, 20],
        "y_range": [2, 14],
        "width_in": 5.0,
        "height_in": 5.0,
        "dpi": 100,
        "marker_size": 3.0,
    },
}


def _merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def load_cfg(path: str | Path | None = None) -> dict:
    """
    Defaults overlaid with the YAML file and QUARTET_OUT_DIR.
    An explicitly passed path must exist; the default one is optional.
    """
    cfg_path = Path(path) if path else CONFIG_PATH
    raw: dict = {}
    if cfg_path.exists():
        with open(cfg_path, "r") as f:
            raw = yaml.safe_load(f) or {}
    elif path:
        raise FileNotFoundError(f"Config file not found: {cfg_path}")

    cfg = _merge(DEFAULTS, raw)
    if os.environ.get("QUARTET_OUT_DIR"):
        cfg["output_dir"] = os.environ["QUARTET_OUT_DIR"]
    return cfg
