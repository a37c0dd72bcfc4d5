"""
E2E smoke: runs scripts/run_quartet.py as a subprocess and checks the
printed report and the images it leaves behind.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
SCRIPT = ROOT / "scripts" / "run_quartet.py"


def run(*args: str, env_extra: dict | None = None) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))
    env.pop("QUARTET_OUT_DIR", None)
    env.update(env_extra or {})
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        cwd=ROOT, env=env, capture_output=True, text=True, timeout=120,
    )


@pytest.mark.order(1)
def test_full_run_writes_every_plot(tmp_path):
    proc = run("--out-dir", str(tmp_path), "--prefix", "quartet")
    assert proc.returncode == 0, f"run failed: {proc.stderr}"

    for i in range(1, 5):
        assert (tmp_path / f"quartet_{i}.png").exists(), f"missing plot {i}"
    assert (tmp_path / "quartet_overview.png").exists()

    out = proc.stdout
    for name in ["Set I:", "Set II:", "Set III:", "Set IV:"]:
        assert name in out, f"{name} missing from report"
    assert "slope = 0.50009" in out
    assert "Summary for All Sets:" in out


@pytest.mark.order(2)
def test_subset_without_plots(tmp_path):
    proc = run("--sets", "II", "--no-plots", env_extra={"QUARTET_OUT_DIR": str(tmp_path)})
    assert proc.returncode == 0, f"run failed: {proc.stderr}"
    assert "Set II:" in proc.stdout
    assert "Set I:" not in proc.stdout
    assert not list(tmp_path.glob("*.png")), "--no-plots still wrote images"


@pytest.mark.order(3)
def test_unknown_set_exits_with_error(tmp_path):
    proc = run("--sets", "VII", "--out-dir", str(tmp_path))
    assert proc.returncode == 2
    assert "[ERROR] Unknown dataset(s): VII" in proc.stderr


@pytest.mark.order(4)
def test_missing_config_file_exits_with_error(tmp_path):
    proc = run("--config", str(tmp_path / "missing.yaml"), "--out-dir", str(tmp_path))
    assert proc.returncode == 2
    assert "Config file not found" in proc.stderr
