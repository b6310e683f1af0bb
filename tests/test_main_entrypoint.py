from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"


def _run(*args: str) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(SRC), env.get("PYTHONPATH", "")) if p)
    cmd = [sys.executable, "-m", "labyrinth", *args]
    return subprocess.run(cmd, capture_output=True, text=True, env=env, timeout=20)


def test_module_entrypoint_moves_player(tmp_path: Path):
    p = tmp_path / "map.txt"
    p.write_text("1..\n...\n", encoding="utf-8")

    proc = _run("-m", str(p), "-p", "1", "--move", "right")

    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.splitlines() == [".1.", "..."]


def test_module_entrypoint_failure_exit_status(tmp_path: Path):
    p = tmp_path / "map.txt"
    p.write_text("..#\n###\n#..\n", encoding="utf-8")

    proc = _run("-m", str(p), "-p", "1")

    assert proc.returncode == 1
    assert proc.stdout == ""
    assert "more than one empty area" in proc.stderr


def test_module_entrypoint_version():
    proc = _run("--version")
    assert proc.returncode == 0
    assert proc.stdout.startswith("labyrinth ")
