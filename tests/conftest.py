import logging
import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture
def write_map(tmp_path: Path):
    """Write map text to a file and return its path.

    Text is written byte-for-byte so tests control line endings exactly.
    """

    def _write(text: str, name: str = "map.txt") -> Path:
        p = tmp_path / name
        p.write_bytes(text.encode("utf-8"))
        return p

    return _write


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for key in ("LABYRINTH_SETTINGS_FILE", "LABYRINTH_MAX_ROWS", "LABYRINTH_MAX_COLS", "LABYRINTH_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
