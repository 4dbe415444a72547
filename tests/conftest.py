import os
import sys
from pathlib import Path

import pytest


# Ensure project root is on sys.path for `import test262_harness`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SAMPLE_ROOT = ROOT / "sample-test262"

os.environ.setdefault("TEST262_ROOT", str(SAMPLE_ROOT))


@pytest.fixture
def sample_root() -> Path:
    return SAMPLE_ROOT


@pytest.fixture
def write_file(tmp_path):
    """Write text under tmp_path, creating parent directories."""
    def _write(relative: str, text: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8", newline="")
        return path
    return _write
