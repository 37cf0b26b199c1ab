import os
import sys
from pathlib import Path

import pytest

# Reporter reads this at import time
os.environ["RONDO_NO_COLORS"] = "1"

# Ensure the project `src` directory is on sys.path so tests can import
# modules like `checks`, `graph`, `reporter`, etc.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"
