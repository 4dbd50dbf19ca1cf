from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make package importable when running tests without installing.
TOOLS = Path(__file__).resolve().parents[1] / "tools"
if str(TOOLS) not in sys.path:
    sys.path.insert(0, str(TOOLS))

from abbr_cli.persistence import Storage  # noqa: E402


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    return tmp_path / "abbr" / "storage.json"


@pytest.fixture
def cpu_storage() -> Storage:
    """CPU with two meanings, the second one described; RAM with one."""
    storage = Storage()
    storage.put("CPU", "Central Processing Unit")
    storage.put("CPU", "Critical Path Utility", "Project planning")
    storage.put("RAM", "Random Access Memory")
    return storage
