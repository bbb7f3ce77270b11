"""Pytest configuration. Ensures project root is in sys.path for top-level modules (typecov_cli, cli, report)."""
import json
from pathlib import Path

import pytest


@pytest.fixture(scope="session", autouse=True)
def _add_project_root_to_path():
    root = Path(__file__).resolve().parent.parent
    import sys
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


@pytest.fixture
def write_snapshot(tmp_path: Path):
    """Write a snapshot mapping as JSON under tmp_path and return its path."""

    def _write(name: str, data: dict) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
