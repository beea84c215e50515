"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root to path for imports - do this before other imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the app at an empty temporary data directory."""
    data_path = tmp_path / "Data"
    monkeypatch.setenv("INVOICING_DATA_DIR", str(data_path))
    return data_path


@pytest.fixture
def client(data_dir):
    """Create test client with fresh repositories under ``data_dir``."""
    from invoicing import api as api_module
    from invoicing.server import app

    api_module.reset_dependencies()
    yield TestClient(app)
    api_module.reset_dependencies()
