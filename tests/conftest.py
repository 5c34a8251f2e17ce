# tests/conftest.py
import os
import tempfile
from pathlib import Path

# Settings are read once at import time, so point them at test values first
_DB_PATH = Path(tempfile.gettempdir()) / "export_platform_test.db"
if _DB_PATH.exists():
    _DB_PATH.unlink()
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_PATH}"
os.environ["QUERY_BACKEND"] = "sql"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["RATES_API_URL"] = "https://carrier.test/rates"

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
