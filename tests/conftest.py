from __future__ import annotations

from pathlib import Path

import pytest

import resume_builder.data.db as app_db
from resume_builder.data.db import init_db

TEST_JWT_SECRET = "test-secret-for-signing-bearer-tokens"


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Use a temporary SQLite DB for API and storage tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    app_db.reset_engine()
    init_db()
    yield
    # Dispose engine to release connections
    app_db.reset_engine()


@pytest.fixture(autouse=True)
def _auto_api_db(request: pytest.FixtureRequest) -> None:
    """Automatically add api_db fixture to tests in API test files."""
    # Check if test file name contains "api" (case-insensitive)
    test_file_path = Path(str(request.node.fspath))
    if "api" in test_file_path.stem.lower():
        request.getfixturevalue("api_db")
