"""Pytest configuration and fixtures for integration tests."""

import pytest
from pathlib import Path

from migrant.migrations import MigrationRunner
from migrant.store.database import Database


@pytest.fixture
def runner(db: Database, migrations_dir: Path) -> MigrationRunner:
    """Provide a MigrationRunner over the temporary migrations directory."""
    return MigrationRunner(db, migrations_dir)


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch) -> Path:
    """Provide a db folder laid out the way the CLI expects."""
    for name in (
        "MIGRANT_DB_PATH",
        "MIGRANT_MIGRATIONS_DIR",
        "MIGRANT_ENV",
        "MIGRANT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    path = tmp_path / "db"
    (path / "migrations").mkdir(parents=True)
    return path
