"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from migrant.store.database import Database
from migrant.store.versions import VersionStore
from tests.fakes import CREATE_POSTS, CREATE_USERS, SEED_USERS


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path for tests."""
    return tmp_path / "test.db"


@pytest.fixture
def db(test_db_path: Path) -> Database:
    """Provide a connected database instance."""
    database = Database(test_db_path)
    database.connect()
    yield database
    database.close()


@pytest.fixture
def version_store(db: Database) -> VersionStore:
    """Provide a VersionStore instance."""
    return VersionStore(db)


@pytest.fixture
def migrations_dir(tmp_path: Path) -> Path:
    """Provide an empty migrations directory."""
    path = tmp_path / "migrations"
    path.mkdir()
    return path


@pytest.fixture
def write_migration(migrations_dir: Path):
    """Provide a helper that writes a file into the migrations directory."""

    def _write(name: str, content: str = "") -> Path:
        path = migrations_dir / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def sample_migrations(write_migration) -> list[Path]:
    """Create three migrations: two SQL scripts and one Python module."""
    return [
        write_migration("001_create_users.sql", CREATE_USERS),
        write_migration("002_create_posts.sql", CREATE_POSTS),
        write_migration("003_seed_users.py", SEED_USERS),
    ]
