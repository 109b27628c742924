"""Persistence layer for migrant.

- Database: SQLite connection and transaction management
- VersionStore: append-only record of applied versions

Example:
    from migrant.store import Database, VersionStore

    with Database(Path("db/migrant.db")) as db:
        current = VersionStore(db).ensure_current_version()
"""

from .database import Database
from .versions import VERSION_TABLE, VersionStore

__all__ = [
    "Database",
    "VersionStore",
    "VERSION_TABLE",
]
