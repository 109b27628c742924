"""Applied-version bookkeeping.

The version table is append-only: every successful step adds a row and
the current version is the ``version_id`` of the newest row.
"""

from __future__ import annotations

import sqlite3

from loguru import logger

from ..core.exceptions import DatabaseError, StoreBootstrapError
from ..core.types import VersionRecord
from .database import Database

VERSION_TABLE = "migrant_db_version"

CREATE_VERSION_TABLE = f"""\
CREATE TABLE {VERSION_TABLE} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    version_id INTEGER NOT NULL,
    is_applied INTEGER NOT NULL DEFAULT 1,
    tstamp TEXT NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now'))
)"""

INSERT_VERSION = f"INSERT INTO {VERSION_TABLE} (version_id) VALUES (?)"

INSERT_RECORD = f"INSERT INTO {VERSION_TABLE} (version_id, is_applied) VALUES (?, ?)"

SELECT_CURRENT = (
    f"SELECT version_id FROM {VERSION_TABLE} ORDER BY tstamp DESC, id DESC LIMIT 1"
)


class VersionStore:
    """Reads and appends rows of the version table."""

    def __init__(self, db: Database):
        self.db = db

    def ensure_current_version(self) -> int:
        """Return the current version, creating the version table if needed.

        Any failure reading the table is taken to mean it does not exist
        yet. The table is then created and seeded with version 0 in a
        single transaction. This is not safe against concurrent first-time
        callers.

        Returns:
            The current version, 0 for a freshly bootstrapped store.

        Raises:
            StoreBootstrapError: If the table could not be created or seeded.
        """
        try:
            row = self.db.connection.execute(SELECT_CURRENT).fetchone()
        except sqlite3.Error as e:
            logger.debug(f"Version table unreadable ({e}), bootstrapping")
            self._bootstrap(create=True)
            return 0

        if row is None:
            logger.debug("Version table is empty, recording version 0")
            self._bootstrap(create=False)
            return 0

        return row[0]

    def _bootstrap(self, create: bool) -> None:
        try:
            with self.db.transaction() as cursor:
                if create:
                    cursor.execute(CREATE_VERSION_TABLE)
                cursor.execute(INSERT_VERSION, (0,))
        except DatabaseError as e:
            raise StoreBootstrapError(
                f"Couldn't create or initialize {VERSION_TABLE}: {e}"
            ) from e
        logger.info(f"Initialized {VERSION_TABLE} at version 0")

    def record_version(
        self,
        version: int,
        applied: bool = True,
        cursor: sqlite3.Cursor | None = None,
    ) -> None:
        """Append a row marking ``version`` as current.

        Args:
            version: Version the database is now at.
            applied: False when the row was written by rolling a migration back.
            cursor: Cursor of an open transaction to write through, so the
                row commits together with the migration that produced it.
        """
        params = (version, int(applied))
        if cursor is not None:
            cursor.execute(INSERT_RECORD, params)
        else:
            self.db.execute(INSERT_RECORD, params)
        logger.debug(f"Recorded version {version}")

    def history(self) -> list[VersionRecord]:
        """All version records, oldest first."""
        cursor = self.db.execute(
            f"SELECT version_id, tstamp FROM {VERSION_TABLE} ORDER BY tstamp, id"
        )
        return [VersionRecord(row["version_id"], row["tstamp"]) for row in cursor]

    def applied_at(self, version: int) -> str | None:
        """When ``version`` was last applied going up, or None.

        Rows written by a rollback also carry a version number (the one
        left behind) but are not applications of it, so they are skipped.
        """
        row = self.db.execute(
            f"SELECT tstamp FROM {VERSION_TABLE} WHERE version_id = ? AND is_applied = 1 "
            "ORDER BY tstamp DESC, id DESC LIMIT 1",
            (version,),
        ).fetchone()
        return row["tstamp"] if row else None
