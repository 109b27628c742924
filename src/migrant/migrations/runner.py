"""Migration runner for migrant.

Resolves the migrations between the recorded version and a target, then
applies them one at a time. Each step commits together with its version
row. A failing step stops the run; steps already applied stay applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from loguru import logger

from ..core.exceptions import StepExecutionError
from ..core.types import Direction, Migration, MigrationStatus
from ..store.database import Database
from ..store.versions import VersionStore
from .catalog import Catalog, discover, version_before
from .executors import execute
from .map import MigrationMap, build
from .resolver import select


@dataclass
class StepResult:
    """A successfully applied migration step."""

    migration: Migration
    direction: Direction
    statements: int
    recorded_version: int

    def __str__(self) -> str:
        return f"OK   {self.migration.source.name} ({self.statements} statements)"


StepCallback = Callable[[StepResult], None]


class MigrationRunner:
    """Applies versioned migration scripts to a SQLite database.

    Example:
        with Database(config.db_path) as db:
            runner = MigrationRunner(db, config.migrations_dir)
            results = runner.run()
            print(f"Now at version {runner.get_version()}")
    """

    def __init__(self, db: Database, migrations_dir: Path):
        """Initialize with database and migrations directory.

        Args:
            db: Connected database to migrate.
            migrations_dir: Directory holding the migration scripts.
        """
        self.db = db
        self.migrations_dir = migrations_dir
        self.store = VersionStore(db)

    def get_version(self) -> int:
        """Current version, bootstrapping the version table on first use."""
        return self.store.ensure_current_version()

    def get_migrations(self) -> Catalog:
        """Discover the migration scripts on disk."""
        return discover(self.migrations_dir)

    def plan(self, target: int | None = None) -> MigrationMap:
        """Migrations that ``run(target)`` would apply, in order."""
        return select(self.get_version(), target, self.get_migrations())

    def run(
        self,
        target: int | None = None,
        on_step: StepCallback | None = None,
    ) -> list[StepResult]:
        """Migrate to ``target``, or to the most recent version if None.

        Args:
            target: Version to migrate to.
            on_step: Called after each applied step.

        Returns:
            Results of the applied steps, in order.

        Raises:
            StepExecutionError: If a step fails; later steps are not run.
        """
        current = self.get_version()
        catalog = self.get_migrations()
        mm = select(current, target, catalog)

        if not mm:
            logger.info(f"No migrations to run, current version: {current}")
            return []

        logger.info(f"Migrating {mm.describe()}, current version: {current}")
        return self._apply(mm, catalog, on_step)

    def down(self, on_step: StepCallback | None = None) -> list[StepResult]:
        """Roll back the migration at the current version."""
        current = self.get_version()
        catalog = self.get_migrations()

        if current not in catalog:
            logger.info(f"No migration to roll back at version {current}")
            return []

        return self._apply(build([catalog[current]], Direction.DOWN), catalog, on_step)

    def redo(self, on_step: StepCallback | None = None) -> list[StepResult]:
        """Roll back the current migration and apply it again."""
        current = self.get_version()
        results = self.down(on_step)
        if not results:
            return []
        return results + self.run(current, on_step)

    def status(self) -> list[MigrationStatus]:
        """Applied state of every migration on disk, oldest first."""
        current = self.get_version()
        catalog = self.get_migrations()
        return [
            MigrationStatus(
                migration=catalog[v],
                applied_at=self.store.applied_at(v) if v <= current else None,
            )
            for v in sorted(catalog)
        ]

    def _apply(
        self,
        mm: MigrationMap,
        catalog: Catalog,
        on_step: StepCallback | None,
    ) -> list[StepResult]:
        results: list[StepResult] = []

        for migration in mm:
            if mm.direction is Direction.UP:
                recorded = migration.version
            else:
                recorded = version_before(catalog, migration.version)

            try:
                with self.db.transaction() as cursor:
                    statements = execute(cursor, migration, mm.direction)
                    self.store.record_version(
                        recorded,
                        applied=mm.direction is Direction.UP,
                        cursor=cursor,
                    )
            except Exception as e:
                logger.error(f"Migration {migration.version} failed: {e}")
                raise StepExecutionError(
                    migration,
                    mm.direction,
                    e,
                    completed=[r.migration.version for r in results],
                ) from e

            result = StepResult(migration, mm.direction, statements, recorded)
            logger.info(f"Applied {migration.source.name} {mm.direction.value}")
            results.append(result)
            if on_step is not None:
                on_step(result)

        return results
