"""Versioned schema migrations.

Example:
    from migrant.migrations import MigrationRunner

    runner = MigrationRunner(db, Path("db/migrations"))
    runner.run()
"""

from .catalog import discover, most_recent_version, numeric_component, version_before
from .map import MigrationMap, build
from .resolver import Resolution, resolve, select, version_filter
from .runner import MigrationRunner, StepResult
from .templates import create_migration

__all__ = [
    "MigrationRunner",
    "StepResult",
    "MigrationMap",
    "Resolution",
    "build",
    "create_migration",
    "discover",
    "most_recent_version",
    "numeric_component",
    "resolve",
    "select",
    "version_before",
    "version_filter",
]
