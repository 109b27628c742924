"""Custom exceptions for migrant."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Direction, Migration


class MigrantError(Exception):
    """Base exception for all migrant errors."""

    pass


class DatabaseError(MigrantError):
    """Database operation failed."""

    pass


class ConfigError(MigrantError):
    """Configuration could not be loaded."""

    pass


class DiscoveryError(MigrantError):
    """Migrations directory could not be read."""

    pass


class AmbiguousVersionError(MigrantError):
    """More than one file claims the same migration version."""

    def __init__(self, version: int, first: Path, second: Path):
        """Initialize exception with the conflicting files.

        Args:
            version: Version number claimed twice.
            first: File seen first.
            second: File seen second.
        """
        self.version = version
        self.first = first
        self.second = second
        super().__init__(
            f"More than one file specifies the migration for version {version} "
            f"({first} and {second})"
        )


class StoreBootstrapError(MigrantError):
    """Version table could not be created or initialized."""

    pass


class StepExecutionError(MigrantError):
    """A single migration failed to apply."""

    def __init__(
        self,
        migration: "Migration",
        direction: "Direction",
        cause: Exception,
        completed: list[int] | None = None,
    ):
        """Initialize exception with the failing step.

        Args:
            migration: Migration that failed.
            direction: Direction it was applied in.
            cause: Underlying exception.
            completed: Versions applied before the failure, in order.
        """
        self.migration = migration
        self.direction = direction
        self.cause = cause
        self.completed = completed or []
        super().__init__(
            f"{migration.source.name} ({direction.value}) failed: {cause}"
        )


class TemplateError(MigrantError):
    """New migration file could not be created."""

    pass
