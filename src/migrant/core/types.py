"""Type definitions for migrant."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class Direction(Enum):
    """Direction of traversal over the migration sequence."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def between(cls, current: int, target: int) -> Optional["Direction"]:
        """Direction that moves from current to target, None if equal."""
        if target > current:
            return cls.UP
        if target < current:
            return cls.DOWN
        return None


class MigrationKind(Enum):
    """Kind of migration script, tagged by file extension."""

    SQL = ".sql"
    PYTHON = ".py"

    @classmethod
    def from_path(cls, path: Path) -> Optional["MigrationKind"]:
        """Kind for a file, or None if the extension is not recognized."""
        for kind in cls:
            if path.suffix == kind.value:
                return kind
        return None


@dataclass
class Migration:
    """A discovered migration script.

    Attributes:
        version: Version number parsed from the filename.
        source: Path to the script.
        kind: SQL script or Python module.
        next: Following version in the selected order, None if last.
        previous: Preceding version in the selected order, None if first.
    """

    version: int
    source: Path
    kind: MigrationKind
    next: Optional[int] = None
    previous: Optional[int] = None

    def __repr__(self) -> str:
        return f"Migration({self.version}, {self.source.name!r})"


@dataclass(frozen=True)
class VersionRecord:
    """One row of the version table."""

    version_id: int
    tstamp: str


@dataclass
class MigrationStatus:
    """Applied state of a single catalog migration."""

    migration: Migration
    applied_at: Optional[str] = None

    @property
    def pending(self) -> bool:
        """True if the migration has never been recorded."""
        return self.applied_at is None
