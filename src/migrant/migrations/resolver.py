"""Selection of the migrations needed to move between two versions."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from ..core.types import Direction
from .catalog import Catalog, most_recent_version
from .map import MigrationMap, build


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a target against the current version.

    Attributes:
        current: Version the database is at.
        target: Effective target, None when the catalog is empty and no
            target was requested.
        direction: UP or DOWN, None when there is nothing to do.
    """

    current: int
    target: int | None
    direction: Direction | None

    def includes(self, version: int) -> bool:
        """Whether ``version`` belongs to the range."""
        if self.target is None:
            return False
        return version_filter(version, self.current, self.target)


def version_filter(version: int, current: int, target: int | None) -> bool:
    """Decide whether a migration belongs between current and target.

    Moving up excludes ``current`` and includes ``target``; moving down
    includes both bounds.

    Args:
        version: Candidate migration version.
        current: Version the database is at.
        target: Requested version, None meaning "most recent".
    """
    if target is None:
        return version > current

    if target > current:
        return current < version <= target

    if target < current:
        return target <= version <= current

    return False


def resolve(current: int, target: int | None, catalog: Catalog) -> Resolution:
    """Work out the effective target and direction.

    Args:
        current: Version the database is at.
        target: Requested version, None to use the most recent available.
        catalog: Discovered migrations.
    """
    if target is None:
        target = most_recent_version(catalog)
        if target is None:
            return Resolution(current, None, None)

    return Resolution(current, target, Direction.between(current, target))


def select(current: int, target: int | None, catalog: Catalog) -> MigrationMap:
    """Build the ordered map of migrations to run from current to target.

    Args:
        current: Version the database is at.
        target: Requested version, None to use the most recent available.
        catalog: Discovered migrations.

    Returns:
        The linked MigrationMap, empty if there is nothing to do.
    """
    resolution = resolve(current, target, catalog)
    if resolution.direction is None:
        logger.debug(f"No migrations between {current} and {resolution.target}")
        return MigrationMap()

    selected = [m for v, m in catalog.items() if resolution.includes(v)]
    mm = build(selected, resolution.direction)
    logger.debug(
        f"Resolved {len(mm)} migration(s) {resolution.direction.value} "
        f"from {current} to {resolution.target}"
    )
    return mm
