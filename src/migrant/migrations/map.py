"""Ordered, linked working set of migrations."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator

from ..core.types import Direction, Migration


@dataclass
class MigrationMap:
    """Selected migrations in the order they will be applied.

    Attributes:
        versions: Version numbers, ascending for UP and descending for DOWN.
        migrations: Descriptor for each version in ``versions``.
        direction: Direction the versions will be applied in.
    """

    versions: list[int] = field(default_factory=list)
    migrations: dict[int, Migration] = field(default_factory=dict)
    direction: Direction = Direction.UP

    def __len__(self) -> int:
        return len(self.versions)

    def __iter__(self) -> Iterator[Migration]:
        for v in self.versions:
            yield self.migrations[v]

    def __getitem__(self, version: int) -> Migration:
        return self.migrations[version]

    @property
    def first(self) -> Migration | None:
        return self.migrations[self.versions[0]] if self.versions else None

    @property
    def last(self) -> Migration | None:
        return self.migrations[self.versions[-1]] if self.versions else None

    def describe(self) -> str:
        """Human-readable span of the map, e.g. ``from 3 to 5``."""
        if not self.versions:
            return "nothing to do"
        return f"from {self.versions[0]} to {self.versions[-1]}"


def build(selected: Iterable[Migration], direction: Direction) -> MigrationMap:
    """Sort migrations for ``direction`` and link each to its neighbours.

    The descriptors are copied, so the caller's catalog keeps its
    unlinked entries.

    Args:
        selected: Migrations to include, in any order.
        direction: UP sorts ascending, DOWN descending.

    Returns:
        A MigrationMap whose ``previous``/``next`` links follow ``versions``.
    """
    mm = MigrationMap(direction=direction)
    for migration in selected:
        mm.migrations[migration.version] = replace(migration, next=None, previous=None)

    mm.versions = sorted(mm.migrations)
    if direction is Direction.DOWN:
        mm.versions.reverse()

    previous = None
    for v in mm.versions:
        mm.migrations[v].previous = previous
        if previous in mm.migrations:
            mm.migrations[previous].next = v
        previous = v

    return mm
