"""Tests for MigrationMap building and linking."""

from pathlib import Path

from migrant.core.types import Direction, Migration, MigrationKind
from migrant.migrations.map import MigrationMap, build


def migrations(*versions: int) -> list[Migration]:
    return [
        Migration(version=v, source=Path(f"{v}_m.sql"), kind=MigrationKind.SQL)
        for v in versions
    ]


class TestBuildUp:
    """Tests for ascending maps."""

    def test_sorts_ascending(self):
        mm = build(migrations(5, 3, 4), Direction.UP)
        assert mm.versions == [3, 4, 5]
        assert mm.direction is Direction.UP

    def test_links(self):
        mm = build(migrations(3, 4, 5), Direction.UP)

        assert mm.migrations[3].previous is None
        assert mm.migrations[3].next == 4
        assert mm.migrations[4].previous == 3
        assert mm.migrations[4].next == 5
        assert mm.migrations[5].previous == 4
        assert mm.migrations[5].next is None

    def test_links_follow_gaps(self):
        mm = build(migrations(10, 2, 30), Direction.UP)
        assert mm[2].next == 10
        assert mm[10].next == 30
        assert mm[30].previous == 10


class TestBuildDown:
    """Tests for descending maps."""

    def test_reverses_order(self):
        mm = build(migrations(3, 4, 5), Direction.DOWN)
        assert mm.versions == [5, 4, 3]
        assert mm.direction is Direction.DOWN

    def test_links(self):
        mm = build(migrations(3, 4, 5), Direction.DOWN)

        assert mm.migrations[5].previous is None
        assert mm.migrations[5].next == 4
        assert mm.migrations[4].next == 3
        assert mm.migrations[3].previous == 4
        assert mm.migrations[3].next is None


class TestMigrationMap:
    """Tests for MigrationMap helpers."""

    def test_empty_selection(self):
        mm = build([], Direction.UP)
        assert len(mm) == 0
        assert mm.first is None
        assert mm.last is None
        assert mm.describe() == "nothing to do"

    def test_single_element_has_no_links(self):
        mm = build(migrations(7), Direction.DOWN)
        assert mm.versions == [7]
        assert mm[7].previous is None
        assert mm[7].next is None

    def test_iterates_in_order(self):
        mm = build(migrations(1, 3, 2), Direction.DOWN)
        assert [m.version for m in mm] == [3, 2, 1]

    def test_describe(self):
        mm = build(migrations(3, 4, 5), Direction.DOWN)
        assert mm.describe() == "from 5 to 3"
        assert mm.first.version == 5
        assert mm.last.version == 3

    def test_every_version_has_descriptor(self):
        mm = build(migrations(8, 1, 4, 2), Direction.UP)
        assert set(mm.versions) == set(mm.migrations)
        assert len(mm.versions) == len(set(mm.versions))

    def test_default_is_empty(self):
        assert len(MigrationMap()) == 0

    def test_rebuild_resets_links(self):
        """Descriptors already linked elsewhere are relinked from scratch."""
        linked = build(migrations(1, 2, 3), Direction.UP)
        mm = build([linked[2]], Direction.UP)
        assert mm[2].previous is None
        assert mm[2].next is None
        assert linked[2].next == 3
