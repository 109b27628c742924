"""Discovery of migration scripts on disk.

Migration files are named ``<version>_<description>.<ext>`` where
``<ext>`` is ``sql`` or ``py``. Anything else in the directory is ignored.
"""

from __future__ import annotations

import re
from pathlib import Path

from loguru import logger

from ..core.exceptions import AmbiguousVersionError, DiscoveryError
from ..core.types import Migration, MigrationKind

SEPARATOR = "_"
VERSION_PATTERN = re.compile(r"[+-]?[0-9]+")

Catalog = dict[int, Migration]


def numeric_component(name: str) -> int:
    """Extract the version number from a migration filename.

    Args:
        name: Filename such as ``12_add_users.sql``.

    Returns:
        The integer before the first separator.

    Raises:
        ValueError: If there is no separator or the prefix is not an integer.
    """
    prefix, sep, _ = name.partition(SEPARATOR)
    if not sep:
        raise ValueError(f"no separator found in {name!r}")
    if not VERSION_PATTERN.fullmatch(prefix):
        raise ValueError(f"non-integer version prefix in {name!r}")
    return int(prefix)


def discover(directory: Path) -> Catalog:
    """Collect every migration script in a directory, keyed by version.

    Args:
        directory: Directory holding migration scripts.

    Returns:
        Mapping of version to Migration with no links set.

    Raises:
        DiscoveryError: If the directory cannot be listed.
        AmbiguousVersionError: If two files claim the same version.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise DiscoveryError(f"Cannot read migrations directory {directory}: {e}") from e

    catalog: Catalog = {}
    for path in entries:
        kind = MigrationKind.from_path(path)
        if kind is None or not path.is_file():
            continue

        try:
            version = numeric_component(path.name)
        except ValueError:
            logger.debug(f"Skipping {path.name}: no numeric version prefix")
            continue

        if version in catalog:
            raise AmbiguousVersionError(version, catalog[version].source, path)

        catalog[version] = Migration(version=version, source=path, kind=kind)

    logger.debug(f"Discovered {len(catalog)} migration(s) in {directory}")
    return catalog


def most_recent_version(catalog: Catalog) -> int | None:
    """Highest version in the catalog, or None if it is empty."""
    if not catalog:
        return None
    return max(catalog)


def version_before(catalog: Catalog, version: int) -> int:
    """Highest catalog version strictly below ``version``, or 0."""
    return max((v for v in catalog if v < version), default=0)
