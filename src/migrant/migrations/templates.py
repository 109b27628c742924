"""Creation of new, empty migration files."""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path

from loguru import logger

from ..core.exceptions import TemplateError
from ..core.types import MigrationKind

SQL_TEMPLATE = """\
-- +migrate Up
-- SQL in this section is executed when the migration is applied.


-- +migrate Down
-- SQL in this section is executed when the migration is rolled back.

"""

PYTHON_TEMPLATE = '''\
{name!r}


def up(conn):
    """Apply the migration."""
    pass


def down(conn):
    """Roll back the migration."""
    pass
'''

TEMPLATES = {
    MigrationKind.SQL: SQL_TEMPLATE,
    MigrationKind.PYTHON: PYTHON_TEMPLATE,
}


def _slug(name: str) -> str:
    slug = re.sub(r"[^0-9a-zA-Z]+", "_", name).strip("_").lower()
    if not slug:
        raise TemplateError(f"Invalid migration name: {name!r}")
    return slug


def create_migration(
    directory: Path,
    name: str,
    kind: MigrationKind = MigrationKind.SQL,
    now: datetime | None = None,
) -> Path:
    """Write a new migration skeleton versioned by the current time.

    Args:
        directory: Migrations directory, created if missing.
        name: Free-text description used in the filename.
        kind: SQL script or Python module.
        now: Timestamp for the version, defaults to the current time.

    Returns:
        Path of the created file.

    Raises:
        TemplateError: If the name is empty or the file already exists.
    """
    version = (now or datetime.now()).strftime("%Y%m%d%H%M%S")
    path = directory / f"{version}_{_slug(name)}{kind.value}"

    try:
        directory.mkdir(parents=True, exist_ok=True)
        with path.open("x") as f:
            f.write(TEMPLATES[kind].format(name=name))
    except FileExistsError as e:
        raise TemplateError(f"Migration already exists: {path}") from e
    except OSError as e:
        raise TemplateError(f"Cannot create {path}: {e}") from e

    logger.info(f"Created migration {path}")
    return path
