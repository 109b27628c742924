"""Core types, configuration and errors for migrant."""

from .config import Config, load_config
from .exceptions import (
    AmbiguousVersionError,
    ConfigError,
    DatabaseError,
    DiscoveryError,
    MigrantError,
    StepExecutionError,
    StoreBootstrapError,
    TemplateError,
)
from .types import Direction, Migration, MigrationKind, MigrationStatus, VersionRecord

__all__ = [
    "Config",
    "load_config",
    "MigrantError",
    "DatabaseError",
    "ConfigError",
    "DiscoveryError",
    "AmbiguousVersionError",
    "StoreBootstrapError",
    "StepExecutionError",
    "TemplateError",
    "Direction",
    "Migration",
    "MigrationKind",
    "MigrationStatus",
    "VersionRecord",
]
