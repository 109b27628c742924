"""Configuration management for migrant."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .exceptions import ConfigError

CONFIG_FILENAME = "dbconf.yml"
DEFAULT_ENVIRONMENT = "development"


def _default_db_path() -> Path:
    """Get default database path."""
    return Path("db") / "migrant.db"


def _default_migrations_dir() -> Path:
    """Get default migrations directory."""
    return Path("db") / "migrations"


@dataclass
class Config:
    """Main application configuration."""

    db_path: Path = field(default_factory=_default_db_path)
    migrations_dir: Path = field(default_factory=_default_migrations_dir)
    environment: str = DEFAULT_ENVIRONMENT
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, config: "Config | None" = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            config: Existing configuration to override, defaults if None.
        """
        config = config or cls()

        if path := os.environ.get("MIGRANT_DB_PATH"):
            config.db_path = Path(path)

        if path := os.environ.get("MIGRANT_MIGRATIONS_DIR"):
            config.migrations_dir = Path(path)

        if env := os.environ.get("MIGRANT_ENV"):
            config.environment = env

        if level := os.environ.get("MIGRANT_LOG_LEVEL"):
            config.log_level = level.upper()

        return config

    @classmethod
    def from_file(cls, path: Path, environment: str = DEFAULT_ENVIRONMENT) -> "Config":
        """Load one environment from a dbconf.yml file.

        The file holds one mapping per environment:

            development:
                db_path: dev.db
                migrations_dir: migrations

        Relative paths are resolved against the file's directory.

        Args:
            path: Path to the YAML file.
            environment: Name of the environment section to use.

        Returns:
            Config for that environment.

        Raises:
            ConfigError: If the file is unreadable, malformed, or lacks the
                environment.
        """
        try:
            data = yaml.safe_load(path.read_text())
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict) or environment not in data:
            raise ConfigError(f"Environment '{environment}' not found in {path}")

        section = data[environment] or {}
        if not isinstance(section, dict):
            raise ConfigError(f"Environment '{environment}' in {path} must be a mapping")

        base = path.parent
        config = cls(environment=environment)
        if "db_path" in section:
            config.db_path = base / str(section["db_path"])
        if "migrations_dir" in section:
            config.migrations_dir = base / str(section["migrations_dir"])
        if "log_level" in section:
            config.log_level = str(section["log_level"]).upper()
        return config


def load_config(conf_dir: Path | None = None, environment: str | None = None) -> Config:
    """Build the effective configuration.

    Uses ``<conf_dir>/dbconf.yml`` when it exists, then applies environment
    variable overrides.

    Args:
        conf_dir: Directory holding dbconf.yml, or None to skip the file.
        environment: Environment name, defaults to MIGRANT_ENV or development.
    """
    environment = environment or os.environ.get("MIGRANT_ENV") or DEFAULT_ENVIRONMENT

    config = Config(environment=environment)
    if conf_dir is not None:
        conf_file = conf_dir / CONFIG_FILENAME
        if conf_file.exists():
            config = Config.from_file(conf_file, environment)
        else:
            config.db_path = conf_dir / config.db_path.name
            config.migrations_dir = conf_dir / "migrations"

    config = Config.from_env(config)
    config.environment = environment
    return config
