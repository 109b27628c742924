"""Tests for configuration loading."""

from pathlib import Path

import pytest

from migrant.core.config import Config, load_config
from migrant.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove migrant environment variables for each test."""
    for name in (
        "MIGRANT_DB_PATH",
        "MIGRANT_MIGRATIONS_DIR",
        "MIGRANT_ENV",
        "MIGRANT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


DBCONF = """\
development:
    db_path: dev.db
    migrations_dir: migrations

test:
    db_path: data/test.db
    migrations_dir: migrations
    log_level: debug
"""


class TestConfig:
    """Tests for the Config dataclass."""

    def test_defaults(self):
        config = Config()
        assert config.db_path == Path("db") / "migrant.db"
        assert config.migrations_dir == Path("db") / "migrations"
        assert config.environment == "development"
        assert config.log_level == "WARNING"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MIGRANT_DB_PATH", "/tmp/x.db")
        monkeypatch.setenv("MIGRANT_MIGRATIONS_DIR", "/tmp/m")
        monkeypatch.setenv("MIGRANT_LOG_LEVEL", "info")

        config = Config.from_env()
        assert config.db_path == Path("/tmp/x.db")
        assert config.migrations_dir == Path("/tmp/m")
        assert config.log_level == "INFO"


class TestFromFile:
    """Tests for Config.from_file()."""

    def test_reads_environment(self, tmp_path: Path):
        conf = tmp_path / "dbconf.yml"
        conf.write_text(DBCONF)

        config = Config.from_file(conf, "test")
        assert config.db_path == tmp_path / "data" / "test.db"
        assert config.migrations_dir == tmp_path / "migrations"
        assert config.environment == "test"
        assert config.log_level == "DEBUG"

    def test_missing_environment(self, tmp_path: Path):
        conf = tmp_path / "dbconf.yml"
        conf.write_text(DBCONF)

        with pytest.raises(ConfigError, match="production"):
            Config.from_file(conf, "production")

    def test_invalid_yaml(self, tmp_path: Path):
        conf = tmp_path / "dbconf.yml"
        conf.write_text("development: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            Config.from_file(conf)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Cannot read"):
            Config.from_file(tmp_path / "dbconf.yml")


class TestLoadConfig:
    """Tests for load_config()."""

    def test_without_file_uses_folder(self, tmp_path: Path):
        config = load_config(tmp_path)
        assert config.db_path == tmp_path / "migrant.db"
        assert config.migrations_dir == tmp_path / "migrations"

    def test_with_file(self, tmp_path: Path):
        (tmp_path / "dbconf.yml").write_text(DBCONF)

        config = load_config(tmp_path)
        assert config.db_path == tmp_path / "dev.db"

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch):
        (tmp_path / "dbconf.yml").write_text(DBCONF)
        monkeypatch.setenv("MIGRANT_DB_PATH", str(tmp_path / "other.db"))

        assert load_config(tmp_path).db_path == tmp_path / "other.db"

    def test_environment_from_env_var(self, tmp_path: Path, monkeypatch):
        (tmp_path / "dbconf.yml").write_text(DBCONF)
        monkeypatch.setenv("MIGRANT_ENV", "test")

        config = load_config(tmp_path)
        assert config.environment == "test"
        assert config.db_path == tmp_path / "data" / "test.db"

    def test_explicit_environment_wins(self, tmp_path: Path, monkeypatch):
        (tmp_path / "dbconf.yml").write_text(DBCONF)
        monkeypatch.setenv("MIGRANT_ENV", "test")

        assert load_config(tmp_path, "development").environment == "development"
