"""Tests for configuration loading with precedence."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from snapraid_web.config.env import EnvReader
from snapraid_web.config.loader import (
    DEFAULT_CONFIG_FILE,
    ConfigError,
    get_config,
    get_default_config_path,
    load_config_file,
)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(
        """
[store]
output_dir = "/from/file"

[server]
port = 9000
bind = "127.0.0.1"

[logging]
level = "debug"
"""
    )
    return path


class TestGetDefaultConfigPath:
    """Tests for get_default_config_path()."""

    def test_default_location(self) -> None:
        assert get_default_config_path(EnvReader(env={})) == DEFAULT_CONFIG_FILE

    def test_env_override(self, tmp_path: Path) -> None:
        reader = EnvReader(env={"SNAPRAID_WEB_CONFIG_PATH": str(tmp_path / "c.toml")})
        assert get_default_config_path(reader) == tmp_path / "c.toml"


class TestLoadConfigFile:
    """Tests for load_config_file()."""

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_config_file(tmp_path / "missing.toml") == {}

    def test_parses_toml(self, config_file: Path) -> None:
        data = load_config_file(config_file)
        assert data["server"]["port"] == 9000

    def test_invalid_toml_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[server\nport = ")

        with caplog.at_level(logging.WARNING):
            assert load_config_file(path) == {}
        assert "Ignoring unreadable config file" in caplog.text

    def test_invalid_toml_strict(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[server\nport = ")

        with pytest.raises(ConfigError):
            load_config_file(path, strict=True)


class TestGetConfig:
    """Tests for get_config() precedence: cli > env > file > defaults."""

    def test_defaults(self, tmp_path: Path) -> None:
        config = get_config(
            config_path=tmp_path / "missing.toml", env_reader=EnvReader(env={})
        )

        assert config.store.output_dir == Path("/output")
        assert config.server.port == 8080
        assert config.logging.format == "json"

    def test_file_values(self, config_file: Path) -> None:
        config = get_config(config_path=config_file, env_reader=EnvReader(env={}))

        assert config.store.output_dir == Path("/from/file")
        assert config.server.port == 9000
        assert config.logging.level == "debug"

    def test_env_overrides_file(self, config_file: Path) -> None:
        reader = EnvReader(
            env={"SNAPRAID_WEB_PORT": "9100", "SNAPRAID_WEB_OUTPUT_DIR": "/from/env"}
        )

        config = get_config(config_path=config_file, env_reader=reader)

        assert config.server.port == 9100
        assert config.store.output_dir == Path("/from/env")
        assert config.server.bind == "127.0.0.1"

    def test_cli_overrides_env(self, config_file: Path) -> None:
        reader = EnvReader(env={"SNAPRAID_WEB_PORT": "9100"})

        config = get_config(
            config_path=config_file,
            output_dir=Path("/from/cli"),
            port=9200,
            log_format="text",
            env_reader=reader,
        )

        assert config.server.port == 9200
        assert config.store.output_dir == Path("/from/cli")
        assert config.logging.format == "text"

    def test_config_path_from_env(self, config_file: Path) -> None:
        reader = EnvReader(env={"SNAPRAID_WEB_CONFIG_PATH": str(config_file)})

        assert get_config(env_reader=reader).server.port == 9000

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            get_config(
                config_path=tmp_path / "missing.toml",
                port=70000,
                env_reader=EnvReader(env={}),
            )
