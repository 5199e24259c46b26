"""Configuration builder with explicit layering.

This module provides ConfigBuilder for building AppConfig by composing
multiple configuration sources with explicit precedence handling.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from snapraid_web.config.env import ENV_PREFIX, EnvReader
from snapraid_web.config.models import (
    DEFAULT_OUTPUT_DIR,
    AppConfig,
    LoggingConfig,
    ServerConfig,
    StoreConfig,
)


@dataclass
class ConfigSource:
    """Configuration values from a single source.

    None values indicate "not specified in this source" and will not
    override values from lower-precedence sources.
    """

    # Store config
    output_dir: Path | None = None

    # Server config
    server_bind: str | None = None
    server_port: int | None = None
    server_shutdown_timeout: float | None = None

    # Logging config
    logging_level: str | None = None
    logging_file: Path | None = None
    logging_format: str | None = None
    logging_include_stderr: bool | None = None
    logging_max_bytes: int | None = None
    logging_backup_count: int | None = None


class ConfigBuilder:
    """Builds AppConfig by layering ConfigSources with precedence.

    Later sources override earlier ones (for non-None values).

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config), source_name="file")
        builder.apply(source_from_env(reader), source_name="env")
        builder.apply(cli_source, source_name="cli")
        config = builder.build()
    """

    def __init__(self) -> None:
        """Initialize the builder with no values set."""
        self._values: dict[str, Any] = {}
        self._origins: dict[str, str] = {}

    def apply(self, source: ConfigSource, source_name: str = "unknown") -> None:
        """Apply configuration source, overriding existing values.

        Args:
            source: Configuration source to apply.
            source_name: Label recorded as the origin of each applied value.
        """
        for f in fields(source):
            value = getattr(source, f.name)
            if value is not None:
                self._values[f.name] = value
                self._origins[f.name] = source_name

    def origin(self, key: str) -> str:
        """Return where a value came from: a source name or "default"."""
        return self._origins.get(key, "default")

    def _get(self, key: str, default: Any) -> Any:
        return self._values.get(key, default)

    def build(self) -> AppConfig:
        """Build the final AppConfig.

        Raises:
            ValueError: If a merged value fails model validation.
        """
        store = StoreConfig(output_dir=self._get("output_dir", DEFAULT_OUTPUT_DIR))

        server = ServerConfig(
            bind=self._get("server_bind", "0.0.0.0"),
            port=self._get("server_port", 8080),
            shutdown_timeout=self._get("server_shutdown_timeout", 10.0),
        )

        logging_config = LoggingConfig(
            level=self._get("logging_level", "info"),
            file=self._get("logging_file", None),
            format=self._get("logging_format", "json"),
            include_stderr=self._get("logging_include_stderr", False),
            max_bytes=self._get("logging_max_bytes", 10_485_760),
            backup_count=self._get("logging_backup_count", 5),
        )

        return AppConfig(store=store, server=server, logging=logging_config)


def _optional_path(value: Any) -> Path | None:
    if value is None or value == "":
        return None
    return Path(str(value)).expanduser()


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Create a ConfigSource from a parsed TOML config file.

    Expected layout:

        [store]
        output_dir = "/var/lib/snapraid/output"

        [server]
        bind = "127.0.0.1"
        port = 8080

        [logging]
        level = "debug"
        format = "text"
    """
    store = file_config.get("store", {})
    server = file_config.get("server", {})
    logging_conf = file_config.get("logging", {})

    return ConfigSource(
        output_dir=_optional_path(store.get("output_dir")),
        server_bind=server.get("bind"),
        server_port=server.get("port"),
        server_shutdown_timeout=server.get("shutdown_timeout"),
        logging_level=logging_conf.get("level"),
        logging_file=_optional_path(logging_conf.get("file")),
        logging_format=logging_conf.get("format"),
        logging_include_stderr=logging_conf.get("include_stderr"),
        logging_max_bytes=logging_conf.get("max_bytes"),
        logging_backup_count=logging_conf.get("backup_count"),
    )


def source_from_env(reader: EnvReader) -> ConfigSource:
    """Create a ConfigSource from SNAPRAID_WEB_* environment variables."""
    return ConfigSource(
        output_dir=reader.get_path(f"{ENV_PREFIX}OUTPUT_DIR"),
        server_bind=reader.get_str(f"{ENV_PREFIX}BIND"),
        server_port=reader.get_int(f"{ENV_PREFIX}PORT"),
        server_shutdown_timeout=reader.get_float(f"{ENV_PREFIX}SHUTDOWN_TIMEOUT"),
        logging_level=reader.get_str(f"{ENV_PREFIX}LOG_LEVEL"),
        logging_file=reader.get_path(f"{ENV_PREFIX}LOG_FILE"),
        logging_format=reader.get_str(f"{ENV_PREFIX}LOG_FORMAT"),
        logging_include_stderr=reader.get_bool(f"{ENV_PREFIX}LOG_INCLUDE_STDERR"),
    )
