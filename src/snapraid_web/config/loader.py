"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (SNAPRAID_WEB_*)
3. Config file (~/.snapraid-web/config.toml)
4. Default values

Environment variables:
- SNAPRAID_WEB_CONFIG_PATH: Path to config file (overrides default location)
- SNAPRAID_WEB_OUTPUT_DIR: Directory holding the run snapshots
- SNAPRAID_WEB_BIND / SNAPRAID_WEB_PORT: Server listen address
- SNAPRAID_WEB_SHUTDOWN_TIMEOUT: Graceful shutdown timeout in seconds
- SNAPRAID_WEB_LOG_LEVEL / SNAPRAID_WEB_LOG_FORMAT / SNAPRAID_WEB_LOG_FILE
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from snapraid_web.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from snapraid_web.config.env import ENV_PREFIX, EnvReader
from snapraid_web.config.models import AppConfig

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".snapraid-web"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


class ConfigError(Exception):
    """Raised when the config file cannot be parsed (strict mode only)."""


def get_default_config_path(env_reader: EnvReader | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by SNAPRAID_WEB_CONFIG_PATH environment variable.
    """
    reader = env_reader or EnvReader()
    env_path = reader.get_path(f"{ENV_PREFIX}CONFIG_PATH")
    if env_path is not None:
        return env_path
    return DEFAULT_CONFIG_FILE


def load_config_file(path: Path, *, strict: bool = False) -> dict[str, Any]:
    """Load configuration from a TOML file.

    Args:
        path: Path to config file.
        strict: If True, raise ConfigError on read or parse failures.
                If False (default), log a warning and return an empty dict.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist.

    Raises:
        ConfigError: When strict=True and the file cannot be read or parsed.
    """
    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        if strict:
            raise ConfigError(f"Cannot load config file {path}: {e}") from e
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    output_dir: Path | None = None,
    bind: str | None = None,
    port: int | None = None,
    log_level: str | None = None,
    log_format: str | None = None,
    log_file: Path | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> AppConfig:
    """Get configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides SNAPRAID_WEB_CONFIG_PATH).
        output_dir: CLI override for the snapshot directory.
        bind: CLI override for the bind address.
        port: CLI override for the port.
        log_level: CLI override for the log level.
        log_format: CLI override for the log format.
        log_file: CLI override for the log file.
        env_reader: Optional EnvReader for testing (uses os.environ if None).
        strict: If True, raise ConfigError on config file parse failures.

    Returns:
        AppConfig with merged configuration.

    Raises:
        ConfigError: When strict=True and the config file cannot be parsed.
        ValueError: When a merged value fails validation.
    """
    reader = env_reader or EnvReader()
    path = config_path or get_default_config_path(reader)
    file_config = load_config_file(path, strict=strict)

    cli_source = ConfigSource(
        output_dir=output_dir,
        server_bind=bind,
        server_port=port,
        logging_level=log_level,
        logging_format=log_format,
        logging_file=log_file,
    )

    # Build with precedence: file < env < cli
    builder = ConfigBuilder()
    builder.apply(source_from_file(file_config), source_name="file")
    builder.apply(source_from_env(reader), source_name="env")
    builder.apply(cli_source, source_name="cli")

    config = builder.build()
    logger.debug(
        "Loaded config: output_dir=%s (%s), port=%d (%s)",
        config.store.output_dir,
        builder.origin("output_dir"),
        config.server.port,
        builder.origin("server_port"),
    )
    return config
