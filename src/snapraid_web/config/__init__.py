"""Configuration management for snapraid-web.

This module provides configuration loading with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (SNAPRAID_WEB_*)
3. Config file (~/.snapraid-web/config.toml)
4. Default values (lowest priority)
"""

from snapraid_web.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from snapraid_web.config.env import EnvReader
from snapraid_web.config.loader import (
    ConfigError,
    get_config,
    get_default_config_path,
    load_config_file,
)
from snapraid_web.config.models import (
    AppConfig,
    LoggingConfig,
    ServerConfig,
    StoreConfig,
)

__all__ = [
    # Models
    "AppConfig",
    "LoggingConfig",
    "ServerConfig",
    "StoreConfig",
    # Loader
    "ConfigError",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Layering
    "EnvReader",
    "ConfigBuilder",
    "ConfigSource",
    "source_from_env",
    "source_from_file",
]
