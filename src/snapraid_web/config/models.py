"""Configuration data models.

This module defines dataclasses for snapraid-web configuration options.
"""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_OUTPUT_DIR = Path("/output")


@dataclass
class StoreConfig:
    """Configuration for the snapshot store."""

    output_dir: Path = DEFAULT_OUTPUT_DIR
    """Directory the SnapRAID runner writes its JSON snapshots to."""


@dataclass
class ServerConfig:
    """Configuration for the web server.

    Controls bind address, port, and shutdown behavior for `snapraid-web serve`.
    """

    bind: str = "0.0.0.0"
    """Network address to bind to."""

    port: int = 8080
    """Port number for the HTTP server."""

    shutdown_timeout: float = 10.0
    """Seconds to wait for in-flight requests during graceful shutdown."""

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not 1 <= self.port <= 65535:
            raise ValueError(f"port must be 1-65535, got {self.port}")
        if self.shutdown_timeout <= 0:
            raise ValueError(
                f"shutdown_timeout must be positive, got {self.shutdown_timeout}"
            )


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "json"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass
class AppConfig:
    """Main configuration container for snapraid-web.

    Aggregates all configuration sections.
    """

    store: StoreConfig = field(default_factory=StoreConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
