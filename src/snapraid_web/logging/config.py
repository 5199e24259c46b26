"""Root logger setup for snapraid-web."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from snapraid_web.logging.handlers import JSONFormatter, TextFormatter

if TYPE_CHECKING:
    from snapraid_web.config.models import LoggingConfig

_FORMATTERS: dict[str, type[logging.Formatter]] = {
    "json": JSONFormatter,
    "text": TextFormatter,
}

# These duplicate the request logging middleware below WARNING
_QUIET_LOGGERS = ("aiohttp.access",)


def _open_log_file(
    config: LoggingConfig, formatter: logging.Formatter
) -> logging.Handler | None:
    """Open the rotating log file, or return None when it cannot be opened."""
    path = Path(config.file).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None

    handler.setFormatter(formatter)
    return handler


def configure_logging(config: LoggingConfig) -> None:
    """Replace the root logger's handlers according to ``config``.

    Logs go to the configured file, to stderr, or both. When the file
    cannot be opened, stderr is used instead so records are never lost.
    """
    level = logging.getLevelNamesMapping()[config.level.upper()]
    formatter = _FORMATTERS[config.format.lower()]()

    handlers: list[logging.Handler] = []
    if config.file is not None:
        file_handler = _open_log_file(config, formatter)
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        handlers.append(stderr_handler)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        root_logger.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
