"""Structured logging module for snapraid-web.

Provides configurable logging with JSON format support and file rotation.
"""

from snapraid_web.logging.config import configure_logging
from snapraid_web.logging.handlers import JSONFormatter, TextFormatter

__all__ = [
    "JSONFormatter",
    "TextFormatter",
    "configure_logging",
]
