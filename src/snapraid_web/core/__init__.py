"""Core utilities for snapraid-web.

Timestamp parsing and display formatting shared by the history engine,
the web UI and the CLI.
"""

from snapraid_web.core.datetime_utils import (
    DISPLAY_DATE_FORMAT,
    format_run_date,
    is_run_id,
    parse_run_id,
)
from snapraid_web.core.formatting import (
    DEFAULT_RENDER_HELPERS,
    RenderHelpers,
    format_duration,
    title,
)

__all__ = [
    "DISPLAY_DATE_FORMAT",
    "format_run_date",
    "is_run_id",
    "parse_run_id",
    "DEFAULT_RENDER_HELPERS",
    "RenderHelpers",
    "format_duration",
    "title",
]
