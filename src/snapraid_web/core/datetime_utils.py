"""Run identifier timestamp utilities.

Run identifiers are RFC 3339 timestamps taken from snapshot file names.
The producer writes them with a fixed, zero-padded layout so lexicographic
and chronological order coincide.
"""

import re
from datetime import datetime, timedelta

# RFC 3339 date-time: 2024-05-01T03:00:00Z, 2024-05-01T03:00:00.5+02:00
_RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$"
)

DISPLAY_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_run_id(run_id: str) -> datetime | None:
    """Parse a run identifier into a timezone-aware datetime.

    Args:
        run_id: Candidate identifier (snapshot file name without suffix).

    Returns:
        Timezone-aware datetime, or None if the value is not an RFC 3339
        timestamp (wrong layout or impossible calendar date).
    """
    if not _RFC3339_PATTERN.match(run_id):
        return None

    normalized = run_id.replace("Z", "+00:00")
    # fromisoformat accepts at most 6 fractional digits
    if "." in normalized:
        head, rest = normalized.split(".", 1)
        digits = rest[:-6]
        offset = rest[-6:]
        normalized = f"{head}.{digits[:6].ljust(6, '0')}{offset}"

    try:
        return datetime.fromisoformat(normalized)
    except ValueError:
        return None


def is_run_id(run_id: str) -> bool:
    """Return True if the value is a valid run identifier."""
    return parse_run_id(run_id) is not None


def format_run_date(run_id: str) -> str:
    """Format a run identifier for display.

    The time is shown in the identifier's own offset, followed by ``UTC``
    for a zero offset or the ``+HH:MM`` offset otherwise.

    Args:
        run_id: Valid run identifier.

    Returns:
        Display string such as ``2024-05-01 03:00:00 UTC``. Invalid
        identifiers are returned unchanged.
    """
    parsed = parse_run_id(run_id)
    if parsed is None:
        return run_id

    offset = parsed.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        suffix = "UTC"
    else:
        sign = "-" if offset < timedelta(0) else "+"
        minutes = abs(int(offset.total_seconds())) // 60
        suffix = f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"

    return f"{parsed.strftime(DISPLAY_DATE_FORMAT)} {suffix}"
