"""Display formatting helpers shared by the web UI and the CLI."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta

_NANOS_PER_MICROSECOND = 1_000
_NANOS_PER_MILLISECOND = 1_000_000
_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MINUTE = 60 * _NANOS_PER_SECOND
_NANOS_PER_HOUR = 60 * _NANOS_PER_MINUTE


def _format_fraction(value: int, unit: int) -> str:
    """Format value/unit as a decimal without trailing zeros."""
    whole, remainder = divmod(value, unit)
    if remainder == 0:
        return str(whole)
    width = len(str(unit)) - 1
    fraction = str(remainder).rjust(width, "0").rstrip("0")
    return f"{whole}.{fraction}"


def format_duration(value: int | timedelta) -> str:
    """Format a step duration the way SnapRAID runner logs show it.

    Args:
        value: Duration as integer nanoseconds or a timedelta.

    Returns:
        Compact string such as "0s", "250ms", "1.5s", "2m3s" or "1h30m0s".

    Examples:
        >>> format_duration(1_500_000_000)
        '1.5s'
        >>> format_duration(timedelta(minutes=90))
        '1h30m0s'
    """
    if isinstance(value, timedelta):
        nanos = (
            (value.days * 86_400 + value.seconds) * _NANOS_PER_SECOND
            + value.microseconds * _NANOS_PER_MICROSECOND
        )
    else:
        nanos = int(value)

    if nanos == 0:
        return "0s"

    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)

    if nanos < _NANOS_PER_MICROSECOND:
        return f"{sign}{nanos}ns"
    if nanos < _NANOS_PER_MILLISECOND:
        return f"{sign}{_format_fraction(nanos, _NANOS_PER_MICROSECOND)}µs"
    if nanos < _NANOS_PER_SECOND:
        return f"{sign}{_format_fraction(nanos, _NANOS_PER_MILLISECOND)}ms"

    hours, remainder = divmod(nanos, _NANOS_PER_HOUR)
    minutes, remainder = divmod(remainder, _NANOS_PER_MINUTE)
    seconds = _format_fraction(remainder, _NANOS_PER_SECOND)

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def title(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    if not text:
        return text
    return text[:1].upper() + text[1:]


@dataclass(frozen=True)
class RenderHelpers:
    """Formatting operations handed to the template renderer.

    Attributes:
        format_duration: Converts a nanosecond duration to display text.
        title: Capitalizes a label such as a change category name.
    """

    format_duration: Callable[[int | timedelta], str]
    title: Callable[[str], str]


DEFAULT_RENDER_HELPERS = RenderHelpers(format_duration=format_duration, title=title)
