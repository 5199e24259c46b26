"""Log formatters for snapraid-web.

Both formatters surface the run a record is about. The HTTP and CLI
boundaries log a failed request with ``extra=error.log_fields()``; the
resulting ``run_id``, ``path``, ``store_dir`` and ``error_type``
attributes become top-level JSON fields, or a ``[key=value ...]`` suffix
in text output. A HistoryError passed as ``exc_info`` contributes the
same fields.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from snapraid_web.history.exceptions import HistoryError

RUN_FIELDS: tuple[str, ...] = ("run_id", "path", "store_dir", "error_type")

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord carries; anything else came from ``extra``
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def run_fields(record: logging.LogRecord) -> dict[str, str]:
    """Collect the run-identifying fields of a record, in RUN_FIELDS order."""
    fields: dict[str, str] = {}
    for name in RUN_FIELDS:
        value = getattr(record, name, None)
        if value is not None:
            fields[name] = str(value)

    if record.exc_info and isinstance(record.exc_info[1], HistoryError):
        for name, value in record.exc_info[1].log_fields().items():
            fields.setdefault(name, value)

    return {name: fields[name] for name in RUN_FIELDS if name in fields}


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Keys: ``timestamp`` (ISO-8601 UTC), ``level``, ``message``, ``logger``
    (omitted for the root logger), the run fields, ``context`` for any
    other ``extra`` values, and ``exception`` when a traceback is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        record_time = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": record_time.isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.name != "root":
            entry["logger"] = record.name

        entry.update(run_fields(record))

        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS
            and key not in RUN_FIELDS
            and not key.startswith("_")
        }
        if context:
            entry["context"] = context

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable formatter that appends run fields to the first line."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = run_fields(record)
        if not fields:
            return line

        suffix = " ".join(f"{name}={value}" for name, value in fields.items())
        head, sep, traceback = line.partition("\n")
        return f"{head} [{suffix}]{sep}{traceback}"
