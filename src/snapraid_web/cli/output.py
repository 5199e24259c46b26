"""CLI error reporting.

Failures are written to stderr, as a line of text or as a JSON object,
and the process exits with an ExitCode. History failures choose their
own exit code.
"""

from __future__ import annotations

import json
import sys
from typing import Any, NoReturn

import click

from snapraid_web.cli.exit_codes import ExitCode
from snapraid_web.history import (
    HistoryError,
    RunNotFoundError,
    StoreUnavailableError,
)

# Checked in order; the first matching class wins
_HISTORY_EXIT_CODES: tuple[tuple[type[HistoryError], ExitCode], ...] = (
    (RunNotFoundError, ExitCode.RUN_NOT_FOUND),
    (StoreUnavailableError, ExitCode.STORE_ERROR),
    (HistoryError, ExitCode.SNAPSHOT_ERROR),
)


def exit_code_for(error: HistoryError) -> ExitCode:
    """Return the exit code reported for a history failure."""
    for error_class, code in _HISTORY_EXIT_CODES:
        if isinstance(error, error_class):
            return code
    return ExitCode.GENERAL_ERROR


def error_payload(error: str | HistoryError, code: ExitCode) -> dict[str, Any]:
    """Build the ``error`` object of a JSON failure report.

    A history failure naming a run adds ``run_id``.
    """
    payload: dict[str, Any] = {"code": code.name, "message": str(error)}
    run_id = getattr(error, "run_id", None)
    if run_id is not None:
        payload["run_id"] = run_id
    return payload


def error_exit(
    error: str | HistoryError,
    code: ExitCode | None = None,
    json_output: bool = False,
) -> NoReturn:
    """Report a failure on stderr and exit.

    Args:
        error: Message to report, or the history failure itself.
        code: Exit code. Required for plain messages; for a history
            failure it defaults to exit_code_for(error).
        json_output: Report as ``{"status": "failed", "error": {...}}``.
    """
    if code is None:
        if not isinstance(error, HistoryError):
            raise TypeError("an exit code is required for a plain message")
        code = exit_code_for(error)

    if json_output:
        report = {"status": "failed", "error": error_payload(error, code)}
        click.echo(json.dumps(report), err=True)
    else:
        click.echo(f"Error: {error}", err=True)

    sys.exit(int(code))
