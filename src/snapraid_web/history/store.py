"""Snapshot store scanning and decoding.

A store is a directory holding one ``<run-id>.json`` file per run. Files
whose stem is not an RFC 3339 timestamp are foreign files and are skipped
silently. Every call re-reads the directory; nothing is cached.

Overview decode policy is fail-loud: scan_all() raises on the first
snapshot that cannot be decoded instead of returning a partial history.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from snapraid_web.core.datetime_utils import is_run_id
from snapraid_web.history.exceptions import (
    RunNotFoundError,
    SnapshotDecodeError,
    SnapshotReadError,
    StoreUnavailableError,
)
from snapraid_web.history.models import ChangedPaths, SnapshotRecord, StepDurations
from snapraid_web.history.schema import SnapshotFileModel

SNAPSHOT_SUFFIX = ".json"


def snapshot_path(store_dir: Path, run_id: str) -> Path:
    """Return the file path of a run's snapshot."""
    return store_dir / f"{run_id}{SNAPSHOT_SUFFIX}"


def list_run_ids(store_dir: Path) -> list[str]:
    """List the identifiers of all runs in a store.

    Args:
        store_dir: Snapshot directory.

    Returns:
        Identifiers in ascending (chronological) order, each exactly once.

    Raises:
        StoreUnavailableError: If the directory is missing or unreadable.
    """
    try:
        entries = list(store_dir.iterdir())
    except FileNotFoundError as e:
        raise StoreUnavailableError(store_dir, "directory does not exist") from e
    except NotADirectoryError as e:
        raise StoreUnavailableError(store_dir, "not a directory") from e
    except OSError as e:
        raise StoreUnavailableError(store_dir, str(e)) from e

    run_ids = []
    for entry in entries:
        if entry.suffix != SNAPSHOT_SUFFIX or not entry.is_file():
            continue
        if is_run_id(entry.stem):
            run_ids.append(entry.stem)

    return sorted(run_ids)


def _format_validation_error(error: ValidationError) -> str:
    """Summarize the first pydantic error as 'field: message'."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]


def _format_error_value(value: Any) -> str | None:
    """Convert the producer's error field into display text."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True)


def decode_snapshot(run_id: str, raw: bytes | str, path: Path) -> SnapshotRecord:
    """Decode snapshot file content into a SnapshotRecord.

    Args:
        run_id: Identifier of the snapshot.
        raw: File content.
        path: File path, used in error messages.

    Returns:
        Decoded record.

    Raises:
        SnapshotDecodeError: If the content is not valid JSON or does not
            have the snapshot shape.
    """
    try:
        model = SnapshotFileModel.model_validate_json(raw)
    except ValidationError as e:
        raise SnapshotDecodeError(run_id, path, _format_validation_error(e)) from e

    result = model.result
    timings = model.timings
    return SnapshotRecord(
        id=run_id,
        timestamp=model.timestamp,
        changed_paths=ChangedPaths(
            added=tuple(result.added),
            removed=tuple(result.removed),
            updated=tuple(result.updated),
            moved=tuple(result.moved),
            copied=tuple(result.copied),
            restored=tuple(result.restored),
        ),
        step_durations=StepDurations(
            touch=timings.touch,
            diff=timings.diff,
            sync=timings.sync,
            scrub=timings.scrub,
            smart=timings.smart,
            total=timings.total,
        ),
        error=_format_error_value(model.error),
    )


def load_snapshot(store_dir: Path, run_id: str) -> SnapshotRecord:
    """Load and decode the snapshot of one run.

    Args:
        store_dir: Snapshot directory.
        run_id: Run identifier, matched exactly against file names.

    Returns:
        Decoded record.

    Raises:
        RunNotFoundError: If no snapshot exists for the identifier, or the
            identifier is not a valid run identifier.
        SnapshotReadError: If the file exists but cannot be read.
        SnapshotDecodeError: If the content cannot be decoded.
    """
    if not is_run_id(run_id):
        raise RunNotFoundError(run_id)

    path = snapshot_path(store_dir, run_id)
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise RunNotFoundError(run_id) from e
    except OSError as e:
        raise SnapshotReadError(run_id, path, str(e)) from e

    return decode_snapshot(run_id, raw, path)


def scan_all(store_dir: Path) -> list[SnapshotRecord]:
    """Load every snapshot in a store.

    Args:
        store_dir: Snapshot directory.

    Returns:
        Records in ascending identifier order.

    Raises:
        StoreUnavailableError: If the directory is missing or unreadable.
        SnapshotReadError: If any snapshot cannot be read.
        SnapshotDecodeError: If any snapshot cannot be decoded.
    """
    records = []
    for run_id in list_run_ids(store_dir):
        try:
            records.append(load_snapshot(store_dir, run_id))
        except RunNotFoundError:
            # Removed between listing and loading; no longer part of the store
            continue
    return records
