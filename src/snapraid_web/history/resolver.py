"""Run detail resolution.

Resolves a requested run identifier, or the latest run when none is
given, and builds the navigation list of all runs for run selection.

The latest run is the identifier that sorts last in ascending order.
Identifiers are fixed-layout RFC 3339 timestamps, so this is also the
chronologically most recent run.
"""

from __future__ import annotations

from pathlib import Path

from snapraid_web.core.datetime_utils import format_run_date
from snapraid_web.history.exceptions import RunNotFoundError
from snapraid_web.history.models import NavigationList, RunDetail, SnapshotRecord
from snapraid_web.history.store import list_run_ids, load_snapshot


def select_latest_run_id(run_ids: list[str]) -> str:
    """Return the latest identifier (lexicographic maximum).

    Raises:
        RunNotFoundError: If there are no identifiers.
    """
    if not run_ids:
        raise RunNotFoundError(None)
    return max(run_ids)


def build_navigation(store_dir: Path) -> NavigationList:
    """Build the ascending navigation list for a store.

    Raises:
        StoreUnavailableError: If the store directory is unavailable.
    """
    return NavigationList(run_ids=tuple(list_run_ids(store_dir)))


def build_run_detail(record: SnapshotRecord) -> RunDetail:
    """Convert a record into its detail view.

    The producer's display timestamp is shown when present, otherwise
    the formatted identifier.
    """
    return RunDetail(
        id=record.id,
        date=record.timestamp or format_run_date(record.id),
        changed_paths=record.changed_paths,
        error=record.error,
    )


def resolve_run(
    store_dir: Path, requested_id: str | None = None
) -> tuple[RunDetail, NavigationList]:
    """Resolve and load a run, together with the navigation list.

    Args:
        store_dir: Snapshot directory.
        requested_id: Identifier to load, matched exactly. None or empty
            selects the latest run.

    Returns:
        Tuple of (run detail, navigation list).

    Raises:
        RunNotFoundError: If the requested run does not exist, or the store
            is empty when resolving the latest run. ``navigation`` on the
            exception holds the identifiers that do exist.
        StoreUnavailableError: If the store directory is unavailable.
        SnapshotReadError: If the snapshot cannot be read.
        SnapshotDecodeError: If the snapshot cannot be decoded.
    """
    navigation = build_navigation(store_dir)

    try:
        if requested_id:
            run_id = requested_id
        else:
            run_id = select_latest_run_id(navigation.to_list())
        record = load_snapshot(store_dir, run_id)
    except RunNotFoundError as e:
        e.navigation = navigation.to_list()
        raise

    return build_run_detail(record), navigation
