"""Overview aggregation over all runs in a store."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from snapraid_web.core.datetime_utils import format_run_date
from snapraid_web.history.models import OverviewRow, SnapshotRecord
from snapraid_web.history.store import scan_all


def build_overview_row(record: SnapshotRecord) -> OverviewRow:
    """Summarize one record as an overview row."""
    return OverviewRow(
        id=record.id,
        date=format_run_date(record.id),
        total_changes=record.changed_paths.total,
        step_durations=record.step_durations,
        failed=record.error is not None,
    )


def build_overview(records: Iterable[SnapshotRecord]) -> list[OverviewRow]:
    """Build overview rows, most recent run first.

    Pure function: the same records always yield the same rows in the
    same order. Identifiers are unique within a store so the order has
    no ties.

    Args:
        records: Decoded snapshot records, in any order.

    Returns:
        One row per record, sorted by identifier descending.
    """
    rows = [build_overview_row(record) for record in records]
    rows.sort(key=lambda row: row.id, reverse=True)
    return rows


def get_overview(store_dir: Path) -> list[OverviewRow]:
    """Scan a store and build its overview.

    Raises:
        StoreUnavailableError: If the store directory is unavailable.
        SnapshotReadError: If any snapshot cannot be read.
        SnapshotDecodeError: If any snapshot cannot be decoded; the whole
            overview fails rather than omitting the run.
    """
    return build_overview(scan_all(store_dir))
