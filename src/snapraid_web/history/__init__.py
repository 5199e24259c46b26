"""Run history query and aggregation engine.

Scans a directory of SnapRAID run snapshots and derives the overview,
run detail and navigation views. Every query re-reads the directory.

Exports:
    list_run_ids, load_snapshot, scan_all: Snapshot store access
    build_overview, get_overview: Overview rows, newest first
    resolve_run: Run detail plus navigation list (latest when no id)
"""

from snapraid_web.history.exceptions import (
    HistoryError,
    RunNotFoundError,
    SnapshotDecodeError,
    SnapshotReadError,
    StoreUnavailableError,
)
from snapraid_web.history.models import (
    CHANGE_CATEGORIES,
    STEP_NAMES,
    ChangedPaths,
    NavigationList,
    OverviewRow,
    RunDetail,
    SnapshotRecord,
    StepDurations,
)
from snapraid_web.history.overview import build_overview, get_overview
from snapraid_web.history.resolver import (
    build_navigation,
    resolve_run,
    select_latest_run_id,
)
from snapraid_web.history.store import (
    SNAPSHOT_SUFFIX,
    list_run_ids,
    load_snapshot,
    scan_all,
)

__all__ = [
    # Exceptions
    "HistoryError",
    "RunNotFoundError",
    "SnapshotDecodeError",
    "SnapshotReadError",
    "StoreUnavailableError",
    # Models
    "CHANGE_CATEGORIES",
    "STEP_NAMES",
    "ChangedPaths",
    "NavigationList",
    "OverviewRow",
    "RunDetail",
    "SnapshotRecord",
    "StepDurations",
    # Store
    "SNAPSHOT_SUFFIX",
    "list_run_ids",
    "load_snapshot",
    "scan_all",
    # Views
    "build_overview",
    "get_overview",
    "build_navigation",
    "resolve_run",
    "select_latest_run_id",
]
