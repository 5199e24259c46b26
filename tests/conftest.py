"""Shared test fixtures for snapraid-web."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

SECOND = 1_000_000_000


def snapshot_document(
    *,
    timestamp: str = "2024-05-01 03:00",
    added: list[str] | None = None,
    removed: list[str] | None = None,
    updated: list[str] | None = None,
    moved: list[str] | None = None,
    copied: list[str] | None = None,
    restored: list[str] | None = None,
    timings: dict[str, Any] | None = None,
    error: Any = None,
) -> dict[str, Any]:
    """Build a snapshot document as the SnapRAID runner writes it."""
    return {
        "timestamp": timestamp,
        "result": {
            "added": added,
            "removed": removed,
            "updated": updated,
            "moved": moved,
            "copied": copied,
            "restored": restored,
        },
        "timings": timings
        or {
            "touch": 1 * SECOND,
            "diff": 2 * SECOND,
            "sync": 3 * SECOND,
            "scrub": 4 * SECOND,
            "smart": 5 * SECOND,
            "total": 15 * SECOND,
        },
        "error": error,
    }


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    """Create an empty snapshot directory."""
    path = tmp_path / "output"
    path.mkdir()
    return path


@pytest.fixture
def write_snapshot(store_dir: Path) -> Callable[..., Path]:
    """Return a factory that writes a snapshot file into store_dir.

    Call with a run identifier and snapshot_document() keyword arguments,
    or pass ``raw`` to write the file content verbatim.
    """

    def _write(run_id: str, raw: str | None = None, **kwargs: Any) -> Path:
        path = store_dir / f"{run_id}.json"
        if raw is None:
            raw = json.dumps(snapshot_document(**kwargs))
        path.write_text(raw)
        return path

    return _write


@pytest.fixture
def make_document() -> Callable[..., dict[str, Any]]:
    """Return the snapshot document builder."""
    return snapshot_document
