"""Pydantic models for the snapshot file format.

A snapshot is the JSON document the SnapRAID runner writes after each run:

    {
      "timestamp": "2024-05-01 03:00",
      "result":  {"added": [...], "removed": [...], "updated": [...],
                  "moved": [...], "copied": [...], "restored": [...]},
      "timings": {"touch": 1000000000, "diff": ..., "sync": ..., "scrub": ...,
                  "smart": ..., "total": ...},
      "error": null
    }

Durations are Go ``time.Duration`` values, i.e. integer nanoseconds.
Change lists are ``null`` when empty.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, field_validator


class ChangeResultModel(BaseModel):
    """Pydantic model for the ``result`` object."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    added: list[StrictStr] | None
    removed: list[StrictStr] | None
    updated: list[StrictStr] | None
    moved: list[StrictStr] | None
    copied: list[StrictStr] | None
    restored: list[StrictStr] | None

    @field_validator(
        "added", "removed", "updated", "moved", "copied", "restored", mode="after"
    )
    @classmethod
    def null_to_empty(cls, v: list[str] | None) -> list[str]:
        """Treat a null change list as empty."""
        return [] if v is None else v


class TimingsModel(BaseModel):
    """Pydantic model for the ``timings`` object (nanoseconds)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    touch: StrictInt
    diff: StrictInt
    sync: StrictInt
    scrub: StrictInt
    smart: StrictInt
    total: StrictInt


class SnapshotFileModel(BaseModel):
    """Pydantic model for a whole snapshot document."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    timestamp: StrictStr
    result: ChangeResultModel
    timings: TimingsModel
    error: Any = None
