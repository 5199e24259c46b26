"""Run history data models.

SnapshotRecord is the decoded form of one snapshot file. OverviewRow,
RunDetail and NavigationList are derived per request and never mutated.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import asdict, dataclass, field
from typing import Any

# Order of change categories as displayed and serialized
CHANGE_CATEGORIES = ("added", "removed", "updated", "moved", "copied", "restored")

# Order of maintenance steps as displayed and serialized
STEP_NAMES = ("touch", "diff", "sync", "scrub", "smart", "total")


@dataclass(frozen=True)
class ChangedPaths:
    """File paths changed by a run, grouped by change category."""

    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()
    updated: tuple[str, ...] = ()
    moved: tuple[str, ...] = ()
    copied: tuple[str, ...] = ()
    restored: tuple[str, ...] = ()

    @property
    def total(self) -> int:
        """Number of changed paths over all categories."""
        return sum(len(paths) for _, paths in self.items())

    def items(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        """Iterate (category, paths) pairs in display order."""
        for name in CHANGE_CATEGORIES:
            yield name, getattr(self, name)


@dataclass(frozen=True)
class StepDurations:
    """Per-step run durations in integer nanoseconds."""

    touch: int = 0
    diff: int = 0
    sync: int = 0
    scrub: int = 0
    smart: int = 0
    total: int = 0

    def items(self) -> Iterator[tuple[str, int]]:
        """Iterate (step, nanoseconds) pairs in display order."""
        for name in STEP_NAMES:
            yield name, getattr(self, name)


@dataclass(frozen=True)
class SnapshotRecord:
    """One decoded run snapshot.

    Attributes:
        id: Run identifier (RFC 3339 timestamp from the file name).
        timestamp: Display timestamp written by the producer.
        changed_paths: Changed file paths per category.
        step_durations: Duration of each maintenance step.
        error: Failure message recorded by the producer, if the run failed.
    """

    id: str
    timestamp: str
    changed_paths: ChangedPaths
    step_durations: StepDurations
    error: str | None = None


@dataclass(frozen=True)
class OverviewRow:
    """Summary of one run for the overview list.

    Attributes:
        id: Run identifier.
        date: Identifier formatted for display.
        total_changes: Sum of all changed-path counts.
        step_durations: Step durations copied from the record.
        failed: True if the producer recorded an error for the run.
    """

    id: str
    date: str
    total_changes: int
    step_durations: StepDurations
    failed: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass(frozen=True)
class RunDetail:
    """File-level changes of a single run."""

    id: str
    date: str
    changed_paths: ChangedPaths
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data["changed_paths"] = {
            name: list(paths) for name, paths in self.changed_paths.items()
        }
        return data


@dataclass(frozen=True)
class NavigationList:
    """All known run identifiers in ascending order."""

    run_ids: tuple[str, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[str]:
        return iter(self.run_ids)

    def __len__(self) -> int:
        return len(self.run_ids)

    def __contains__(self, run_id: object) -> bool:
        return run_id in self.run_ids

    @property
    def latest(self) -> str | None:
        """The last identifier in ascending order, None when empty."""
        return self.run_ids[-1] if self.run_ids else None

    def to_list(self) -> list[str]:
        """Return the identifiers as a plain list."""
        return list(self.run_ids)
