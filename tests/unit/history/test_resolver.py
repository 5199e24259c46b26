"""Unit tests for run detail resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from snapraid_web.history import (
    NavigationList,
    RunNotFoundError,
    SnapshotDecodeError,
    StoreUnavailableError,
    build_navigation,
    resolve_run,
    select_latest_run_id,
)

RUN_1 = "2023-01-01T00:00:00Z"
RUN_2 = "2023-01-02T00:00:00Z"
RUN_3 = "2023-01-03T00:00:00Z"


class TestSelectLatestRunId:
    """Tests for select_latest_run_id()."""

    def test_latest_is_lexicographic_maximum(self) -> None:
        """Regression: latest is the last identifier in ascending order, never the first."""
        run_ids = [RUN_1, RUN_2, RUN_3]

        assert select_latest_run_id(run_ids) == RUN_3
        assert select_latest_run_id(list(reversed(run_ids))) == RUN_3

    def test_single_run(self) -> None:
        assert select_latest_run_id([RUN_1]) == RUN_1

    def test_empty(self) -> None:
        with pytest.raises(RunNotFoundError) as exc_info:
            select_latest_run_id([])

        assert exc_info.value.run_id is None
        assert str(exc_info.value) == "no runs available"


class TestBuildNavigation:
    """Tests for build_navigation()."""

    def test_ascending_unique(self, store_dir: Path, write_snapshot) -> None:
        write_snapshot(RUN_3)
        write_snapshot(RUN_1)
        write_snapshot(RUN_2)
        write_snapshot("notarun")

        navigation = build_navigation(store_dir)

        assert navigation.to_list() == [RUN_1, RUN_2, RUN_3]
        assert navigation.latest == RUN_3
        assert len(navigation) == 3
        assert RUN_2 in navigation
        assert "notarun" not in navigation

    def test_empty(self, store_dir: Path) -> None:
        navigation = build_navigation(store_dir)

        assert navigation == NavigationList()
        assert navigation.latest is None


class TestResolveRun:
    """Tests for resolve_run()."""

    @pytest.fixture
    def two_runs(self, write_snapshot) -> None:
        write_snapshot(
            RUN_1,
            timestamp="2023-01-01 00:00",
            added=["a", "b", "c"],
            removed=["d"],
        )
        write_snapshot(RUN_2, timestamp="2023-01-02 00:00")

    @pytest.mark.usefixtures("two_runs")
    def test_no_id_resolves_latest(self, store_dir: Path) -> None:
        run, navigation = resolve_run(store_dir)

        assert run.id == RUN_2
        assert navigation.to_list() == [RUN_1, RUN_2]

    @pytest.mark.usefixtures("two_runs")
    def test_empty_id_resolves_latest(self, store_dir: Path) -> None:
        run, _ = resolve_run(store_dir, "")

        assert run.id == RUN_2

    @pytest.mark.usefixtures("two_runs")
    def test_explicit_id(self, store_dir: Path) -> None:
        """Change lists round-trip from the file unchanged."""
        run, navigation = resolve_run(store_dir, RUN_1)

        assert run.id == RUN_1
        assert run.date == "2023-01-01 00:00"
        assert run.changed_paths.added == ("a", "b", "c")
        assert run.changed_paths.removed == ("d",)
        assert run.changed_paths.updated == ()
        assert navigation.to_list() == [RUN_1, RUN_2]

    @pytest.mark.usefixtures("two_runs")
    def test_unknown_id_carries_navigation(self, store_dir: Path) -> None:
        """A missing run is not-found, and the known runs are still offered."""
        with pytest.raises(RunNotFoundError) as exc_info:
            resolve_run(store_dir, "bogus")

        assert exc_info.value.run_id == "bogus"
        assert exc_info.value.navigation == [RUN_1, RUN_2]

    @pytest.mark.usefixtures("two_runs")
    def test_missing_run_does_not_affect_others(self, store_dir: Path) -> None:
        with pytest.raises(RunNotFoundError):
            resolve_run(store_dir, RUN_3)

        run, _ = resolve_run(store_dir, RUN_1)
        assert run.id == RUN_1

    def test_empty_store_latest_not_found(self, store_dir: Path) -> None:
        with pytest.raises(RunNotFoundError) as exc_info:
            resolve_run(store_dir)

        assert exc_info.value.run_id is None
        assert exc_info.value.navigation == []

    def test_date_falls_back_to_identifier(
        self, store_dir: Path, write_snapshot
    ) -> None:
        """Without a producer timestamp the identifier is formatted instead."""
        write_snapshot(RUN_1, timestamp="")

        run, _ = resolve_run(store_dir, RUN_1)

        assert run.date == "2023-01-01 00:00:00 UTC"

    def test_error_propagated(self, store_dir: Path, write_snapshot) -> None:
        write_snapshot(RUN_1, error="parity disk missing")

        run, _ = resolve_run(store_dir)

        assert run.error == "parity disk missing"

    def test_corrupt_latest(self, store_dir: Path, write_snapshot) -> None:
        """Decode failures propagate unchanged, not as not-found."""
        write_snapshot(RUN_1)
        write_snapshot(RUN_2, raw="{")

        with pytest.raises(SnapshotDecodeError):
            resolve_run(store_dir)

    def test_missing_store(self, tmp_path: Path) -> None:
        with pytest.raises(StoreUnavailableError):
            resolve_run(tmp_path / "missing", RUN_1)

    @pytest.mark.usefixtures("two_runs")
    def test_detail_to_dict(self, store_dir: Path) -> None:
        run, _ = resolve_run(store_dir, RUN_1)

        assert run.to_dict() == {
            "id": RUN_1,
            "date": "2023-01-01 00:00",
            "changed_paths": {
                "added": ["a", "b", "c"],
                "removed": ["d"],
                "updated": [],
                "moved": [],
                "copied": [],
                "restored": [],
            },
            "error": None,
        }
