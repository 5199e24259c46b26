"""Tests for server app creation and health checks."""

from __future__ import annotations

from pathlib import Path

import pytest

from snapraid_web import __version__
from snapraid_web.core.formatting import RenderHelpers
from snapraid_web.server.app import HealthStatus, count_runs, create_app


class TestCreateApp:
    """Tests for create_app factory."""

    def test_stores_settings(self, store_dir: Path) -> None:
        app = create_app(store_dir)

        assert app["output_dir"] == store_dir
        assert app["version"] == __version__
        assert app["lifecycle"] is None

    def test_accepts_string_path(self, store_dir: Path) -> None:
        assert create_app(str(store_dir))["output_dir"] == store_dir

    def test_missing_store_does_not_prevent_startup(self, tmp_path: Path) -> None:
        app = create_app(tmp_path / "missing", version="9.9.9")

        assert app["version"] == "9.9.9"

    def test_routes_registered(self, store_dir: Path) -> None:
        app = create_app(store_dir)

        paths = {
            resource.canonical for resource in app.router.resources()
        }
        assert {
            "/",
            "/healthz",
            "/partials/overview",
            "/partials/run",
            "/partials/{section}",
            "/api/runs",
            "/api/runs/detail",
            "/static",
        } <= paths

    def test_custom_helpers_become_filters(self, store_dir: Path) -> None:
        import aiohttp_jinja2

        helpers = RenderHelpers(format_duration=lambda _: "n/a", title=str.upper)
        app = create_app(store_dir, helpers=helpers)

        env = aiohttp_jinja2.get_env(app)
        assert env.filters["duration"](1) == "n/a"
        assert env.filters["title"]("added") == "ADDED"


class TestHealthStatus:
    """Tests for the HealthStatus payload."""

    def test_to_dict(self) -> None:
        health = HealthStatus(
            status="healthy",
            store="available",
            uptime_seconds=1.5,
            version="0.1.0",
            run_count=2,
        )

        assert health.to_dict() == {
            "status": "healthy",
            "store": "available",
            "uptime_seconds": 1.5,
            "version": "0.1.0",
            "run_count": 2,
            "shutting_down": False,
        }


class TestCountRuns:
    """Tests for count_runs()."""

    @pytest.mark.asyncio
    async def test_counts_valid_runs(self, store_dir: Path, write_snapshot) -> None:
        write_snapshot("2023-01-01T00:00:00Z")
        write_snapshot("2023-01-02T00:00:00Z")
        write_snapshot("notarun")

        assert await count_runs(store_dir) == 2

    @pytest.mark.asyncio
    async def test_corrupt_snapshot_still_counted(
        self, store_dir: Path, write_snapshot
    ) -> None:
        """Health only lists the store, it does not decode snapshots."""
        write_snapshot("2023-01-01T00:00:00Z", raw="garbage")

        assert await count_runs(store_dir) == 1

    @pytest.mark.asyncio
    async def test_missing_store(self, tmp_path: Path) -> None:
        assert await count_runs(tmp_path / "missing") is None
