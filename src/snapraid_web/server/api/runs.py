"""API handlers for run history endpoints.

Endpoints:
    GET /api/runs - Overview of all runs, newest first
    GET /api/runs/detail?id=<run-id> - Detail of one run (latest if no id)
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from aiohttp import web

from snapraid_web.history import (
    HistoryError,
    RunNotFoundError,
    get_overview,
    resolve_run,
)
from snapraid_web.server.api.errors import (
    history_error_response,
    unknown_params_error,
)

logger = logging.getLogger(__name__)

RUNS_ALLOWED_PARAMS = frozenset()
RUN_DETAIL_ALLOWED_PARAMS = frozenset({"id"})


def _log_history_error(action: str, error: HistoryError) -> None:
    # A missing run is a client error; everything else is ours
    level = logging.WARNING if isinstance(error, RunNotFoundError) else logging.ERROR
    logger.log(level, "%s failed: %s", action, error, extra=error.log_fields())


async def api_runs_handler(request: web.Request) -> web.Response:
    """Handle GET /api/runs - JSON overview of all runs.

    Returns:
        JSON response ``{"runs": [...]}`` ordered by identifier descending.
    """
    invalid = unknown_params_error(request, RUNS_ALLOWED_PARAMS)
    if invalid is not None:
        return invalid

    output_dir: Path = request.app["output_dir"]
    try:
        rows = await asyncio.to_thread(get_overview, output_dir)
    except HistoryError as e:
        _log_history_error("Build overview", e)
        return history_error_response(e)

    return web.json_response({"runs": [row.to_dict() for row in rows]})


async def api_run_detail_handler(request: web.Request) -> web.Response:
    """Handle GET /api/runs/detail - JSON detail of one run.

    Query parameters:
        id: Run identifier. Absent or empty selects the latest run.

    Returns:
        JSON response ``{"run": {...}, "navigation": [...]}``. On 404 the
        body carries the existing identifiers in ``details``.
    """
    invalid = unknown_params_error(request, RUN_DETAIL_ALLOWED_PARAMS)
    if invalid is not None:
        return invalid

    output_dir: Path = request.app["output_dir"]
    run_id = request.query.get("id") or None

    try:
        run, navigation = await asyncio.to_thread(resolve_run, output_dir, run_id)
    except HistoryError as e:
        _log_history_error("Resolve run", e)
        return history_error_response(e)

    return web.json_response(
        {"run": run.to_dict(), "navigation": navigation.to_list()}
    )


def get_run_routes() -> list[tuple[str, str, object]]:
    """Return run route definitions as (method, path_suffix, handler) tuples."""
    return [
        ("GET", "/runs", api_runs_handler),
        ("GET", "/runs/detail", api_run_detail_handler),
    ]


def setup_run_routes(app: web.Application) -> None:
    """Register run API routes with the application.

    Args:
        app: aiohttp Application to configure.
    """
    for method, suffix, handler in get_run_routes():
        app.router.add_route(method, f"/api{suffix}", handler)
