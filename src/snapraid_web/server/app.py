"""HTTP application for the run dashboard.

This module provides the aiohttp Application with the health check
endpoint, the JSON API, the Web UI routes and static file serving.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from aiohttp import web
from aiohttp.web import RequestHandler

from snapraid_web import __version__
from snapraid_web.core.formatting import DEFAULT_RENDER_HELPERS, RenderHelpers
from snapraid_web.history import HistoryError, list_run_ids
from snapraid_web.server.api import setup_api_routes
from snapraid_web.server.ui import setup_ui_routes

if TYPE_CHECKING:
    from snapraid_web.server.lifecycle import DaemonLifecycle

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@dataclass
class HealthStatus:
    """Health check response payload."""

    status: str
    """Overall status: 'healthy' or 'unhealthy'."""

    store: str
    """Snapshot store state: 'available' or 'unavailable'."""

    uptime_seconds: float
    """Seconds since server startup."""

    version: str
    """snapraid-web version string."""

    run_count: int = 0
    """Number of run snapshots currently in the store."""

    shutting_down: bool = False
    """True if graceful shutdown is in progress."""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


HEALTH_CHECK_TIMEOUT = 5.0  # seconds


async def count_runs(output_dir: Path) -> int | None:
    """Count the runs in the store without decoding any snapshot.

    Returns:
        Number of runs, or None if the store cannot be listed in time.
    """
    try:
        run_ids = await asyncio.wait_for(
            asyncio.to_thread(list_run_ids, output_dir),
            timeout=HEALTH_CHECK_TIMEOUT,
        )
    except HistoryError as e:
        logger.warning("Health check: %s", e)
        return None
    except asyncio.TimeoutError:
        logger.warning(
            "Health check: listing %s timed out after %.1fs",
            output_dir,
            HEALTH_CHECK_TIMEOUT,
        )
        return None
    return len(run_ids)


async def health_handler(request: web.Request) -> web.Response:
    """Handle GET /healthz requests.

    Returns JSON health status with appropriate HTTP status code:
    - 200: healthy (store listable, not shutting down)
    - 503: unhealthy (store unavailable or shutting down)
    """
    lifecycle: DaemonLifecycle | None = request.app.get("lifecycle")
    run_count = await count_runs(request.app["output_dir"])

    shutting_down = lifecycle.is_shutting_down if lifecycle else False
    uptime = lifecycle.uptime_seconds if lifecycle else 0.0
    healthy = run_count is not None and not shutting_down

    health = HealthStatus(
        status="healthy" if healthy else "unhealthy",
        store="available" if run_count is not None else "unavailable",
        uptime_seconds=round(uptime, 1),
        version=request.app["version"],
        run_count=run_count or 0,
        shutting_down=shutting_down,
    )
    return web.json_response(health.to_dict(), status=200 if healthy else 503)


@web.middleware
async def static_cache_middleware(
    request: web.Request, handler: RequestHandler
) -> web.StreamResponse:
    """Add Cache-Control headers to static file responses."""
    response = await handler(request)
    if request.path.startswith("/static/"):
        # Cache static files for 1 hour
        response.headers["Cache-Control"] = "public, max-age=3600"
    return response


def create_app(
    output_dir: Path,
    *,
    version: str = __version__,
    helpers: RenderHelpers = DEFAULT_RENDER_HELPERS,
) -> web.Application:
    """Create and configure the aiohttp Application.

    The store is only read per request, so a missing ``output_dir`` does not
    prevent the application from starting; requests report it instead.

    Args:
        output_dir: Directory holding the run snapshots.
        version: Version string shown in the page footer and health payload.
        helpers: Formatting operations made available to templates.

    Returns:
        Configured aiohttp Application instance.
    """
    app = web.Application()

    app["output_dir"] = Path(output_dir)
    app["version"] = version
    app["lifecycle"] = None  # Will be set by serve command

    app.router.add_get("/healthz", health_handler)
    setup_api_routes(app)
    setup_ui_routes(app, helpers)

    app.router.add_static(
        "/static",
        STATIC_DIR,
        name="static",
        append_version=True,  # Adds ?v=hash for cache busting
    )
    # Insert at beginning so it runs after static handler
    app.middlewares.insert(0, static_cache_middleware)

    logger.debug("Created app for store %s", app["output_dir"])
    return app
