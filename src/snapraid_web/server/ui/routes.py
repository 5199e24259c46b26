"""UI route handlers.

This module provides server-rendered HTML routes: the page shell and the
two partials (overview, run detail) the client loads into it.
JSON API handlers live in the snapraid_web.server.api package.
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

import aiohttp_jinja2
import jinja2
from aiohttp import web

from snapraid_web.core.formatting import DEFAULT_RENDER_HELPERS, RenderHelpers
from snapraid_web.history import (
    HistoryError,
    RunNotFoundError,
    get_overview,
    resolve_run,
)
from snapraid_web.server.ui.models import HomeContext, OverviewContext, RunContext

logger = logging.getLogger(__name__)

# HTTP security headers for HTML responses
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": (
        "default-src 'self'; "
        "script-src 'self'; "
        "style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data:; "
        "connect-src 'self'; "
        "object-src 'none'; "
        "frame-ancestors 'self'"
    ),
}

# Template directory path
TEMPLATES_DIR = Path(__file__).parent / "templates"

# Paths whose errors are consumed by scripts, not shown as pages
_RAW_ERROR_PREFIXES = ("/partials/", "/api/", "/static/")


# ==========================================================================
# HTML Route handlers
# ==========================================================================


async def home_handler(request: web.Request) -> dict:
    """Handle GET / - page shell with navigation and version footer."""
    return HomeContext(version=request.app["version"]).to_dict()


async def overview_partial_handler(request: web.Request) -> dict:
    """Handle GET /partials/overview - overview table, newest run first.

    Raises:
        HTTPInternalServerError: If any snapshot cannot be read or decoded,
            or the store is unavailable.
    """
    output_dir: Path = request.app["output_dir"]

    try:
        rows = await asyncio.to_thread(get_overview, output_dir)
    except HistoryError as e:
        logger.error(
            "Render overview partial failed: %s", e, extra=e.log_fields()
        )
        raise web.HTTPInternalServerError(text="internal error") from e

    return OverviewContext(rows=rows).to_dict()


async def run_partial_handler(request: web.Request) -> dict:
    """Handle GET /partials/run?id=<run-id> - run detail with run selector.

    An absent or empty ``id`` selects the latest run.

    Raises:
        HTTPNotFound: If the run does not exist or the store has no runs.
        HTTPInternalServerError: If the snapshot cannot be read or decoded.
    """
    output_dir: Path = request.app["output_dir"]
    run_id = request.query.get("id") or None

    try:
        run, navigation = await asyncio.to_thread(resolve_run, output_dir, run_id)
    except RunNotFoundError as e:
        logger.warning("Run partial: %s", e, extra=e.log_fields())
        raise web.HTTPNotFound(text=str(e)) from e
    except HistoryError as e:
        logger.error("Render run partial failed: %s", e, extra=e.log_fields())
        raise web.HTTPInternalServerError(text="internal error") from e

    return RunContext.from_resolution(run, navigation).to_dict()


async def unknown_partial_handler(request: web.Request) -> web.Response:
    """Handle GET /partials/{section} for sections that do not exist."""
    raise web.HTTPNotFound(text=f"unknown section {request.match_info['section']!r}")


async def handle_404(request: web.Request) -> web.Response:
    """Render the HTML not-found page."""
    return aiohttp_jinja2.render_template(
        "errors/404.html",
        request,
        {"version": request.app["version"], "path": request.path},
        status=404,
    )


# ==========================================================================
# Middleware
# ==========================================================================


@web.middleware
async def security_headers_middleware(
    request: web.Request,
    handler: web.RequestHandler,
) -> web.StreamResponse:
    """Add security headers to all HTML responses."""
    response = await handler(request)

    content_type = response.headers.get("Content-Type", "")
    if "text/html" in content_type:
        for header, value in SECURITY_HEADERS.items():
            response.headers[header] = value

    return response


@web.middleware
async def request_logging_middleware(
    request: web.Request,
    handler: web.RequestHandler,
) -> web.StreamResponse:
    """Log request details with timing."""
    start_time = time.monotonic()

    try:
        response = await handler(request)
    except web.HTTPException as exc:
        duration_ms = (time.monotonic() - start_time) * 1000
        logger.info(
            "Request: method=%s path=%s status=%d duration_ms=%.1f",
            request.method,
            request.path,
            exc.status,
            duration_ms,
        )
        raise

    duration_ms = (time.monotonic() - start_time) * 1000
    if not request.path.startswith("/static/") and request.path != "/healthz":
        logger.info(
            "Request: method=%s path=%s status=%d duration_ms=%.1f",
            request.method,
            request.path,
            response.status,
            duration_ms,
        )
    return response


@web.middleware
async def error_middleware(
    request: web.Request,
    handler: web.RequestHandler,
) -> web.StreamResponse:
    """Render the HTML 404 page for browser-facing paths."""
    if request.path.startswith(_RAW_ERROR_PREFIXES):
        return await handler(request)

    try:
        return await handler(request)
    except web.HTTPNotFound:
        return await handle_404(request)


def setup_ui_routes(
    app: web.Application, helpers: RenderHelpers = DEFAULT_RENDER_HELPERS
) -> None:
    """Setup UI routes and Jinja2 templating.

    Args:
        app: aiohttp Application to configure.
        helpers: Formatting operations exposed to templates as the
            ``duration`` and ``title`` filters.
    """
    env = aiohttp_jinja2.setup(
        app,
        loader=jinja2.FileSystemLoader(str(TEMPLATES_DIR)),
    )
    env.filters["duration"] = helpers.format_duration
    env.filters["title"] = helpers.title

    app.router.add_get("/", aiohttp_jinja2.template("home.html")(home_handler))
    app.router.add_get(
        "/partials/overview",
        aiohttp_jinja2.template("partials/overview.html")(overview_partial_handler),
    )
    app.router.add_get(
        "/partials/run",
        aiohttp_jinja2.template("partials/run.html")(run_partial_handler),
    )
    # Must be registered after the named partials
    app.router.add_get("/partials/{section}", unknown_partial_handler)

    # Order matters: logging -> security -> error handling
    app.middlewares.append(request_logging_middleware)
    app.middlewares.append(security_headers_middleware)
    app.middlewares.append(error_middleware)

    logger.debug("UI routes configured with Jinja2 templating")
