"""JSON API route modules for the snapraid-web server.

- runs.py: Run overview and run detail endpoints

All endpoints are read-only and served under ``/api/``.
"""

from aiohttp import web

from snapraid_web.server.api.runs import setup_run_routes

__all__ = [
    "setup_api_routes",
]


def setup_api_routes(app: web.Application) -> None:
    """Register all API routes with the application.

    Args:
        app: aiohttp Application to configure.
    """
    setup_run_routes(app)
