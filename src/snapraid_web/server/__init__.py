"""snapraid-web HTTP server module.

This module serves the run dashboard: HTML page and partials, a small JSON
API, a health check endpoint, signal handling for graceful shutdown, and
lifecycle management.

Exports:
    DaemonLifecycle: Manages server startup/shutdown state
    ShutdownState: Tracks shutdown progress for graceful termination
    HealthStatus: Response payload for health check endpoint
    create_app: Factory function to create the aiohttp Application
"""

from snapraid_web.server.app import HealthStatus, create_app
from snapraid_web.server.lifecycle import DaemonLifecycle, ShutdownState

__all__ = [
    "DaemonLifecycle",
    "ShutdownState",
    "HealthStatus",
    "create_app",
]
