"""Web UI package: page shell, partial templates and view models."""

from snapraid_web.server.ui.routes import setup_ui_routes

__all__ = ["setup_ui_routes"]
