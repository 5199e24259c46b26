"""Server lifecycle management.

This module provides classes for tracking server uptime and coordinating
graceful shutdown between signal handlers and the HTTP runner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone


@dataclass
class ShutdownState:
    """Tracks shutdown progress for graceful termination."""

    initiated: datetime | None = None
    """UTC timestamp when shutdown was initiated, None if not shutting down."""

    timeout_deadline: datetime | None = None
    """UTC timestamp after which open connections are dropped."""

    @property
    def is_shutting_down(self) -> bool:
        """Returns True if shutdown has been initiated."""
        return self.initiated is not None

    @property
    def is_timed_out(self) -> bool:
        """Returns True if shutdown timeout has been exceeded."""
        if self.timeout_deadline is None:
            return False
        return datetime.now(timezone.utc) >= self.timeout_deadline


@dataclass
class DaemonLifecycle:
    """Manages server startup and shutdown state.

    The health endpoint reads it to report uptime and to turn unhealthy as
    soon as a shutdown signal arrives.
    """

    shutdown_timeout: float = 10.0
    """Seconds to wait for in-flight requests before closing the server."""

    start_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    """UTC timestamp when the server started."""

    shutdown_state: ShutdownState = field(default_factory=ShutdownState)
    """Current shutdown state."""

    @property
    def uptime_seconds(self) -> float:
        """Returns seconds since server startup."""
        return (datetime.now(timezone.utc) - self.start_time).total_seconds()

    @property
    def is_shutting_down(self) -> bool:
        """Returns True if shutdown has been initiated."""
        return self.shutdown_state.is_shutting_down

    def initiate_shutdown(self) -> None:
        """Begin graceful shutdown process.

        Idempotent - calling multiple times has no additional effect after
        the first call.
        """
        if self.shutdown_state.initiated is not None:
            return  # Already shutting down

        now = datetime.now(timezone.utc)
        self.shutdown_state.initiated = now
        self.shutdown_state.timeout_deadline = now + timedelta(
            seconds=self.shutdown_timeout
        )
