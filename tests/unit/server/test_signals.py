"""Unit tests for signal handler setup."""

import asyncio
import os
import signal

import pytest

from snapraid_web.server.lifecycle import DaemonLifecycle
from snapraid_web.server.signals import remove_signal_handlers, setup_signal_handlers


@pytest.mark.skipif(not hasattr(signal, "SIGTERM"), reason="POSIX signals required")
class TestSetupSignalHandlers:
    """Tests for setup_signal_handlers()."""

    def test_sigterm_initiates_shutdown(self) -> None:
        """SIGTERM marks the lifecycle as shutting down and sets the event."""

        async def _test() -> DaemonLifecycle:
            loop = asyncio.get_running_loop()
            lifecycle = DaemonLifecycle()
            shutdown_event = asyncio.Event()
            setup_signal_handlers(loop, lifecycle, shutdown_event)
            try:
                os.kill(os.getpid(), signal.SIGTERM)
                await asyncio.wait_for(shutdown_event.wait(), timeout=2.0)
            finally:
                remove_signal_handlers(loop)
            return lifecycle

        lifecycle = asyncio.run(_test())

        assert lifecycle.is_shutting_down

    def test_remove_without_setup(self) -> None:
        """Removing handlers that were never registered does not raise."""

        async def _test() -> None:
            remove_signal_handlers(asyncio.get_running_loop())

        asyncio.run(_test())
