"""CLI serve command.

This module provides the `snapraid-web serve` command that runs the
dashboard as a long-lived HTTP service suitable for systemd or a
container runtime.
"""

from __future__ import annotations

import asyncio
import errno
import logging
import os
import sys
from pathlib import Path

import click

from snapraid_web.cli.context import load_config
from snapraid_web.cli.exit_codes import ExitCode

logger = logging.getLogger(__name__)


async def run_server(
    bind: str,
    port: int,
    shutdown_timeout: float,
    output_dir: Path,
    shutdown_event: asyncio.Event | None = None,
) -> int:
    """Run the HTTP server until SIGINT or SIGTERM.

    Args:
        bind: Address to bind to.
        port: Port to bind to.
        shutdown_timeout: Seconds to wait for in-flight requests on shutdown.
        output_dir: Directory holding the run snapshots.
        shutdown_event: Event that stops the server when set. The signal
            handlers set it; a new one is created when omitted.

    Returns:
        Exit code (0 for clean shutdown, non-zero for errors).
    """
    from aiohttp import web

    from snapraid_web.server.app import create_app
    from snapraid_web.server.lifecycle import DaemonLifecycle
    from snapraid_web.server.signals import (
        remove_signal_handlers,
        setup_signal_handlers,
    )

    lifecycle = DaemonLifecycle(shutdown_timeout=shutdown_timeout)

    if shutdown_event is None:
        shutdown_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    setup_signal_handlers(loop, lifecycle, shutdown_event)

    app = create_app(output_dir)
    app["lifecycle"] = lifecycle

    runner = web.AppRunner(app, shutdown_timeout=shutdown_timeout)
    await runner.setup()

    try:
        site = web.TCPSite(runner, bind, port)
        await site.start()

        logger.info(
            "snapraid-web started on http://%s:%d (PID %d)",
            bind,
            port,
            os.getpid(),
        )
        logger.info("Serving runs from %s", output_dir)
        logger.info("Press Ctrl+C or send SIGTERM to stop")

        await shutdown_event.wait()

        logger.info(
            "Shutdown initiated, waiting up to %.1fs for in-flight requests",
            shutdown_timeout,
        )
    except OSError as e:
        if e.errno == errno.EADDRINUSE:
            logger.error("Port %d is already in use", port)
            return ExitCode.SERVER_ERROR
        if e.errno == errno.EADDRNOTAVAIL:
            logger.error("Cannot bind to address %s", bind)
            return ExitCode.SERVER_ERROR
        logger.error("Server error: %s", e)
        return ExitCode.SERVER_ERROR
    finally:
        remove_signal_handlers(loop)
        await runner.cleanup()
        logger.info("snapraid-web stopped")

    return ExitCode.SUCCESS


@click.command("serve")
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the run snapshots (default: /output).",
)
@click.option(
    "--bind",
    type=str,
    default=None,
    help="Address to bind to (default: 0.0.0.0).",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (default: 8080).",
)
@click.pass_context
def serve_command(
    ctx: click.Context,
    output_dir: Path | None,
    bind: str | None,
    port: int | None,
) -> None:
    """Serve the run dashboard over HTTP.

    Starts a long-lived HTTP server with a health endpoint at /healthz.
    Handles graceful shutdown on SIGTERM or SIGINT (Ctrl+C).

    Configuration precedence (highest to lowest):
      1. CLI flags (--output-dir, --bind, --port)
      2. Environment variables (SNAPRAID_WEB_*)
      3. Config file (--config or ~/.snapraid-web/config.toml)
      4. Default values

    \b
    Examples:
        snapraid-web serve                          # Start with defaults
        snapraid-web serve --port 9000              # Custom port
        snapraid-web serve --output-dir /srv/runs   # Custom snapshot directory
    """
    config = load_config(ctx, output_dir=output_dir, bind=bind, port=port)
    store_dir = config.store.output_dir

    if not store_dir.is_dir():
        logger.error("Snapshot directory not found: %s", store_dir)
        click.echo(f"Error: snapshot directory not found: {store_dir}", err=True)
        sys.exit(ExitCode.STORE_ERROR)

    logger.info(
        "Starting snapraid-web (bind=%s, port=%d, timeout=%.1fs)",
        config.server.bind,
        config.server.port,
        config.server.shutdown_timeout,
    )

    try:
        exit_code = asyncio.run(
            run_server(
                config.server.bind,
                config.server.port,
                config.server.shutdown_timeout,
                store_dir,
            )
        )
        sys.exit(exit_code)
    except KeyboardInterrupt:
        logger.info("Interrupted before server started")
        sys.exit(ExitCode.INTERRUPTED)
