"""Shared helpers for resolving configuration inside CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from snapraid_web.cli.exit_codes import ExitCode
from snapraid_web.cli.output import error_exit
from snapraid_web.config import AppConfig, ConfigError, get_config


def load_config(
    ctx: click.Context,
    *,
    json_output: bool = False,
    **overrides: Any,
) -> AppConfig:
    """Load the effective configuration for a command.

    The config file path chosen on the command group is reused, so the
    same file feeds both logging and command settings.

    Args:
        ctx: Click context carrying the group options.
        json_output: Format a configuration error as JSON.
        **overrides: CLI overrides forwarded to get_config.

    Returns:
        AppConfig with CLI overrides applied.
    """
    obj = ctx.obj or {}
    config_path: Path | None = obj.get("config_path")
    try:
        return get_config(
            config_path=config_path,
            strict=config_path is not None,
            **overrides,
        )
    except (ConfigError, ValueError) as e:
        error_exit(f"Invalid configuration: {e}", ExitCode.CONFIG_ERROR, json_output)
