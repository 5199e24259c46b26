"""CLI module for snapraid-web."""

import logging
from pathlib import Path

import click

from snapraid_web import __version__
from snapraid_web.cli.exit_codes import ExitCode
from snapraid_web.cli.output import error_exit

_logging_configured: bool = False

logger = logging.getLogger(__name__)


def _configure_logging(
    config_path: Path | None,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """Configure logging from CLI options.

    Args:
        config_path: Config file to read logging settings from.
        log_level: Override log level (debug, info, warning, error).
        log_format: Override log format (text, json).
    """
    global _logging_configured
    if _logging_configured:
        return

    from snapraid_web.config import ConfigError, get_config
    from snapraid_web.logging import configure_logging

    try:
        config = get_config(
            config_path=config_path,
            log_level=log_level,
            log_format=log_format,
        )
    except (ConfigError, ValueError) as e:
        error_exit(f"Invalid configuration: {e}", ExitCode.CONFIG_ERROR)
    configure_logging(config.logging)
    _logging_configured = True


@click.group()
@click.version_option(version=__version__, prog_name="snapraid-web")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: ~/.snapraid-web/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default=None,
    help="Log format: text or json (default: json).",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """snapraid-web - Browse the history of SnapRAID maintenance runs."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["log_level"] = log_level
    ctx.obj["log_format"] = log_format

    _configure_logging(
        config_path,
        log_level.lower() if log_level else None,
        log_format.lower() if log_format else None,
    )


# Defer import to avoid circular dependency
def _register_commands():
    from snapraid_web.cli.runs import runs_group
    from snapraid_web.cli.serve import serve_command

    main.add_command(runs_group)
    main.add_command(serve_command)


_register_commands()
