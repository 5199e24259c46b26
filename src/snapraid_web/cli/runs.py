"""CLI commands for inspecting the run history without the web server."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from snapraid_web.cli.context import load_config
from snapraid_web.cli.output import error_exit
from snapraid_web.core.formatting import format_duration
from snapraid_web.history import (
    STEP_NAMES,
    HistoryError,
    OverviewRow,
    RunDetail,
    get_overview,
    resolve_run,
)

logger = logging.getLogger(__name__)

_output_dir_option = click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the run snapshots (default: /output).",
)

_json_option = click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format.",
)


def _format_overview_row(row: OverviewRow) -> str:
    durations = " ".join(
        f"{format_duration(ns):>12}" for _, ns in row.step_durations.items()
    )
    status = "failed" if row.failed else "ok"
    return f"{row.id:<26} {row.total_changes:>8} {durations} {status}"


@click.group("runs")
def runs_group() -> None:
    """Inspect recorded SnapRAID runs.

    Examples:

        # List all runs, newest first
        snapraid-web runs list

        # Show the latest run
        snapraid-web runs show

        # Show one run as JSON
        snapraid-web runs show 2023-01-02T00:00:00Z --json
    """


@runs_group.command("list")
@_output_dir_option
@_json_option
@click.pass_context
def list_runs(ctx: click.Context, output_dir: Path | None, json_output: bool) -> None:
    """List all runs with change counts and step durations, newest first."""
    config = load_config(ctx, json_output=json_output, output_dir=output_dir)

    try:
        rows = get_overview(config.store.output_dir)
    except HistoryError as e:
        error_exit(e, json_output=json_output)

    if json_output:
        click.echo(json.dumps({"runs": [row.to_dict() for row in rows]}, indent=2))
        return

    if not rows:
        click.echo("No runs found.")
        return

    steps = " ".join(f"{name.upper():>12}" for name in STEP_NAMES)
    header = f"{'RUN':<26} {'CHANGES':>8} {steps} STATUS"
    click.echo(header)
    click.echo("-" * len(header))
    for row in rows:
        click.echo(_format_overview_row(row))


def _output_run_human(run: RunDetail) -> None:
    click.echo(f"Run:     {run.id}")
    click.echo(f"Date:    {run.date}")
    click.echo(f"Changes: {run.changed_paths.total}")
    if run.error:
        click.echo(click.style(f"Error:   {run.error}", fg="red"))

    for category, paths in run.changed_paths.items():
        if not paths:
            continue
        click.echo("")
        click.echo(f"{category.capitalize()} ({len(paths)}):")
        for path in paths:
            click.echo(f"  {path}")


@runs_group.command("show")
@click.argument("run_id", required=False)
@_output_dir_option
@_json_option
@click.pass_context
def show_run(
    ctx: click.Context,
    run_id: str | None,
    output_dir: Path | None,
    json_output: bool,
) -> None:
    """Show the changed files of one run.

    RUN_ID is the run identifier as listed by 'runs list'. When omitted,
    the latest run is shown.
    """
    config = load_config(ctx, json_output=json_output, output_dir=output_dir)

    try:
        run, navigation = resolve_run(config.store.output_dir, run_id or None)
    except HistoryError as e:
        error_exit(e, json_output=json_output)

    if json_output:
        data = {"run": run.to_dict(), "navigation": navigation.to_list()}
        click.echo(json.dumps(data, indent=2))
    else:
        _output_run_human(run)
