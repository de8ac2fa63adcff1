"""CLI entry point for gh-activity."""

import json
from pathlib import Path

import click
from rich.console import Console

from gh_activity import __version__
from gh_activity.config import Config, load_config
from gh_activity.errors import NotFoundError
from gh_activity.logging import setup_logging
from gh_activity.pipeline import analyze_sync
from gh_activity.report import render_report

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="gh-activity")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose output")
@click.option("--log-json", is_flag=True, default=False, help="Emit logs as JSON lines")
@click.pass_context
def main(ctx: click.Context, verbose: bool, log_json: bool) -> None:
    """GitHub User Profile Analyzer.

    Shows a user's profile, repositories and daily commit activity from
    their recent public events.

    \b
    Example:
        gh-activity analyze octocat
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose=verbose, json_format=log_json)


@main.command()
@click.argument("handle")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to config.yaml file",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the report as JSON instead of tables",
)
@click.option(
    "--fill-gaps",
    is_flag=True,
    default=False,
    help="Show days without commits as zero",
)
def analyze(
    handle: str,
    config: Path | None,
    as_json: bool,
    fill_gaps: bool,
) -> None:
    """Analyze the GitHub user HANDLE."""
    handle = handle.strip()
    if not handle:
        raise click.UsageError("HANDLE must not be empty")

    cfg = load_config(config) if config else Config()
    if fill_gaps:
        cfg.activity.fill_gaps = True

    try:
        report = analyze_sync(handle, cfg)
    except NotFoundError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        raise click.Abort() from e
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Lookup interrupted by user[/yellow]")
        raise click.Abort() from None

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2, default=str))
        return

    render_report(console, report)
