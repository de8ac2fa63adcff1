"""Terminal rendering of a ProfileReport."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gh_activity.metrics.activity import summarize
from gh_activity.models import ActivityPoint, CollectionItem, Identity
from gh_activity.pipeline import ProfileReport

BAR_WIDTH = 40


def render_profile(console: Console, identity: Identity) -> None:
    """Print the profile header and follower counts."""
    name = escape(identity.display_name)
    console.print(f"[bold]{name}[/bold] [dim]@{escape(identity.login)}[/dim]")
    if identity.avatar_url:
        console.print(f"[dim]{escape(identity.avatar_url)}[/dim]")
    console.print(
        f"  Repositories: [cyan]{identity.public_repos}[/cyan]"
        f"  Followers: [cyan]{identity.followers}[/cyan]"
        f"  Following: [cyan]{identity.following}[/cyan]"
    )


def render_repositories(console: Console, repositories: list[CollectionItem]) -> None:
    """Print the repository table, or the empty state."""
    if not repositories:
        console.print("[dim]No repositories found[/dim]")
        return

    table = Table(title="Repositories", title_justify="left")
    table.add_column("Name", style="bold")
    table.add_column("Language")
    table.add_column("Stars", justify="right")
    table.add_column("Forks", justify="right")

    for repo in repositories:
        table.add_row(
            escape(repo.name),
            escape(repo.language or ""),
            str(repo.stargazers_count),
            str(repo.forks_count),
        )
    console.print(table)


def render_activity(console: Console, activity: list[ActivityPoint]) -> None:
    """Print daily commits as a bar chart, or the empty state."""
    if not activity:
        console.print("[dim]No commit history available[/dim]")
        return

    summary = summarize(activity)
    peak = summary.busiest.count if summary.busiest else 0

    console.print(
        f"[bold]Daily Commits[/bold] [dim]{summary.first_day} .. {summary.last_day}[/dim]"
    )
    for point in activity:
        width = round(point.count / peak * BAR_WIDTH) if peak else 0
        console.print(f"  {point.day_key} [blue]{'█' * width}[/blue] {point.count}")
    console.print(
        f"  Total: [cyan]{summary.total}[/cyan] commits on "
        f"[cyan]{summary.active_days}[/cyan] active days"
    )


def render_report(console: Console, report: ProfileReport) -> None:
    """Print the full report."""
    render_profile(console, report.identity)
    console.print()
    render_activity(console, report.activity)
    console.print()
    render_repositories(console, report.repositories)
