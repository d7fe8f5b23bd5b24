"""Journal CLI commands."""

from typing import Optional

import click
import structlog
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from cli.utils import get_components, parse_day

console = Console()
logger = structlog.get_logger()


@click.group()
def journal():
    """Manage journal entries."""
    pass


@journal.command("add")
@click.option("--date", "day_str", help="Entry date (YYYY-MM-DD, defaults to today)")
@click.argument("content", required=False)
def journal_add(day_str: Optional[str], content: Optional[str]):
    """Write the entry for a day. Opens editor if no content provided.

    A day holds one entry; writing again replaces it.
    """
    day = parse_day(day_str)
    c = get_components()

    if not content:
        content = click.edit("# Write your entry here\n\n")
        if not content:
            console.print("[yellow]No content provided, cancelled.[/]")
            return

    try:
        entry = c["storage"].upsert(c["user"].id, content, day=day, analyzer=c["analyzer"])
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    console.print(f"[green]Saved:[/] {entry.date.isoformat()}")
    console.print(
        f"[dim]Mood: {entry.mood.value} | Sentiment: {entry.sentiment.value} "
        f"({entry.sentiment_score:+.2f})[/]"
    )
    if entry.keywords:
        console.print(f"[dim]Keywords: {', '.join(entry.keywords[:5])}[/]")


@journal.command("list")
@click.option("-n", "--limit", default=10, help="Max entries to show")
def journal_list(limit: int):
    """List recent journal entries."""
    c = get_components()
    entries = c["storage"].list_entries(c["user"].id, limit=limit)

    if not entries:
        console.print("[yellow]No entries found.[/]")
        return

    table = Table(show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Mood", style="green")
    table.add_column("Score", justify="right")
    table.add_column("Preview")

    for e in reversed(entries):
        preview = e.content.strip().replace("\n", " ")[:40]
        table.add_row(e.date.isoformat(), e.mood.value, f"{e.sentiment_score:+.2f}", preview)

    console.print(table)


@journal.command("show")
@click.argument("day_str", metavar="DATE")
def journal_show(day_str: str):
    """View the entry for DATE (YYYY-MM-DD)."""
    day = parse_day(day_str)
    c = get_components()
    entry = c["storage"].get(c["user"].id, day)
    if entry is None:
        console.print(f"[red]Not found:[/] {day_str}")
        return

    console.print(f"\n[cyan bold]{entry.date.strftime('%A, %B %-d %Y')}[/]")
    console.print(
        f"[dim]Mood: {entry.mood.value} | Sentiment: {entry.sentiment.value} "
        f"({entry.sentiment_score:+.2f}) | Updated: {entry.updated_at.isoformat(timespec='minutes')}[/]"
    )
    if entry.keywords:
        console.print(f"[dim]Keywords: {', '.join(entry.keywords)}[/]")
    console.print()
    console.print(Markdown(entry.content))


@journal.command("delete")
@click.argument("day_str", metavar="DATE")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def journal_delete(day_str: str, yes: bool):
    """Delete the entry for DATE (YYYY-MM-DD)."""
    day = parse_day(day_str)
    c = get_components()

    if c["storage"].get(c["user"].id, day) is None:
        console.print(f"[red]Not found:[/] {day_str}")
        return

    if not yes:
        if not click.confirm(f"Delete entry for {day.isoformat()}?"):
            return

    c["storage"].delete(c["user"].id, day)
    logger.debug("entry_deleted", date=day.isoformat())
    console.print(f"[green]Deleted:[/] {day.isoformat()}")
