"""Journaling statistics command."""

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components

console = Console()


@click.command()
def stats():
    """Show mood distribution, average valence and streak."""
    from journal.stats import summarize

    c = get_components()
    entries = c["storage"].list_entries(c["user"].id)
    summary = summarize(entries)

    if not summary["total_entries"]:
        console.print("[yellow]No entries yet. Run `stillpoint journal add` to start.[/]")
        return

    console.print(f"[bold]Entries:[/] {summary['total_entries']}  |  This week: {summary['entries_this_week']}")
    console.print(f"[bold]Streak:[/] {summary['streak']} day(s)")
    console.print(f"[bold]Average valence:[/] {summary['average_valence']} / 8")
    console.print(f"[bold]Most common mood:[/] {summary['most_common_mood']}")

    table = Table(show_header=True, title="Mood distribution")
    table.add_column("Mood")
    table.add_column("Entries", justify="right")
    table.add_column("Share", justify="right")
    total = summary["total_entries"]
    for mood_name, count in summary["distribution"].items():
        table.add_row(mood_name, str(count), f"{count / total:.0%}")
    console.print(table)
