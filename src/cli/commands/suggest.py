"""Mindful practice suggestions command."""

from typing import Optional

import click
from rich.console import Console

from cli.utils import get_components, parse_day

console = Console()

TYPE_STYLE = {
    "mood-boost": "yellow",
    "stress-relief": "cyan",
    "reflection": "magenta",
    "growth": "green",
}


@click.command()
@click.option("--date", "day_str", help="Suggestions for a specific day (YYYY-MM-DD)")
def suggest(day_str: Optional[str]):
    """Suggest three mindful practices based on your recent entries."""
    day = parse_day(day_str)
    c = get_components()
    entries = c["storage"].list_entries(c["user"].id)
    generator = c["generator"]

    if day is not None:
        suggestions = generator.suggest_for_date(day, entries, c["user"])
    else:
        suggestions = generator.suggest_for_history(entries, c["user"])

    for i, s in enumerate(suggestions, 1):
        style = TYPE_STYLE.get(s.type.value, "white")
        console.print(f"\n[bold]{i}. {s.title}[/] [{style}]({s.type.value})[/] [dim]{s.duration}[/]")
        console.print(f"   {s.description}")
        console.print(f"   [dim]{s.reason} | relevance {s.relevance_score:.2f}[/]")
