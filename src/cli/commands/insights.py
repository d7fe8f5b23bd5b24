"""Emotional pattern and insight command."""

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components

console = Console()

INSIGHT_STYLE = {"strength": "green", "concern": "red", "pattern": "cyan", "trend": "yellow"}


@click.command()
def insights():
    """Show emotional patterns and sentiment insights."""
    from journal.insights import InsightWindows, analyze_emotional_patterns, generate_sentiment_insights

    c = get_components()
    cfg = c["config_model"].insights
    entries = c["storage"].list_entries(c["user"].id)

    patterns = analyze_emotional_patterns(entries, window=cfg.pattern_window)
    if patterns:
        table = Table(show_header=True, title="Emotional patterns")
        table.add_column("Mood")
        table.add_column("Frequency", justify="right")
        table.add_column("Trend")
        table.add_column("Consistency", justify="right")
        table.add_column("Triggers", style="dim")
        for p in patterns:
            table.add_row(
                p.dominant_mood.value,
                f"{p.frequency:.0%}",
                p.trend.value,
                f"{p.consistency:.2f}",
                ", ".join(p.triggers),
            )
        console.print(table)

    windows = InsightWindows(
        pattern_window=cfg.pattern_window,
        insight_window=cfg.insight_window,
        max_insights=cfg.max_insights,
    )
    for insight in generate_sentiment_insights(entries, windows):
        style = INSIGHT_STYLE.get(insight.type.value, "white")
        console.print(f"\n[{style} bold]{insight.title}[/] [dim]({insight.confidence:.0%})[/]")
        console.print(f"  {insight.description}")
        if insight.suggestion:
            console.print(f"  [italic]{insight.suggestion}[/]")
