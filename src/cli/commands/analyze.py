"""Ad-hoc text analysis command."""

import json

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components

console = Console()

SENTIMENT_STYLE = {"positive": "green", "neutral": "dim", "negative": "red"}


@click.command()
@click.argument("text")
@click.option("--explain", is_flag=True, help="Show per-mood scores")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON")
def analyze(text: str, explain: bool, as_json: bool):
    """Analyze the mood and sentiment of TEXT without saving it."""
    c = get_components()
    analyzer = c["analyzer"]
    result = analyzer.analyze(text)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    style = SENTIMENT_STYLE.get(result.sentiment.value, "dim")
    console.print(f"[bold]Mood:[/] {result.mood.value}  ({result.confidence:.0%} confidence)")
    console.print(
        f"[bold]Sentiment:[/] [{style}]{result.sentiment.value}[/] ({result.sentiment_score:+.2f})"
    )
    if result.keywords:
        console.print(f"[bold]Keywords:[/] {', '.join(result.keywords)}")

    if explain:
        scores = analyzer.score_moods(text)
        table = Table(show_header=True, title="Mood scores")
        table.add_column("Mood")
        table.add_column("Score", justify="right")
        table.add_column("Confidence", justify="right")
        table.add_column("Matches", style="dim")
        for mood, score in sorted(scores.items(), key=lambda kv: kv[1].score, reverse=True):
            if score.score <= 0:
                continue
            table.add_row(mood.value, f"{score.score:.2f}", f"{score.confidence:.2f}", ", ".join(score.matches[:5]))
        console.print(table)
