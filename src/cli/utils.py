"""Shared CLI utilities."""

import sys
from datetime import date

import click
import structlog
from rich.console import Console

console = Console()
logger = structlog.get_logger()


def get_components():
    """Initialize all components from config."""
    from advisor import SuggestionGenerator
    from cli.config import get_paths, load_config_model
    from journal import UserProfile
    from journal.storage import JournalStorage
    from mood import MoodAnalyzer

    try:
        config_model = load_config_model()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    config = config_model.to_dict()
    paths = get_paths(config)

    return {
        "config": config,
        "config_model": config_model,
        "paths": paths,
        "storage": JournalStorage(paths["journal_dir"]),
        "analyzer": MoodAnalyzer(tuning=config_model.analyzer),
        "generator": SuggestionGenerator(
            history_window=config_model.suggestions.history_window,
            theme_window=config_model.suggestions.theme_window,
        ),
        "user": UserProfile(id=config_model.user.id, name=config_model.user.name),
    }


def parse_day(value: str | None) -> date | None:
    """Parse a YYYY-MM-DD option value."""
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM-DD, got {value!r}")
