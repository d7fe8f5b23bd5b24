"""CLI entry point for Stillpoint."""

import sys
from pathlib import Path

import click
from rich.console import Console

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import analyze, insights, journal, mood, stats, suggest
from cli.config import load_config_model
from cli.logging_config import setup_logging
from observability import log_run_summary

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Stillpoint - mood-aware journaling companion."""
    try:
        log_cfg = load_config_model().logging
        level, json_mode = log_cfg.level, log_cfg.json_mode
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    if verbose:
        level = "DEBUG"
        ctx.call_on_close(log_run_summary)
    setup_logging(json_mode=json_mode, level=level)


cli.add_command(analyze)
cli.add_command(journal)
cli.add_command(mood)
cli.add_command(stats)
cli.add_command(suggest)
cli.add_command(insights)


def main():
    cli()


if __name__ == "__main__":
    main()
