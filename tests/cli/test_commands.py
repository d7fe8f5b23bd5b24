"""CLI command tests using Click CliRunner.

Strategy: patch get_components at each command module's import point so every
command runs against a real storage rooted in a temp dir, never the user's
config or journal.
"""

import json
from datetime import date
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from advisor import SuggestionGenerator
from cli.config_models import StillpointConfig
from cli.main import cli
from journal import UserProfile
from journal.storage import JournalStorage
from mood import MoodAnalyzer


@pytest.fixture
def runner():
    return CliRunner()


def _make_components(temp_dirs):
    """Build a components dict matching cli.utils.get_components return."""
    config_model = StillpointConfig()
    return {
        "config": config_model.to_dict(),
        "config_model": config_model,
        "paths": {"journal_dir": temp_dirs["journal_dir"]},
        "storage": JournalStorage(temp_dirs["journal_dir"]),
        "analyzer": MoodAnalyzer(),
        "generator": SuggestionGenerator(),
        "user": UserProfile(id="alice", name="Alice"),
    }


@pytest.fixture
def components(temp_dirs):
    """Patch get_components everywhere it's imported."""
    comps = _make_components(temp_dirs)

    targets = [
        "cli.commands.analyze.get_components",
        "cli.commands.journal.get_components",
        "cli.commands.mood.get_components",
        "cli.commands.stats.get_components",
        "cli.commands.suggest.get_components",
        "cli.commands.insights.get_components",
    ]
    patches = [patch(t, return_value=comps) for t in targets]
    patches.append(patch("cli.main.load_config_model", return_value=StillpointConfig()))
    for p in patches:
        p.start()
    yield comps
    for p in patches:
        p.stop()


def _seed(comps, days=((2026, 3, 1), (2026, 3, 2), (2026, 3, 3))):
    texts = [
        "I am so happy and joyful today!",
        "Worried and anxious about the deadline at work.",
        "A calm, peaceful walk in the garden.",
    ]
    for (y, m, d), text in zip(days, texts):
        comps["storage"].upsert("alice", text, day=date(y, m, d), analyzer=comps["analyzer"])


# -- Analyze --


class TestAnalyzeCommand:
    def test_json(self, runner, components):
        result = runner.invoke(cli, ["analyze", "--json", "I am so happy and joyful today!"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["mood"] == "joyful"
        assert data["sentiment"] == "positive"
        assert 0 < data["confidence"] <= 0.98

    def test_explain(self, runner, components):
        result = runner.invoke(cli, ["analyze", "--explain", "Worried and anxious all day."])
        assert result.exit_code == 0
        assert "Mood:" in result.output
        assert "Mood scores" in result.output

    def test_nothing_is_saved(self, runner, components, temp_dirs):
        runner.invoke(cli, ["analyze", "Just checking."])
        assert list(temp_dirs["journal_dir"].glob("*.md")) == []


# -- Journal --


class TestJournalCommands:
    def test_add(self, runner, components, temp_dirs):
        result = runner.invoke(cli, ["journal", "add", "--date", "2026-03-01", "A quiet, content day."])
        assert result.exit_code == 0
        assert "Saved:" in result.output
        assert "2026-03-01" in result.output
        assert (temp_dirs["journal_dir"] / "alice_2026-03-01.md").exists()

    def test_add_replaces_same_day(self, runner, components):
        runner.invoke(cli, ["journal", "add", "--date", "2026-03-01", "First version."])
        runner.invoke(cli, ["journal", "add", "--date", "2026-03-01", "Second version."])
        entries = components["storage"].list_entries("alice")
        assert len(entries) == 1
        assert entries[0].content == "Second version."

    def test_add_blank_content_fails(self, runner, components):
        result = runner.invoke(cli, ["journal", "add", "   "])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_add_bad_date(self, runner, components):
        result = runner.invoke(cli, ["journal", "add", "--date", "03/01/2026", "Hello"])
        assert result.exit_code == 2
        assert "YYYY-MM-DD" in result.output

    def test_list(self, runner, components):
        _seed(components)
        result = runner.invoke(cli, ["journal", "list"])
        assert result.exit_code == 0
        assert "2026-03-03" in result.output

    def test_list_empty(self, runner, components):
        result = runner.invoke(cli, ["journal", "list"])
        assert result.exit_code == 0
        assert "No entries found" in result.output

    def test_show(self, runner, components):
        _seed(components)
        result = runner.invoke(cli, ["journal", "show", "2026-03-01"])
        assert result.exit_code == 0
        assert "joyful" in result.output

    def test_show_missing(self, runner, components):
        result = runner.invoke(cli, ["journal", "show", "2026-03-09"])
        assert "Not found" in result.output

    def test_delete(self, runner, components):
        _seed(components)
        result = runner.invoke(cli, ["journal", "delete", "2026-03-01", "--yes"])
        assert result.exit_code == 0
        assert "Deleted:" in result.output
        assert components["storage"].get("alice", date(2026, 3, 1)) is None

    def test_delete_declined(self, runner, components):
        _seed(components)
        result = runner.invoke(cli, ["journal", "delete", "2026-03-01"], input="n\n")
        assert result.exit_code == 0
        assert components["storage"].get("alice", date(2026, 3, 1)) is not None


# -- Mood, stats, suggestions, insights --


class TestReportCommands:
    def test_mood_timeline(self, runner, components):
        components["storage"].upsert("alice", "I am so happy and joyful today!", analyzer=components["analyzer"])
        result = runner.invoke(cli, ["mood", "-d", "7"])
        assert result.exit_code == 0
        assert "Average:" in result.output

    def test_mood_empty(self, runner, components):
        result = runner.invoke(cli, ["mood"])
        assert result.exit_code == 0
        assert "No entries found" in result.output

    def test_stats(self, runner, components):
        _seed(components)
        result = runner.invoke(cli, ["stats"])
        assert result.exit_code == 0
        assert "Entries:" in result.output
        assert "Mood distribution" in result.output

    def test_stats_empty(self, runner, components):
        result = runner.invoke(cli, ["stats"])
        assert "No entries yet" in result.output

    def test_suggest_defaults(self, runner, components):
        result = runner.invoke(cli, ["suggest"])
        assert result.exit_code == 0
        assert "Mindful Check-In" in result.output
        assert "3." in result.output

    def test_suggest_for_date(self, runner, components):
        _seed(components)
        result = runner.invoke(cli, ["suggest", "--date", "2026-03-01"])  # a Sunday
        assert result.exit_code == 0
        assert "3." in result.output

    def test_insights_starter(self, runner, components):
        result = runner.invoke(cli, ["insights"])
        assert result.exit_code == 0
        assert "Building Your Emotional Awareness" in result.output

    def test_insights_with_history(self, runner, components):
        days = tuple((2026, 3, d) for d in range(1, 4))
        _seed(components, days)
        _seed(components, tuple((2026, 3, d) for d in range(4, 7)))
        result = runner.invoke(cli, ["insights"])
        assert result.exit_code == 0
        assert "Emotional patterns" in result.output


class TestCliGroup:
    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("analyze", "journal", "mood", "stats", "suggest", "insights"):
            assert name in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert "0.1.0" in result.output

    def test_config_error_exits(self, runner):
        with patch("cli.main.load_config_model", side_effect=ValueError("bad yaml")):
            result = runner.invoke(cli, ["stats"])
        assert result.exit_code == 1
        assert "Config error" in result.output
