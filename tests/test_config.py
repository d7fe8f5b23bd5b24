"""Tests for configuration loading."""

from pathlib import Path

import pytest

from cli.config import DEFAULT_CONFIG, get_paths, load_config, load_config_model
from cli.config_models import LoggingConfig, StillpointConfig


class TestDefaults:
    def test_model_defaults(self):
        cfg = StillpointConfig()
        assert cfg.user.id == "me"
        assert cfg.suggestions.history_window == 7
        assert cfg.suggestions.theme_window == 5
        assert cfg.insights.max_insights == 6
        assert cfg.logging.level == "WARNING"
        assert cfg.analyzer.max_keywords == 10

    def test_paths_expanded(self):
        assert "~" not in str(StillpointConfig().paths.journal_dir)

    def test_default_dict_uses_alias(self):
        assert DEFAULT_CONFIG["logging"]["json"] is False


class TestLoadConfig:
    def test_yaml_overrides(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "paths:\n"
            f"  journal_dir: {tmp_path / 'j'}\n"
            "user:\n"
            "  id: bob\n"
            "analyzer:\n"
            "  max_keywords: 4\n"
            "logging:\n"
            "  level: debug\n"
            "  json: true\n"
        )
        cfg = load_config_model(path)

        assert cfg.paths.journal_dir == tmp_path / "j"
        assert cfg.user.id == "bob"
        assert cfg.analyzer.max_keywords == 4
        assert cfg.logging.level == "DEBUG"
        assert cfg.logging.json_mode is True

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config_model(path) == StillpointConfig()

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.yaml")["user"]["id"] == "me"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("paths: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config_model(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config_model(path)

    @pytest.mark.parametrize(
        "body",
        [
            "logging:\n  level: LOUD\n",
            "user:\n  id: '  '\n",
            "user:\n  id: Alice\n",
            "insights:\n  insight_window: 2\n",
            "analyzer:\n  unknown_knob: 1\n",
        ],
    )
    def test_validation_errors(self, tmp_path, body):
        path = tmp_path / "config.yaml"
        path.write_text(body)
        with pytest.raises(ValueError, match="Config validation failed"):
            load_config_model(path)


class TestHelpers:
    def test_get_paths(self, tmp_path):
        paths = get_paths({"paths": {"journal_dir": str(tmp_path / "j")}})
        assert paths == {"journal_dir": tmp_path / "j"}

    def test_get_paths_defaults(self):
        assert get_paths({})["journal_dir"] == Path(DEFAULT_CONFIG["paths"]["journal_dir"])

    def test_logging_populate_by_name(self):
        assert LoggingConfig(json_mode=True).json_mode is True
