"""Configuration loading and management."""

from pathlib import Path
from typing import Optional

import yaml

from .config_models import StillpointConfig

DEFAULT_CONFIG = StillpointConfig().to_dict()


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "config.yaml",
        Path.home() / ".stillpoint" / "config.yaml",
        Path.home() / "stillpoint" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from file or defaults.

    Returns a plain dict. Use load_config_model() for typed access.
    """
    model = load_config_model(config_path)
    return model.to_dict()


def load_config_model(config_path: Optional[Path] = None) -> StillpointConfig:
    """Load configuration as Pydantic model with validation."""
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}") from e

    if not isinstance(base_config, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(base_config).__name__}")

    try:
        return StillpointConfig.from_dict(base_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}") from e


def get_paths(config: dict) -> dict:
    """Get expanded paths from config."""
    paths = config.get("paths", DEFAULT_CONFIG["paths"])
    return {
        "journal_dir": Path(paths["journal_dir"]).expanduser(),
    }
