"""Pydantic configuration models for Stillpoint."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from journal.storage import USER_ID_PATTERN
from mood.tuning import AnalyzerTuning


class PathsConfig(BaseModel):
    """File paths configuration."""

    journal_dir: Path = Path("~/stillpoint/journal")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.journal_dir = self.journal_dir.expanduser()
        return self


class UserConfig(BaseModel):
    """Local journal owner."""

    id: str = "me"
    name: str = ""

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("user id must not be empty")
        if not USER_ID_PATTERN.match(v):
            raise ValueError(f"user id {v!r} may only contain lower-case letters, digits and '-'")
        return v


class SuggestionsConfig(BaseModel):
    """Suggestion windows (number of most recent entries considered)."""

    history_window: int = Field(default=7, ge=1)
    theme_window: int = Field(default=5, ge=1)


class InsightsConfig(BaseModel):
    """Insight aggregation windows."""

    pattern_window: int = Field(default=14, ge=1)
    insight_window: int = Field(default=10, ge=3)
    max_insights: int = Field(default=6, ge=1)


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class StillpointConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    user: UserConfig = Field(default_factory=UserConfig)
    analyzer: AnalyzerTuning = Field(default_factory=AnalyzerTuning)
    suggestions: SuggestionsConfig = Field(default_factory=SuggestionsConfig)
    insights: InsightsConfig = Field(default_factory=InsightsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "StillpointConfig":
        """Create config from dict (e.g. parsed YAML)."""
        if "paths" in data:
            for key in ["journal_dir"]:
                if key in data["paths"] and isinstance(data["paths"][key], str):
                    data["paths"][key] = Path(data["paths"][key])
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        """Convert to plain dict."""
        return self.model_dump(mode="python", by_alias=True)
