"""Tunable scoring constants for the mood analyzer."""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class AnalyzerTuning(BaseModel):
    """Empirically chosen multipliers, radii and thresholds.

    Defaults reproduce the reference behaviour; override via the ``analyzer``
    section of config.yaml.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # mood scoring
    keyword_context_radius: int = 100
    phrase_context_radius: int = 80
    intensifier_boost: float = 1.6
    keyword_context_boost: float = 1.3
    phrase_weight: float = 2.2
    phrase_context_boost: float = 1.4
    ambient_boost_weight: float = 0.8
    negation_scope: int = 3
    negation_dampening: float = 0.15
    negation_confidence_penalty: float = 0.8
    conditional_dampening: float = 0.85
    conditional_confidence_penalty: float = 0.9
    min_mood_score: float = 0.2
    max_confidence: float = 0.98
    neutral_confidence: float = 0.5

    # sentiment
    sentiment_threshold: float = 0.6
    sentiment_range: float = 4.0
    mood_nudge: float = 0.2
    negated_positive_shift: float = -2.0
    negated_negative_shift: float = 1.0
    emotional_cue_weight: float = 0.2
    length_norm_words: int = 50

    # keywords
    max_keywords: int = 10
    keyword_root_length: int = 4
    keyword_diversity_override: float = 3.0

    @field_validator(
        "negation_dampening",
        "negation_confidence_penalty",
        "conditional_dampening",
        "conditional_confidence_penalty",
    )
    @classmethod
    def validate_dampening(cls, v: float) -> float:
        if not 0.0 < v <= 1.0:
            raise ValueError(f"Dampening factors must be in (0, 1], got {v}")
        return v

    @field_validator(
        "keyword_context_radius",
        "phrase_context_radius",
        "length_norm_words",
        "max_keywords",
        "keyword_root_length",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Must be positive, got {v}")
        return v

    @field_validator("negation_scope")
    @classmethod
    def validate_scope(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"negation_scope must be >= 0, got {v}")
        return v

    @model_validator(mode="after")
    def validate_ranges(self):
        if not 0.0 < self.max_confidence <= 1.0:
            raise ValueError(f"max_confidence must be in (0, 1], got {self.max_confidence}")
        if not 0.0 <= self.neutral_confidence <= self.max_confidence:
            raise ValueError("neutral_confidence must be between 0 and max_confidence")
        if self.sentiment_range <= 0:
            raise ValueError("sentiment_range must be positive")
        return self
