from .suggestions import MindfulSuggestion, SuggestionGenerator, calculate_relevance
from .themes import detect_themes

__all__ = ["MindfulSuggestion", "SuggestionGenerator", "calculate_relevance", "detect_themes"]
