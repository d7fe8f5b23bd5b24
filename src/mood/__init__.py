from .analyzer import MoodAnalysis, MoodAnalyzer, analyze
from .lexicon import DEFAULT_LEXICON, Lexicon, LexiconError
from .tuning import AnalyzerTuning

__all__ = ["MoodAnalyzer", "MoodAnalysis", "analyze", "Lexicon", "LexiconError", "DEFAULT_LEXICON", "AnalyzerTuning"]
