"""Lexicon Sentiment package initializer."""

from .analyzer import SentimentAnalyzer, analyze
from .config import AnalyzerConfig
from .lexicon import LexiconStore, load_lexicon
from .sentiment import score_sentiment

__all__ = [
    "SentimentAnalyzer",
    "AnalyzerConfig",
    "LexiconStore",
    "analyze",
    "load_lexicon",
    "score_sentiment",
]
