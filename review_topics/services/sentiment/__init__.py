"""Sentiment services."""

from review_topics.services.sentiment.lexicon import PolarityLexicon
from review_topics.services.sentiment.scorer import SentimentScorer, weighted_average

__all__ = [
    "PolarityLexicon",
    "SentimentScorer",
    "weighted_average",
]
