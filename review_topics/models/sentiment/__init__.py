"""Sentiment domain models."""

from review_topics.models.sentiment.entities import SentimentResult, TermGroup

__all__ = [
    "SentimentResult",
    "TermGroup",
]
