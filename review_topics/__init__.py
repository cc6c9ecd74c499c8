"""Topic extraction and topic-scoped sentiment for location reviews."""

from review_topics.pipeline import extract_topics, score_sentiment_for_topics

__all__ = [
    "extract_topics",
    "score_sentiment_for_topics",
]
