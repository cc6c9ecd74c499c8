"""Models package - value objects for all domains."""

from review_topics.models.common import BaseEntity
from review_topics.models.reviews import LocationAnalysis, Review
from review_topics.models.sentiment import SentimentResult, TermGroup
from review_topics.models.topics import ExtractionResult, Topic, ValidatedCorpus

__all__ = [
    # Common
    "BaseEntity",
    # Topics
    "ExtractionResult",
    "Topic",
    "ValidatedCorpus",
    # Sentiment
    "SentimentResult",
    "TermGroup",
    # Reviews
    "LocationAnalysis",
    "Review",
]
