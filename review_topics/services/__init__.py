"""Services package - service class exports."""

from review_topics.services.locations.service import LocationSentimentService
from review_topics.services.sentiment.lexicon import PolarityLexicon
from review_topics.services.sentiment.scorer import SentimentScorer
from review_topics.services.topics.extractor import TopicExtractor

__all__ = [
    "LocationSentimentService",
    "PolarityLexicon",
    "SentimentScorer",
    "TopicExtractor",
]
