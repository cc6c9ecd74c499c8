"""Topic services."""

from review_topics.services.topics.extractor import TopicExtractor
from review_topics.services.topics.validation import validate_corpus

__all__ = [
    "TopicExtractor",
    "validate_corpus",
]
