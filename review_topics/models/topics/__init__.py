"""Topic domain models."""

from review_topics.models.topics.entities import ExtractionResult, Topic, ValidatedCorpus

__all__ = [
    "ExtractionResult",
    "Topic",
    "ValidatedCorpus",
]
