"""Review domain models."""

from review_topics.models.reviews.entities import LocationAnalysis, Review

__all__ = [
    "LocationAnalysis",
    "Review",
]
