"""Location services."""

from review_topics.services.locations.service import LocationSentimentService

__all__ = [
    "LocationSentimentService",
]
