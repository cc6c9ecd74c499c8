"""Location reviews API views - thin layer over services."""

from review_topics.container import container
from web.api.errors import NotFoundError, validate_location

from .schemas import LocationReviewsResponse, TopicItem, TopicSentimentItem


def get_location_reviews(location: str) -> LocationReviewsResponse:
    """Get topics and topic-scoped sentiment for a location's reviews."""
    validate_location(location)
    analysis = container.location_sentiment.analyze(location)

    if analysis is None:
        raise NotFoundError("Location reviews not found")

    return LocationReviewsResponse(
        location=analysis.location,
        sentiment_by_topics=[
            TopicSentimentItem(topic=s.label, sentiment=s.sentiment) for s in analysis.sentiment_by_topics
        ],
        topics=[TopicItem(terms=list(t.terms), probability=t.probability) for t in analysis.topics],
        overall_sentiment=analysis.overall_sentiment,
        error=analysis.error,
    )


def get_locations() -> list[str]:
    """Get all locations that have reviews."""
    return container.location_sentiment.repo.get_locations()
