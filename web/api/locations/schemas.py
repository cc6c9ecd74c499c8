"""Location reviews API response schemas."""

from pydantic import BaseModel


class TopicItem(BaseModel):
    """Extracted topic."""

    terms: list[str]
    probability: float


class TopicSentimentItem(BaseModel):
    """Sentiment scoped to one topic."""

    topic: str
    sentiment: float


class LocationReviewsResponse(BaseModel):
    """Topics and per-topic sentiment for a location."""

    location: str
    sentiment_by_topics: list[TopicSentimentItem]
    topics: list[TopicItem]
    overall_sentiment: float
    error: str | None = None
