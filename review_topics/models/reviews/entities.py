"""Review domain entities - stored reviews and per-location analysis."""

from dataclasses import dataclass

from review_topics.models.common import BaseEntity
from review_topics.models.sentiment import SentimentResult
from review_topics.models.topics import Topic


@dataclass(frozen=True)
class Review(BaseEntity):
    """A single review left for a location."""

    id: int
    location: str
    text: str


@dataclass(frozen=True)
class LocationAnalysis(BaseEntity):
    """Topics and topic-scoped sentiment for one location."""

    location: str
    topics: tuple[Topic, ...]
    sentiment_by_topics: tuple[SentimentResult, ...]
    overall_sentiment: float
    error: str | None = None
