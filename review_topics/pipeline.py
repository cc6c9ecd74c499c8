"""Extract-then-score operations backed by the shared container."""

from collections.abc import Iterable, Sequence

from review_topics.container import container
from review_topics.models.sentiment import SentimentResult
from review_topics.models.topics import Topic
from settings import TERMS_PER_TOPIC, TOPIC_COUNT


def extract_topics(
    documents: Iterable[object],
    topic_count: int = TOPIC_COUNT,
    terms_per_topic: int = TERMS_PER_TOPIC,
) -> list[Topic]:
    """Topics for a corpus; empty when the corpus is invalid or inference fails."""
    container.init()
    return list(container.topic_extractor.extract(documents, topic_count, terms_per_topic).topics)


def score_sentiment_for_topics(text: str, topics: Sequence[Topic]) -> list[SentimentResult]:
    """Sentiment of text scoped to each topic's terms, one result per topic."""
    container.init()
    return container.sentiment_scorer.score_topics(text, topics)
