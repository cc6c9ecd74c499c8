"""Location sentiment service - topics and topic sentiment per location."""

from loguru import logger

from review_topics.models.reviews import LocationAnalysis
from review_topics.repositories.reviews import ReviewRepository
from review_topics.services.sentiment import SentimentScorer, weighted_average
from review_topics.services.topics import TopicExtractor


class LocationSentimentService:
    """Extract topics from a location's reviews and score sentiment per topic."""

    def __init__(
        self,
        repo: ReviewRepository,
        extractor: TopicExtractor,
        scorer: SentimentScorer,
        topic_count: int = 2,
        terms_per_topic: int = 3,
    ):
        self.repo = repo
        self.extractor = extractor
        self.scorer = scorer
        self.topic_count = topic_count
        self.terms_per_topic = terms_per_topic

    def analyze(self, location: str) -> LocationAnalysis | None:
        """Analyze a location. Returns None when it has no reviews."""
        reviews = self.repo.get_reviews(location)

        if not reviews:
            logger.warning("No reviews for location {}", location)
            return None

        texts = [r.text for r in reviews]
        result = self.extractor.extract(texts, self.topic_count, self.terms_per_topic)

        sentiments = self.scorer.score_topics(" ".join(texts), result.topics)
        overall = weighted_average(sentiments)

        logger.info("Analyzed {} reviews for {}: {} topics, overall {:.3f}", len(reviews), location, len(sentiments), overall)

        return LocationAnalysis(
            location=location,
            topics=result.topics,
            sentiment_by_topics=tuple(sentiments),
            overall_sentiment=overall,
            error=None if result.ok else result.error.message,
        )
