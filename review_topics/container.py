"""Dependency Injection container - initialized at app startup."""

from review_topics.repositories.reviews import ReviewRepository
from review_topics.services.locations.service import LocationSentimentService
from review_topics.services.sentiment.lexicon import PolarityLexicon
from review_topics.services.sentiment.scorer import SentimentScorer
from review_topics.services.topics.extractor import TopicExtractor
from review_topics.text import TextNormalizer
from settings import LDA_MAX_ITER, LDA_RANDOM_STATE, LEXICON_LANGUAGE, TERMS_PER_TOPIC, TOPIC_COUNT


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Shared read-only text configuration
        self.normalizer = TextNormalizer()
        self.lexicon = PolarityLexicon.afinn(self.normalizer, language=LEXICON_LANGUAGE)

        # Repositories (singletons)
        self._review_repo = ReviewRepository()

        # Services (with injected configuration)
        self.topic_extractor = TopicExtractor(
            normalizer=self.normalizer,
            random_state=LDA_RANDOM_STATE,
            max_iter=LDA_MAX_ITER,
        )

        self.sentiment_scorer = SentimentScorer(
            lexicon=self.lexicon,
            normalizer=self.normalizer,
        )

        self.location_sentiment = LocationSentimentService(
            repo=self._review_repo,
            extractor=self.topic_extractor,
            scorer=self.sentiment_scorer,
            topic_count=TOPIC_COUNT,
            terms_per_topic=TERMS_PER_TOPIC,
        )

        self._initialized = True


# Global container instance
container = Container()
