"""Topic extraction from review texts with Latent Dirichlet Allocation."""

from collections.abc import Iterable

import numpy as np
from loguru import logger
from sklearn.decomposition import LatentDirichletAllocation
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS, CountVectorizer

from review_topics.errors import InferenceFailure, NoValidInputError
from review_topics.models.topics import ExtractionResult, Topic, ValidatedCorpus
from review_topics.services.topics.validation import validate_corpus
from review_topics.text import TextNormalizer

# Weights closer than this rank as ties and fall back to vocabulary order
RANK_DECIMALS = 12


class TopicExtractor:
    """Extract a fixed number of ranked-term topics from a corpus."""

    def __init__(
        self,
        normalizer: TextNormalizer,
        random_state: int = 0,
        max_iter: int = 20,
        stop_words: Iterable[str] = ENGLISH_STOP_WORDS,
    ):
        self.normalizer = normalizer
        self.random_state = random_state
        self.max_iter = max_iter
        self.stop_words = frozenset(stop_words)

    def _vocabulary_tokens(self, document: str) -> list[str]:
        """Tokens eligible as topic terms. Single characters are skipped."""
        return [t for t in self.normalizer.tokenize(document) if len(t) > 1]

    def extract(self, documents: Iterable[object], topic_count: int = 2, terms_per_topic: int = 3) -> ExtractionResult:
        """Run topic inference; failures come back inside the result."""
        if topic_count < 1 or terms_per_topic < 1:
            raise ValueError(f"topic_count and terms_per_topic must be positive, got {topic_count}, {terms_per_topic}")

        try:
            corpus = validate_corpus(documents)
        except NoValidInputError as e:
            logger.warning("Error extracting topics: {}", e.message)
            return ExtractionResult.failed(e)

        if corpus.discarded:
            logger.debug("Discarded {} invalid documents", corpus.discarded)

        try:
            topics = self._infer(corpus, topic_count, terms_per_topic)
        except (ValueError, ArithmeticError, np.linalg.LinAlgError) as e:
            failure = InferenceFailure(f"Topic inference failed: {e}")
            logger.exception("Error extracting topics from {} documents", len(corpus))
            return ExtractionResult.failed(failure)

        logger.info("Extracted {} topics from {} documents", len(topics), len(corpus))
        return ExtractionResult(topics=tuple(topics))

    def _infer(self, corpus: ValidatedCorpus, topic_count: int, terms_per_topic: int) -> list[Topic]:
        vectorizer = CountVectorizer(
            tokenizer=self._vocabulary_tokens,
            token_pattern=None,
            lowercase=False,
            stop_words=sorted(self.stop_words),
        )
        counts = vectorizer.fit_transform(corpus.documents)
        vocabulary = vectorizer.get_feature_names_out()

        lda = LatentDirichletAllocation(
            n_components=topic_count,
            learning_method="batch",
            max_iter=self.max_iter,
            random_state=self.random_state,
        )
        lda.fit(counts)

        # Row-normalize to per-topic term probabilities
        weights = lda.components_ / lda.components_.sum(axis=1)[:, np.newaxis]
        if not np.all(np.isfinite(weights)):
            raise FloatingPointError("non-finite topic-term weights")

        topics = []
        seen: set[frozenset[str]] = set()
        for row in weights:
            order = np.argsort(-np.round(row, RANK_DECIMALS), kind="stable")[:terms_per_topic]
            terms = tuple(str(vocabulary[i]) for i in order)

            # Same term set in a different rank order is the same topic
            if frozenset(terms) in seen:
                logger.debug("Dropping indistinguishable topic: {}", ", ".join(terms))
                continue
            seen.add(frozenset(terms))

            topics.append(Topic(terms=terms, probability=float(np.mean(row[order]))))

        return topics
