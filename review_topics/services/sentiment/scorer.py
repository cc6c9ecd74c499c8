"""Sentiment scoring restricted to topic vocabularies."""

from collections.abc import Sequence

from loguru import logger

from review_topics.models.sentiment import SentimentResult, TermGroup
from review_topics.models.topics import Topic
from review_topics.services.sentiment.lexicon import PolarityLexicon
from review_topics.text import TextNormalizer


def weighted_average(results: Sequence[SentimentResult]) -> float:
    """Average of group sentiments weighted by group size.

    Groups with no matched tokens carry no weight. Returns 0 when nothing matched.
    """
    total = 0.0
    weight = 0
    for r in results:
        if r.matched == 0:
            continue
        total += r.sentiment * r.weight
        weight += r.weight
    return total / weight if weight > 0 else 0.0


class SentimentScorer:
    """Score a text once per term group, using only tokens in that group."""

    def __init__(self, lexicon: PolarityLexicon, normalizer: TextNormalizer):
        self.lexicon = lexicon
        self.normalizer = normalizer

    def score(self, text: str, term_groups: Sequence[TermGroup]) -> list[SentimentResult]:
        """One result per group, in input order."""
        tokens = self.normalizer.tokenize(text)
        results = []

        for group in term_groups:
            matched = [t for t in tokens if t in group.terms]
            # Neutral when the text never mentions the group
            sentiment = self.lexicon.score(matched) if matched else 0.0
            results.append(
                SentimentResult(
                    label=group.label,
                    sentiment=sentiment,
                    matched=len(matched),
                    weight=group.size,
                )
            )

        logger.debug("Scored {} term groups over {} tokens", len(results), len(tokens))
        return results

    def score_weighted(self, text: str, term_groups: Sequence[TermGroup]) -> float:
        """Single size-weighted sentiment across all groups."""
        return weighted_average(self.score(text, term_groups))

    def score_topics(self, text: str, topics: Sequence[Topic]) -> list[SentimentResult]:
        """Score each topic on its own, one single-group call per topic."""
        return [self.score(text, [topic.term_group()])[0] for topic in topics]
