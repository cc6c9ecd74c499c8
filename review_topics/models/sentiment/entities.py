"""Sentiment domain entities - term groups and per-group scores."""

from collections.abc import Iterable
from dataclasses import dataclass

from review_topics.models.common import BaseEntity
from review_topics.text import fold_case


@dataclass(frozen=True)
class TermGroup(BaseEntity):
    """Terms of one topic, used to scope which tokens get scored."""

    label: str
    terms: frozenset[str]

    @classmethod
    def from_terms(cls, terms: Iterable[str], label: str | None = None) -> "TermGroup":
        ordered = [fold_case(t.strip()) for t in terms]
        ordered = [t for t in ordered if t]
        return cls(label=label if label is not None else ", ".join(ordered), terms=frozenset(ordered))

    @property
    def size(self) -> int:
        """Number of distinct terms; the group's weight in averages."""
        return len(self.terms)


@dataclass(frozen=True)
class SentimentResult(BaseEntity):
    """Sentiment of the tokens matching one term group."""

    label: str
    sentiment: float
    matched: int
    weight: int
