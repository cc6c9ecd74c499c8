"""Topic domain entities - validated corpora, topics and extraction outcomes."""

from dataclasses import dataclass

from review_topics.errors import ExtractionError
from review_topics.models.common import BaseEntity
from review_topics.models.sentiment import TermGroup


@dataclass(frozen=True)
class ValidatedCorpus(BaseEntity):
    """Lowercased, non-empty documents ready for topic inference."""

    documents: tuple[str, ...]
    discarded: int = 0

    def __len__(self) -> int:
        return len(self.documents)


@dataclass(frozen=True)
class Topic(BaseEntity):
    """A ranked set of terms with their average probability."""

    terms: tuple[str, ...]
    probability: float

    @property
    def label(self) -> str:
        return ", ".join(self.terms)

    def term_group(self) -> TermGroup:
        return TermGroup.from_terms(self.terms, label=self.label)


@dataclass(frozen=True)
class ExtractionResult:
    """Either topics or the failure that prevented them."""

    topics: tuple[Topic, ...] = ()
    error: ExtractionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, error: ExtractionError) -> "ExtractionResult":
        return cls(topics=(), error=error)
