"""Corpus validation before topic inference."""

from collections.abc import Iterable

from review_topics.errors import NoValidInputError
from review_topics.models.topics import ValidatedCorpus
from review_topics.text import fold_case


def validate_corpus(documents: Iterable[object]) -> ValidatedCorpus:
    """Keep non-empty string documents, lowercased.

    Raises NoValidInputError when nothing survives or documents is not a collection.
    """
    # A bare string would otherwise be read as one document per character
    if isinstance(documents, str) or not isinstance(documents, Iterable):
        raise NoValidInputError(f"Expected a collection of review texts, got {type(documents).__name__}")

    kept = []
    discarded = 0
    for doc in documents:
        if isinstance(doc, str) and doc.strip():
            kept.append(fold_case(doc))
        else:
            discarded += 1

    if not kept:
        raise NoValidInputError(f"No valid review texts available for topic extraction ({discarded} discarded)")

    return ValidatedCorpus(documents=tuple(kept), discarded=discarded)
