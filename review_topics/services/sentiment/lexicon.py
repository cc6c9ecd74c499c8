"""Word polarity lexicon with stem fallback."""

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from afinn import Afinn
from loguru import logger

from review_topics.text import TextNormalizer, fold_case


class PolarityLexicon:
    """Immutable word -> polarity mapping.

    Tokens are looked up verbatim first, then by Porter stem against the
    stemmed lexicon so that "damaging" still finds "damage". When several
    lexicon words share a stem the first one in lexicon order wins.
    """

    def __init__(self, polarities: Mapping[str, float], normalizer: TextNormalizer):
        self._normalizer = normalizer

        # Multi-word phrases can never equal a single token
        words = {fold_case(w.strip()): float(v) for w, v in polarities.items() if " " not in w.strip()}
        stems: dict[str, float] = {}
        for word, value in words.items():
            stems.setdefault(normalizer.stem(word), value)

        self._words = MappingProxyType(words)
        self._stems = MappingProxyType(stems)

    @classmethod
    def afinn(cls, normalizer: TextNormalizer, language: str = "en") -> "PolarityLexicon":
        """Build from the AFINN word list shipped with the afinn package."""
        # afinn 0.1 (pinned) exposes the loaded word -> score map only as _dict
        lexicon = cls(Afinn(language=language)._dict, normalizer)
        logger.debug("Loaded AFINN-{} lexicon: {} words", language, len(lexicon))
        return lexicon

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, token: str) -> bool:
        return token in self._words or self._normalizer.stem(token) in self._stems

    def polarity(self, token: str) -> float:
        """Polarity of a single lowercase token, 0 when unknown."""
        if token in self._words:
            return self._words[token]
        return self._stems.get(self._normalizer.stem(token), 0.0)

    def score(self, tokens: Sequence[str]) -> float:
        """Mean polarity over tokens; unknown words count as neutral."""
        if not tokens:
            return 0.0
        return sum(self.polarity(t) for t in tokens) / len(tokens)
