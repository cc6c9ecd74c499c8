"""Case folding, tokenization and stemming shared by extraction and scoring."""

from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

# Word characters only; apostrophes and punctuation split tokens ("don't" -> "don", "t")
WORD_PATTERN = r"\w+"


def fold_case(text: str) -> str:
    """Normalize case. Topic terms and scored tokens must both pass through here."""
    return text.lower()


class TextNormalizer:
    """Read-only tokenizer and stemmer, safe to share between calls."""

    def __init__(self, pattern: str = WORD_PATTERN):
        self._tokenizer = RegexpTokenizer(pattern)
        self._stemmer = PorterStemmer()

    def tokenize(self, text: str) -> list[str]:
        """Split text on word boundaries and lowercase every token."""
        return [fold_case(token) for token in self._tokenizer.tokenize(text)]

    def stem(self, token: str) -> str:
        return self._stemmer.stem(fold_case(token))
