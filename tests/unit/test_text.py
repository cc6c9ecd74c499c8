"""Tests for shared text normalization."""

from review_topics.text import TextNormalizer, fold_case

normalizer = TextNormalizer()


class TestTokenize:
    def test_lowercases(self):
        assert normalizer.tokenize("Great Service") == ["great", "service"]

    def test_strips_punctuation(self):
        assert normalizer.tokenize("Great experience! Friendly staff.") == ["great", "experience", "friendly", "staff"]

    def test_splits_contractions(self):
        assert normalizer.tokenize("Don't go") == ["don", "t", "go"]

    def test_empty(self):
        assert normalizer.tokenize("  ...  ") == []


class TestFold:
    def test_matches_tokenizer(self):
        assert fold_case("SeRvIcE") == normalizer.tokenize("SeRvIcE")[0]


class TestStem:
    def test_variants_share_stem(self):
        assert normalizer.stem("damaged") == normalizer.stem("damage")

    def test_case_insensitive(self):
        assert normalizer.stem("Damaged") == normalizer.stem("damaged")
