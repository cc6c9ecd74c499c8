"""Tests for topic-scoped sentiment scoring."""

from review_topics.models import SentimentResult, TermGroup, Topic
from review_topics.services.sentiment import PolarityLexicon, SentimentScorer, weighted_average
from review_topics.text import TextNormalizer

normalizer = TextNormalizer()
lexicon = PolarityLexicon({"good": 2, "nice": 2, "bad": -1, "great": 3}, normalizer)
scorer = SentimentScorer(lexicon, normalizer)


class TestTermGroup:
    def test_from_terms_folds_case(self):
        group = TermGroup.from_terms(["Great", " Service "])
        assert group.terms == frozenset({"great", "service"})
        assert group.label == "great, service"

    def test_size_counts_distinct(self):
        assert TermGroup.from_terms(["food", "food", "staff"]).size == 2


class TestScore:
    def test_one_result_per_group_in_order(self):
        groups = [
            TermGroup.from_terms(["bad"]),
            TermGroup.from_terms(["good"]),
            TermGroup.from_terms(["missing"]),
        ]
        results = scorer.score("Good food, bad service", groups)
        assert [r.label for r in results] == ["bad", "good", "missing"]
        assert [r.sentiment for r in results] == [-1.0, 2.0, 0.0]

    def test_no_overlap_is_zero(self):
        result = scorer.score("Great food", [TermGroup.from_terms(["parking", "price"])])[0]
        assert result.sentiment == 0
        assert result.matched == 0

    def test_case_insensitive_match(self):
        result = scorer.score("GREAT place", [TermGroup.from_terms(["great"])])[0]
        assert result.sentiment == 3.0

    def test_whole_token_match(self):
        result = scorer.score("The greatest place", [TermGroup.from_terms(["great"])])[0]
        assert result.matched == 0

    def test_unscored_terms_dilute(self):
        result = scorer.score("good staff", [TermGroup.from_terms(["good", "staff"])])[0]
        assert result.sentiment == 1.0
        assert result.matched == 2

    def test_deterministic(self):
        groups = [TermGroup.from_terms(["good", "bad"]), TermGroup.from_terms(["nice"])]
        text = "Good, bad and nice. Nice!"
        assert scorer.score(text, groups) == scorer.score(text, groups)

    def test_empty_groups(self):
        assert scorer.score("good", []) == []


class TestWeightedAverage:
    def test_weighted_by_group_size(self):
        groups = [
            TermGroup.from_terms(["good", "nice"]),
            TermGroup.from_terms(["bad", "food", "staff", "price"]),
        ]
        results = scorer.score("good nice bad", groups)
        assert [r.sentiment for r in results] == [2.0, -1.0]
        assert weighted_average(results) == 0.0
        assert scorer.score_weighted("good nice bad", groups) == 0.0

    def test_unmatched_groups_carry_no_weight(self):
        results = [
            SentimentResult(label="a", sentiment=2.0, matched=1, weight=2),
            SentimentResult(label="b", sentiment=0.0, matched=0, weight=10),
        ]
        assert weighted_average(results) == 2.0

    def test_nothing_matched(self):
        assert weighted_average([SentimentResult(label="a", sentiment=0.0, matched=0, weight=3)]) == 0.0
        assert weighted_average([]) == 0.0


class TestScoreTopics:
    def test_one_result_per_topic(self):
        topics = [
            Topic(terms=("good", "food"), probability=0.2),
            Topic(terms=("bad", "service"), probability=0.1),
        ]
        results = scorer.score_topics("Good food, bad service", topics)
        assert [r.label for r in results] == ["good, food", "bad, service"]
        assert results[0].sentiment == 1.0
        assert results[1].sentiment == -0.5
