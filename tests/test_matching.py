"""Tests for the string helpers behind the relevance signals."""

import pytest

from rallybot.faq.matching import (
    contains_term,
    expand_query,
    keyword_overlap,
    normalize_query,
    similarity,
    split_keywords,
)


class TestNormalizeQuery:

    def test_drops_stop_words_and_short_tokens(self):
        assert normalize_query("How does tennis scoring work?") == "tennis scoring work?"

    def test_keeps_original_order(self):
        assert normalize_query("Is it OK to play in the rain") == "play rain"

    def test_collapses_whitespace_and_case(self):
        assert normalize_query("  DEUCE\t\tAdvantage  ") == "deuce advantage"

    def test_empty(self):
        assert normalize_query("") == ""
        assert normalize_query("how do i") == ""

    def test_custom_stop_words(self):
        assert normalize_query("tennis racket grip", stop_words={"tennis"}) == "racket grip"


class TestExpandQuery:

    def test_single_trigger(self):
        assert expand_query("What is deuce?") == "what is deuce? deuce advantage scoring tennis game"

    def test_no_trigger_only_lowercases(self):
        assert expand_query("HELLO There") == "hello there"

    def test_expansions_cascade_into_later_triggers(self):
        expanded = expand_query("my score")
        assert expanded.startswith("my score scoring point deuce advantage game set match")
        # "scoring", "deuce", "tiebreak" and "match" were all pulled in by the first phrase
        assert "score point deuce advantage game set match tiebreak" in expanded
        assert "tiebreak tie-break scoring tennis set" in expanded
        assert expanded.endswith("match game set scoring tennis")

    def test_custom_mapping(self):
        assert expand_query("Racquet", {"racquet": "racket"}) == "racquet racket"


class TestSimilarity:

    def test_substring_short_circuit(self):
        assert similarity("tennis score", "score") == 1.0
        assert similarity("score", "tennis score") == 1.0
        assert similarity("  Tennis Score ", "SCORE") == 1.0

    def test_empty_strings_score_zero(self):
        assert similarity("", "abc") == 0.0
        assert similarity("abc", "   ") == 0.0

    def test_exact_word_matches_count_two(self):
        assert similarity("red ball court", "blue ball") == pytest.approx(2 / 3)

    def test_partial_word_matches_count_one(self):
        assert similarity("tennis courts", "court time") == pytest.approx(0.5)

    def test_short_words_never_match_partially(self):
        assert similarity("ab cd", "abc cde") == 0.0

    def test_no_overlap(self):
        assert similarity("volley", "payment methods") == 0.0


class TestKeywordOverlap:

    def test_split_keywords_skips_empty_terms(self):
        assert split_keywords(" Scoring, , Tennis Score ,") == ["scoring", "tennis score"]

    def test_exact_hit_scores_three(self):
        assert keyword_overlap("tennis scoring", "scoring, xyz") == pytest.approx(1.5)

    def test_partial_hit_scores_one(self):
        assert keyword_overlap("how to pay", "payments") == pytest.approx(1.0)

    def test_partial_hit_counted_once_per_keyword(self):
        assert keyword_overlap("pay pay payment", "payments") == pytest.approx(1.0)

    def test_short_keyword_needs_exact_hit(self):
        assert keyword_overlap("the app crashed", "app") == pytest.approx(3.0)
        assert keyword_overlap("apps crashed", "ap") == 0.0

    def test_no_keywords(self):
        assert keyword_overlap("anything", "") == 0.0
        assert keyword_overlap("anything", " , ,") == 0.0


def test_contains_term_rejects_empty_needle():
    assert contains_term("abc", "b")
    assert not contains_term("abc", "")
    assert not contains_term("", "a")
