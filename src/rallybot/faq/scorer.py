import logging
from dataclasses import replace
from typing import Iterable

from rallybot.faq.lexicon import DEFAULT_LEXICON, DEFAULT_WEIGHTS, Lexicon, ScoringWeights
from rallybot.faq.matching import (
    contains_term,
    expand_query,
    keyword_overlap,
    mutual_contains,
    normalize_query,
    similarity,
)
from rallybot.faq.models import FaqRecord, ScoreBreakdown, ScoredCandidate

log = logging.getLogger(__name__)


class RelevanceScorer:
    """
    Heuristic FAQ matcher used by the chat assistant.

    Each record gets an additive score built from keyword overlap, word
    similarity against the question and answer, tennis/challenge term boosts,
    a category boost and the record's own priority. Records at or below the
    threshold are dropped and the best few are returned, best first.
    """

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ) -> None:
        self.lexicon = lexicon
        self.weights = weights

    def normalize(self, query: str) -> str:
        return normalize_query(query, self.lexicon.stop_words)

    def expand(self, query: str) -> str:
        return expand_query(query, self.lexicon.expansions)

    # Individual signals. Every text argument is expected lower-cased.

    def keyword_signal(self, expanded: str, record: FaqRecord) -> float:
        return keyword_overlap(expanded, record.keywords) * self.weights.keyword

    def scoring_term_signal(self, query: str, question: str, answer: str) -> float:
        score = 0.0
        for term in self.lexicon.scoring_terms:
            if not contains_term(query, term):
                continue
            if contains_term(question, term):
                score += self.weights.scoring_term_question
            if contains_term(answer, term):
                score += self.weights.scoring_term_answer
        return score

    def _term_boost(self, terms: Iterable[str], weight: float, query: str, question: str, answer: str) -> float:
        score = 0.0
        for term in terms:
            if contains_term(query, term) and (contains_term(question, term) or contains_term(answer, term)):
                score += weight
        return score

    def tennis_term_signal(self, query: str, question: str, answer: str) -> float:
        return self._term_boost(self.lexicon.tennis_terms, self.weights.tennis_term, query, question, answer)

    def challenge_term_signal(self, query: str, question: str, answer: str) -> float:
        return self._term_boost(self.lexicon.challenge_terms, self.weights.challenge_term, query, question, answer)

    def category_signal(self, query: str, category: str) -> float:
        category = category.strip().lower()
        score = 0.0
        for trigger, name in self.lexicon.category_triggers:
            if contains_term(query, trigger) and category == name:
                score += self.weights.category
        return score

    def exact_phrase_signal(self, normalized: str, question: str) -> float:
        return self.weights.exact_phrase if mutual_contains(question, normalized) else 0.0

    def breakdown(self, query: str, record: FaqRecord) -> ScoreBreakdown:
        """Score one record against a raw query, signal by signal."""
        query_lower = query.lower()
        normalized = self.normalize(query)
        expanded = self.expand(query)
        return self._breakdown(query_lower, normalized, expanded, record)

    def _breakdown(self, query_lower: str, normalized: str, expanded: str, record: FaqRecord) -> ScoreBreakdown:
        question = record.question.lower()
        answer = record.answer.lower()

        signals = ScoreBreakdown(
            keyword=self.keyword_signal(expanded, record),
            question_similarity=similarity(expanded, record.question) * self.weights.question_similarity,
            scoring_terms=self.scoring_term_signal(query_lower, question, answer),
            tennis_terms=self.tennis_term_signal(query_lower, question, answer),
            challenge_terms=self.challenge_term_signal(query_lower, question, answer),
            category=self.category_signal(query_lower, record.category),
            answer_similarity=similarity(expanded, record.answer) * self.weights.answer_similarity,
            exact_phrase=self.exact_phrase_signal(normalized, question),
        )
        # Priority ranks matching records; it cannot make a non-matching one relevant.
        if signals.textual <= 0:
            return signals
        return replace(signals, priority=record.priority * self.weights.priority)

    def score(self, query: str, record: FaqRecord) -> float:
        return self.breakdown(query, record).total

    def search(self, query: str, candidates: Iterable[FaqRecord]) -> list[ScoredCandidate]:
        """
        Return up to ``weights.max_results`` records scoring above the
        threshold, best first. Ties keep their input order.
        """
        if not query or not query.strip():
            return []

        query_lower = query.lower()
        normalized = self.normalize(query)
        expanded = self.expand(query)
        log.debug("Processed query: %r", normalized)
        log.debug("Expanded query: %r", expanded)

        scored: list[ScoredCandidate] = []
        for record in candidates:
            total = self._breakdown(query_lower, normalized, expanded, record).total
            log.debug("FAQ %r - score %.2f", record.question[:50], total)
            scored.append(ScoredCandidate(record=record, relevance_score=total))

        relevant = [c for c in scored if c.relevance_score > self.weights.threshold]
        relevant.sort(key=lambda c: c.relevance_score, reverse=True)
        results = relevant[: self.weights.max_results]

        if results:
            log.debug("Top match: %r score %.2f", results[0].question, results[0].relevance_score)
        else:
            log.debug("No FAQ scored above %.2f for %r", self.weights.threshold, query)
        return results


default_scorer = RelevanceScorer()


def search(query: str, candidates: Iterable[FaqRecord]) -> list[ScoredCandidate]:
    return default_scorer.search(query, candidates)
