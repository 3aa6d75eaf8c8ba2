import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


STOP_WORDS: frozenset[str] = frozenset(
    {
        "how", "do", "does", "can", "what", "where", "when", "why", "is", "are",
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by",
    }
)

# Order matters: expansions are appended in this order and later triggers see
# the text appended by earlier ones.
QUERY_EXPANSIONS: Mapping[str, str] = MappingProxyType(
    {
        "score": "scoring point deuce advantage game set match",
        "scoring": "score point deuce advantage game set match tiebreak",
        "deuce": "deuce advantage scoring tennis game",
        "tiebreak": "tiebreak tie-break scoring tennis set",
        "match": "match game set scoring tennis",
        "challenge": "challenge opponent player create accept",
        "event": "event tournament registration location",
        "payment": "payment subscription fee billing",
        "location": "location address map nearby",
        "profile": "profile account settings user",
    }
)

# "scor" is a prefix so it catches score, scores, scoring and scored.
SCORING_TERMS: tuple[str, ...] = ("scor", "deuce", "tiebreak", "advantage", "point", "game", "set")
TENNIS_TERMS: tuple[str, ...] = ("tennis", "racket", "court", "serve", "volley")
CHALLENGE_TERMS: tuple[str, ...] = ("challenge", "opponent", "match", "accept", "create")

# (query trigger, category name)
CATEGORY_TRIGGERS: tuple[tuple[str, str], ...] = (
    ("pay", "payments"),
    ("event", "events"),
    ("challenge", "challenges"),
    ("account", "account"),
    ("technical", "technical"),
)

CATEGORIES: tuple[str, ...] = ("General", "Challenges", "Events", "Payments", "Account", "Technical")


@dataclass(frozen=True)
class Lexicon:
    """Vocabulary used to normalize, expand and boost queries."""

    stop_words: frozenset[str] = STOP_WORDS
    expansions: Mapping[str, str] = field(default_factory=lambda: QUERY_EXPANSIONS)
    scoring_terms: tuple[str, ...] = SCORING_TERMS
    tennis_terms: tuple[str, ...] = TENNIS_TERMS
    challenge_terms: tuple[str, ...] = CHALLENGE_TERMS
    category_triggers: tuple[tuple[str, str], ...] = CATEGORY_TRIGGERS


@dataclass(frozen=True)
class ScoringWeights:
    """
    Weights of the relevance signals plus the result cut-off.

    The values were tuned by hand against the seed corpus. Raw magnitudes
    matter: the term boosts are meant to outweigh the similarity signals.
    """

    keyword: float = 15.0
    question_similarity: float = 12.0
    scoring_term_question: float = 20.0
    scoring_term_answer: float = 15.0
    tennis_term: float = 10.0
    challenge_term: float = 12.0
    category: float = 10.0
    answer_similarity: float = 8.0
    priority: float = 1.0
    exact_phrase: float = 8.0

    threshold: float = 0.5
    max_results: int = 3

    def __post_init__(self) -> None:
        if isinstance(self.max_results, bool) or not isinstance(self.max_results, int) or self.max_results < 1:
            raise ValueError(f"max_results must be a positive integer, got {self.max_results!r}")
        if math.isnan(self.threshold):
            raise ValueError("threshold must be a number, got NaN")


DEFAULT_LEXICON = Lexicon()
DEFAULT_WEIGHTS = ScoringWeights()
