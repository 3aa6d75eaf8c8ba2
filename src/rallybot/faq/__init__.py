"""FAQ matching for the tennis assistant: records, lexicon, scorer and store."""

from .lexicon import DEFAULT_LEXICON, DEFAULT_WEIGHTS, Lexicon, ScoringWeights
from .models import FaqRecord, ScoreBreakdown, ScoredCandidate
from .scorer import RelevanceScorer, search
from .store import FaqStore

__all__ = [
    "DEFAULT_LEXICON",
    "DEFAULT_WEIGHTS",
    "Lexicon",
    "ScoringWeights",
    "FaqRecord",
    "ScoreBreakdown",
    "ScoredCandidate",
    "RelevanceScorer",
    "search",
    "FaqStore",
]
