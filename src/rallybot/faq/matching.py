"""String helpers behind the FAQ relevance signals."""

from typing import Iterable, Mapping

from rallybot.faq.lexicon import QUERY_EXPANSIONS, STOP_WORDS


def contains_term(haystack: str, needle: str) -> bool:
    """Substring test that never matches an empty needle."""
    return bool(needle) and needle in haystack


def mutual_contains(a: str, b: str) -> bool:
    return contains_term(a, b) or contains_term(b, a)


def normalize_query(query: str, stop_words: Iterable[str] = STOP_WORDS) -> str:
    """
    Lower-case the query and keep only informative terms.

    Tokens of two characters or fewer and stop words are dropped; the rest
    keep their original order.
    """
    stop = set(stop_words)
    words = query.lower().split()
    return " ".join(w for w in words if len(w) > 2 and w not in stop)


def expand_query(query: str, expansions: Mapping[str, str] = QUERY_EXPANSIONS) -> str:
    """
    Append domain synonyms for every trigger found in the query.

    Triggers are checked against the query as it grows, so a phrase added by
    one trigger can fire a later one.
    """
    expanded = query.lower()
    for trigger, phrase in expansions.items():
        if trigger in expanded:
            expanded += " " + phrase
    return expanded


def similarity(a: str, b: str) -> float:
    """
    Word-overlap similarity between two strings.

    Returns 1.0 when one string contains the other. Otherwise every equal word
    pair counts 2 and every partial pair (both words at least 3 chars, one
    inside the other) counts 1; the total is divided by the longer word count.
    """
    s1 = a.lower().strip()
    s2 = b.lower().strip()
    if not s1 or not s2:
        return 0.0

    if s2 in s1 or s1 in s2:
        return 1.0

    words1 = s1.split()
    words2 = s2.split()

    matches = 0
    for w1 in words1:
        for w2 in words2:
            if w1 == w2:
                matches += 2
            elif len(w1) >= 3 and len(w2) >= 3 and (w1 in w2 or w2 in w1):
                matches += 1

    longest = max(len(words1), len(words2))
    return matches / longest if longest else 0.0


def split_keywords(keywords: str) -> list[str]:
    return [k.strip() for k in keywords.lower().split(",") if k.strip()]


def keyword_overlap(query: str, keywords: str) -> float:
    """
    Average per-keyword hit strength of a comma-separated keyword list.

    A keyword of 3+ chars found in the query is worth 3. Failing that, a
    keyword of 4+ chars that overlaps any query word is worth 1. The sum is
    divided by the number of non-empty keywords.
    """
    terms = split_keywords(keywords)
    if not terms:
        return 0.0

    query_lower = query.lower()
    words = query_lower.split()

    total = 0
    for kw in terms:
        if len(kw) >= 3 and kw in query_lower:
            total += 3
        elif len(kw) >= 4:
            if any(kw in w or w in kw for w in words):
                total += 1

    return total / len(terms)
