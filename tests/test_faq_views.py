from rallybot.faq.models import FaqRecord, ScoredCandidate
from rallybot.faq.store import FaqStore
from rallybot.ui.faq_views import (
    EMBED_TOTAL_LIMIT,
    FALLBACK_TEXT,
    build_answer_embed,
    build_browse_embed,
    build_categories_embed,
    build_fallback_embed,
)


def _candidate(id_, question, category="General", score=10.0):
    return ScoredCandidate(
        record=FaqRecord(id=id_, category=category, question=question, answer=f"Answer to {question}"),
        relevance_score=score,
    )


def test_answer_embed_lists_related_questions():
    results = [
        _candidate(1, "What is deuce in tennis?", score=80),
        _candidate(2, "How does tennis scoring work?", score=50),
        _candidate(3, "How does a tiebreaker work in tennis?", score=20),
    ]
    embed = build_answer_embed(results)

    assert embed.title == "What is deuce in tennis?"
    assert embed.description == "Answer to What is deuce in tennis?"
    assert embed.fields[0].name == "Related questions"
    assert "How does tennis scoring work?" in embed.fields[0].value
    assert "How does a tiebreaker work in tennis?" in embed.fields[0].value
    assert embed.footer.text == "General"


def test_answer_embed_single_result_has_no_related_field():
    embed = build_answer_embed([_candidate(1, "Can I delete my account?", category="Account")])
    assert embed.fields == []
    assert embed.footer.text == "Account"


def test_long_answers_are_clipped():
    record = FaqRecord(id=1, question="Q", answer="x" * 5000)
    embed = build_answer_embed([ScoredCandidate(record=record, relevance_score=1.0)])
    assert len(embed.description) == 4096
    assert embed.description.endswith("…")


def test_fallback_embed():
    embed = build_fallback_embed()
    assert embed.description == FALLBACK_TEXT
    assert "General, Challenges, Events, Payments, Account, or Technical" in FALLBACK_TEXT


def test_browse_embed():
    records = [FaqRecord(id=i, question=f"Question {i}", answer="A") for i in range(30)]
    embed = build_browse_embed(records, "All", "question")
    assert embed.title == "Help Center"
    assert len(embed.fields) == 25
    assert embed.footer.text == '25 of 30 FAQs matching "question"'

    empty = build_browse_embed([], "Payments")
    assert empty.title == "Help Center: Payments"
    assert empty.description.startswith("No FAQs found")


def test_categories_embed():
    embed = build_categories_embed({"All": 2, "General": 2})
    assert embed.description == "**All**: 2\n**General**: 2"


def test_browse_embed_of_seed_corpus_fits_discord_limit():
    store = FaqStore()
    store.load_seed()
    embed = build_browse_embed(store.browse(), "All")

    assert len(embed) <= EMBED_TOTAL_LIMIT
    shown = len(embed.fields)
    assert shown > 0
    assert embed.footer.text == f"{shown} of 24 FAQs"


def test_browse_embed_stops_adding_fields_at_total_limit():
    records = [FaqRecord(id=i, question=f"Question {i} " + "q" * 200, answer="a" * 1000) for i in range(25)]
    embed = build_browse_embed(records, "General", "q" * 300)

    assert len(embed) <= EMBED_TOTAL_LIMIT
    assert 0 < len(embed.fields) < 25
    assert embed.footer.text.startswith(f"{len(embed.fields)} of 25 FAQs matching")
