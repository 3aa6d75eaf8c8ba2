import dataclasses

import pytest

from rallybot.faq.models import FaqRecord, ScoreBreakdown, ScoredCandidate


def test_from_mapping_fills_missing_fields():
    record = FaqRecord.from_mapping({"id": 3, "question": "How do refunds work?"})
    assert record == FaqRecord(id=3, question="How do refunds work?")
    assert record.answer == ""
    assert record.keywords == ""
    assert record.priority == 0
    assert record.is_active is True


def test_from_mapping_treats_none_as_empty():
    record = FaqRecord.from_mapping(
        {"id": 1, "category": None, "question": None, "answer": None, "keywords": None, "priority": None}
    )
    assert (record.category, record.question, record.answer, record.keywords) == ("", "", "", "")
    assert record.priority == 0


def test_from_mapping_accepts_both_active_spellings():
    assert FaqRecord.from_mapping({"is_active": False}).is_active is False
    assert FaqRecord.from_mapping({"isActive": False}).is_active is False
    assert FaqRecord.from_mapping({"isActive": 1}).is_active is True


def test_from_mapping_coerces_priority_and_ignores_extras():
    record = FaqRecord.from_mapping({"priority": "7", "created_at": "2024-01-01"})
    assert record.priority == 7


def test_records_are_immutable():
    record = FaqRecord(id=1, question="q")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.question = "changed"


def test_scored_candidate_forwards_record_fields():
    record = FaqRecord(id=5, category="Events", question="Q", answer="A", keywords="k", priority=2)
    candidate = ScoredCandidate(record=record, relevance_score=12.5)

    assert (candidate.id, candidate.category, candidate.question, candidate.answer) == (5, "Events", "Q", "A")
    assert candidate.to_dict() == {
        "id": 5,
        "category": "Events",
        "question": "Q",
        "answer": "A",
        "keywords": "k",
        "priority": 2,
        "is_active": True,
        "relevanceScore": 12.5,
    }


def test_breakdown_totals():
    breakdown = ScoreBreakdown(keyword=15, question_similarity=6, category=10, priority=4, exact_phrase=8)
    assert breakdown.textual == 39
    assert breakdown.total == 43
