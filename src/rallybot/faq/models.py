from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class FaqRecord:
    id: int | str | None = None
    category: str = ""
    question: str = ""
    answer: str = ""
    keywords: str = ""
    priority: int = 0
    is_active: bool = True

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "FaqRecord":
        """
        Build a record from a database row or JSON object.

        Missing or null text fields become empty strings and a missing
        priority becomes 0. Both ``is_active`` and ``isActive`` are accepted.
        """
        active = row.get("is_active", row.get("isActive"))
        priority = row.get("priority")
        return cls(
            id=row.get("id"),
            category=_text(row.get("category")),
            question=_text(row.get("question")),
            answer=_text(row.get("answer")),
            keywords=_text(row.get("keywords")),
            priority=int(priority) if priority is not None else 0,
            is_active=True if active is None else bool(active),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-signal contributions to one record's relevance score."""

    keyword: float = 0.0
    question_similarity: float = 0.0
    scoring_terms: float = 0.0
    tennis_terms: float = 0.0
    challenge_terms: float = 0.0
    category: float = 0.0
    answer_similarity: float = 0.0
    priority: float = 0.0
    exact_phrase: float = 0.0

    @property
    def textual(self) -> float:
        return sum(getattr(self, f.name) for f in fields(self) if f.name != "priority")

    @property
    def total(self) -> float:
        return self.textual + self.priority


@dataclass(frozen=True)
class ScoredCandidate:
    record: FaqRecord
    relevance_score: float

    @property
    def id(self) -> int | str | None:
        return self.record.id

    @property
    def category(self) -> str:
        return self.record.category

    @property
    def question(self) -> str:
        return self.record.question

    @property
    def answer(self) -> str:
        return self.record.answer

    def to_dict(self) -> dict[str, Any]:
        data = self.record.to_dict()
        data["relevanceScore"] = self.relevance_score
        return data
