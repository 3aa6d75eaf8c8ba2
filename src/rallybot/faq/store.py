import json
import logging
import re
from pathlib import Path
from typing import Iterable

import asyncpg

from rallybot.faq.lexicon import CATEGORIES
from rallybot.faq.models import FaqRecord, ScoredCandidate
from rallybot.faq.scorer import RelevanceScorer
from rallybot.faq.seed_data import SEED_FAQS, seed_records

log = logging.getLogger(__name__)

ALL_CATEGORIES = "All"
PAGE_SIZE = 100

_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _table(name: str) -> str:
    if not _IDENT_RE.match(name):
        raise ValueError(f"Invalid FAQ table name: {name!r}")
    return name


class FaqStore:
    """Holds the active FAQ records and answers queries against them."""

    def __init__(self, scorer: RelevanceScorer | None = None, table: str = "faqs"):
        self.scorer = scorer or RelevanceScorer()
        self.table = _table(table)
        self.items: list[FaqRecord] = []

    def set_records(self, records: Iterable[FaqRecord]) -> None:
        """Keep only active records, highest priority first."""
        active = [r for r in records if r.is_active]
        active.sort(key=lambda r: r.priority, reverse=True)
        self.items = active

    def load_json(self, path: str | Path) -> None:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        self.set_records(FaqRecord.from_mapping(item) for item in raw)
        log.info("Loaded %d active FAQs from %s", len(self.items), path)

    def load_seed(self) -> None:
        self.set_records(seed_records())
        log.info("Loaded %d active FAQs from the seed corpus", len(self.items))

    async def load_from_db(self, pool: asyncpg.Pool, *, limit: int = PAGE_SIZE) -> None:
        async with pool.acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT id, category, question, answer, keywords, priority, is_active
                FROM {self.table}
                WHERE is_active = TRUE
                ORDER BY priority DESC
                LIMIT $1
                """,
                limit,
            )
        self.set_records(FaqRecord.from_mapping(dict(r)) for r in rows)
        log.info("Loaded %d active FAQs from table %s", len(self.items), self.table)

    async def load(
        self,
        source: str,
        *,
        json_path: str | Path | None = None,
        pool: asyncpg.Pool | None = None,
    ) -> None:
        """Load from "db", "json" or "seed"."""
        if source == "db":
            if pool is None:
                raise RuntimeError("FAQ source is 'db' but no database pool is available.")
            await self.load_from_db(pool)
        elif source == "json":
            if not json_path:
                raise RuntimeError("FAQ source is 'json' but no file path was given.")
            self.load_json(json_path)
        elif source == "seed":
            self.load_seed()
        else:
            raise ValueError(f"Unknown FAQ source: {source!r}")

    def search(self, query: str) -> list[ScoredCandidate]:
        return self.scorer.search(query, self.items)

    def get(self, faq_id: int | str) -> FaqRecord | None:
        for item in self.items:
            if item.id == faq_id:
                return item
        return None

    def browse(self, category: str = ALL_CATEGORIES, term: str = "") -> list[FaqRecord]:
        """
        Filter records the way the help center list does: by exact category
        (or All) and by a case-insensitive substring of question, answer or
        keywords.
        """
        needle = term.strip().lower()
        results = []
        for item in self.items:
            if category != ALL_CATEGORIES and item.category != category:
                continue
            if needle and not (
                needle in item.question.lower()
                or needle in item.answer.lower()
                or needle in item.keywords.lower()
            ):
                continue
            results.append(item)
        return results

    def category_counts(self) -> dict[str, int]:
        counts = {ALL_CATEGORIES: len(self.items)}
        for category in CATEGORIES:
            counts[category] = sum(1 for item in self.items if item.category == category)
        return counts


async def ensure_faq_table(pool: asyncpg.Pool, table: str = "faqs") -> None:
    table = _table(table)
    async with pool.acquire() as conn:
        await conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {table} (
                id SERIAL PRIMARY KEY,
                category TEXT NOT NULL DEFAULT 'General',
                question TEXT NOT NULL,
                answer TEXT NOT NULL DEFAULT '',
                keywords TEXT NOT NULL DEFAULT '',
                priority INTEGER NOT NULL DEFAULT 0,
                is_active BOOLEAN NOT NULL DEFAULT TRUE
            )
            """
        )


async def seed_faqs(pool: asyncpg.Pool, table: str = "faqs") -> tuple[int, int]:
    """
    Insert the seed corpus row by row.

    A failing row is logged and counted; the rest are still inserted.
    Returns (created, failed).
    """
    table = _table(table)
    created = 0
    failed = 0
    async with pool.acquire() as conn:
        for item in SEED_FAQS:
            try:
                await conn.execute(
                    f"""
                    INSERT INTO {table} (category, question, answer, keywords, priority, is_active)
                    VALUES ($1, $2, $3, $4, $5, $6)
                    """,
                    item["category"],
                    item["question"],
                    item["answer"],
                    item["keywords"],
                    item["priority"],
                    item["is_active"],
                )
                created += 1
            except (asyncpg.PostgresError, OSError):
                log.exception("Error creating FAQ: %s", item["question"])
                failed += 1

    log.info("Seeded FAQs: %d created, %d failed", created, failed)
    return created, failed
