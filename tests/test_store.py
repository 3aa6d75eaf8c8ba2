import json

import pytest

from rallybot.faq.models import FaqRecord
from rallybot.faq.store import FaqStore, ensure_faq_table, seed_faqs
from rallybot.faq.seed_data import SEED_FAQS


class FakeConnection:
    def __init__(self, rows=None, fail_on=()):
        self.rows = rows or []
        self.fail_on = set(fail_on)
        self.fetch_calls = []
        self.executed = []

    async def fetch(self, query, *args):
        self.fetch_calls.append((query, args))
        return self.rows

    async def execute(self, query, *args):
        if args and args[1] in self.fail_on:
            raise OSError("connection reset")
        self.executed.append((query, args))
        return "INSERT 0 1"


class FakeAcquire:
    def __init__(self, conn):
        self.conn = conn

    async def __aenter__(self):
        return self.conn

    async def __aexit__(self, *exc):
        return False


class FakePool:
    def __init__(self, conn):
        self.conn = conn

    def acquire(self):
        return FakeAcquire(self.conn)


@pytest.fixture
def seeded_store():
    store = FaqStore()
    store.load_seed()
    return store


def test_set_records_drops_inactive_and_orders_by_priority():
    store = FaqStore()
    store.set_records([
        FaqRecord(id=1, priority=1),
        FaqRecord(id=2, priority=9, is_active=False),
        FaqRecord(id=3, priority=5),
        FaqRecord(id=4, priority=5),
    ])
    assert [r.id for r in store.items] == [3, 4, 1]


def test_seed_corpus_loads(seeded_store):
    assert len(seeded_store.items) == len(SEED_FAQS) == 24
    assert seeded_store.get(1) is not None
    assert seeded_store.get(999) is None


def test_category_counts(seeded_store):
    assert seeded_store.category_counts() == {
        "All": 24,
        "General": 7,
        "Challenges": 5,
        "Events": 3,
        "Payments": 3,
        "Account": 3,
        "Technical": 3,
    }


def test_browse_by_category_and_term(seeded_store):
    assert len(seeded_store.browse("Payments")) == 3
    assert [r.question for r in seeded_store.browse("All", "refund")] == ["How do refunds work?"]
    assert len(seeded_store.browse("All", "DEUCE")) == 2
    assert seeded_store.browse("Technical", "deuce") == []
    assert len(seeded_store.browse()) == 24


def test_search_delegates_to_scorer(seeded_store):
    results = seeded_store.search("What is deuce?")
    assert results[0].question == "What is deuce in tennis?"
    assert seeded_store.search("xyzabc nonsense query") == []


def test_load_json(tmp_path):
    path = tmp_path / "faqs.json"
    path.write_text(
        json.dumps([
            {"id": 1, "category": "General", "question": "Old question", "priority": 1, "is_active": False},
            {"id": 2, "category": "Events", "question": "How do I join?", "keywords": None, "priority": 3},
        ]),
        encoding="utf-8",
    )
    store = FaqStore()
    store.load_json(path)
    assert store.items == [FaqRecord(id=2, category="Events", question="How do I join?", priority=3)]


def test_load_json_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FaqStore().load_json(tmp_path / "nope.json")


@pytest.mark.asyncio
async def test_load_from_db():
    conn = FakeConnection(rows=[
        {"id": 7, "category": "Account", "question": "Can I delete my account?", "answer": "Yes.",
         "keywords": "delete account", "priority": 5, "is_active": True},
    ])
    store = FaqStore(table="faq_entries")
    await store.load("db", pool=FakePool(conn))

    assert [r.id for r in store.items] == [7]
    query, args = conn.fetch_calls[0]
    assert "FROM faq_entries" in query
    assert "ORDER BY priority DESC" in query
    assert args == (100,)


@pytest.mark.asyncio
async def test_load_dispatch_errors():
    store = FaqStore()
    with pytest.raises(RuntimeError):
        await store.load("db")
    with pytest.raises(RuntimeError):
        await store.load("json")
    with pytest.raises(ValueError):
        await store.load("carrier-pigeon")

    await store.load("seed")
    assert len(store.items) == 24


def test_table_name_is_validated():
    with pytest.raises(ValueError):
        FaqStore(table="faqs; DROP TABLE users")


@pytest.mark.asyncio
async def test_seed_faqs_counts_failures():
    failing_question = SEED_FAQS[3]["question"]
    conn = FakeConnection(fail_on={failing_question})

    created, failed = await seed_faqs(FakePool(conn), "faqs")

    assert (created, failed) == (23, 1)
    assert all("INSERT INTO faqs" in query for query, _ in conn.executed)


@pytest.mark.asyncio
async def test_ensure_faq_table():
    conn = FakeConnection()
    await ensure_faq_table(FakePool(conn), "faqs")
    assert "CREATE TABLE IF NOT EXISTS faqs" in conn.executed[0][0]
