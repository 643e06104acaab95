import threading
from datetime import timezone

import pytest

from string_analyzer.db import StringStore
from string_analyzer.errors import StringAlreadyExistsError
from string_analyzer.models import TextRecord


@pytest.fixture
def store():
    return StringStore()


def test_add_and_get(store):
    record = TextRecord.create("hello")
    stored = store.add(record)
    assert store.get(record.fingerprint) is stored
    assert stored.content == "hello"
    assert record.fingerprint in store
    assert len(store) == 1


def test_created_at_assigned_on_insert(store):
    record = TextRecord.create("hello")
    assert record.created_at is None
    stored = store.add(record)
    assert stored.created_at is not None
    assert stored.created_at.tzinfo == timezone.utc
    assert stored.properties == record.properties


def test_duplicate_rejected(store):
    store.add(TextRecord.create("hello"))
    with pytest.raises(StringAlreadyExistsError):
        store.add(TextRecord.create("hello"))
    assert len(store) == 1


def test_case_variant_is_distinct(store):
    store.add(TextRecord.create("Hello"))
    store.add(TextRecord.create("hello"))
    assert len(store) == 2


def test_remove(store):
    record = store.add(TextRecord.create("bye"))
    assert store.remove(record.fingerprint) is True
    assert store.remove(record.fingerprint) is False
    assert store.get(record.fingerprint) is None


def test_all_preserves_insertion_order(store):
    for v in ["c", "a", "b"]:
        store.add(TextRecord.create(v))
    assert [r.content for r in store.all()] == ["c", "a", "b"]


def test_concurrent_inserts_keep_one_record(store):
    errors = []

    def worker():
        try:
            store.add(TextRecord.create("same"))
        except StringAlreadyExistsError as e:
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 1
    assert len(errors) == 7
