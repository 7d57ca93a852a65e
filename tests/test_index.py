"""Tests for the in-memory entry index."""

from datetime import datetime, timezone

import pytest

from strongbox.core.index import EntryIndex
from strongbox.core.entries import JournalEntry

NOW = datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)


def make_entry(entry_id: int, content: str = "note") -> JournalEntry:
    return JournalEntry(id=entry_id, content=content, timestamp=NOW)


class TestSeed:
    def test_empty_index_starts_at_one(self):
        index = EntryIndex()
        assert index.next_id == 1
        assert len(index) == 0

    def test_seed_recomputes_next_id_from_max(self):
        index = EntryIndex()
        index.seed([make_entry(3), make_entry(7), make_entry(5)])
        assert index.next_id == 8
        assert len(index) == 3

    def test_seed_with_empty_list_resets(self):
        index = EntryIndex([make_entry(4)])
        index.seed([])
        assert index.next_id == 1
        assert index.snapshot() == []

    def test_seed_replaces_wholesale(self):
        index = EntryIndex([make_entry(1), make_entry(2)])
        index.seed([make_entry(10)])
        assert [e.id for e in index.snapshot()] == [10]
        assert index.next_id == 11

    def test_seed_rejects_duplicate_ids(self):
        index = EntryIndex()
        with pytest.raises(ValueError, match="Duplicate"):
            index.seed([make_entry(1), make_entry(1)])

    def test_constructor_seeds(self):
        index = EntryIndex([make_entry(2)])
        assert index.next_id == 3


class TestAllocateAndAppend:
    def test_allocate_returns_current_and_increments(self):
        index = EntryIndex([make_entry(4)])
        assert index.allocate_id() == 5
        assert index.allocate_id() == 6
        assert index.next_id == 7

    def test_allocated_ids_not_reused_without_append(self):
        index = EntryIndex()
        first = index.allocate_id()
        second = index.allocate_id()
        assert first != second

    def test_append_adds_entry(self):
        index = EntryIndex()
        entry = make_entry(index.allocate_id(), "hello")
        index.append(entry)
        assert index.snapshot() == [entry]

    def test_append_rejects_duplicate_id(self):
        index = EntryIndex([make_entry(1)])
        with pytest.raises(ValueError, match="already exists"):
            index.append(make_entry(1, "again"))

    def test_append_keeps_counter_ahead(self):
        index = EntryIndex()
        index.append(make_entry(9))
        assert index.next_id == 10

    def test_snapshot_is_a_copy(self):
        index = EntryIndex([make_entry(1)])
        snapshot = index.snapshot()
        snapshot.append(make_entry(2))
        assert len(index) == 1

    def test_snapshot_keeps_insertion_order(self):
        index = EntryIndex()
        for entry_id in (3, 1, 2):
            index.append(make_entry(entry_id))
        assert [e.id for e in index.snapshot()] == [3, 1, 2]
