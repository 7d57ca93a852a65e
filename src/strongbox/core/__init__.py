"""Functional core - entry model, queries and the in-memory index."""

from .entries import (
    JournalEntry,
    dump_entries,
    filter_by_date,
    load_entries,
    parse_timestamp,
    sort_newest_first,
    take,
)
from .index import EntryIndex

__all__ = [
    # Entries
    "JournalEntry",
    "dump_entries",
    "load_entries",
    "parse_timestamp",
    "sort_newest_first",
    "take",
    "filter_by_date",
    # Index
    "EntryIndex",
]
