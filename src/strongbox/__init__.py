"""Strongbox - encrypted-at-rest journal store."""

from .core.entries import JournalEntry
from .service import JournalService, get_journal

__all__ = ["JournalEntry", "JournalService", "get_journal"]
