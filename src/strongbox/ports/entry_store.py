"""Entry storage interface."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from strongbox.core.entries import JournalEntry


@dataclass(frozen=True)
class StoreHealth:
    """Last known state of the backing store."""

    ok: bool = True
    last_error: str | None = None
    last_operation: str | None = None  # "load" or "save"
    failed_at: datetime | None = None


class EntryStore(Protocol):
    """Interface for persisting the full entry set."""

    def load(self) -> list[JournalEntry]:
        """Load all entries. Returns an empty list when nothing is recoverable."""
        ...

    def save(self, entries: list[JournalEntry]) -> bool:
        """Overwrite stored entries with the full set. Returns False on failure."""
        ...

    def health(self) -> StoreHealth:
        """Report the outcome of the most recent failed or recovering operation."""
        ...
