"""In-memory working set of journal entries."""

from .entries import JournalEntry


class EntryIndex:
    """
    Working set plus the next-id counter.

    Not thread-safe on its own; callers serialize access.
    """

    def __init__(self, entries: list[JournalEntry] | None = None):
        self._entries: list[JournalEntry] = []
        self._ids: set[int] = set()
        self._next_id = 1
        if entries:
            self.seed(entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def next_id(self) -> int:
        return self._next_id

    def seed(self, entries: list[JournalEntry]) -> None:
        """Replace the working set wholesale and recompute the counter."""
        ids = {e.id for e in entries}
        if len(ids) != len(entries):
            raise ValueError("Duplicate entry ids in seed data")

        self._entries = list(entries)
        self._ids = ids
        self._next_id = max(ids) + 1 if ids else 1

    def allocate_id(self) -> int:
        """Return the current counter value and advance it."""
        entry_id = self._next_id
        self._next_id += 1
        return entry_id

    def append(self, entry: JournalEntry) -> None:
        if entry.id in self._ids:
            raise ValueError(f"Entry id {entry.id} already exists")
        self._entries.append(entry)
        self._ids.add(entry.id)
        # Keep the counter ahead of anything appended directly
        if entry.id >= self._next_id:
            self._next_id = entry.id + 1

    def snapshot(self) -> list[JournalEntry]:
        """Copy of the full working set, in insertion order."""
        return list(self._entries)
