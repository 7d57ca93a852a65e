"""Journal service - the public add/list/list_by_date surface.

Composes the in-memory index with an entry store. Every add rewrites the
whole store; reads only touch memory.
"""

import logging
import threading
from datetime import date, datetime, timezone
from typing import Callable

from .adapters.aes_cipher import AesCbcCipher
from .adapters.encrypted_file_store import EncryptedFileStore
from .config import Config, load_config
from .core.entries import JournalEntry, filter_by_date, sort_newest_first, take
from .core.index import EntryIndex
from .ports.entry_store import EntryStore, StoreHealth

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JournalService:
    """
    Encrypted-at-rest journal.

    Thread-safe: one lock covers id allocation, the working set and the
    save, so concurrent adds never share an id or interleave file writes.
    """

    def __init__(self, store: EntryStore, clock: Callable[[], datetime] = utc_now):
        self.store = store
        self.clock = clock
        self._lock = threading.Lock()
        self._index = EntryIndex()

        with self._lock:
            self._index.seed(store.load())
        logger.info(f"Journal loaded with {len(self._index)} entries (next id {self._index.next_id})")

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._index.next_id

    def add(self, content: str) -> JournalEntry:
        """
        Create, index and persist a new entry.

        Returns the entry even if persisting it failed; check health()
        for durability.
        """
        with self._lock:
            entry = JournalEntry(
                id=self._index.allocate_id(),
                content=content,
                timestamp=self.clock().astimezone(timezone.utc),
            )
            self._index.append(entry)
            if not self.store.save(self._index.snapshot()):
                logger.warning(f"Entry {entry.id} kept in memory only; save failed")
        return entry

    def list_by_date(self, day: date) -> list[JournalEntry]:
        """Entries on a calendar date, newest first."""
        with self._lock:
            entries = self._index.snapshot()
        return sort_newest_first(filter_by_date(entries, day))

    def list(self, limit: int = 0) -> list[JournalEntry]:
        """Entries newest first, truncated to `limit` when it is positive."""
        with self._lock:
            entries = self._index.snapshot()
        return take(sort_newest_first(entries), limit)

    def health(self) -> StoreHealth:
        return self.store.health()


def get_journal(config: Config | None = None) -> JournalService:
    """Build a journal service over the configured encrypted backing file."""
    config = config or load_config()
    if config.uses_default_secrets:
        logger.warning(
            "Using built-in fallback encryption secrets - set encryption_key and "
            "encryption_iv in strongbox.conf"
        )

    cipher = AesCbcCipher(config.encryption_key, config.encryption_iv)
    store = EncryptedFileStore(config.journal_file, cipher)
    return JournalService(store)
