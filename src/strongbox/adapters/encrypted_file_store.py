"""Encrypted single-file entry storage adapter."""

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from strongbox.core.entries import JournalEntry, dump_entries, load_entries
from strongbox.ports.cipher import Cipher
from strongbox.ports.entry_store import StoreHealth

from .aes_cipher import DecryptionError

logger = logging.getLogger(__name__)


class EncryptedFileStore:
    """
    Encrypted file-based entry storage.

    Implements EntryStore protocol. The whole entry set lives in one file,
    rewritten in full on every save. Failures are logged and recorded in
    health() instead of being raised.
    """

    def __init__(self, path: Path | str, cipher: Cipher):
        self.path = Path(path).expanduser()
        self.cipher = cipher
        self._health = StoreHealth()

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Could not create data directory {self.path.parent}: {e}")
            self._record_failure("save", e)

    def _record_failure(self, operation: str, error: Exception) -> None:
        self._health = StoreHealth(
            ok=False,
            last_error=f"{type(error).__name__}: {error}",
            last_operation=operation,
            failed_at=datetime.now(timezone.utc),
        )

    def health(self) -> StoreHealth:
        return self._health

    def load(self) -> list[JournalEntry]:
        """Read, decrypt and parse the backing file. Empty list if missing or unreadable."""
        if not self.path.exists():
            return []

        try:
            plaintext = self.cipher.decrypt(self.path.read_bytes())
            entries = load_entries(plaintext.decode("utf-8"))
        except (OSError, DecryptionError, ValueError, KeyError, TypeError, RecursionError) as e:
            logger.error(f"Error loading journal entries from {self.path}: {e}")
            self._record_failure("load", e)
            return []

        logger.debug(f"Loaded {len(entries)} entries from {self.path}")
        return entries

    def save(self, entries: list[JournalEntry]) -> bool:
        """Serialize, encrypt and overwrite the backing file. False on failure."""
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            payload = dump_entries(entries).encode("utf-8")
            tmp_path.write_bytes(self.cipher.encrypt(payload))
            os.replace(tmp_path, self.path)
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error saving journal entries to {self.path}: {e}")
            self._record_failure("save", e)
            if tmp_path.exists():
                tmp_path.unlink(missing_ok=True)
            return False

        if not self._health.ok:
            logger.info(f"Journal store {self.path} recovered")
            self._health = StoreHealth()
        return True
