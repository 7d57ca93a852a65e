"""Ports - interfaces/protocols for external dependencies."""

from .cipher import Cipher
from .entry_store import EntryStore, StoreHealth

__all__ = [
    "Cipher",
    "EntryStore",
    "StoreHealth",
]
