"""Adapters - I/O implementations of ports."""

from .aes_cipher import AesCbcCipher, DecryptionError
from .encrypted_file_store import EncryptedFileStore

__all__ = [
    "AesCbcCipher",
    "DecryptionError",
    "EncryptedFileStore",
]
