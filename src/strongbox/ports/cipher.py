"""Cipher interface."""

from typing import Protocol


class Cipher(Protocol):
    """Interface for a symmetric encrypt/decrypt pair."""

    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt a byte buffer."""
        ...

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt a byte buffer. Raises on bad input or key mismatch."""
        ...
