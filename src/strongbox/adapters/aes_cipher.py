"""AES-CBC cipher adapter - fixed key and IV from configured secrets."""

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

KEY_SIZE = 32  # AES-256
IV_SIZE = 16
BLOCK_SIZE = 16


class DecryptionError(Exception):
    """Raised when ciphertext cannot be decrypted with this key/IV."""

    pass


def derive_secret(secret: str, size: int) -> bytes:
    """UTF-8 encode a secret, truncated or zero-padded to `size` bytes."""
    raw = secret.encode("utf-8")[:size]
    return raw.ljust(size, b"\0")


class AesCbcCipher:
    """
    AES-256-CBC with PKCS7 padding.

    Implements Cipher protocol. Key and IV are fixed at construction, so
    encryption is deterministic: the same plaintext always produces the
    same ciphertext.
    """

    def __init__(self, key: str, iv: str):
        self.key = derive_secret(key, KEY_SIZE)
        self.iv = derive_secret(iv, IV_SIZE)

    def _cipher(self) -> Cipher:
        return Cipher(algorithms.AES(self.key), modes.CBC(self.iv))

    def encrypt(self, plaintext: bytes) -> bytes:
        """Pad to the block size and encrypt."""
        padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
        padded = padder.update(plaintext) + padder.finalize()

        encryptor = self._cipher().encryptor()
        return encryptor.update(padded) + encryptor.finalize()

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt and strip padding. Raises DecryptionError on bad input."""
        if not ciphertext or len(ciphertext) % BLOCK_SIZE:
            raise DecryptionError(
                f"Ciphertext length {len(ciphertext)} is not a positive multiple of {BLOCK_SIZE}"
            )

        decryptor = self._cipher().decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()

        unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as e:
            # Bad padding usually means the wrong key or IV
            raise DecryptionError(f"Invalid padding: {e}") from e
