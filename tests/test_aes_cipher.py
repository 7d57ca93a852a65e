"""Tests for the AES-CBC cipher adapter."""

import pytest
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from strongbox.adapters.aes_cipher import (
    AesCbcCipher,
    DecryptionError,
    derive_secret,
)
from strongbox.config import DEFAULT_ENCRYPTION_IV, DEFAULT_ENCRYPTION_KEY


@pytest.fixture
def cipher():
    return AesCbcCipher(DEFAULT_ENCRYPTION_KEY, DEFAULT_ENCRYPTION_IV)


class TestDeriveSecret:
    def test_truncates_long_secret(self):
        assert derive_secret(DEFAULT_ENCRYPTION_KEY, 32) == DEFAULT_ENCRYPTION_KEY.encode()[:32]

    def test_exact_length_unchanged(self):
        assert derive_secret("1234567890123456", 16) == b"1234567890123456"

    def test_pads_short_secret_with_zeros(self):
        assert derive_secret("abc", 16) == b"abc" + b"\0" * 13

    def test_multibyte_secret_counts_bytes(self):
        secret = derive_secret("é" * 20, 32)
        assert len(secret) == 32
        assert secret[:2] == "é".encode("utf-8")

    def test_cipher_key_and_iv_sizes(self, cipher):
        assert len(cipher.key) == 32
        assert len(cipher.iv) == 16


class TestAesCbcCipher:
    @pytest.mark.parametrize(
        "plaintext",
        [b"", b"a", b"x" * 15, b"y" * 16, b"z" * 17, "journal ✍".encode("utf-8"), bytes(range(256))],
    )
    def test_roundtrip(self, cipher, plaintext):
        assert cipher.decrypt(cipher.encrypt(plaintext)) == plaintext

    def test_output_is_block_padded(self, cipher):
        assert len(cipher.encrypt(b"")) == 16
        assert len(cipher.encrypt(b"a" * 15)) == 16
        # Full block of padding added when input is block aligned
        assert len(cipher.encrypt(b"a" * 16)) == 32

    def test_deterministic_with_fixed_iv(self, cipher):
        assert cipher.encrypt(b"same text") == cipher.encrypt(b"same text")

    def test_ciphertext_differs_from_plaintext(self, cipher):
        assert b"secret diary" not in cipher.encrypt(b"secret diary")

    def test_different_key_different_ciphertext(self, cipher):
        other = AesCbcCipher("another key entirely", DEFAULT_ENCRYPTION_IV)
        assert other.encrypt(b"hello") != cipher.encrypt(b"hello")

    def test_compatible_with_plain_aes_cbc(self, cipher):
        """Same key/IV in a raw AES-CBC decryptor recovers PKCS7-padded text."""
        decryptor = Cipher(algorithms.AES(cipher.key), modes.CBC(cipher.iv)).decryptor()
        padded = decryptor.update(cipher.encrypt(b"hello")) + decryptor.finalize()
        assert padded == b"hello" + bytes([11]) * 11

    @pytest.mark.parametrize("length", [1, 15, 17, 31])
    def test_decrypt_rejects_partial_blocks(self, cipher, length):
        with pytest.raises(DecryptionError, match="not a positive multiple"):
            cipher.decrypt(b"\x01" * length)

    def test_decrypt_rejects_empty(self, cipher):
        with pytest.raises(DecryptionError):
            cipher.decrypt(b"")

    def test_decrypt_rejects_invalid_padding(self, cipher):
        # A block whose plaintext ends in 0x00 can never be valid PKCS7
        encryptor = Cipher(algorithms.AES(cipher.key), modes.CBC(cipher.iv)).encryptor()
        ciphertext = encryptor.update(b"\0" * 16) + encryptor.finalize()

        with pytest.raises(DecryptionError, match="Invalid padding"):
            cipher.decrypt(ciphertext)
