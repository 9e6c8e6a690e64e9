"""
Cipher: ChaCha20-Poly1305
=========================
ChaCha20 stream cipher + Poly1305 authentication tag.

Key:   256-bit (32 bytes)
Nonce:  96-bit (12 bytes) — randomly generated per message
Tag:   128-bit (16 bytes) — Poly1305 authentication

The context holds only the key. Nonces are supplied by the caller so
that the producers in chacha_cli.stream can emit the nonce before any
plaintext has been read.

Dependencies: cryptography >= 41.0
"""

import os
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from .errors import AuthenticationError, EncryptionError, InvalidKeyError


class ChaChaCipher:
    """ChaCha20-Poly1305 context bound to one key. Never mutated."""

    KEY_SIZE   = 32
    NONCE_SIZE = 12
    TAG_SIZE   = 16

    def __init__(self, key: bytes):
        if len(key) != self.KEY_SIZE:
            raise InvalidKeyError(
                f"ChaCha20 key must be {self.KEY_SIZE} bytes, got {len(key)}."
            )
        self._cipher = ChaCha20Poly1305(bytes(key))

    @classmethod
    def generate_key(cls) -> bytes:
        return os.urandom(cls.KEY_SIZE)

    @classmethod
    def generate_nonce(cls) -> bytes:
        return os.urandom(cls.NONCE_SIZE)

    def seal(self, nonce: bytes, data: bytes) -> bytes:
        """
        Encrypt and authenticate data, no associated data.
        Returns: ciphertext || tag(16)
        """
        try:
            return self._cipher.encrypt(nonce, data, None)
        except (ValueError, OverflowError) as exc:
            raise EncryptionError(f"failed to encrypt buffer: {exc}") from exc

    def open(self, nonce: bytes, data: bytes) -> bytes:
        """
        Decrypt and verify ciphertext || tag.
        Raises AuthenticationError on any verification failure.
        """
        try:
            return self._cipher.decrypt(nonce, data, None)
        except InvalidTag:
            raise AuthenticationError("failed to decrypt buffer") from None
