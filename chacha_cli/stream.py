"""
Stream producers
================
Encryptor and Decryptor are small phase machines that hand out byte
chunks one pull at a time. Callers must treat both as "pull until
exhausted": today each phase does its work in bulk, but the iterator
shape is what lets the framing become incremental later without
touching callers.

Wire format:  nonce(12) || ciphertext || tag(16)

There is no length prefix. The ciphertext runs to end-of-stream, so a
stream holds exactly one message.
"""

import enum
import logging
from typing import BinaryIO, Iterator

from .cipher import ChaChaCipher
from .errors import MalformedInputError

logger = logging.getLogger(__name__)


class EncryptorPhase(enum.Enum):
    NONCE      = "nonce"
    CIPHERTEXT = "ciphertext"
    COMPLETE   = "complete"


class DecryptorPhase(enum.Enum):
    PLAINTEXT = "plaintext"
    COMPLETE  = "complete"


class Encryptor(Iterator[bytes]):
    """
    Yields the nonce, then ciphertext+tag, then stops.

    The nonce is drawn once, here in the constructor, so it is fixed
    before a single byte of plaintext is read. One Encryptor per
    message; never reuse an instance.
    """

    def __init__(self, cipher: ChaChaCipher, source: BinaryIO):
        self._cipher = cipher
        self._source = source
        self._nonce  = cipher.generate_nonce()
        self._phase  = EncryptorPhase.NONCE

    @property
    def nonce(self) -> bytes:
        return self._nonce

    @property
    def phase(self) -> EncryptorPhase:
        return self._phase

    def __iter__(self) -> "Encryptor":
        return self

    def __next__(self) -> bytes:
        if self._phase is EncryptorPhase.NONCE:
            self._phase = EncryptorPhase.CIPHERTEXT
            logger.debug(f"Encryptor: emitting nonce ({len(self._nonce)}B)")
            return self._nonce

        if self._phase is EncryptorPhase.CIPHERTEXT:
            self._phase = EncryptorPhase.COMPLETE
            plaintext   = self._source.read()
            self._source = None
            ciphertext  = self._cipher.seal(self._nonce, plaintext)
            logger.debug(f"Encryptor: pt={len(plaintext)}B ct={len(ciphertext)}B")
            return ciphertext

        raise StopIteration


class Decryptor(Iterator[bytes]):
    """Consumes nonce || ciphertext+tag and yields the plaintext once."""

    def __init__(self, cipher: ChaChaCipher, source: BinaryIO):
        self._cipher = cipher
        self._source = source
        self._phase  = DecryptorPhase.PLAINTEXT

    @property
    def phase(self) -> DecryptorPhase:
        return self._phase

    def __iter__(self) -> "Decryptor":
        return self

    def __next__(self) -> bytes:
        if self._phase is DecryptorPhase.COMPLETE:
            raise StopIteration

        # Nothing below is retried: a failed pull still ends the sequence.
        self._phase  = DecryptorPhase.COMPLETE
        source       = self._source
        self._source = None

        nonce      = _read_exact(source, ChaChaCipher.NONCE_SIZE)
        ciphertext = source.read()
        plaintext  = self._cipher.open(nonce, ciphertext)
        logger.debug(f"Decryptor: ct={len(ciphertext)}B pt={len(plaintext)}B")
        return plaintext


def _read_exact(source: BinaryIO, size: int) -> bytes:
    """Read exactly size bytes, looping over short reads."""
    buf = bytearray()
    while len(buf) < size:
        chunk = source.read(size - len(buf))
        if not chunk:
            raise MalformedInputError(
                f"failed to read nonce of size {size} bytes "
                f"(stream ended after {len(buf)})"
            )
        buf += chunk
    return bytes(buf)
