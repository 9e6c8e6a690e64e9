"""
Key files
=========
Keys are stored raw: exactly ChaChaCipher.KEY_SIZE bytes, no encoding,
no header. Whoever holds the file can decrypt everything sealed with it.
"""

import logging
import os
from typing import Union

from .cipher import ChaChaCipher
from .errors import InvalidKeyError

logger = logging.getLogger(__name__)


def load_key(path: Union[str, os.PathLike]) -> bytes:
    """Read a raw key file. Raises OSError if unreadable, InvalidKeyError if mis-sized."""
    with open(path, "rb") as f:
        key = f.read()
    if len(key) != ChaChaCipher.KEY_SIZE:
        raise InvalidKeyError(
            f"key file {os.fspath(path)} holds {len(key)} bytes, "
            f"expected {ChaChaCipher.KEY_SIZE}."
        )
    logger.debug(f"Loaded key: {len(key)}B from {os.fspath(path)}")
    return key


def build_cipher(key_bytes: bytes) -> ChaChaCipher:
    return ChaChaCipher(key_bytes)
