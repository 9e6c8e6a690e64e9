"""
chacha_cli — ChaCha20-Poly1305 over stdin/stdout
=================================================
Streams bytes through authenticated encryption with a raw key file.

Commands:
    keygen            32 random bytes to stdout
    encrypt FILE      plaintext  -> nonce(12) || ciphertext || tag(16)
    decrypt FILE      ciphertext -> plaintext, or fail on any tampering

Library use:
    cipher = build_cipher(load_key("key.bin"))
    write_chunks(Encryptor(cipher, src), dst)

License: Apache 2.0
"""

__version__ = "0.1.0"

from .errors  import (ChaChaError, InvalidKeyError, MalformedInputError,
                      AuthenticationError, EncryptionError)
from .cipher  import ChaChaCipher
from .stream  import Encryptor, Decryptor, EncryptorPhase, DecryptorPhase
from .sink    import write_chunks, key_chunks, BUFFER_SIZE
from .keys    import load_key, build_cipher

__all__ = [
    "ChaChaError",
    "InvalidKeyError",
    "MalformedInputError",
    "AuthenticationError",
    "EncryptionError",
    "ChaChaCipher",
    "Encryptor",
    "Decryptor",
    "EncryptorPhase",
    "DecryptorPhase",
    "write_chunks",
    "key_chunks",
    "BUFFER_SIZE",
    "load_key",
    "build_cipher",
]
