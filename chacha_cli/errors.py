"""
Errors
======
Every failure the tool can hit while building a cipher or running a
stream transform. All of them are fatal to the current operation;
only the CLI boundary catches them.
"""


class ChaChaError(Exception):
    """Base class for chacha_cli failures."""


class InvalidKeyError(ChaChaError, ValueError):
    """Key material is not exactly ChaChaCipher.KEY_SIZE bytes."""


class MalformedInputError(ChaChaError, ValueError):
    """Ciphertext stream ended before a full nonce could be read."""


class AuthenticationError(ChaChaError):
    """
    Ciphertext failed authentication.

    Raised for a tag mismatch, tampered data, a wrong key, or a body too
    short to hold a tag. The message never says which.
    """


class EncryptionError(ChaChaError, RuntimeError):
    """The AEAD primitive refused to seal the buffer."""
