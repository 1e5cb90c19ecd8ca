"""
Exceptions raised by paillier_crypto.

Every error derives from PaillierError so callers can catch the whole
family at once. The concrete classes also inherit the matching built-in
(ValueError, RuntimeError, TimeoutError) for callers that only know those.
"""


class PaillierError(Exception):
    """Base exception for Paillier-related errors."""


class InvalidArgument(PaillierError, ValueError):
    """A size, range bound, plaintext or ciphertext is out of its valid range."""


class KeyGenerationFailure(PaillierError, RuntimeError):
    """A modular inverse needed to derive the private key does not exist."""


class KeyGenerationTimeout(KeyGenerationFailure, TimeoutError):
    """Prime or key search ran past its deadline."""
