"""
Pure Python ChaCha20-Poly1305 AEAD.

Usage::

    from chacha_poly import open_sealed, seal

    ciphertext, tag = seal(key, nonce, plaintext, aad)
    plaintext = open_sealed(key, nonce, ciphertext, aad, tag)

`open_sealed` raises `AuthenticationFailure` instead of returning data when
the tag does not match.

The implementation follows RFC 8439:
https://datatracker.ietf.org/doc/html/rfc8439
"""

from .aead import ChaCha20Poly1305, SealedMessage, open_sealed, seal
from .types import (
    AuthenticationFailure,
    ChaChaPolyError,
    CounterOverflow,
    InvalidKeyLength,
    InvalidNonceLength,
    InvalidTagLength,
)

__all__ = [
    # Core API
    "seal",
    "open_sealed",
    "ChaCha20Poly1305",
    "SealedMessage",
    # Exceptions
    "ChaChaPolyError",
    "InvalidKeyLength",
    "InvalidNonceLength",
    "InvalidTagLength",
    "CounterOverflow",
    "AuthenticationFailure",
]
