"""
ChaCha20-Poly1305 authenticated encryption (RFC 8439 section 2.8).

ChaCha20 encrypts, Poly1305 authenticates. The Poly1305 key is derived fresh
for every (key, nonce) pair from ChaCha20 block 0, and the associated data is
covered by the tag without being encrypted.

References:
    - https://datatracker.ietf.org/doc/html/rfc8439
"""

from .cipher import ChaCha20Poly1305
from .constants import (
    ENCRYPTION_COUNTER,
    KEY_SIZE,
    KEYGEN_COUNTER,
    MAX_DATA_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    Key,
    Nonce,
)
from .construction import (
    compute_tag,
    mac_data,
    open_sealed,
    pad16,
    poly1305_key_gen,
    seal,
)
from .message import SealedMessage

__all__ = [
    # Constants
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "KEYGEN_COUNTER",
    "ENCRYPTION_COUNTER",
    "MAX_DATA_SIZE",
    # Type aliases
    "Key",
    "Nonce",
    # Primitives
    "seal",
    "open_sealed",
    "poly1305_key_gen",
    "compute_tag",
    "mac_data",
    "pad16",
    # Classes
    "ChaCha20Poly1305",
    "SealedMessage",
]
