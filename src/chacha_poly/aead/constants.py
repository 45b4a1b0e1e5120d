"""
Constants and type aliases for the ChaCha20-Poly1305 AEAD construction.

Separated to avoid circular imports between construction.py and cipher.py.
"""

from __future__ import annotations

from typing import Final, TypeAlias

from chacha_poly.chacha20 import BLOCK_SIZE, COUNTER_LIMIT
from chacha_poly.types import Bytes12, Bytes32

# =============================================================================
# Sizes
# =============================================================================

KEY_SIZE: Final[int] = 32
"""The only supported key size."""

NONCE_SIZE: Final[int] = 12
"""The only supported nonce size."""

TAG_SIZE: Final[int] = 16
"""Poly1305 tag size appended to or returned alongside the ciphertext."""

# =============================================================================
# Block Counter Allocation
# =============================================================================
#
# Block 0 is spent on the one-time Poly1305 key. Encryption starts at block 1
# so the MAC key never doubles as keystream.

KEYGEN_COUNTER: Final[int] = 0
"""ChaCha20 block whose first 32 bytes become the one-time Poly1305 key."""

ENCRYPTION_COUNTER: Final[int] = 1
"""ChaCha20 block counter of the first encryption block."""

MAX_DATA_SIZE: Final[int] = (COUNTER_LIMIT - ENCRYPTION_COUNTER) * BLOCK_SIZE
"""Largest plaintext in bytes: 2^32 - 1 blocks of 64 bytes (about 256 GiB)."""

# =============================================================================
# MAC Input Layout
# =============================================================================

PAD_ALIGNMENT: Final[int] = 16
"""AAD and ciphertext are each zero-padded to a multiple of this."""

# =============================================================================
# Domain-Specific Type Aliases
# =============================================================================

Key: TypeAlias = Bytes32
"""32-byte ChaCha20-Poly1305 key."""

Nonce: TypeAlias = Bytes12
"""12-byte nonce. Must never repeat under the same key."""
