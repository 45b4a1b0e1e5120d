"""
ChaCha20 stream cipher (RFC 8439 section 2.4).

Usage::

    from chacha_poly.chacha20 import apply_keystream

    ciphertext = apply_keystream(key, 1, nonce, plaintext)
    plaintext = apply_keystream(key, 1, nonce, ciphertext)
"""

from __future__ import annotations

from .block import chacha20_block, initial_state, quarter_round, rotl32
from .constants import BLOCK_SIZE, COUNTER_LIMIT, KEY_SIZE, NONCE_SIZE
from .keystream import apply_keystream, blocks_needed, keystream

__all__ = [
    # Block function
    "chacha20_block",
    "initial_state",
    "quarter_round",
    "rotl32",
    # Stream
    "apply_keystream",
    "keystream",
    "blocks_needed",
    # Constants
    "BLOCK_SIZE",
    "COUNTER_LIMIT",
    "KEY_SIZE",
    "NONCE_SIZE",
]
