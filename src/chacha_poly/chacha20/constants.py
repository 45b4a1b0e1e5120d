"""
Constants for the ChaCha20 stream cipher.

Reference: https://datatracker.ietf.org/doc/html/rfc8439#section-2.3
"""

from __future__ import annotations

from typing import Final

# ===========================================================================
# Sizes
# ===========================================================================

KEY_SIZE: Final[int] = 32
"""Key length in bytes (256 bits, eight state words)."""

NONCE_SIZE: Final[int] = 12
"""Nonce length in bytes (96 bits, three state words)."""

BLOCK_SIZE: Final[int] = 64
"""Keystream block length in bytes (sixteen 32-bit words)."""

STATE_WORDS: Final[int] = 16
"""Number of 32-bit words in the ChaCha state."""

# ===========================================================================
# Word Arithmetic
# ===========================================================================

WORD_MASK: Final[int] = 0xFFFFFFFF
"""Mask reducing an integer modulo 2^32."""

COUNTER_LIMIT: Final[int] = 1 << 32
"""Exclusive upper bound of the block counter (it occupies one 32-bit word)."""

# ===========================================================================
# State Layout
# ===========================================================================
#
#   cccccccc  cccccccc  cccccccc  cccccccc
#   kkkkkkkk  kkkkkkkk  kkkkkkkk  kkkkkkkk
#   kkkkkkkk  kkkkkkkk  kkkkkkkk  kkkkkkkk
#   bbbbbbbb  nnnnnnnn  nnnnnnnn  nnnnnnnn
#
# c = constant, k = key, b = block counter, n = nonce.

CONSTANTS: Final[tuple[int, int, int, int]] = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)
"""The ASCII string "expand 32-byte k" read as four little-endian words."""

# ===========================================================================
# Rounds
# ===========================================================================

DOUBLE_ROUNDS: Final[int] = 10
"""Number of double-rounds (20 rounds in total)."""

COLUMN_ROUNDS: Final[tuple[tuple[int, int, int, int], ...]] = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
)
"""Quarter-round indices of a column round."""

DIAGONAL_ROUNDS: Final[tuple[tuple[int, int, int, int], ...]] = (
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)
"""Quarter-round indices of a diagonal round."""
