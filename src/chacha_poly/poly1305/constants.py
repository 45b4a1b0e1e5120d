"""
Constants for the Poly1305 one-time authenticator.

Reference: https://datatracker.ietf.org/doc/html/rfc8439#section-2.5
"""

from __future__ import annotations

from typing import Final, TypeAlias

from chacha_poly.types import Bytes16

# =============================================================================
# Field Constants
# =============================================================================

P: Final[int] = (1 << 130) - 5
"""The Poly1305 prime: P = 2^130 - 5."""

TAG_MODULUS: Final[int] = 1 << 128
"""The final tag is taken modulo 2^128."""

# =============================================================================
# Sizes
# =============================================================================

KEY_SIZE: Final[int] = 32
"""One-time key length in bytes: 16 bytes of `r` followed by 16 bytes of `s`."""

HALF_KEY_SIZE: Final[int] = 16
"""Length of each of the `r` and `s` halves."""

BLOCK_SIZE: Final[int] = 16
"""Message bytes absorbed per multiplication."""

TAG_SIZE: Final[int] = 16
"""Authentication tag length in bytes."""

# =============================================================================
# Clamping
# =============================================================================
#
# Clearing these bits keeps every 32-bit limb of r small enough that the
# products in an optimized limb implementation never overflow 64 bits.
#
#   bytes 3, 7, 11, 15: top four bits cleared   (& 0x0F)
#   bytes 4, 8, 12:     bottom two bits cleared (& 0xFC)

CLAMP_MASK: Final[int] = 0x0FFFFFFC0FFFFFFC0FFFFFFC0FFFFFFF
"""Little-endian integer mask applied to `r`."""

# =============================================================================
# Domain-Specific Type Aliases
# =============================================================================

Tag: TypeAlias = Bytes16
"""16-byte Poly1305 authentication tag."""
