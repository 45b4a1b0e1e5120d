"""
Poly1305 one-time authenticator (RFC 8439 section 2.5).

Usage::

    from chacha_poly.poly1305 import poly1305_mac

    tag = poly1305_mac(one_time_key, message)
"""

from __future__ import annotations

from .constants import BLOCK_SIZE, CLAMP_MASK, KEY_SIZE, TAG_SIZE, P, Tag
from .mac import Poly1305, clamp, poly1305_mac, verify_tag

__all__ = [
    # Authenticator
    "Poly1305",
    "poly1305_mac",
    "clamp",
    "verify_tag",
    # Constants
    "P",
    "CLAMP_MASK",
    "BLOCK_SIZE",
    "KEY_SIZE",
    "TAG_SIZE",
    # Type aliases
    "Tag",
]
