"""
Shared pytest fixtures for chacha_poly tests.

Provides the RFC 8439 section 2.8.2 AEAD test vector used across modules.
"""

from __future__ import annotations

import pytest

from chacha_poly.types import Bytes12, Bytes32

SUNSCREEN = (
    b"Ladies and Gentlemen of the class of '99: "
    b"If I could offer you only one tip for the future, sunscreen would be it."
)
"""Plaintext used by several RFC 8439 examples."""


@pytest.fixture
def rfc_key() -> Bytes32:
    """RFC 8439 section 2.8.2 key: bytes 0x80..0x9f."""
    return Bytes32(bytes(range(0x80, 0xA0)))


@pytest.fixture
def rfc_nonce() -> Bytes12:
    """RFC 8439 section 2.8.2 nonce."""
    return Bytes12(bytes.fromhex("070000004041424344454647"))


@pytest.fixture
def rfc_aad() -> bytes:
    """RFC 8439 section 2.8.2 associated data."""
    return bytes.fromhex("50515253c0c1c2c3c4c5c6c7")


@pytest.fixture
def rfc_plaintext() -> bytes:
    """RFC 8439 section 2.8.2 plaintext."""
    return SUNSCREEN
