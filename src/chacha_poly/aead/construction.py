"""
The ChaCha20-Poly1305 AEAD construction.

Sealing a message:
    1. One-time Poly1305 key = first 32 bytes of ChaCha20 block 0.
    2. Ciphertext = plaintext XOR keystream starting at block 1.
    3. Tag = Poly1305 over:

        aad  || zeros to 16-byte boundary
        ct   || zeros to 16-byte boundary
        len(aad) as 8 bytes little-endian
        len(ct)  as 8 bytes little-endian

Opening reverses the order: the tag is recomputed and checked first, and the
ciphertext is decrypted only if it matches. A failed check releases nothing.

Nonce uniqueness is the caller's responsibility. Reusing a (key, nonce) pair
for two messages leaks their XOR and the Poly1305 key.

Reference: https://datatracker.ietf.org/doc/html/rfc8439#section-2.8
"""

from __future__ import annotations

import logging
import struct
from typing import Iterator

from chacha_poly.chacha20 import apply_keystream, blocks_needed, chacha20_block
from chacha_poly.poly1305 import Poly1305, Tag, verify_tag
from chacha_poly.types import (
    AuthenticationFailure,
    CounterOverflow,
    InvalidKeyLength,
    InvalidNonceLength,
    InvalidTagLength,
    wipe,
)

from .constants import (
    ENCRYPTION_COUNTER,
    KEY_SIZE,
    KEYGEN_COUNTER,
    MAX_DATA_SIZE,
    NONCE_SIZE,
    PAD_ALIGNMENT,
    TAG_SIZE,
    Key,
    Nonce,
)

logger = logging.getLogger(__name__)

_LENGTHS = struct.Struct("<QQ")
"""Trailing length fields: len(aad) then len(ciphertext), each 64-bit little-endian."""


def check_key(key: bytes) -> Key:
    """
    Validate and wrap a key.

    Raises:
        TypeError: If `key` is not bytes-like (text keys are refused).
        InvalidKeyLength: If `key` is not 32 bytes.
    """
    data = bytes(memoryview(key))
    if len(data) != KEY_SIZE:
        raise InvalidKeyLength(len(data), expected=KEY_SIZE)
    return Key(data)


def check_nonce(nonce: bytes) -> Nonce:
    """
    Validate and wrap a nonce.

    Raises:
        TypeError: If `nonce` is not bytes-like.
        InvalidNonceLength: If `nonce` is not 12 bytes.
    """
    data = bytes(memoryview(nonce))
    if len(data) != NONCE_SIZE:
        raise InvalidNonceLength(len(data), expected=NONCE_SIZE)
    return Nonce(data)


def _check_data_size(length: int) -> None:
    """Reject data that would exhaust the block counter, before any work is done."""
    if length > MAX_DATA_SIZE:
        raise CounterOverflow(ENCRYPTION_COUNTER, blocks_needed(length))


def poly1305_key_gen(key: bytes, nonce: bytes) -> bytearray:
    """
    Derive the one-time Poly1305 key for a (key, nonce) pair.

    Returns:
        A 32-byte mutable buffer. The caller should `wipe` it after use.
    """
    block = bytearray(chacha20_block(key, KEYGEN_COUNTER, nonce))
    one_time_key = block[:32]
    wipe(block)
    return one_time_key


def pad16(data: bytes) -> bytes:
    """Zero bytes that bring `data` up to a multiple of 16 (empty if aligned)."""
    return bytes(-len(data) % PAD_ALIGNMENT)


def _mac_segments(aad: bytes, ciphertext: bytes) -> Iterator[bytes]:
    """Yield the pieces of the MAC input in order."""
    yield aad
    yield pad16(aad)
    yield ciphertext
    yield pad16(ciphertext)
    yield _LENGTHS.pack(len(aad), len(ciphertext))


def mac_data(aad: bytes, ciphertext: bytes) -> bytes:
    """
    Assemble the full Poly1305 input for `aad` and `ciphertext`.

    Both lengths are written as complete 64-bit integers.
    """
    return b"".join(_mac_segments(aad, ciphertext))


def compute_tag(key: bytes, nonce: bytes, aad: bytes, ciphertext: bytes) -> Tag:
    """
    Compute the AEAD tag over `aad` and `ciphertext`.

    The MAC input is streamed into Poly1305 rather than concatenated.
    """
    one_time_key = poly1305_key_gen(key, nonce)
    try:
        mac = Poly1305(one_time_key)
        for segment in _mac_segments(aad, ciphertext):
            mac.update(segment)
        return mac.finalize()
    finally:
        wipe(one_time_key)


def seal(
    key: bytes,
    nonce: bytes,
    plaintext: bytes,
    aad: bytes = b"",
    *,
    workers: int | None = None,
) -> tuple[bytes, Tag]:
    """
    Encrypt and authenticate `plaintext`, binding `aad` to it.

    Args:
        key: 32-byte key.
        nonce: 12-byte nonce, never reused with the same key.
        plaintext: Data to encrypt.
        aad: Associated data, authenticated but not encrypted.
        workers: Threads for keystream generation (see `apply_keystream`).

    Returns:
        (ciphertext, tag). The ciphertext has the same length as `plaintext`.

    Raises:
        TypeError: If `key` or `nonce` is not bytes-like.
        InvalidKeyLength: If `key` is not 32 bytes.
        InvalidNonceLength: If `nonce` is not 12 bytes.
        CounterOverflow: If `plaintext` is longer than `MAX_DATA_SIZE`.
    """
    key = check_key(key)
    nonce = check_nonce(nonce)
    _check_data_size(len(plaintext))

    ciphertext = apply_keystream(key, ENCRYPTION_COUNTER, nonce, plaintext, workers=workers)
    tag = compute_tag(key, nonce, aad, ciphertext)
    return ciphertext, tag


def open_sealed(
    key: bytes,
    nonce: bytes,
    ciphertext: bytes,
    aad: bytes,
    tag: bytes,
    *,
    workers: int | None = None,
) -> bytes:
    """
    Verify `tag` and, only if it is valid, decrypt `ciphertext`.

    Args:
        key: 32-byte key used to seal.
        nonce: 12-byte nonce used to seal.
        ciphertext: Data returned by `seal`.
        aad: The associated data given to `seal`.
        tag: The 16-byte tag returned by `seal`.
        workers: Threads for keystream generation (see `apply_keystream`).

    Returns:
        The plaintext.

    Raises:
        TypeError: If `key`, `nonce` or `tag` is not bytes-like.
        InvalidKeyLength: If `key` is not 32 bytes.
        InvalidNonceLength: If `nonce` is not 12 bytes.
        InvalidTagLength: If `tag` is not 16 bytes.
        CounterOverflow: If `ciphertext` is longer than `MAX_DATA_SIZE`.
        AuthenticationFailure: If the tag does not match. Nothing is decrypted.
    """
    key = check_key(key)
    nonce = check_nonce(nonce)
    tag = bytes(memoryview(tag))
    if len(tag) != TAG_SIZE:
        raise InvalidTagLength(len(tag), expected=TAG_SIZE)
    _check_data_size(len(ciphertext))

    # Tag first. A rejected ciphertext is never decrypted.
    expected = compute_tag(key, nonce, aad, ciphertext)
    if not verify_tag(expected, tag):
        logger.debug(
            "Rejected ciphertext: tag mismatch (ciphertext %d bytes, aad %d bytes)",
            len(ciphertext),
            len(aad),
        )
        raise AuthenticationFailure()

    return apply_keystream(key, ENCRYPTION_COUNTER, nonce, ciphertext, workers=workers)
