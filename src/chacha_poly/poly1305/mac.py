"""
The Poly1305 one-time authenticator.

Poly1305 evaluates a polynomial in `r` over the message blocks, modulo the
prime 2^130 - 5, and masks the result with `s`:

    acc = 0
    for each 16-byte block m_i:
        acc = (acc + (m_i || 0x01)) * r   mod 2^130 - 5
    tag = (acc + s)   mod 2^128

The 0x01 byte is appended after the bytes actually present. A short final
block is therefore distinguishable from a full block padded with zeros.

Only `acc` carries over between blocks, so the message can be fed in pieces
and never needs to be held in memory as a whole.

A key must authenticate exactly one message. Two tags under the same key
reveal enough to forge a third.

Reference: https://datatracker.ietf.org/doc/html/rfc8439#section-2.5
"""

from __future__ import annotations

import hmac

from chacha_poly.types import (
    AlreadyFinalized,
    AuthenticationFailure,
    InvalidKeyLength,
    InvalidTagLength,
    wipe,
)

from .constants import (
    BLOCK_SIZE,
    CLAMP_MASK,
    HALF_KEY_SIZE,
    KEY_SIZE,
    TAG_MODULUS,
    TAG_SIZE,
    P,
    Tag,
)


def clamp(r: bytes) -> bytes:
    """
    Clear the bits of `r` that RFC 8439 requires to be zero.

    Args:
        r: The 16-byte multiplier half of a one-time key.

    Returns:
        The clamped 16 bytes.

    Raises:
        ValueError: If `r` is not 16 bytes.
    """
    if len(r) != HALF_KEY_SIZE:
        raise ValueError(f"r must be {HALF_KEY_SIZE} bytes, got {len(r)}")
    value = int.from_bytes(r, "little") & CLAMP_MASK
    return value.to_bytes(HALF_KEY_SIZE, "little")


def verify_tag(expected: bytes, received: bytes) -> bool:
    """
    Compare two tags in constant time.

    Every byte is inspected whatever the position of the first difference.
    """
    return hmac.compare_digest(bytes(expected), bytes(received))


class Poly1305:
    """
    Incremental Poly1305 authenticator.

    Feed data with `update` in chunks of any size, then call `finalize` (or
    `verify`) once. The instance cannot be reused afterwards.

    Example:
        >>> mac = Poly1305(bytes(32))
        >>> mac.update(b"hello ")
        >>> mac.update(b"world")
        >>> len(mac.finalize())
        16
    """

    __slots__ = ("_r", "_s", "_accumulator", "_pending", "_finalized")

    def __init__(self, key: bytes) -> None:
        """
        Start a new authenticator.

        Args:
            key: 32-byte one-time key, `r || s`.

        Raises:
            InvalidKeyLength: If `key` is not 32 bytes.
        """
        if len(key) != KEY_SIZE:
            raise InvalidKeyLength(len(key), expected=KEY_SIZE)

        self._r = int.from_bytes(clamp(key[:HALF_KEY_SIZE]), "little")
        self._s = int.from_bytes(key[HALF_KEY_SIZE:], "little")
        self._accumulator = 0
        self._pending = bytearray()
        self._finalized = False

    def _absorb(self, block: bytes | bytearray | memoryview) -> None:
        """Fold one block (at most 16 bytes) into the accumulator."""
        # The set bit just above the last byte is the appended 0x01.
        n = int.from_bytes(block, "little") | (1 << (8 * len(block)))
        self._accumulator = ((self._accumulator + n) * self._r) % P

    def update(self, data: bytes) -> None:
        """
        Absorb more message bytes.

        Full blocks are read in place from `data`. Only an incomplete
        trailing block is copied and held until the next call.

        Raises:
            AlreadyFinalized: If the tag has already been produced.
        """
        if self._finalized:
            raise AlreadyFinalized()

        view = memoryview(data).cast("B")
        pending = self._pending

        # Top up a block left over from the previous call.
        if pending:
            needed = BLOCK_SIZE - len(pending)
            pending.extend(view[:needed])
            view = view[needed:]
            if len(pending) < BLOCK_SIZE:
                return
            self._absorb(pending)
            wipe(pending)
            del pending[:]

        full = len(view) - len(view) % BLOCK_SIZE
        for offset in range(0, full, BLOCK_SIZE):
            self._absorb(view[offset : offset + BLOCK_SIZE])
        pending.extend(view[full:])

    def finalize(self) -> Tag:
        """
        Produce the 16-byte tag and clear the key material.

        Raises:
            AlreadyFinalized: If called a second time.
        """
        if self._finalized:
            raise AlreadyFinalized()
        self._finalized = True

        if self._pending:
            self._absorb(self._pending)
            wipe(self._pending)

        tag = ((self._accumulator + self._s) % TAG_MODULUS).to_bytes(TAG_SIZE, "little")
        self._r = self._s = self._accumulator = 0
        return Tag(tag)

    def verify(self, tag: bytes) -> None:
        """
        Finalize and check the result against `tag` in constant time.

        Raises:
            InvalidTagLength: If `tag` is not 16 bytes.
            AuthenticationFailure: If the tags differ.
            AlreadyFinalized: If the tag has already been produced.
        """
        if len(tag) != TAG_SIZE:
            raise InvalidTagLength(len(tag), expected=TAG_SIZE)
        if not verify_tag(self.finalize(), tag):
            raise AuthenticationFailure()


def poly1305_mac(key: bytes, message: bytes) -> Tag:
    """
    Compute the Poly1305 tag of `message` in one call.

    Args:
        key: 32-byte one-time key.
        message: The data to authenticate.

    Returns:
        The 16-byte tag.
    """
    mac = Poly1305(key)
    mac.update(message)
    return mac.finalize()
