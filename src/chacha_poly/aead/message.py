"""Container for a sealed message: ciphertext plus its tag."""

from __future__ import annotations

from typing import Self

from chacha_poly.poly1305 import Tag
from chacha_poly.types import InvalidTagLength, StrictBaseModel

from .constants import TAG_SIZE


class SealedMessage(StrictBaseModel):
    """
    A ciphertext and the tag that authenticates it.

    The combined wire layout is `ciphertext || tag`, as used by TLS 1.3,
    Noise and most AEAD APIs. In JSON both fields are hex strings.
    """

    ciphertext: bytes
    """Encrypted data, same length as the plaintext."""

    tag: Tag
    """16-byte Poly1305 tag."""

    def to_bytes(self) -> bytes:
        """Serialize as `ciphertext || tag`."""
        return self.ciphertext + self.tag

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """
        Split a combined `ciphertext || tag` buffer.

        Raises:
            InvalidTagLength: If `data` is too short to contain a tag.
        """
        if len(data) < TAG_SIZE:
            raise InvalidTagLength(len(data), expected=TAG_SIZE)
        split = len(data) - TAG_SIZE
        return cls(ciphertext=bytes(data[:split]), tag=Tag(data[split:]))
