"""
Keyed ChaCha20-Poly1305 cipher object.

Holds one key and exposes the combined `ciphertext || tag` layout, the same
shape as `cryptography`'s `ChaCha20Poly1305`, so the two are interchangeable.
"""

from __future__ import annotations

from .constants import Key
from .construction import check_key, open_sealed, seal
from .message import SealedMessage


class ChaCha20Poly1305:
    """
    ChaCha20-Poly1305 AEAD bound to a single key.

    Example:
        >>> cipher = ChaCha20Poly1305(bytes(32))
        >>> nonce = bytes(12)
        >>> sealed = cipher.encrypt(nonce, b"attack at dawn", b"header")
        >>> cipher.decrypt(nonce, sealed, b"header")
        b'attack at dawn'
    """

    __slots__ = ("_key", "_workers")

    def __init__(self, key: bytes, *, workers: int | None = None) -> None:
        """
        Args:
            key: 32-byte key.
            workers: Threads for keystream generation. Defaults to the
                configured value.

        Raises:
            InvalidKeyLength: If `key` is not 32 bytes.
        """
        self._key: Key = check_key(key)
        self._workers = workers

    def __repr__(self) -> str:
        # Never print the key.
        return f"{type(self).__name__}(key=<redacted>)"

    def seal(
        self, nonce: bytes, data: bytes, associated_data: bytes | None = None
    ) -> SealedMessage:
        """Encrypt `data` and return the ciphertext and tag as a `SealedMessage`."""
        aad = associated_data or b""
        ciphertext, tag = seal(self._key, nonce, data, aad, workers=self._workers)
        return SealedMessage(ciphertext=ciphertext, tag=tag)

    def open(
        self, nonce: bytes, message: SealedMessage, associated_data: bytes | None = None
    ) -> bytes:
        """
        Verify and decrypt a `SealedMessage`.

        Raises:
            AuthenticationFailure: If the tag does not match.
        """
        return open_sealed(
            self._key,
            nonce,
            message.ciphertext,
            associated_data or b"",
            message.tag,
            workers=self._workers,
        )

    def encrypt(self, nonce: bytes, data: bytes, associated_data: bytes | None = None) -> bytes:
        """
        Encrypt `data`, returning `ciphertext || tag`.

        Args:
            nonce: 12-byte nonce, never reused with this key.
            data: Plaintext.
            associated_data: Authenticated, unencrypted data. None means empty.

        Returns:
            Ciphertext followed by the 16-byte tag.
        """
        return self.seal(nonce, data, associated_data).to_bytes()

    def decrypt(self, nonce: bytes, data: bytes, associated_data: bytes | None = None) -> bytes:
        """
        Verify and decrypt `ciphertext || tag`.

        Raises:
            InvalidTagLength: If `data` is shorter than a tag.
            AuthenticationFailure: If the tag does not match.
        """
        return self.open(nonce, SealedMessage.from_bytes(data), associated_data)
