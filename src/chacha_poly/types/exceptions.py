"""Exception hierarchy for the ChaCha20-Poly1305 construction."""

from __future__ import annotations


class ChaChaPolyError(Exception):
    """
    Base exception for all ChaCha20-Poly1305 errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class ChaChaPolyValueError(ChaChaPolyError):
    """
    Base class for precondition violations.

    Raised before any cryptographic computation takes place.
    """


class InvalidLength(ChaChaPolyValueError):
    """
    Raised when a fixed-size input has the wrong number of bytes.

    Attributes:
        name: What the input is (e.g. "key", "nonce").
        expected: The required length in bytes.
        actual: The length that was supplied.
    """

    NAME: str = "input"
    """Default input name used in the message (overridden by subclasses)."""

    def __init__(self, actual: int, *, expected: int) -> None:
        self.name = self.NAME
        self.expected = expected
        self.actual = actual

        super().__init__(f"{self.name} must be exactly {expected} bytes, got {actual}")


class InvalidKeyLength(InvalidLength):
    """Raised when a key is not 32 bytes."""

    NAME = "key"


class InvalidNonceLength(InvalidLength):
    """Raised when a nonce is not 12 bytes."""

    NAME = "nonce"


class InvalidTagLength(InvalidLength):
    """
    Raised when a tag is not 16 bytes.

    Also raised when a combined `ciphertext || tag` buffer is shorter than a tag.
    """

    NAME = "tag"


class CounterOverflow(ChaChaPolyValueError):
    """
    Raised when a keystream request would run past the 32-bit block counter.

    The counter never wraps: wrapping would repeat keystream under the same nonce.

    Attributes:
        counter: The starting block counter.
        blocks: Number of blocks the request needs.
    """

    def __init__(self, counter: int, blocks: int) -> None:
        self.counter = counter
        self.blocks = blocks

        super().__init__(
            f"{blocks} keystream blocks starting at counter {counter} "
            "exceed the 32-bit block counter"
        )


class AuthenticationFailure(ChaChaPolyError):
    """
    Raised when a tag does not match the ciphertext and associated data.

    The message is fixed. It says nothing about which bytes differed, and no
    plaintext is attached.
    """

    def __init__(self) -> None:
        super().__init__("Authentication failed: tag does not match")


class AlreadyFinalized(ChaChaPolyError):
    """Raised when an incremental authenticator is used after producing its tag."""

    def __init__(self) -> None:
        super().__init__("Authenticator has already been finalized")
