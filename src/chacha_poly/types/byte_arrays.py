"""
Fixed-length byte strings for keys, nonces and tags.

Each type is a `bytes` subclass whose length is checked on construction, so a
value can go anywhere plain `bytes` is accepted. Only binary input is taken:
text, hex or otherwise, is refused with `TypeError`.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


class BaseBytes(bytes):
    """
    Immutable byte string of exactly `LENGTH` bytes.

    Accepts any object exposing the buffer protocol (`bytes`, `bytearray`,
    `memoryview`). In pydantic models the value validates as bytes of the
    right length and serializes to hex in JSON.
    """

    LENGTH: ClassVar[int]
    """Required length in bytes (set by subclasses)."""

    def __new__(cls, value: Any) -> Self:
        """
        Args:
            value: A bytes-like object of exactly `LENGTH` bytes.

        Raises:
            TypeError: If `value` is not bytes-like (e.g. a `str`).
            ValueError: If the length is wrong.
        """
        data = bytes(memoryview(value))
        if len(data) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} needs {cls.LENGTH} bytes, got {len(data)}")
        return super().__new__(cls, data)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Length is enforced by the bytes schema, then the value is wrapped.
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.bytes_schema(min_length=cls.LENGTH, max_length=cls.LENGTH),
            serialization=core_schema.plain_serializer_function_ser_schema(
                bytes.hex, when_used="json"
            ),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"


class Bytes12(BaseBytes):
    """12 bytes: a ChaCha20 nonce."""

    LENGTH = 12


class Bytes16(BaseBytes):
    """16 bytes: a Poly1305 tag or either half of its key."""

    LENGTH = 16


class Bytes32(BaseBytes):
    """32 bytes: a ChaCha20 key or a one-time Poly1305 key."""

    LENGTH = 32
