"""Reusable type definitions for the ChaCha20-Poly1305 construction."""

from .base import StrictBaseModel
from .byte_arrays import Bytes12, Bytes16, Bytes32
from .exceptions import (
    AlreadyFinalized,
    AuthenticationFailure,
    ChaChaPolyError,
    ChaChaPolyValueError,
    CounterOverflow,
    InvalidKeyLength,
    InvalidLength,
    InvalidNonceLength,
    InvalidTagLength,
)
from .memory import wipe

__all__ = [
    # Core types
    "Bytes12",
    "Bytes16",
    "Bytes32",
    "StrictBaseModel",
    # Secret handling
    "wipe",
    # Exceptions
    "ChaChaPolyError",
    "ChaChaPolyValueError",
    "InvalidLength",
    "InvalidKeyLength",
    "InvalidNonceLength",
    "InvalidTagLength",
    "CounterOverflow",
    "AuthenticationFailure",
    "AlreadyFinalized",
]
