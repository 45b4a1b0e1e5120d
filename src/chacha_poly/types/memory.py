"""Clearing of secret scratch buffers."""

from __future__ import annotations


def wipe(buffer: bytearray) -> None:
    """
    Overwrite a mutable buffer with zeros, in place.

    Only mutable buffers can be cleared. Immutable `bytes` objects derived
    from a secret stay alive until garbage collected, so code that handles
    secrets keeps them in `bytearray` scratch space for as long as possible.

    Args:
        buffer: The buffer to clear. Its length is unchanged.
    """
    buffer[:] = bytes(len(buffer))
