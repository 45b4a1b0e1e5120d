"""
Global configuration for the ChaCha20-Poly1305 package.

This module contains environment-specific settings. Cipher parameters are
fixed by RFC 8439 and are not configurable; only the execution strategy is.
"""

import os


def _read_positive_int(name: str, default: int) -> int:
    """Read a strictly positive integer from the environment."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(
            f"Invalid {name} environment variable: '{raw}'. Expected an integer."
        ) from None
    if value < 1:
        raise ValueError(f"Invalid {name} environment variable: '{raw}'. Must be at least 1.")
    return value


KEYSTREAM_WORKERS: int = _read_positive_int("CHACHA_POLY_WORKERS", 1)
"""
Default number of threads used to generate keystream blocks.

1 means sequential generation. Callers may override per call.
"""

PARALLEL_MIN_BLOCKS: int = _read_positive_int("CHACHA_POLY_PARALLEL_MIN_BLOCKS", 64)
"""
Minimum number of keystream blocks before work is spread across threads.

Below this size the thread pool costs more than it saves.
"""
