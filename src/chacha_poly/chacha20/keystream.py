"""
ChaCha20 keystream generation and encryption.

Encryption XORs the data with consecutive keystream blocks:

    block i  =  chacha20_block(key, counter + i, nonce)
    out      =  data XOR (block 0 || block 1 || ...)[:len(data)]

XOR is its own inverse, so the same call both encrypts and decrypts.

Each block depends only on its own counter, so blocks can be generated in any
order or in parallel. The output is always reassembled in counter order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial

from chacha_poly import config
from chacha_poly.types import CounterOverflow, InvalidKeyLength, InvalidNonceLength, wipe

from .block import chacha20_block
from .constants import BLOCK_SIZE, COUNTER_LIMIT, KEY_SIZE, NONCE_SIZE

logger = logging.getLogger(__name__)


def blocks_needed(length: int) -> int:
    """Number of 64-byte keystream blocks that cover `length` bytes."""
    return -(-length // BLOCK_SIZE)


def keystream(
    key: bytes,
    counter: int,
    nonce: bytes,
    length: int,
    *,
    workers: int | None = None,
) -> bytearray:
    """
    Produce the first `length` bytes of keystream starting at block `counter`.

    Args:
        key: 32-byte key.
        counter: Block counter of the first block.
        nonce: 12-byte nonce.
        length: Number of keystream bytes wanted.
        workers: Threads used for block generation. Defaults to
            `config.KEYSTREAM_WORKERS`.

    Returns:
        A mutable buffer holding the keystream. The caller owns it and should
        `wipe` it once used.

    Raises:
        InvalidKeyLength: If `key` is not 32 bytes.
        InvalidNonceLength: If `nonce` is not 12 bytes.
        CounterOverflow: If the request runs past counter 2^32 - 1.
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(len(key), expected=KEY_SIZE)
    if len(nonce) != NONCE_SIZE:
        raise InvalidNonceLength(len(nonce), expected=NONCE_SIZE)

    count = blocks_needed(length)

    # The counter never wraps into the nonce word.
    if not (0 <= counter < COUNTER_LIMIT) or counter + count > COUNTER_LIMIT:
        raise CounterOverflow(counter, count)

    if workers is None:
        workers = config.KEYSTREAM_WORKERS
    counters = range(counter, counter + count)
    generate = partial(chacha20_block, key, nonce=nonce)

    stream = bytearray()
    if workers > 1 and count >= config.PARALLEL_MIN_BLOCKS:
        logger.debug("Generating %d keystream blocks across %d workers", count, workers)
        # map() yields results in submission order, i.e. counter order.
        with ThreadPoolExecutor(max_workers=workers) as executor:
            for block in executor.map(generate, counters):
                stream.extend(block)
    else:
        for block_counter in counters:
            stream.extend(generate(block_counter))

    # Drop the unused tail of the final block.
    del stream[length:]
    return stream


def apply_keystream(
    key: bytes,
    counter: int,
    nonce: bytes,
    data: bytes,
    *,
    workers: int | None = None,
) -> bytes:
    """
    XOR `data` with the ChaCha20 keystream starting at block `counter`.

    Applying it twice with the same key, counter and nonce returns the
    original data.

    Args:
        key: 32-byte key.
        counter: Block counter of the first block.
        nonce: 12-byte nonce.
        data: Plaintext or ciphertext of any length.
        workers: Threads used for block generation (see `keystream`).

    Returns:
        Bytes of the same length as `data`.

    Raises:
        InvalidKeyLength: If `key` is not 32 bytes.
        InvalidNonceLength: If `nonce` is not 12 bytes.
        CounterOverflow: If `data` needs blocks past counter 2^32 - 1.
    """
    length = len(data)
    stream = keystream(key, counter, nonce, length, workers=workers)
    try:
        if length == 0:
            return b""
        # Whole-buffer XOR through integers. Same result as a byte loop.
        mixed = int.from_bytes(data, "little") ^ int.from_bytes(stream, "little")
        return mixed.to_bytes(length, "little")
    finally:
        wipe(stream)
