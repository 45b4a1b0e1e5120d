"""
The ChaCha20 block function.

One block turns (key, counter, nonce) into 64 pseudorandom bytes.


THE STATE
---------
Sixteen 32-bit words laid out as a 4x4 matrix:

    0   1   2   3       constants
    4   5   6   7       key
    8   9  10  11       key
   12  13  14  15       counter, nonce

All arithmetic is on 32-bit words: addition modulo 2^32, XOR, and rotation.
None of these branch on the data, so the running time does not depend on the
key or nonce.


THE ROUNDS
----------
A double-round is four quarter-rounds down the columns followed by four
along the diagonals. Twenty rounds is ten double-rounds.

After the rounds, the original state is added back word by word. Without
this step the rounds could be run backwards to recover the key.


Reference: https://datatracker.ietf.org/doc/html/rfc8439#section-2.3
"""

from __future__ import annotations

import struct

from chacha_poly.types import CounterOverflow, InvalidKeyLength, InvalidNonceLength

from .constants import (
    COLUMN_ROUNDS,
    CONSTANTS,
    COUNTER_LIMIT,
    DIAGONAL_ROUNDS,
    DOUBLE_ROUNDS,
    KEY_SIZE,
    NONCE_SIZE,
    STATE_WORDS,
    WORD_MASK,
)

_KEY_WORDS = struct.Struct("<8I")
_NONCE_WORDS = struct.Struct("<3I")
_STATE_BYTES = struct.Struct(f"<{STATE_WORDS}I")


def rotl32(value: int, shift: int) -> int:
    """Rotate a 32-bit word left by `shift` bits."""
    return ((value << shift) & WORD_MASK) | (value >> (32 - shift))


def quarter_round(state: list[int], a: int, b: int, c: int, d: int) -> None:
    """
    Apply the ChaCha quarter-round to four words of `state`, in place.

    Args:
        state: The 16-word working state.
        a, b, c, d: Indices of the four words to mix.
    """
    state[a] = (state[a] + state[b]) & WORD_MASK
    state[d] = rotl32(state[d] ^ state[a], 16)

    state[c] = (state[c] + state[d]) & WORD_MASK
    state[b] = rotl32(state[b] ^ state[c], 12)

    state[a] = (state[a] + state[b]) & WORD_MASK
    state[d] = rotl32(state[d] ^ state[a], 8)

    state[c] = (state[c] + state[d]) & WORD_MASK
    state[b] = rotl32(state[b] ^ state[c], 7)


def initial_state(key: bytes, counter: int, nonce: bytes) -> list[int]:
    """
    Build the 16-word ChaCha state for one block.

    Args:
        key: 32-byte key.
        counter: 32-bit block counter.
        nonce: 12-byte nonce.

    Returns:
        The state words: 4 constants, 8 key words, the counter, 3 nonce words.

    Raises:
        InvalidKeyLength: If `key` is not 32 bytes.
        InvalidNonceLength: If `nonce` is not 12 bytes.
        CounterOverflow: If `counter` does not fit in 32 bits.
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(len(key), expected=KEY_SIZE)
    if len(nonce) != NONCE_SIZE:
        raise InvalidNonceLength(len(nonce), expected=NONCE_SIZE)
    if not (0 <= counter < COUNTER_LIMIT):
        raise CounterOverflow(counter, 1)

    return [*CONSTANTS, *_KEY_WORDS.unpack(key), counter, *_NONCE_WORDS.unpack(nonce)]


def chacha20_block(key: bytes, counter: int, nonce: bytes) -> bytes:
    """
    Compute one 64-byte ChaCha20 keystream block.

    Pure function: the same inputs always give the same block.

    Args:
        key: 32-byte key.
        counter: 32-bit block counter.
        nonce: 12-byte nonce.

    Returns:
        The little-endian serialization of (rounds(state) + state).
    """
    state = initial_state(key, counter, nonce)
    working = state.copy()

    for _ in range(DOUBLE_ROUNDS):
        for a, b, c, d in COLUMN_ROUNDS:
            quarter_round(working, a, b, c, d)
        for a, b, c, d in DIAGONAL_ROUNDS:
            quarter_round(working, a, b, c, d)

    # Feed-forward: makes the block function non-invertible.
    return _STATE_BYTES.pack(*((w + s) & WORD_MASK for w, s in zip(working, state)))
