"""
Tests for the Poly1305 authenticator.

Test vectors from RFC 8439 section 2.5.2 and Appendix A.3. Random inputs are
also checked against the `cryptography` package's Poly1305.
"""

from __future__ import annotations

import pytest
from cryptography.hazmat.primitives import poly1305 as reference
from hypothesis import given
from hypothesis import strategies as st

from chacha_poly.poly1305 import CLAMP_MASK, P, Poly1305, clamp, poly1305_mac, verify_tag
from chacha_poly.types import (
    AlreadyFinalized,
    AuthenticationFailure,
    Bytes16,
    InvalidKeyLength,
    InvalidTagLength,
)

RFC_KEY = bytes.fromhex("85d6be7857556d337f4452fe42d506a80103808afb0db2fd4abff6af4149f51b")
RFC_MESSAGE = b"Cryptographic Forum Research Group"
RFC_TAG = bytes.fromhex("a8061dc1305136c6c22b8baf0c0127a9")

keys = st.binary(min_size=32, max_size=32)


class TestConstants:
    """Field constants."""

    def test_prime(self) -> None:
        """P is 2^130 - 5."""
        assert P == 0x3FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFB

    def test_clamp_mask_clears_required_bits(self) -> None:
        """The mask matches the byte-wise clamping rule."""
        mask = CLAMP_MASK.to_bytes(16, "little")
        for i in (3, 7, 11, 15):
            assert mask[i] == 0x0F
        for i in (4, 8, 12):
            assert mask[i] == 0xFC


class TestClamp:
    """Clamping of the `r` half."""

    def test_all_ones(self) -> None:
        """Clamping 0xff... clears exactly the specified bits."""
        assert clamp(b"\xff" * 16) == bytes.fromhex("ffffff0ffcffff0ffcffff0ffcffff0f")

    def test_rfc8439_section_2_5_2(self) -> None:
        """The clamped r of section 2.5.2 is 0x806d5400e52447c036d555408bed685."""
        clamped = clamp(RFC_KEY[:16])
        assert int.from_bytes(clamped, "little") == 0x806D5400E52447C036D555408BED685

    def test_zero_is_fixed_point(self) -> None:
        """Clamping never sets bits."""
        assert clamp(bytes(16)) == bytes(16)

    @given(r=st.binary(min_size=16, max_size=16))
    def test_idempotent(self, r: bytes) -> None:
        """Clamping twice is the same as clamping once."""
        assert clamp(clamp(r)) == clamp(r)

    @pytest.mark.parametrize("length", [0, 15, 17, 32])
    def test_rejects_wrong_length(self, length: int) -> None:
        """Only the 16-byte half is clamped."""
        with pytest.raises(ValueError):
            clamp(bytes(length))


class TestPoly1305Mac:
    """One-shot tag computation."""

    def test_rfc8439_section_2_5_2(self) -> None:
        """RFC 8439 section 2.5.2 test vector."""
        assert poly1305_mac(RFC_KEY, RFC_MESSAGE) == RFC_TAG

    def test_returns_tag_type(self) -> None:
        """Tags are 16-byte fixed-size values."""
        tag = poly1305_mac(RFC_KEY, RFC_MESSAGE)
        assert isinstance(tag, Bytes16)
        assert len(tag) == 16

    def test_rfc8439_a_3_vector_1(self) -> None:
        """A.3 #1: an all-zero key gives an all-zero tag."""
        assert poly1305_mac(bytes(32), bytes(64)) == bytes(16)

    def test_rfc8439_a_3_vector_5(self) -> None:
        """A.3 #5: r = 2, message 0xff * 16 wraps the accumulator to 3."""
        key = b"\x02" + bytes(31)
        assert poly1305_mac(key, b"\xff" * 16) == b"\x03" + bytes(15)

    def test_rfc8439_a_3_vector_6(self) -> None:
        """A.3 #6: s = 0xff * 16 makes the final addition wrap modulo 2^128."""
        key = b"\x02" + bytes(15) + b"\xff" * 16
        message = b"\x02" + bytes(15)
        assert poly1305_mac(key, message) == b"\x03" + bytes(15)

    def test_empty_message_tag_is_s(self) -> None:
        """With no blocks the accumulator stays 0 and the tag is `s`."""
        key = bytes(range(32))
        assert poly1305_mac(key, b"") == key[16:]

    def test_short_block_is_not_zero_padded(self) -> None:
        """A short final block differs from the same bytes padded with zeros."""
        key = RFC_KEY
        assert poly1305_mac(key, b"abc") != poly1305_mac(key, b"abc" + bytes(13))

    @given(key=keys, message=st.binary(max_size=200))
    def test_matches_reference(self, key: bytes, message: bytes) -> None:
        """Tags agree with the `cryptography` Poly1305 implementation."""
        assert poly1305_mac(key, message) == reference.Poly1305.generate_tag(key, message)

    @pytest.mark.parametrize("key_len", [0, 16, 31, 33])
    def test_rejects_wrong_key_length(self, key_len: int) -> None:
        """One-time keys are exactly 32 bytes."""
        with pytest.raises(InvalidKeyLength) as exc_info:
            poly1305_mac(bytes(key_len), b"message")
        assert exc_info.value.actual == key_len
        assert exc_info.value.expected == 32


class TestIncrementalPoly1305:
    """Streaming use of the authenticator."""

    def test_rfc_vector_in_pieces(self) -> None:
        """Feeding the section 2.5.2 message in odd pieces gives the same tag."""
        mac = Poly1305(RFC_KEY)
        mac.update(RFC_MESSAGE[:5])
        mac.update(RFC_MESSAGE[5:21])
        mac.update(b"")
        mac.update(RFC_MESSAGE[21:])
        assert mac.finalize() == RFC_TAG

    @given(
        key=keys,
        message=st.binary(max_size=200),
        cuts=st.lists(st.integers(min_value=0, max_value=200), max_size=8),
    )
    def test_chunking_does_not_change_tag(
        self, key: bytes, message: bytes, cuts: list[int]
    ) -> None:
        """Any split of the message gives the one-shot tag."""
        bounds = sorted({0, len(message), *(c for c in cuts if c <= len(message))})
        mac = Poly1305(key)
        for start, end in zip(bounds, bounds[1:]):
            mac.update(message[start:end])
        assert mac.finalize() == poly1305_mac(key, message)

    @pytest.mark.parametrize(
        "sizes",
        [[1000], [5, 1000], [15, 1], [16, 16, 3], [7, 9, 33]],
    )
    def test_only_trailing_partial_block_is_buffered(self, sizes: list[int]) -> None:
        """After each update at most one incomplete block is held back."""
        mac = Poly1305(RFC_KEY)
        total = 0
        for size in sizes:
            mac.update(bytes(size))
            total += size
            assert len(mac._pending) == total % 16

    def test_accepts_memoryview_and_bytearray(self) -> None:
        """Any bytes-like input is absorbed without copying it first."""
        mac = Poly1305(RFC_KEY)
        mac.update(memoryview(RFC_MESSAGE)[:20])
        mac.update(bytearray(RFC_MESSAGE[20:]))
        assert mac.finalize() == RFC_TAG

    def test_large_message_in_one_call(self) -> None:
        """A one-shot tag over many blocks agrees with the reference."""
        message = bytes(range(256)) * 64 + b"tail"
        expected = reference.Poly1305.generate_tag(RFC_KEY, message)
        assert poly1305_mac(RFC_KEY, message) == expected

    def test_finalize_twice(self) -> None:
        """A tag is produced only once."""
        mac = Poly1305(RFC_KEY)
        mac.finalize()
        with pytest.raises(AlreadyFinalized):
            mac.finalize()

    def test_update_after_finalize(self) -> None:
        """No data is accepted after the tag."""
        mac = Poly1305(RFC_KEY)
        mac.finalize()
        with pytest.raises(AlreadyFinalized):
            mac.update(b"more")

    def test_verify_accepts_correct_tag(self) -> None:
        """verify() returns quietly for a matching tag."""
        mac = Poly1305(RFC_KEY)
        mac.update(RFC_MESSAGE)
        mac.verify(RFC_TAG)

    def test_verify_rejects_wrong_tag(self) -> None:
        """verify() raises for a tag differing in one bit."""
        mac = Poly1305(RFC_KEY)
        mac.update(RFC_MESSAGE)
        bad = bytes([RFC_TAG[0] ^ 1]) + RFC_TAG[1:]
        with pytest.raises(AuthenticationFailure):
            mac.verify(bad)

    def test_verify_rejects_short_tag(self) -> None:
        """Tag length is checked before comparison."""
        mac = Poly1305(RFC_KEY)
        with pytest.raises(InvalidTagLength):
            mac.verify(RFC_TAG[:15])


class TestVerifyTag:
    """Constant-time comparison helper."""

    def test_equal(self) -> None:
        """Identical tags compare equal."""
        assert verify_tag(RFC_TAG, bytes(RFC_TAG))

    @pytest.mark.parametrize("position", [0, 7, 15])
    def test_single_byte_difference(self, position: int) -> None:
        """A difference anywhere is detected."""
        altered = bytearray(RFC_TAG)
        altered[position] ^= 0x80
        assert not verify_tag(RFC_TAG, bytes(altered))

    def test_accepts_fixed_size_type(self) -> None:
        """Bytes16 and plain bytes compare by value."""
        assert verify_tag(Bytes16(RFC_TAG), RFC_TAG)
