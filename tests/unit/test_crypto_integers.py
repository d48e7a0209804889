"""Tests for the byte/integer boundary."""
import pytest

from ticketkeys.core.crypto.utils.integers import (
    IntegerCodec, bytes_to_int, int_to_bytes, byte_length
)
from ticketkeys.core.exceptions import ValueTooLarge, FormatError


class TestIntegerCodec:
    """Test suite for IntegerCodec."""

    def test_decode_is_unsigned(self):
        """Test a set high bit is never read as a sign."""
        assert bytes_to_int(b"\xff") == 255
        assert bytes_to_int(b"\x80\x00") == 0x8000

    def test_decode_ignores_leading_zeros(self):
        """Test leading zero bytes do not change the value."""
        assert bytes_to_int(b"\x00\x00\x01\x00\x01") == 65537

    def test_decode_empty(self):
        """Test an empty buffer decodes to zero."""
        assert bytes_to_int(b"") == 0

    def test_encode_pads_to_width(self):
        """Test values are left-padded with zeros."""
        assert int_to_bytes(1, 4) == b"\x00\x00\x00\x01"
        assert int_to_bytes(0x0100, 2) == b"\x01\x00"

    def test_encode_high_bit_fills_width(self):
        """Test a value using the top bit still fits its width."""
        assert int_to_bytes(0xff, 1) == b"\xff"
        assert int_to_bytes(0x8000, 2) == b"\x80\x00"

    def test_encode_one_byte_too_many_raises(self):
        """Test a value needing exactly one more byte is rejected."""
        with pytest.raises(ValueTooLarge):
            int_to_bytes(0x100, 1)
        with pytest.raises(ValueTooLarge):
            int_to_bytes(1 << 2048, 0x100)

    def test_encode_negative_raises(self):
        """Test negative values are rejected."""
        with pytest.raises(ValueTooLarge):
            int_to_bytes(-1, 4)

    def test_encode_minimal_width(self):
        """Test size=None uses the minimal width."""
        assert int_to_bytes(65537) == b"\x01\x00\x01"
        assert int_to_bytes(0) == b"\x00"

    def test_roundtrip_fixed_width(self):
        """Test decoding then encoding reproduces a fixed-width buffer."""
        data = b"\x00\x7f" + bytes(range(1, 255))

        assert int_to_bytes(bytes_to_int(data), len(data)) == data

    def test_byte_length(self):
        """Test minimal byte lengths."""
        assert byte_length(0) == 1
        assert byte_length(255) == 1
        assert byte_length(256) == 2
        assert byte_length(3233) == 2

    def test_value_too_large_is_format_error(self):
        """Test ValueTooLarge belongs to the format error family."""
        with pytest.raises(FormatError):
            IntegerCodec.encode(1 << 64, 8)
