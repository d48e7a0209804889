"""Big-endian byte buffer <-> integer conversion."""
from typing import Optional

from ...exceptions import ValueTooLarge


class IntegerCodec:
    """Converts between fixed-width big-endian buffers and Python ints.

    Python integers are unsigned magnitudes, so buffers are decoded
    without a sign byte and encoded without one. Every width check in the
    package goes through here.
    """

    @staticmethod
    def byte_length(value: int) -> int:
        """Returns the minimal number of bytes needed to hold value."""
        return max(1, (value.bit_length() + 7) // 8)

    @staticmethod
    def decode(data: bytes) -> int:
        """Decodes a big-endian buffer as an unsigned integer."""
        return int.from_bytes(data, byteorder='big', signed=False)

    @staticmethod
    def encode(value: int, size: Optional[int] = None) -> bytes:
        """
        Encodes an integer as a big-endian buffer of a fixed width.

        Args:
            value: Non-negative integer to encode
            size: Target width in bytes, or None for the minimal width

        Returns:
            Buffer left-padded with zero bytes to size

        Raises:
            ValueTooLarge: If value is negative or needs more than size bytes
        """
        if value < 0:
            raise ValueTooLarge(f"Cannot encode negative value into {size} bytes")

        needed = IntegerCodec.byte_length(value)
        if size is None:
            size = needed
        if needed > size:
            raise ValueTooLarge(
                f"Cannot squeeze a {needed}-byte value into {size} bytes"
            )
        return value.to_bytes(size, byteorder='big')


def bytes_to_int(data: bytes) -> int:
    """Decodes a big-endian buffer as an unsigned integer."""
    return IntegerCodec.decode(data)


def int_to_bytes(value: int, size: Optional[int] = None) -> bytes:
    """Encodes an integer as a zero-padded big-endian buffer."""
    return IntegerCodec.encode(value, size)


def byte_length(value: int) -> int:
    """Returns the minimal number of bytes needed to hold value."""
    return IntegerCodec.byte_length(value)
