"""Key and block size checks."""
from ...exceptions import InvalidKeyLength, InvalidBlockAlignment

AES_BLOCK_SIZE = 0x10
AES128_KEY_SIZE = 0x10


class KeyManager:
    """Validates symmetric keys and cipher inputs."""

    @staticmethod
    def require_key(key: bytes, name: str = 'key') -> bytes:
        """Checks that key is a 128-bit AES key and returns it as bytes."""
        if not isinstance(key, (bytes, bytearray, memoryview)):
            raise InvalidKeyLength(f"{name} must be bytes, got {type(key).__name__}")
        if len(key) != AES128_KEY_SIZE:
            raise InvalidKeyLength(
                f"{name} must be {AES128_KEY_SIZE} bytes, got {len(key)}"
            )
        return bytes(key)

    @staticmethod
    def require_aligned(data: bytes, name: str = 'data') -> bytes:
        """Checks that data is a whole number of AES blocks."""
        if len(data) % AES_BLOCK_SIZE:
            raise InvalidBlockAlignment(
                f"{name} length {len(data)} is not a multiple of {AES_BLOCK_SIZE}"
            )
        return bytes(data)

    @staticmethod
    def require_block(block: bytes, name: str = 'block') -> bytes:
        """Checks that block is exactly one AES block (IVs, counters)."""
        if len(block) != AES_BLOCK_SIZE:
            raise InvalidBlockAlignment(
                f"{name} must be {AES_BLOCK_SIZE} bytes, got {len(block)}"
            )
        return bytes(block)
