"""Shared utilities for the crypto module."""
from .integers import IntegerCodec, bytes_to_int, int_to_bytes, byte_length
from .key_utils import KeyManager, AES_BLOCK_SIZE, AES128_KEY_SIZE

__all__ = [
    'IntegerCodec',
    'KeyManager',
    'bytes_to_int',
    'int_to_bytes',
    'byte_length',
    'AES_BLOCK_SIZE',
    'AES128_KEY_SIZE',
]
