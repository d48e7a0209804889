"""
AES-128 counter mode.

The counter block is a full 128-bit big-endian integer that wraps around
at 2**128. Decrypting at a byte offset advances the counter by whole
blocks and discards the keystream prefix of the partial block, so any
sub-range decrypts exactly as the matching slice of the full stream.
"""
import io

from Crypto.Cipher import AES
from Crypto.Util import Counter

from ...logging import get_logger
from ..utils.key_utils import KeyManager, AES_BLOCK_SIZE

logger = get_logger(__name__)

_COUNTER_MODULUS = 1 << 128


def _ctr_cipher(key: bytes, counter: bytes, offset: int):
    """Creates a CTR cipher positioned at offset, with the prefix consumed."""
    if offset < 0:
        raise ValueError("offset cannot be negative")

    initial_value = int.from_bytes(counter, byteorder='big') + offset // AES_BLOCK_SIZE
    ctr = Counter.new(
        128,
        initial_value=initial_value % _COUNTER_MODULUS,
        allow_wraparound=True
    )
    cipher = AES.new(key, AES.MODE_CTR, counter=ctr)

    skip = offset % AES_BLOCK_SIZE
    if skip:
        cipher.decrypt(b'\x00' * skip)
    return cipher


def decrypt_ctr(key: bytes, counter: bytes, data: bytes, offset: int = 0) -> bytes:
    """
    Decrypts data with AES-128-CTR.

    Args:
        key: 16-byte AES key
        counter: 16-byte big-endian counter block for stream offset 0
        data: Ciphertext of any length
        offset: Byte position of data within the logical stream

    Returns:
        Plaintext of the same length as data
    """
    key = KeyManager.require_key(key)
    counter = KeyManager.require_block(counter, 'counter')
    if not data:
        return b''
    return _ctr_cipher(key, counter, offset).decrypt(bytes(data))


def encrypt_ctr(key: bytes, counter: bytes, data: bytes, offset: int = 0) -> bytes:
    """Encrypts data with AES-128-CTR (same keystream as decrypt_ctr)."""
    return decrypt_ctr(key, counter, data, offset)


class AesCtrStream(io.RawIOBase):
    """
    Random-access, read-only view of a CTR-encrypted buffer.

    Reads decrypt only the requested range, so seeking around the stream
    never needs the bytes before the read position.

    Example:
        >>> stream = AesCtrStream(ciphertext, kek, counter)
        >>> stream.seek(0x100)
        >>> modulus = stream.read(0x100)
    """

    def __init__(self, data: bytes, key: bytes, counter: bytes):
        super().__init__()
        self._data = bytes(data)
        self._key = KeyManager.require_key(key)
        self._counter = KeyManager.require_block(counter, 'counter')
        self._position = 0

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def tell(self) -> int:
        return self._position

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        if whence == io.SEEK_SET:
            position = offset
        elif whence == io.SEEK_CUR:
            position = self._position + offset
        elif whence == io.SEEK_END:
            position = len(self._data) + offset
        else:
            raise ValueError(f"Invalid whence: {whence}")
        if position < 0:
            raise ValueError("Negative seek position")
        self._position = position
        return position

    def read(self, size: int = -1) -> bytes:
        if self.closed:
            raise ValueError("I/O operation on closed stream")
        start = min(self._position, len(self._data))
        end = len(self._data) if size is None or size < 0 else min(start + size, len(self._data))
        chunk = decrypt_ctr(self._key, self._counter, self._data[start:end], start)
        self._position = end
        logger.debug(f"CTR read {start:#x}-{end:#x}")
        return chunk

    def readall(self) -> bytes:
        return self.read(-1)

    def readinto(self, buffer) -> int:
        chunk = self.read(len(buffer))
        buffer[:len(chunk)] = chunk
        return len(chunk)
