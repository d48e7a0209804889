"""AES cipher modes using Strategy Pattern."""
from abc import ABC, abstractmethod
from Crypto.Cipher import AES
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from ..utils.key_utils import KeyManager, AES_BLOCK_SIZE
from .ctr import decrypt_ctr


class AESStrategy(ABC):
    """Abstract base class for AES-128 cipher modes."""

    @abstractmethod
    def encrypt(self, data: bytes, key: bytes) -> bytes:
        """Encrypts data using the strategy."""
        pass

    @abstractmethod
    def decrypt(self, data: bytes, key: bytes) -> bytes:
        """Decrypts data using the strategy."""
        pass


class AESCBCStrategy(AESStrategy):
    """AES-CBC without padding."""

    def __init__(self, iv: bytes = None):
        """Initializes CBC strategy with a 16-byte IV (zeros by default)."""
        self.iv = KeyManager.require_block(iv if iv is not None else b'\0' * AES_BLOCK_SIZE, 'iv')

    def encrypt(self, data: bytes, key: bytes) -> bytes:
        """Encrypts block-aligned data using AES-CBC mode."""
        key = KeyManager.require_key(key)
        data = KeyManager.require_aligned(data, 'plaintext')
        cipher = AES.new(key, AES.MODE_CBC, self.iv)
        return cipher.encrypt(data)

    def decrypt(self, data: bytes, key: bytes) -> bytes:
        """Decrypts block-aligned data using AES-CBC mode."""
        key = KeyManager.require_key(key)
        data = KeyManager.require_aligned(data, 'ciphertext')
        cipher = AES.new(key, AES.MODE_CBC, self.iv)
        return cipher.decrypt(data)


class AESECBStrategy(AESStrategy):
    """AES-ECB without padding."""

    @staticmethod
    def _cipher(key: bytes) -> Cipher:
        return Cipher(
            algorithms.AES(KeyManager.require_key(key)),
            modes.ECB(),
            backend=default_backend()
        )

    def encrypt(self, data: bytes, key: bytes) -> bytes:
        """Encrypts block-aligned data using AES-ECB mode."""
        encryptor = self._cipher(key).encryptor()
        data = KeyManager.require_aligned(data, 'plaintext')
        return encryptor.update(data) + encryptor.finalize()

    def decrypt(self, data: bytes, key: bytes) -> bytes:
        """Decrypts block-aligned data using AES-ECB mode."""
        decryptor = self._cipher(key).decryptor()
        data = KeyManager.require_aligned(data, 'ciphertext')
        return decryptor.update(data) + decryptor.finalize()


class AESCTRStrategy(AESStrategy):
    """AES-CTR over a 128-bit big-endian counter, starting at a byte offset."""

    def __init__(self, counter: bytes, offset: int = 0):
        """Initializes CTR strategy with the counter block of offset 0."""
        self.counter = KeyManager.require_block(counter, 'counter')
        self.offset = offset

    def encrypt(self, data: bytes, key: bytes) -> bytes:
        """Encrypts data of any length (CTR is its own inverse)."""
        return decrypt_ctr(key, self.counter, data, self.offset)

    def decrypt(self, data: bytes, key: bytes) -> bytes:
        """Decrypts data of any length."""
        return decrypt_ctr(key, self.counter, data, self.offset)
