"""AES crypto class using Strategy Pattern."""
from .strategies import AESStrategy, AESCBCStrategy, AESECBStrategy
from ..utils.key_utils import KeyManager


class AESCrypto:
    """AES-128 cipher bound to one key, ECB by default."""

    def __init__(self, key: bytes, strategy: AESStrategy = None):
        """Initializes AES crypto with a 16-byte key and optional strategy."""
        self.key = KeyManager.require_key(key)
        self.strategy = strategy or AESECBStrategy()

    def set_strategy(self, strategy: AESStrategy):
        """Sets the cipher mode."""
        self.strategy = strategy

    def encrypt(self, data: bytes) -> bytes:
        """Encrypts data with the current strategy."""
        return self.strategy.encrypt(data, self.key)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypts data with the current strategy."""
        return self.strategy.decrypt(data, self.key)

    def encrypt_ecb(self, data: bytes) -> bytes:
        """Encrypts data using ECB mode."""
        return AESECBStrategy().encrypt(data, self.key)

    def decrypt_ecb(self, data: bytes) -> bytes:
        """Decrypts data using ECB mode."""
        return AESECBStrategy().decrypt(data, self.key)

    def encrypt_cbc(self, data: bytes, iv: bytes = None) -> bytes:
        """Encrypts data using CBC mode."""
        return AESCBCStrategy(iv).encrypt(data, self.key)

    def decrypt_cbc(self, data: bytes, iv: bytes = None) -> bytes:
        """Decrypts data using CBC mode."""
        return AESCBCStrategy(iv).decrypt(data, self.key)


def decrypt_ecb(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypts block-aligned data with AES-128-ECB, no padding."""
    return AESECBStrategy().decrypt(ciphertext, key)


def encrypt_ecb(key: bytes, plaintext: bytes) -> bytes:
    """Encrypts block-aligned data with AES-128-ECB, no padding."""
    return AESECBStrategy().encrypt(plaintext, key)


def decrypt_cbc(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Decrypts block-aligned data with AES-128-CBC, no padding."""
    return AESCBCStrategy(iv).decrypt(ciphertext, key)


def encrypt_cbc(key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    """Encrypts block-aligned data with AES-128-CBC, no padding."""
    return AESCBCStrategy(iv).encrypt(plaintext, key)
