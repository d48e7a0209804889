"""
AES-128 block and stream modes using Strategy Pattern.
"""
from .strategies import AESStrategy, AESCBCStrategy, AESECBStrategy, AESCTRStrategy
from .aes_crypto import AESCrypto, decrypt_ecb, encrypt_ecb, decrypt_cbc, encrypt_cbc
from .ctr import AesCtrStream, decrypt_ctr, encrypt_ctr

__all__ = [
    'AESStrategy',
    'AESCBCStrategy',
    'AESECBStrategy',
    'AESCTRStrategy',
    'AESCrypto',
    'AesCtrStream',
    'decrypt_ecb',
    'encrypt_ecb',
    'decrypt_cbc',
    'encrypt_cbc',
    'decrypt_ctr',
    'encrypt_ctr',
]
