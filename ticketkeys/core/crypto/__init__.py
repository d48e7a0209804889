"""Crypto module - key unwrapping chain and RSA key recovery."""
from .utils import IntegerCodec, KeyManager, bytes_to_int, int_to_bytes
from .aes import (
    AESCrypto,
    AESStrategy,
    AESCBCStrategy,
    AESECBStrategy,
    AESCTRStrategy,
    AesCtrStream,
)
from .kek import KekGenerator
from .rsa import (
    RSAService,
    RSAKeyBlobDecoder,
    RSAKeyComponents,
    RSAKeyMaterial,
    RSAParameters,
    FactorRecovery,
    KeyPairValidator,
    TitleKeyUnwrapper,
)

_kek_generator = KekGenerator()
_rsa_service = RSAService()

# Function-based API
from .aes import decrypt_ecb, encrypt_ecb, decrypt_cbc, encrypt_cbc, decrypt_ctr, encrypt_ctr
from .rsa import decode_key_blob, recover_factors, validate_key_pair, unwrap_title_key


def generate_kek(master_key, seed_blob, kek_seed, key_seed=None):
    """Derives a key-encryption-key from a master key and its seeds."""
    return _kek_generator.generate(master_key, seed_blob, kek_seed, key_seed)


def decrypt_rsa_key(encrypted_key, kek):
    """Decrypts, completes and verifies an RSA private key blob."""
    return _rsa_service.decrypt_rsa_key(encrypted_key, kek)


def decrypt_title_key(encrypted_block, key_material):
    """Unwraps an OAEP-SHA256 title key."""
    return _rsa_service.decrypt_title_key(encrypted_block, key_material)


__all__ = [
    # Classes
    'IntegerCodec',
    'KeyManager',
    'AESCrypto',
    'AESStrategy',
    'AESCBCStrategy',
    'AESECBStrategy',
    'AESCTRStrategy',
    'AesCtrStream',
    'KekGenerator',
    'RSAService',
    'RSAKeyBlobDecoder',
    'RSAKeyComponents',
    'RSAKeyMaterial',
    'RSAParameters',
    'FactorRecovery',
    'KeyPairValidator',
    'TitleKeyUnwrapper',
    # Functions
    'bytes_to_int',
    'int_to_bytes',
    'decrypt_ecb',
    'encrypt_ecb',
    'decrypt_cbc',
    'encrypt_cbc',
    'decrypt_ctr',
    'encrypt_ctr',
    'generate_kek',
    'decode_key_blob',
    'recover_factors',
    'validate_key_pair',
    'unwrap_title_key',
    'decrypt_rsa_key',
    'decrypt_title_key',
]
