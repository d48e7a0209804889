"""
ticketkeys - recovery of wrapped RSA and title keys.

Usage:
    >>> from ticketkeys import generate_kek, decrypt_rsa_key, decrypt_title_key
    >>>
    >>> kek = generate_kek(master_key, seed_blob, kek_seed, key_seed)
    >>> rsa_key = decrypt_rsa_key(encrypted_key_blob, kek)
    >>> title_key = decrypt_title_key(title_key_block, rsa_key)
"""
import logging

from .core.config import RecoveryConfig, KeyBlobLayout
from .core.exceptions import (
    TicketKeysError,
    FormatError,
    InvalidKeyLength,
    InvalidBlockAlignment,
    InvalidBlobSize,
    InvalidBlockSize,
    ValueTooLarge,
    KeyMaterialError,
    InvalidKeyMaterial,
    FactorizationFailed,
    KeyVerificationFailed,
    CryptoOperationError,
    DecryptionFailed,
)
from .core.crypto import (
    RSAService,
    RSAKeyMaterial,
    RSAParameters,
    decrypt_ecb,
    decrypt_cbc,
    decrypt_ctr,
    generate_kek,
    decode_key_blob,
    recover_factors,
    validate_key_pair,
    decrypt_rsa_key,
    decrypt_title_key,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for ticketkeys modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'ticketkeys',
        'ticketkeys.core.crypto.aes.ctr',
        'ticketkeys.core.crypto.kek.kek_chain',
        'ticketkeys.core.crypto.rsa.key_blob_decoder',
        'ticketkeys.core.crypto.rsa.factor_recovery',
        'ticketkeys.core.crypto.rsa.validator',
        'ticketkeys.core.crypto.rsa.title_key',
        'ticketkeys.core.crypto.rsa.rsa_service',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'RecoveryConfig',
    'KeyBlobLayout',
    'RSAService',
    'RSAKeyMaterial',
    'RSAParameters',
    'decrypt_ecb',
    'decrypt_cbc',
    'decrypt_ctr',
    'generate_kek',
    'decode_key_blob',
    'recover_factors',
    'validate_key_pair',
    'decrypt_rsa_key',
    'decrypt_title_key',
    'setup_logging',
    # Exceptions
    'TicketKeysError',
    'FormatError',
    'InvalidKeyLength',
    'InvalidBlockAlignment',
    'InvalidBlobSize',
    'InvalidBlockSize',
    'ValueTooLarge',
    'KeyMaterialError',
    'InvalidKeyMaterial',
    'FactorizationFailed',
    'KeyVerificationFailed',
    'CryptoOperationError',
    'DecryptionFailed',
]
