"""RSA key recovery and decryption module."""
from .key_material import RSAKeyComponents, RSAKeyMaterial, RSAParameters
from .key_blob_decoder import RSAKeyBlobDecoder, decode_key_blob
from .factor_recovery import (
    FactorRecovery,
    FactorSearchResult,
    WitnessOutcome,
    WitnessResult,
    check_witness,
    mod_inverse,
    recover_factors,
    split_power_of_two,
)
from .validator import KeyPairValidator, validate_key_pair
from .title_key import TitleKeyUnwrapper, unwrap_title_key, TITLE_KEY_SIZE
from .rsa_service import RSAService

__all__ = [
    'RSAKeyComponents',
    'RSAKeyMaterial',
    'RSAParameters',
    'RSAKeyBlobDecoder',
    'FactorRecovery',
    'FactorSearchResult',
    'WitnessOutcome',
    'WitnessResult',
    'KeyPairValidator',
    'TitleKeyUnwrapper',
    'RSAService',
    'TITLE_KEY_SIZE',
    'check_witness',
    'decode_key_blob',
    'mod_inverse',
    'recover_factors',
    'split_power_of_two',
    'unwrap_title_key',
    'validate_key_pair',
]
