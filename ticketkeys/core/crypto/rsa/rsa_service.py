"""RSA key recovery and title key service."""
from ...logging import get_logger
from .key_blob_decoder import RSAKeyBlobDecoder
from .factor_recovery import FactorRecovery
from .key_material import RSAKeyMaterial
from .validator import KeyPairValidator
from .title_key import TitleKeyUnwrapper

logger = get_logger(__name__)


class RSAService:
    """
    Turns an encrypted RSA key blob into a verified private key and uses
    it to unwrap title keys.

    Every recovered key is validated before it is returned; there is no
    way to obtain unverified key material from this service.
    """

    def __init__(
        self,
        key_decoder: RSAKeyBlobDecoder = None,
        factor_recovery: FactorRecovery = None,
        validator: KeyPairValidator = None,
        unwrapper: TitleKeyUnwrapper = None
    ):
        """Initializes RSA service."""
        self.key_decoder = key_decoder or RSAKeyBlobDecoder()
        self.factor_recovery = factor_recovery or FactorRecovery()
        self.validator = validator or KeyPairValidator()
        self.unwrapper = unwrapper or TitleKeyUnwrapper()

    def decrypt_rsa_key(self, encrypted_key: bytes, kek: bytes) -> RSAKeyMaterial:
        """
        Decrypts and completes an RSA private key.

        Args:
            encrypted_key: Counter block followed by the encrypted d || n || e
            kek: 16-byte key-encryption-key

        Returns:
            Verified RSAKeyMaterial
        """
        components = self.key_decoder.decode(encrypted_key, kek)
        n, e, d = components.to_integers()
        material = self.factor_recovery.recover(n, e, d)
        self.validator.validate(material)
        logger.debug(f"Recovered {n.bit_length()}-bit RSA key")
        return material

    def decrypt_title_key(self, encrypted_block: bytes, material: RSAKeyMaterial) -> bytes:
        """Unwraps a title key with verified key material."""
        return self.unwrapper.unwrap(encrypted_block, material)
