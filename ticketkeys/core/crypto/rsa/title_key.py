"""Title key unwrapping with RSA-OAEP (SHA-256)."""
from typing import Optional

from cryptography.hazmat.primitives.asymmetric import rsa, padding as rsa_padding
from cryptography.hazmat.primitives import hashes

from ...exceptions import DecryptionFailed, InvalidBlockSize, InvalidKeyMaterial
from ...logging import get_logger
from .key_material import RSAKeyMaterial

logger = get_logger(__name__)

TITLE_KEY_SIZE = 0x10


class TitleKeyUnwrapper:
    """Decrypts OAEP-SHA256 wrapped title keys with a recovered RSA key."""

    def __init__(self, expected_size: Optional[int] = TITLE_KEY_SIZE):
        """
        Initializes unwrapper.

        Args:
            expected_size: Title key length to require, or None to accept any
        """
        self.expected_size = expected_size
        self.padding = rsa_padding.OAEP(
            mgf=rsa_padding.MGF1(algorithm=hashes.SHA256()),
            algorithm=hashes.SHA256(),
            label=None
        )

    @staticmethod
    def to_private_key(material: RSAKeyMaterial) -> rsa.RSAPrivateKey:
        """Converts key material to a cryptography private key."""
        try:
            return rsa.RSAPrivateNumbers(
                p=material.p,
                q=material.q,
                d=material.d,
                dmp1=material.dp,
                dmq1=material.dq,
                iqmp=material.qinv,
                public_numbers=rsa.RSAPublicNumbers(e=material.e, n=material.n)
            ).private_key()
        except ValueError as exc:
            raise InvalidKeyMaterial(f"Key material rejected: {exc}") from exc

    def unwrap(self, encrypted_block: bytes, material: RSAKeyMaterial) -> bytes:
        """
        Unwraps a title key.

        Args:
            encrypted_block: One modulus-sized OAEP-SHA256 ciphertext block
            material: Validated RSA key material

        Returns:
            The decrypted title key

        Raises:
            InvalidBlockSize: If the block does not match the modulus size
            DecryptionFailed: If OAEP decoding fails for any reason
        """
        if len(encrypted_block) != material.modulus_size:
            raise InvalidBlockSize(
                f"Title key block must be {material.modulus_size} bytes, got {len(encrypted_block)}"
            )

        private_key = self.to_private_key(material)
        try:
            title_key = private_key.decrypt(bytes(encrypted_block), self.padding)
        except ValueError:
            # Same message for every padding failure
            raise DecryptionFailed("Title key decryption failed") from None

        if self.expected_size is not None and len(title_key) != self.expected_size:
            raise DecryptionFailed("Title key decryption failed")

        logger.debug("Title key unwrapped")
        return title_key


def unwrap_title_key(encrypted_block: bytes, material: RSAKeyMaterial) -> bytes:
    """Unwraps a 16-byte title key."""
    return TitleKeyUnwrapper().unwrap(encrypted_block, material)
