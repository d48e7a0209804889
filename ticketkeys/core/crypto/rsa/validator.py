"""Round-trip verification of recovered RSA key pairs."""
from Crypto.PublicKey import RSA

from ...exceptions import KeyVerificationFailed
from ...logging import get_logger
from ..utils.integers import IntegerCodec
from .key_material import RSAKeyMaterial

logger = get_logger(__name__)


class KeyPairValidator:
    """
    Proves that recovered key material forms a working key pair.

    The key is first rebuilt with PyCryptodome's consistency checks
    (n == p*q, both factors prime, e*d == 1 mod lcm), which do not look at
    the CRT values, so those are checked separately. A fixed test vector
    is then encrypted with (n, e) and decrypted both through the CRT values
    and with d directly.
    """

    TEST_VECTOR = bytes([12, 34, 56, 78])

    def __init__(self, test_vector: bytes = None):
        """Initializes validator with an optional custom test vector."""
        self.test_vector = test_vector or self.TEST_VECTOR

    @staticmethod
    def build_key(material: RSAKeyMaterial) -> RSA.RsaKey:
        """Builds a PyCryptodome key, raising KeyVerificationFailed if inconsistent."""
        try:
            return RSA.construct(
                (material.n, material.e, material.d, material.p, material.q),
                consistency_check=True
            )
        except ValueError as exc:
            raise KeyVerificationFailed(f"Could not verify RSA key pair: {exc}") from exc

    @staticmethod
    def _check_crt_values(material: RSAKeyMaterial):
        """Checks dp, dq and qinv against p, q and d."""
        p, q, d = material.p, material.q, material.d
        if material.dp != d % (p - 1) or material.dq != d % (q - 1):
            raise KeyVerificationFailed("Could not verify RSA key pair: CRT exponent mismatch")
        if not 0 <= material.qinv < p or (material.qinv * q) % p != 1:
            raise KeyVerificationFailed("Could not verify RSA key pair: CRT coefficient mismatch")

    @staticmethod
    def _crt_decrypt(material: RSAKeyMaterial, c: int) -> int:
        m1 = pow(c, material.dp, material.p)
        m2 = pow(c, material.dq, material.q)
        h = (material.qinv * (m1 - m2)) % material.p
        return m2 + h * material.q

    def validate(self, material: RSAKeyMaterial) -> RSAKeyMaterial:
        """
        Validates key material.

        Args:
            material: Recovered key to check

        Returns:
            The same key material, once proven usable

        Raises:
            KeyVerificationFailed: If the key is inconsistent or the round trip fails
        """
        key = self.build_key(material)
        self._check_crt_values(material)

        # Toy moduli are smaller than the vector
        message = IntegerCodec.decode(self.test_vector) % key.n
        ciphertext = pow(message, material.e, material.n)
        if self._crt_decrypt(material, ciphertext) != message:
            raise KeyVerificationFailed("Could not verify RSA key pair")
        if pow(ciphertext, material.d, material.n) != message:
            raise KeyVerificationFailed("Could not verify RSA key pair")

        logger.debug(f"Verified {key.size_in_bits()}-bit RSA key pair")
        return material


def validate_key_pair(material: RSAKeyMaterial) -> RSAKeyMaterial:
    """Validates key material with the default test vector."""
    return KeyPairValidator().validate(material)
