"""
Data models for RSA key material.

Uses frozen dataclasses: key material is created once by the recovery
step and never mutated afterwards.
"""
from dataclasses import dataclass
from typing import Tuple

from ..utils.integers import IntegerCodec


@dataclass(frozen=True)
class RSAKeyComponents:
    """
    Raw fields of a decrypted RSA key blob.

    Only the private exponent, the modulus and the public exponent are
    stored in the blob; the prime factors are not.
    """
    d: bytes
    n: bytes
    e: bytes

    def to_integers(self) -> Tuple[int, int, int]:
        """Returns (n, e, d) as unsigned integers."""
        return (
            IntegerCodec.decode(self.n),
            IntegerCodec.decode(self.e),
            IntegerCodec.decode(self.d),
        )


@dataclass(frozen=True)
class RSAKeyMaterial:
    """
    Complete RSA private key.

    Invariants of a usable key:
    - n == p * q with p != q, both prime
    - d * e == 1 (mod lcm(p - 1, q - 1))
    - dp == d mod (p - 1), dq == d mod (q - 1)
    - qinv == q^-1 mod p
    """
    n: int
    e: int
    d: int
    p: int
    q: int
    dp: int
    dq: int
    qinv: int

    def __repr__(self) -> str:
        return f"RSAKeyMaterial(bits={self.n.bit_length()}, e={self.e})"

    @property
    def modulus_size(self) -> int:
        """Modulus length in bytes."""
        return IntegerCodec.byte_length(self.n)

    @property
    def factor_size(self) -> int:
        """Width used for p, q and the CRT values."""
        return (self.modulus_size + 1) // 2

    @property
    def public_numbers(self) -> Tuple[int, int]:
        """Returns (n, e)."""
        return self.n, self.e

    def to_parameters(self) -> 'RSAParameters':
        """Exports the key as fixed-width big-endian buffers."""
        return RSAParameters.from_material(self)


@dataclass(frozen=True)
class RSAParameters:
    """
    RSA key exported as big-endian byte buffers.

    modulus and d use the full modulus width, the factors and CRT values
    use half of it rounded up, and the exponent uses its minimal width.
    """
    modulus: bytes
    exponent: bytes
    d: bytes
    p: bytes
    q: bytes
    dp: bytes
    dq: bytes
    inverse_q: bytes

    def __repr__(self) -> str:
        return f"RSAParameters(modulus_size={len(self.modulus)})"

    @classmethod
    def from_material(cls, material: RSAKeyMaterial) -> 'RSAParameters':
        """Encodes key material, raising ValueTooLarge if a value overflows."""
        mod_len = material.modulus_size
        half_len = material.factor_size
        encode = IntegerCodec.encode
        return cls(
            modulus=encode(material.n, mod_len),
            exponent=encode(material.e),
            d=encode(material.d, mod_len),
            p=encode(material.p, half_len),
            q=encode(material.q, half_len),
            dp=encode(material.dp, half_len),
            dq=encode(material.dq, half_len),
            inverse_q=encode(material.qinv, half_len),
        )

    def to_material(self) -> RSAKeyMaterial:
        """Decodes the buffers back into integers."""
        decode = IntegerCodec.decode
        return RSAKeyMaterial(
            n=decode(self.modulus),
            e=decode(self.exponent),
            d=decode(self.d),
            p=decode(self.p),
            q=decode(self.q),
            dp=decode(self.dp),
            dq=decode(self.dq),
            qinv=decode(self.inverse_q),
        )
