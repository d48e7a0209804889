"""
RSA prime factor recovery from (n, e, d).

With k = d*e - 1 a multiple of lambda(n), write k = 2^t * r with r odd.
For a random g, the sequence g^r, g^2r, ..., g^(2^(t-1) r) (mod n) ends in
1 for coprime g. If some element y != +-1 squares to 1, y is a nontrivial
square root of unity and gcd(y - 1, n) is a prime factor of n. At least
half of all witnesses expose a factor, so a bounded number of random
draws is enough.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from Crypto.Random import get_random_bytes

from ...config import RecoveryConfig
from ...exceptions import InvalidKeyMaterial, FactorizationFailed
from ...logging import get_logger
from ..utils.integers import IntegerCodec
from .key_material import RSAKeyMaterial

logger = get_logger(__name__)


class WitnessOutcome(Enum):
    """Result of testing one witness."""
    FOUND = 'found'
    UNINFORMATIVE = 'uninformative'
    INCONCLUSIVE = 'inconclusive'


@dataclass(frozen=True)
class WitnessResult:
    """Outcome of one witness, with the factor when one was found."""
    outcome: WitnessOutcome
    factor: Optional[int] = None


@dataclass(frozen=True)
class FactorSearchResult:
    """Outcome of a whole search: a factor, or exhaustion of the bounds."""
    factor: Optional[int]
    attempts: int
    draws: int

    @property
    def found(self) -> bool:
        return self.factor is not None


def split_power_of_two(k: int) -> Tuple[int, int]:
    """Returns (t, r) such that k == 2**t * r with r odd."""
    if k <= 0:
        raise InvalidKeyMaterial(f"Cannot split non-positive value {k}")
    t = 0
    r = k
    while r % 2 == 0:
        t += 1
        r //= 2
    return t, r


def mod_inverse(a: int, m: int) -> int:
    """
    Computes a^-1 mod m with the extended Euclidean algorithm.

    Returns:
        Inverse normalized into [0, m)

    Raises:
        InvalidKeyMaterial: If a is not invertible modulo m
    """
    if m <= 1:
        raise InvalidKeyMaterial(f"Modulus {m} has no multiplicative group")

    r, new_r = m, a % m
    t, new_t = 0, 1
    while new_r != 0:
        quotient = r // new_r
        t, new_t = new_t, t - quotient * new_t
        r, new_r = new_r, r - quotient * new_r

    if r != 1:
        raise InvalidKeyMaterial("Value is not invertible modulo the given modulus")
    if t < 0:
        t += m
    return t


def check_witness(g: int, r: int, t: int, n: int) -> WitnessResult:
    """
    Tests one witness g.

    y = g^r mod n is squared up to t - 1 times. A square equal to 1 from a
    y that is neither 1 nor n - 1 exposes the factor gcd(y - 1, n).
    """
    n_minus_one = n - 1
    y = pow(g, r, n)
    if y == 1 or y == n_minus_one:
        return WitnessResult(WitnessOutcome.UNINFORMATIVE)

    for _ in range(1, t):
        x = pow(y, 2, n)
        if x == 1:
            return WitnessResult(WitnessOutcome.FOUND, math.gcd(y - 1, n))
        if x == n_minus_one:
            break
        y = x

    return WitnessResult(WitnessOutcome.INCONCLUSIVE)


class FactorRecovery:
    """
    Recovers the prime factors and CRT values of an RSA key from (n, e, d).

    Witnesses come from a cryptographically secure source. The search is
    bounded by RecoveryConfig; running out of attempts raises
    FactorizationFailed, distinct from InvalidKeyMaterial for inputs that
    cannot be an RSA key at all.
    """

    def __init__(
        self,
        config: RecoveryConfig = None,
        random_bytes: Callable[[int], bytes] = get_random_bytes
    ):
        """
        Initialize factor recovery.

        Args:
            config: Search bounds (RecoveryConfig.default() if omitted)
            random_bytes: Source of random bytes for witness draws
        """
        self.config = config or RecoveryConfig.default()
        self._random_bytes = random_bytes

    def _draw_witness(self, n: int, size: int) -> int:
        """Draws g uniformly from [0, n) by rejection sampling."""
        while True:
            g = IntegerCodec.decode(self._random_bytes(size))
            if g < n:
                return g

    def search(self, n: int, r: int, t: int) -> FactorSearchResult:
        """Runs the bounded witness loop and reports what it found."""
        config = self.config
        size = IntegerCodec.byte_length(n)
        attempts = 0
        draws = 0

        while attempts < config.max_attempts:
            if config.max_draws is not None and draws >= config.max_draws:
                break

            g = self._draw_witness(n, size)
            draws += 1
            result = check_witness(g, r, t, n)

            if result.outcome is WitnessOutcome.FOUND:
                return FactorSearchResult(result.factor, attempts + 1, draws)
            if result.outcome is WitnessOutcome.UNINFORMATIVE and not config.count_uninformative:
                continue
            attempts += 1

        return FactorSearchResult(None, attempts, draws)

    def recover(self, n: int, e: int, d: int) -> RSAKeyMaterial:
        """
        Recovers the full private key.

        Args:
            n: Modulus
            e: Public exponent
            d: Private exponent

        Returns:
            RSAKeyMaterial with p, q and the CRT values filled in

        Raises:
            InvalidKeyMaterial: If d*e - 1 is odd or the inputs are out of range
            FactorizationFailed: If no witness exposed a factor within the bounds
        """
        if n < 3 or e < 1 or d < 1:
            raise InvalidKeyMaterial("Modulus and exponents must be positive (n >= 3)")

        k = d * e - 1
        if k % 2:
            raise InvalidKeyMaterial("d*e - 1 is odd")

        t, r = split_power_of_two(k)
        logger.debug(f"Recovering factors of a {n.bit_length()}-bit modulus (t={t})")

        result = self.search(n, r, t)
        if not result.found:
            raise FactorizationFailed(
                f"Prime factors not found after {result.attempts} attempts",
                attempts=result.attempts,
                draws=result.draws
            )
        logger.debug(f"Factor found after {result.attempts} attempts ({result.draws} draws)")

        p = result.factor
        q = n // p
        return RSAKeyMaterial(
            n=n,
            e=e,
            d=d,
            p=p,
            q=q,
            dp=d % (p - 1),
            dq=d % (q - 1),
            qinv=mod_inverse(q, p),
        )


def recover_factors(n: int, e: int, d: int, config: RecoveryConfig = None) -> RSAKeyMaterial:
    """Recovers the full private key from (n, e, d)."""
    return FactorRecovery(config).recover(n, e, d)
