"""
Configuration for the key recovery core.

Dataclass-based configuration, open for extension through custom
instances passed to the services that consume them.
"""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class RecoveryConfig:
    """
    Factor recovery configuration.

    Controls how many witnesses the randomized factor search may try
    before giving up.
    """
    max_attempts: int = 100
    # Uninformative witnesses (y == 1 or y == n - 1) are redrawn for free
    # unless this is set.
    count_uninformative: bool = False
    # Ceiling on total draws; None removes it.
    max_draws: Optional[int] = 100_000

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.max_draws is not None and self.max_draws < self.max_attempts:
            raise ValueError("max_draws cannot be lower than max_attempts")

    @classmethod
    def default(cls) -> 'RecoveryConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def strict(cls, max_attempts: int = 100) -> 'RecoveryConfig':
        """Create a configuration where every draw consumes an attempt."""
        return cls(max_attempts=max_attempts, count_uninformative=True, max_draws=max_attempts)


@dataclass(frozen=True)
class KeyBlobLayout:
    """
    Layout of an encrypted RSA key blob.

    The blob is a CTR counter followed by the ciphertext of d || n || e.
    Fields are (offset, size) pairs into the decrypted body.
    """
    counter_size: int = 0x10
    body_size: int = 0x230
    d: Tuple[int, int] = (0x000, 0x100)
    n: Tuple[int, int] = (0x100, 0x100)
    e: Tuple[int, int] = (0x200, 0x4)

    @property
    def total_size(self) -> int:
        """Full blob length including the counter."""
        return self.counter_size + self.body_size

    @classmethod
    def default(cls) -> 'KeyBlobLayout':
        """Create the layout of the observed 2048-bit key blob format."""
        return cls()
