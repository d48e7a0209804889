"""Key-encryption-key derivation by chained AES-ECB unwrapping."""
from typing import Optional

from ...logging import get_logger, describe_buffer
from ..aes.strategies import AESECBStrategy
from ..utils.key_utils import KeyManager

logger = get_logger(__name__)


class KekGenerator:
    """
    Derives key-encryption-keys from a master key and a chain of seeds.

    Each stage decrypts a 16-byte seed with the previous stage's output:

        master_key --ECB--> kek_seed  => stage1
        stage1     --ECB--> seed_blob => stage2
        stage2     --ECB--> key_seed  => kek   (only when key_seed is given)

    The order is fixed; a stage's output never leaves the chain except as
    the final KEK.
    """

    def __init__(self, strategy: AESECBStrategy = None):
        """Initializes the generator with an ECB strategy."""
        self.strategy = strategy or AESECBStrategy()

    def _unwrap(self, key: bytes, seed: bytes) -> bytes:
        return self.strategy.decrypt(seed, key)

    def generate(
        self,
        master_key: bytes,
        seed_blob: bytes,
        kek_seed: bytes,
        key_seed: Optional[bytes] = None
    ) -> bytes:
        """
        Generates a KEK.

        Args:
            master_key: 16-byte master key
            seed_blob: 16-byte per-use seed, unwrapped by the first stage
            kek_seed: 16-byte kek seed, unwrapped by the master key
            key_seed: Optional 16-byte final seed

        Returns:
            16-byte key-encryption-key
        """
        master_key = KeyManager.require_key(master_key, 'master_key')
        seed_blob = KeyManager.require_key(seed_blob, 'seed_blob')
        kek_seed = KeyManager.require_key(kek_seed, 'kek_seed')
        if key_seed is not None:
            key_seed = KeyManager.require_key(key_seed, 'key_seed')

        stage1 = self._unwrap(master_key, kek_seed)
        stage2 = self._unwrap(stage1, seed_blob)
        if key_seed is None:
            kek = stage2
        else:
            kek = self._unwrap(stage2, key_seed)

        logger.debug(
            f"Generated KEK {describe_buffer(kek)} "
            f"({'3' if key_seed is not None else '2'} stages)"
        )
        return kek


def generate_kek(
    master_key: bytes,
    seed_blob: bytes,
    kek_seed: bytes,
    key_seed: Optional[bytes] = None
) -> bytes:
    """Generates a KEK with the default ECB strategy."""
    return KekGenerator().generate(master_key, seed_blob, kek_seed, key_seed)
