"""Tests for OAEP-SHA256 title key unwrapping."""
import dataclasses

import pytest
from Crypto.Random import get_random_bytes
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from ticketkeys.core.crypto.rsa.title_key import TitleKeyUnwrapper, unwrap_title_key
from ticketkeys.core.exceptions import (
    CryptoOperationError, DecryptionFailed, InvalidBlockSize, InvalidKeyMaterial
)


def oaep_sha256():
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None
    )


class TestTitleKeyUnwrapper:
    """Test suite for TitleKeyUnwrapper."""

    def test_unwrap_roundtrip(self, rsa_private_key, rsa_material):
        """Test an OAEP-SHA256 wrapped key comes back unchanged."""
        title_key = get_random_bytes(16)
        block = rsa_private_key.public_key().encrypt(title_key, oaep_sha256())

        assert unwrap_title_key(block, rsa_material) == title_key

    def test_bit_flip_raises(self, rsa_private_key, rsa_material):
        """Test a single flipped bit fails instead of returning a wrong key."""
        block = bytearray(rsa_private_key.public_key().encrypt(get_random_bytes(16), oaep_sha256()))
        block[-1] ^= 0x01

        with pytest.raises(CryptoOperationError):
            unwrap_title_key(bytes(block), rsa_material)

    def test_wrong_hash_raises(self, rsa_private_key, rsa_material):
        """Test OAEP with SHA-1 is rejected."""
        sha1_padding = padding.OAEP(
            mgf=padding.MGF1(algorithm=hashes.SHA1()),
            algorithm=hashes.SHA1(),
            label=None
        )
        block = rsa_private_key.public_key().encrypt(get_random_bytes(16), sha1_padding)

        with pytest.raises(DecryptionFailed):
            unwrap_title_key(block, rsa_material)

    def test_failure_message_is_uniform(self, rsa_private_key, rsa_material):
        """Test different padding failures raise the same message."""
        public_key = rsa_private_key.public_key()
        flipped = bytearray(public_key.encrypt(get_random_bytes(16), oaep_sha256()))
        flipped[-1] ^= 0x01
        pkcs1 = public_key.encrypt(get_random_bytes(16), padding.PKCS1v15())

        messages = []
        for block in (bytes(flipped), pkcs1):
            with pytest.raises(DecryptionFailed) as exc_info:
                unwrap_title_key(block, rsa_material)
            messages.append(str(exc_info.value))

        assert messages[0] == messages[1]

    def test_wrong_block_size_raises(self, rsa_material):
        """Test a block that is not modulus sized is rejected."""
        with pytest.raises(InvalidBlockSize):
            unwrap_title_key(b"\x00" * 0xff, rsa_material)

    def test_unexpected_length_raises(self, rsa_private_key, rsa_material):
        """Test a plaintext that is not 16 bytes is not a title key."""
        block = rsa_private_key.public_key().encrypt(get_random_bytes(20), oaep_sha256())

        with pytest.raises(DecryptionFailed):
            unwrap_title_key(block, rsa_material)

    def test_any_length_when_unrestricted(self, rsa_private_key, rsa_material):
        """Test expected_size=None accepts any plaintext length."""
        secret = get_random_bytes(20)
        block = rsa_private_key.public_key().encrypt(secret, oaep_sha256())

        assert TitleKeyUnwrapper(expected_size=None).unwrap(block, rsa_material) == secret

    def test_inconsistent_key_raises(self, rsa_material):
        """Test key material the backend refuses is reported as such."""
        corrupted = dataclasses.replace(rsa_material, q=rsa_material.q + 2)

        with pytest.raises(InvalidKeyMaterial):
            unwrap_title_key(b"\x00" * 0x100, corrupted)
