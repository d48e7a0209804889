"""Pytest fixtures for ticketkeys tests."""
import pytest
from Crypto.Cipher import AES
from Crypto.Random import get_random_bytes
from cryptography.hazmat.primitives.asymmetric import rsa

from ticketkeys.core.crypto.rsa.key_material import RSAKeyMaterial


def reference_kek(master_key, seed_blob, kek_seed, key_seed=None):
    """Derives a KEK with plain PyCryptodome calls."""
    stage1 = AES.new(master_key, AES.MODE_ECB).decrypt(kek_seed)
    stage2 = AES.new(stage1, AES.MODE_ECB).decrypt(seed_blob)
    if key_seed is None:
        return stage2
    return AES.new(stage2, AES.MODE_ECB).decrypt(key_seed)


def reference_ctr(key, counter, data):
    """Encrypts data with AES-CTR over a full 128-bit counter."""
    cipher = AES.new(key, AES.MODE_CTR, nonce=b'', initial_value=counter)
    return cipher.encrypt(data)


def material_from_private_key(private_key):
    """Builds RSAKeyMaterial from a cryptography private key."""
    numbers = private_key.private_numbers()
    return RSAKeyMaterial(
        n=numbers.public_numbers.n,
        e=numbers.public_numbers.e,
        d=numbers.d,
        p=numbers.p,
        q=numbers.q,
        dp=numbers.dmp1,
        dq=numbers.dmq1,
        qinv=numbers.iqmp,
    )


def build_key_blob(private_key, kek, counter):
    """Encrypts d || n || e of a 2048-bit key into the 0x240-byte blob format."""
    numbers = private_key.private_numbers()
    body = (
        numbers.d.to_bytes(0x100, 'big')
        + numbers.public_numbers.n.to_bytes(0x100, 'big')
        + numbers.public_numbers.e.to_bytes(4, 'big')
    )
    body = body.ljust(0x230, b'\x00')
    return counter + reference_ctr(kek, counter, body)


@pytest.fixture
def master_key():
    """Generates a 16-byte master key for testing."""
    return get_random_bytes(16)


@pytest.fixture
def kek_seed():
    """Generates a 16-byte kek seed."""
    return get_random_bytes(16)


@pytest.fixture
def seed_blob():
    """Generates a 16-byte per-use seed."""
    return get_random_bytes(16)


@pytest.fixture
def key_seed():
    """Generates a 16-byte final key seed."""
    return get_random_bytes(16)


@pytest.fixture
def counter():
    """Generates a random 16-byte CTR counter block."""
    return get_random_bytes(16)


@pytest.fixture(scope='session')
def rsa_private_key():
    """Generates one RSA-2048 key for the whole session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope='session')
def rsa_material(rsa_private_key):
    """Returns the session RSA key as RSAKeyMaterial."""
    return material_from_private_key(rsa_private_key)


@pytest.fixture
def toy_material():
    """Returns the textbook key p=61, q=53, e=17, d=2753."""
    return RSAKeyMaterial(
        n=3233,
        e=17,
        d=2753,
        p=61,
        q=53,
        dp=2753 % 60,
        dq=2753 % 52,
        qinv=38,
    )


@pytest.fixture
def kek_reference():
    """Returns the reference KEK derivation."""
    return reference_kek


@pytest.fixture
def ctr_reference():
    """Returns the reference CTR encryptor."""
    return reference_ctr


@pytest.fixture
def make_key_blob():
    """Returns the key blob builder."""
    return build_key_blob
