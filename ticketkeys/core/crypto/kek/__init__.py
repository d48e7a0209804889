"""
Key-encryption-key derivation.
"""
from .kek_chain import KekGenerator, generate_kek

__all__ = [
    'KekGenerator',
    'generate_kek',
]
