"""Crypto implementation package.

This package provides the default cryptographic primitives for branca.
"""

from .entropy import SecureEntropy
from .xchacha20 import KEY_BYTES, NONCE_BYTES, TAG_BYTES, XChaCha20Poly1305

__all__ = [
    "KEY_BYTES",
    "NONCE_BYTES",
    "TAG_BYTES",
    "SecureEntropy",
    "XChaCha20Poly1305",
]
