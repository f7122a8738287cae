"""Branca interfaces package.

This package provides protocol definitions for the pluggable parts of the
token codec: the AEAD cipher, entropy, text encoding and the clock.
"""

from .crypto import IAead, IEntropy
from .encoding import IClock, ITextEncoder

__all__ = [
    # crypto
    "IAead",
    "IEntropy",
    # encoding
    "IClock",
    "ITextEncoder",
]
