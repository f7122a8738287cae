"""Branca API package.

This package provides the token codec and its configuration types.
"""

from branca.api.codec import Branca, BrancaConfig, CryptoConfig, EncodingConfig
from branca.api.env import config_from_env, key_from_env

__all__ = [
    # Codec
    "Branca",
    # Configuration types
    "BrancaConfig",
    "CryptoConfig",
    "EncodingConfig",
    "config_from_env",
    "key_from_env",
]
