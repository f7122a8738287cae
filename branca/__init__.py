"""Branca Python implementation.

This package implements Branca authenticated and encrypted API tokens. A
token binds a timestamp, a nonce and an arbitrary binary payload under the
IETF XChaCha20-Poly1305 AEAD and is transported as base62 text.

Main Components:
    - Branca: Token encoder/decoder
    - BrancaConfig: Secret key plus pluggable crypto and encoding backends
    - Result / ErrorKind: Typed outcomes of encode and decode
    - Interfaces: Protocol definitions for the AEAD, entropy, text encoding, clock

Example:
    >>> from branca import Branca, BrancaConfig
    >>> branca = Branca(BrancaConfig.create(b"supersecretkeyyoushouldnotcommit"))
    >>> token = branca.encode_or_raise(b"Hello world!")
    >>> branca.decode_or_raise(token)
    b'Hello world!'
"""

from branca.api import (
    Branca,
    BrancaConfig,
    CryptoConfig,
    EncodingConfig,
    config_from_env,
    key_from_env,
)
from branca.exceptions import (
    BrancaError,
    ConfigurationError,
    EncodingError,
    ExpiredTokenError,
    ForgedTokenError,
    InvalidArgumentError,
    MalformedTokenError,
    UnknownVersionError,
)
from branca.result import ErrorKind, Result
from branca.token import VERSION, Token

__version__ = "0.1.0"

__all__ = [
    # API
    "Branca",
    "BrancaConfig",
    "CryptoConfig",
    "EncodingConfig",
    "config_from_env",
    "key_from_env",
    # Results
    "ErrorKind",
    "Result",
    # Token
    "Token",
    "VERSION",
    # Exceptions
    "BrancaError",
    "ConfigurationError",
    "EncodingError",
    "InvalidArgumentError",
    "MalformedTokenError",
    "UnknownVersionError",
    "ForgedTokenError",
    "ExpiredTokenError",
]
