"""Codec implementation for Branca tokens.

This module provides the Branca class, which encodes payloads into base62
tokens and decodes them back, along with the configuration dataclasses it is
constructed from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from branca.crypto import KEY_BYTES, NONCE_BYTES, SecureEntropy, XChaCha20Poly1305
from branca.encoding import Base62, UnixClock
from branca.exceptions import (
    ConfigurationError,
    EncodingError,
    ForgedTokenError,
    MalformedTokenError,
)
from branca.interfaces.crypto import IAead, IEntropy
from branca.interfaces.encoding import IClock, ITextEncoder
from branca.result import ErrorKind, Result
from branca.token import MAX_TIMESTAMP, VERSION, Token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CryptoConfig:
    """Configuration for cryptographic operations.

    Attributes:
        aead: XChaCha20-Poly1305 implementation.
        entropy: Random source for default nonces.
    """

    aead: IAead
    entropy: IEntropy


@dataclass(frozen=True)
class EncodingConfig:
    """Configuration for encoding and time operations.

    Attributes:
        text: Encodes and decodes the token's text form.
        clock: Provides the current Unix time.
    """

    text: ITextEncoder
    clock: IClock


@dataclass(frozen=True)
class BrancaConfig:
    """Configuration for Branca.

    The key is validated once, at construction; a codec built from a valid
    config never fails because of its key.

    Attributes:
        key: The 32-byte secret key.
        crypto: Cryptographic operation configuration.
        encoding: Encoding and time operation configuration.
    """

    key: bytes
    crypto: CryptoConfig
    encoding: EncodingConfig

    def __post_init__(self) -> None:
        if isinstance(self.key, str):
            object.__setattr__(self, "key", self.key.encode("utf-8"))

        if not isinstance(self.key, bytes):
            raise ConfigurationError("key must be bytes")

        if len(self.key) != KEY_BYTES:
            raise ConfigurationError(
                f"invalid key length: expected {KEY_BYTES} bytes, got {len(self.key)}"
            )

    @classmethod
    def create(
        cls,
        key: Union[bytes, str],
        crypto: Optional[CryptoConfig] = None,
        encoding: Optional[EncodingConfig] = None,
    ) -> BrancaConfig:
        """Build a config with the default collaborators.

        Args:
            key: The 32-byte secret key. A str is UTF-8 encoded.
            crypto: Overrides the XChaCha20-Poly1305 cipher and OS entropy.
            encoding: Overrides the base62 encoder and the system clock.

        Returns:
            The validated configuration.

        Raises:
            ConfigurationError: If the key is not 32 bytes.
        """
        return cls(
            key=key,
            crypto=crypto or CryptoConfig(aead=XChaCha20Poly1305(), entropy=SecureEntropy()),
            encoding=encoding or EncodingConfig(text=Base62(), clock=UnixClock()),
        )


class Branca:
    """Encoder and decoder for Branca tokens.

    Branca handles:
    - Encoding a payload with a timestamp and nonce into a base62 token
    - Decoding and authenticating a token back into its payload
    - Optional TTL enforcement against the token's embedded timestamp

    Both operations return a Result; the ``*_or_raise`` variants unwrap it.

    Attributes:
        _config: Codec configuration containing the key, crypto and encoding.
    """

    def __init__(self, config: BrancaConfig) -> None:
        """Initialize the codec.

        Args:
            config: Codec configuration with all required dependencies.
        """
        self._config = config

    def encode(
        self,
        payload: Union[bytes, str],
        *,
        timestamp: Optional[int] = None,
        nonce: Optional[bytes] = None,
    ) -> Result[str]:
        """Encode a payload into a token.

        This method:
        1. Resolves the timestamp (defaults to now)
        2. Resolves the nonce (defaults to 24 fresh random bytes)
        3. Packs the header
        4. Seals the payload with the header as associated data
        5. Base62-encodes header || ciphertext || tag

        A caller-supplied nonce must never be reused with the same key.

        Args:
            payload: The bytes to protect. A str is UTF-8 encoded.
            timestamp: Unsigned 32-bit Unix timestamp to embed.
            nonce: Exactly 24 bytes.

        Returns:
            Result holding the token string, or INVALID_ARGUMENT.
        """
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        if not isinstance(payload, bytes):
            return self._fail(ErrorKind.INVALID_ARGUMENT, "payload is not bytes")

        if timestamp is None:
            timestamp = self._config.encoding.clock.now()
        if (
            not isinstance(timestamp, int)
            or isinstance(timestamp, bool)
            or not 0 <= timestamp <= MAX_TIMESTAMP
        ):
            return self._fail(ErrorKind.INVALID_ARGUMENT, "timestamp out of range")

        if nonce is None:
            nonce = self._config.crypto.entropy.get(NONCE_BYTES)
        if not isinstance(nonce, bytes) or len(nonce) != NONCE_BYTES:
            return self._fail(ErrorKind.INVALID_ARGUMENT, "nonce is not 24 bytes")

        token = (
            Token(payload=payload, timestamp=timestamp, nonce=nonce, version=VERSION)
            .with_header()
            .sealed(self._config.crypto.aead, self._config.key)
            .assembled()
        )

        return Result.success(self._config.encoding.text.encode(token.binary))

    def decode(self, token: str, *, ttl: Optional[int] = None) -> Result[bytes]:
        """Decode and authenticate a token.

        This method:
        1. Base62-decodes the token
        2. Splits it into header, ciphertext and tag
        3. Rejects unknown versions before any cryptographic work
        4. Opens the AEAD box with the header as associated data
        5. If a TTL is given, rejects tokens older than timestamp + ttl

        Expiry is only checked once the token is known to be authentic.

        Args:
            token: The base62 token string.
            ttl: Maximum token age in seconds.

        Returns:
            Result holding the payload, or one of INVALID_ARGUMENT,
            MALFORMED_TOKEN, UNKNOWN_VERSION, FORGED or EXPIRED.
        """
        if not isinstance(token, str):
            return self._fail(ErrorKind.INVALID_ARGUMENT, "token is not a str")
        if ttl is not None and (not isinstance(ttl, int) or ttl < 0):
            return self._fail(ErrorKind.INVALID_ARGUMENT, "ttl is not a non-negative int")

        try:
            parsed = Token.from_binary(self._config.encoding.text.decode(token))
        except (EncodingError, MalformedTokenError):
            return self._fail(ErrorKind.MALFORMED_TOKEN, "token does not decode")

        if parsed.version != VERSION:
            return self._fail(ErrorKind.UNKNOWN_VERSION, f"version 0x{parsed.version:02x}")

        try:
            opened = parsed.opened(self._config.crypto.aead, self._config.key)
        except ForgedTokenError:
            return self._fail(ErrorKind.FORGED, "authentication failed")

        if ttl is not None and opened.expired(ttl, self._config.encoding.clock.now()):
            return self._fail(ErrorKind.EXPIRED, f"timestamp {opened.timestamp} ttl {ttl}")

        return Result.success(opened.payload)

    def encode_or_raise(
        self,
        payload: Union[bytes, str],
        *,
        timestamp: Optional[int] = None,
        nonce: Optional[bytes] = None,
    ) -> str:
        """Encode a payload into a token, raising on failure.

        Raises:
            InvalidArgumentError: If the payload, timestamp or nonce is invalid.
        """
        return self.encode(payload, timestamp=timestamp, nonce=nonce).unwrap()

    def decode_or_raise(self, token: str, *, ttl: Optional[int] = None) -> bytes:
        """Decode a token, raising on failure.

        Raises:
            InvalidArgumentError: If the token or ttl has the wrong type.
            MalformedTokenError: If the token is not base62 or too short.
            UnknownVersionError: If the version byte is not supported.
            ForgedTokenError: If authentication fails.
            ExpiredTokenError: If the token is older than the TTL allows.
        """
        return self.decode(token, ttl=ttl).unwrap()

    @staticmethod
    def _fail(kind: ErrorKind, detail: str) -> Result:
        logger.debug("branca token rejected: %s (%s)", kind.value, detail)
        return Result.failure(kind)
