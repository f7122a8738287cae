"""Token record and binary layout for branca.

This module defines the Token record that an encode or decode call builds up
stage by stage, and the fixed-width header packing used on the wire:

    version (1) || timestamp (4, big-endian) || nonce (24) || ciphertext || tag (16)

The header (the first 29 bytes) is the AEAD associated data.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, replace
from typing import Optional

from branca.crypto.xchacha20 import NONCE_BYTES, TAG_BYTES
from branca.exceptions import MalformedTokenError
from branca.interfaces.crypto import IAead

VERSION = 0xBA
HEADER_BYTES = 1 + 4 + NONCE_BYTES
MIN_TOKEN_BYTES = HEADER_BYTES + TAG_BYTES
MAX_TIMESTAMP = 0xFFFFFFFF

_HEADER = struct.Struct(f">BI{NONCE_BYTES}s")


def pack_header(version: int, timestamp: int, nonce: bytes) -> bytes:
    """Pack the header fields into their 29-byte wire form.

    Args:
        version: The version byte.
        timestamp: Unsigned 32-bit Unix timestamp.
        nonce: The 24-byte nonce.

    Returns:
        The packed header.
    """
    return _HEADER.pack(version, timestamp, nonce)


def unpack_header(header: bytes) -> tuple[int, int, bytes]:
    """Split a 29-byte header into (version, timestamp, nonce).

    Raises:
        MalformedTokenError: If the header is not exactly 29 bytes.
    """
    if len(header) != HEADER_BYTES:
        raise MalformedTokenError()
    return _HEADER.unpack(header)


@dataclass(frozen=True)
class Token:
    """Intermediate state of a single encode or decode call.

    Each pipeline stage returns a copy with more fields filled in. A Token is
    never shared between calls and never persisted.

    Attributes:
        payload: The plaintext bytes.
        timestamp: Seconds since the Unix epoch.
        nonce: The 24-byte AEAD nonce.
        version: The format version byte.
        header: version || timestamp || nonce, used as associated data.
        ciphertext: Encrypted payload, same length as the payload.
        tag: The 16-byte authentication tag.
        binary: header || ciphertext || tag.
    """

    payload: Optional[bytes] = None
    timestamp: Optional[int] = None
    nonce: Optional[bytes] = None
    version: int = VERSION
    header: Optional[bytes] = None
    ciphertext: Optional[bytes] = None
    tag: Optional[bytes] = None
    binary: Optional[bytes] = None

    # Encoding stages

    def with_header(self) -> Token:
        return replace(self, header=pack_header(self.version, self.timestamp, self.nonce))

    def sealed(self, aead: IAead, key: bytes) -> Token:
        ciphertext, tag = aead.seal(self.payload, self.header, self.nonce, key)
        return replace(self, ciphertext=ciphertext, tag=tag)

    def assembled(self) -> Token:
        return replace(self, binary=self.header + self.ciphertext + self.tag)

    # Decoding stages

    @classmethod
    def from_binary(cls, binary: bytes) -> Token:
        """Split a decoded token into its header, ciphertext and tag.

        Args:
            binary: The base62-decoded token bytes.

        Returns:
            A Token with the header fields, ciphertext and tag filled in.

        Raises:
            MalformedTokenError: If the binary cannot hold a header and a tag.
        """
        if len(binary) < MIN_TOKEN_BYTES:
            raise MalformedTokenError()

        header = binary[:HEADER_BYTES]
        version, timestamp, nonce = unpack_header(header)
        return cls(
            binary=binary,
            header=header,
            version=version,
            timestamp=timestamp,
            nonce=nonce,
            ciphertext=binary[HEADER_BYTES:-TAG_BYTES],
            tag=binary[-TAG_BYTES:],
        )

    def opened(self, aead: IAead, key: bytes) -> Token:
        payload = aead.open(self.ciphertext, self.tag, self.header, self.nonce, key)
        return replace(self, payload=payload)

    def expired(self, ttl: int, now: int) -> bool:
        """Whether the token is past its TTL at the given time.

        A token is still valid at exactly ``timestamp + ttl``.
        """
        return self.timestamp + ttl < now
