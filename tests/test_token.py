"""Tests for the token record and header layout."""

from __future__ import annotations

import pytest

from branca.crypto import XChaCha20Poly1305
from branca.exceptions import ForgedTokenError, MalformedTokenError
from branca.token import HEADER_BYTES, MIN_TOKEN_BYTES, VERSION, Token, pack_header, unpack_header

KEY = b"supersecretkeyyoushouldnotcommit"
NONCE = bytes(range(1, 13)) * 2
TIMESTAMP = 123_206_400


def test_header_layout() -> None:
    """Test the fixed-width header fields."""
    header = pack_header(VERSION, TIMESTAMP, NONCE)

    assert len(header) == HEADER_BYTES == 29
    assert header[0] == 0xBA
    assert header[1:5] == TIMESTAMP.to_bytes(4, byteorder="big")
    assert header[5:] == NONCE


def test_header_round_trip() -> None:
    """Test that unpacking a packed header yields the same fields."""
    assert unpack_header(pack_header(VERSION, 0xFFFFFFFF, NONCE)) == (VERSION, 0xFFFFFFFF, NONCE)


@pytest.mark.parametrize("length", [0, 28, 30])
def test_unpack_rejects_wrong_length(length: int) -> None:
    """Test that headers which are not 29 bytes are malformed."""
    with pytest.raises(MalformedTokenError):
        unpack_header(b"\xba" * length)


def test_encoding_stages_fill_fields() -> None:
    """Test that each encoding stage adds fields without mutating its input."""
    token = Token(payload=b"Hello world!", timestamp=TIMESTAMP, nonce=NONCE)
    with_header = token.with_header()
    sealed = with_header.sealed(XChaCha20Poly1305(), KEY)
    assembled = sealed.assembled()

    assert token.header is None
    assert with_header.header == pack_header(VERSION, TIMESTAMP, NONCE)
    assert len(sealed.ciphertext) == len(token.payload)
    assert len(sealed.tag) == 16
    assert assembled.binary == with_header.header + sealed.ciphertext + sealed.tag
    assert len(assembled.binary) == MIN_TOKEN_BYTES + len(token.payload)


def test_from_binary_splits_fields() -> None:
    """Test that decoding splits header, ciphertext and tag."""
    binary = (
        Token(payload=b"abc", timestamp=TIMESTAMP, nonce=NONCE)
        .with_header()
        .sealed(XChaCha20Poly1305(), KEY)
        .assembled()
        .binary
    )

    token = Token.from_binary(binary)

    assert token.version == VERSION
    assert token.timestamp == TIMESTAMP
    assert token.nonce == NONCE
    assert token.header == binary[:29]
    assert token.ciphertext == binary[29:32]
    assert token.tag == binary[32:]
    assert token.payload is None
    assert token.opened(XChaCha20Poly1305(), KEY).payload == b"abc"


def test_from_binary_rejects_short_input() -> None:
    """Test that fewer than 45 bytes cannot hold a header and a tag."""
    with pytest.raises(MalformedTokenError):
        Token.from_binary(b"\xba" * (MIN_TOKEN_BYTES - 1))


def test_opened_rejects_tampered_tag() -> None:
    """Test that opening surfaces a forged signal on a bad tag."""
    binary = bytearray(
        Token(payload=b"abc", timestamp=TIMESTAMP, nonce=NONCE)
        .with_header()
        .sealed(XChaCha20Poly1305(), KEY)
        .assembled()
        .binary
    )
    binary[-1] ^= 0x80

    with pytest.raises(ForgedTokenError):
        Token.from_binary(bytes(binary)).opened(XChaCha20Poly1305(), KEY)


def test_expired() -> None:
    """Test that a token is valid up to and including timestamp + ttl."""
    token = Token(timestamp=1000)

    assert not token.expired(ttl=60, now=1060)
    assert token.expired(ttl=60, now=1061)
    assert not token.expired(ttl=0, now=1000)
