"""Tests for codec configuration and key loading."""

from __future__ import annotations

import pytest

from branca import (
    Branca,
    BrancaConfig,
    ConfigurationError,
    ErrorKind,
    ExpiredTokenError,
    ForgedTokenError,
    InvalidArgumentError,
    MalformedTokenError,
    Result,
    UnknownVersionError,
    config_from_env,
    key_from_env,
)
from branca.crypto import SecureEntropy, XChaCha20Poly1305
from branca.encoding import Base62, UnixClock

KEY = b"supersecretkeyyoushouldnotcommit"


def test_create_uses_default_collaborators() -> None:
    """Test that create() wires the default backends."""
    config = BrancaConfig.create(KEY)

    assert config.key == KEY
    assert isinstance(config.crypto.aead, XChaCha20Poly1305)
    assert isinstance(config.crypto.entropy, SecureEntropy)
    assert isinstance(config.encoding.text, Base62)
    assert isinstance(config.encoding.clock, UnixClock)


def test_str_key_is_utf8_encoded() -> None:
    """Test that a str key is accepted and stored as bytes."""
    assert BrancaConfig.create(KEY.decode("ascii")).key == KEY


@pytest.mark.parametrize("key", [b"", b"short", KEY + b"!", KEY[:-1], 42])
def test_invalid_key_is_a_configuration_error(key: object) -> None:
    """Test that a key which is not 32 bytes fails at construction."""
    with pytest.raises(ConfigurationError):
        BrancaConfig.create(key)


def test_config_is_immutable() -> None:
    """Test that the key cannot be swapped after validation."""
    config = BrancaConfig.create(KEY)

    with pytest.raises(AttributeError):
        config.key = b"x" * 32  # type: ignore[misc]


def test_key_from_env_text() -> None:
    """Test reading a plain-text key."""
    assert key_from_env({"BRANCA_KEY": KEY.decode("ascii")}) == KEY


def test_key_from_env_hex() -> None:
    """Test reading a hex-encoded key."""
    assert key_from_env({"BRANCA_KEY": KEY.hex()}) == KEY


def test_key_from_env_missing() -> None:
    """Test that a missing key is reported."""
    with pytest.raises(ConfigurationError, match="BRANCA_KEY"):
        key_from_env({})


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test building a working codec from the process environment."""
    monkeypatch.setenv("BRANCA_KEY", KEY.decode("ascii"))
    branca = Branca(config_from_env())

    assert branca.decode_or_raise(branca.encode_or_raise(b"payload")) == b"payload"


def test_config_from_env_wrong_length() -> None:
    """Test that a wrong-length key from the environment fails at startup."""
    with pytest.raises(ConfigurationError):
        config_from_env({"BRANCA_KEY": "tooshort"})


@pytest.mark.parametrize(
    "kind, exception, message",
    [
        (ErrorKind.INVALID_ARGUMENT, InvalidArgumentError, "Invalid arguments."),
        (ErrorKind.MALFORMED_TOKEN, MalformedTokenError, "Malformed token."),
        (ErrorKind.UNKNOWN_VERSION, UnknownVersionError, "Unknown token version."),
        (ErrorKind.FORGED, ForgedTokenError, "Invalid token."),
        (ErrorKind.EXPIRED, ExpiredTokenError, "Token is expired."),
    ],
)
def test_unwrap_raises_fixed_message(
    kind: ErrorKind, exception: type, message: str
) -> None:
    """Test that each error kind unwraps to its exception and message."""
    result = Result.failure(kind)

    assert not result.ok
    with pytest.raises(exception) as excinfo:
        result.unwrap()
    assert str(excinfo.value) == message


def test_unwrap_success() -> None:
    """Test that a successful result unwraps to its value."""
    result = Result.success(b"payload")

    assert result.ok
    assert result.unwrap() == b"payload"
