from __future__ import annotations

import os
import string
from typing import Mapping, Optional

from branca.api.codec import BrancaConfig, CryptoConfig, EncodingConfig
from branca.crypto import KEY_BYTES
from branca.exceptions import ConfigurationError


def key_from_env(environ: Optional[Mapping[str, str]] = None) -> bytes:
    """
    Read the secret key from BRANCA_KEY.

    A value of exactly 64 hex digits is hex-decoded; anything else is taken
    as UTF-8 text (the reference test key is plain ASCII).
    """
    env = os.environ if environ is None else environ
    raw = env.get("BRANCA_KEY")
    if not raw:
        raise ConfigurationError("Missing Branca settings: BRANCA_KEY")

    raw = raw.strip()
    if len(raw) == KEY_BYTES * 2 and all(c in string.hexdigits for c in raw):
        return bytes.fromhex(raw)
    return raw.encode("utf-8")


def config_from_env(
    environ: Optional[Mapping[str, str]] = None,
    crypto: Optional[CryptoConfig] = None,
    encoding: Optional[EncodingConfig] = None,
) -> BrancaConfig:
    return BrancaConfig.create(key_from_env(environ), crypto=crypto, encoding=encoding)
