"""Entropy generation utilities.

This module provides cryptographically secure random bytes for nonces.
"""

import secrets

from branca.interfaces.crypto import IEntropy


class SecureEntropy(IEntropy):
    """Entropy source backed by the operating system CSPRNG."""

    def get(self, length: int) -> bytes:
        """Generate cryptographically secure random bytes.

        Args:
            length: The number of random bytes to generate.

        Returns:
            A bytes object containing the requested amount of random data.
        """
        return secrets.token_bytes(length)
