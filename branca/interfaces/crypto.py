"""Cryptographic interfaces for branca.

This module defines protocols for authenticated encryption and entropy.
"""

from __future__ import annotations

from typing import Protocol


class IAead(Protocol):
    """Interface for an AEAD cipher with a 24-byte nonce."""

    def seal(
        self, plaintext: bytes, associated_data: bytes, nonce: bytes, key: bytes
    ) -> tuple[bytes, bytes]:
        """Encrypt and authenticate a plaintext.

        Args:
            plaintext: The bytes to encrypt.
            associated_data: Bytes authenticated but not encrypted.
            nonce: The per-message nonce.
            key: The secret key.

        Returns:
            A tuple of (ciphertext, tag).
        """
        ...

    def open(
        self,
        ciphertext: bytes,
        tag: bytes,
        associated_data: bytes,
        nonce: bytes,
        key: bytes,
    ) -> bytes:
        """Verify and decrypt a ciphertext.

        Args:
            ciphertext: The encrypted bytes.
            tag: The authentication tag.
            associated_data: Bytes authenticated alongside the ciphertext.
            nonce: The nonce used when sealing.
            key: The secret key.

        Returns:
            The plaintext.

        Raises:
            ForgedTokenError: When authentication fails.
        """
        ...


class IEntropy(Protocol):
    """Interface for random byte generation."""

    def get(self, length: int) -> bytes:
        """Generate random bytes.

        Args:
            length: The number of bytes to generate.

        Returns:
            The random bytes.
        """
        ...
