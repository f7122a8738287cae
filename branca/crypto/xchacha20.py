"""XChaCha20-Poly1305 AEAD implementation.

This module provides the IETF XChaCha20-Poly1305 construction backed by
PyCryptodome. PyCryptodome selects the extended (XChaCha20) variant when the
nonce is 24 bytes long, which matches libsodium's
``crypto_aead_xchacha20poly1305_ietf``.
"""

from Crypto.Cipher import ChaCha20_Poly1305

from branca.exceptions import ForgedTokenError
from branca.interfaces.crypto import IAead

KEY_BYTES = 32
NONCE_BYTES = 24
TAG_BYTES = 16


class XChaCha20Poly1305(IAead):
    """XChaCha20-Poly1305 cipher that implements IAead.

    Sealing is deterministic for fixed inputs. Opening verifies the Poly1305
    tag in constant time and only releases the plaintext once it matches.
    """

    def seal(
        self, plaintext: bytes, associated_data: bytes, nonce: bytes, key: bytes
    ) -> tuple[bytes, bytes]:
        """Encrypt a plaintext and compute its detached tag.

        Args:
            plaintext: The bytes to encrypt.
            associated_data: Bytes authenticated but not encrypted.
            nonce: The 24-byte nonce.
            key: The 32-byte key.

        Returns:
            A tuple of (ciphertext, tag) where the ciphertext has the same
            length as the plaintext and the tag is 16 bytes.
        """
        cipher = ChaCha20_Poly1305.new(key=key, nonce=nonce)
        cipher.update(associated_data)
        return cipher.encrypt_and_digest(plaintext)

    def open(
        self,
        ciphertext: bytes,
        tag: bytes,
        associated_data: bytes,
        nonce: bytes,
        key: bytes,
    ) -> bytes:
        """Verify a detached tag and decrypt the ciphertext.

        Args:
            ciphertext: The encrypted bytes.
            tag: The 16-byte tag.
            associated_data: Bytes authenticated alongside the ciphertext.
            nonce: The 24-byte nonce.
            key: The 32-byte key.

        Returns:
            The plaintext.

        Raises:
            ForgedTokenError: When the tag does not match.
        """
        cipher = ChaCha20_Poly1305.new(key=key, nonce=nonce)
        cipher.update(associated_data)
        try:
            return cipher.decrypt_and_verify(ciphertext, tag)
        except ValueError as e:
            raise ForgedTokenError() from e
