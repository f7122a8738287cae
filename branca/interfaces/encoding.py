"""Encoding and clock interfaces for branca.

This module defines protocols for the token text encoding and for reading
the current time.
"""

from __future__ import annotations

from typing import Protocol


class ITextEncoder(Protocol):
    """Interface for the binary-to-text token encoding."""

    def encode(self, data: bytes) -> str:
        """Encode bytes into text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: str) -> bytes:
        """Decode text back into bytes.

        Args:
            text: The text to decode.

        Returns:
            The decoded bytes.

        Raises:
            EncodingError: When the text is not valid in this encoding.
        """
        ...


class IClock(Protocol):
    """Interface for reading the current time."""

    def now(self) -> int:
        """Get the current time.

        Returns:
            Whole seconds since the Unix epoch.
        """
        ...
