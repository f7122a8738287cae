"""Base62 encoding utilities.

This module provides the base62 text encoding used for Branca tokens.
"""

from branca.exceptions import EncodingError
from branca.interfaces.encoding import ITextEncoder

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

_CHAR_TO_INT = {char: i for i, char in enumerate(ALPHABET)}


class Base62(ITextEncoder):
    """Base62 encoder that implements ITextEncoder.

    The input bytes are read as one big-endian integer and rewritten in base
    62 over digits, uppercase and lowercase letters (in that order). Leading
    zero bytes carry no numeric value, so each one is written as a leading
    ``'0'`` character, the same way base58 handles them. This keeps
    ``decode(encode(data)) == data`` for every byte string.
    """

    def encode(self, data: bytes) -> str:
        """Encode bytes to a base62 string.

        Args:
            data: The bytes to encode.

        Returns:
            The base62 string, without padding.

        Example:
            >>> Base62().encode(b"\\x00\\x01")
            '01'
        """
        stripped = data.lstrip(b"\x00")
        zeros = len(data) - len(stripped)

        num = int.from_bytes(stripped, byteorder="big")
        encoded = []
        while num:
            num, remainder = divmod(num, 62)
            encoded.append(ALPHABET[remainder])

        return ALPHABET[0] * zeros + "".join(reversed(encoded))

    def decode(self, text: str) -> bytes:
        """Decode a base62 string to bytes.

        Args:
            text: The base62 string to decode.

        Returns:
            The decoded bytes.

        Raises:
            EncodingError: If the string contains characters outside the alphabet.
        """
        stripped = text.lstrip(ALPHABET[0])
        zeros = len(text) - len(stripped)

        num = 0
        for char in stripped:
            try:
                num = num * 62 + _CHAR_TO_INT[char]
            except KeyError as e:
                raise EncodingError(f"invalid base62 character: {char!r}") from e

        body = num.to_bytes((num.bit_length() + 7) // 8, byteorder="big")
        return b"\x00" * zeros + body
