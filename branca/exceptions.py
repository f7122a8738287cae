"""Exception classes for branca.

This module defines custom exception types used throughout the branca library.
Each token failure kind has a fixed, human-readable message.
"""


class BrancaError(Exception):
    """Base exception class for all branca errors."""

    pass


class ConfigurationError(BrancaError):
    """Exception raised when the codec configuration is invalid.

    This is a startup-time error (e.g. missing key or key of the wrong length),
    never a per-call one.
    """

    pass


class EncodingError(BrancaError):
    """Exception raised for text encoding/decoding errors."""

    pass


class InvalidArgumentError(BrancaError):
    """Exception raised when encode or decode receives malformed input."""

    def __init__(self, message: str = "Invalid arguments.") -> None:
        super().__init__(message)


class MalformedTokenError(BrancaError):
    """Exception raised when a token is too short or not valid base62."""

    def __init__(self, message: str = "Malformed token.") -> None:
        super().__init__(message)


class UnknownVersionError(BrancaError):
    """Exception raised when the token version byte is not supported."""

    def __init__(self, message: str = "Unknown token version.") -> None:
        super().__init__(message)


class ForgedTokenError(BrancaError):
    """Exception raised when token authentication fails."""

    def __init__(self, message: str = "Invalid token.") -> None:
        super().__init__(message)


class ExpiredTokenError(BrancaError):
    """Exception raised when an authentic token is past its TTL."""

    def __init__(self, message: str = "Token is expired.") -> None:
        super().__init__(message)
