"""Result types for branca.

The codec never raises for token failures. It returns a Result carrying
either a value or an ErrorKind, and callers who prefer exceptions use
Result.unwrap() to turn the kind into its fixed BrancaError subclass.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Type, TypeVar

from branca.exceptions import (
    BrancaError,
    ExpiredTokenError,
    ForgedTokenError,
    InvalidArgumentError,
    MalformedTokenError,
    UnknownVersionError,
)

T = TypeVar("T")


class ErrorKind(Enum):
    """The ways encoding or decoding a token can fail."""

    INVALID_ARGUMENT = "invalid_argument"
    MALFORMED_TOKEN = "malformed_token"
    UNKNOWN_VERSION = "unknown_version"
    FORGED = "forged"
    EXPIRED = "expired"

    @property
    def exception(self) -> Type[BrancaError]:
        """The exception type raised for this kind by Result.unwrap()."""
        return _EXCEPTIONS[self]


_EXCEPTIONS = {
    ErrorKind.INVALID_ARGUMENT: InvalidArgumentError,
    ErrorKind.MALFORMED_TOKEN: MalformedTokenError,
    ErrorKind.UNKNOWN_VERSION: UnknownVersionError,
    ErrorKind.FORGED: ForgedTokenError,
    ErrorKind.EXPIRED: ExpiredTokenError,
}


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an encode or decode call.

    Attributes:
        value: The token string or payload on success, otherwise None.
        error: The failure kind, or None on success.
    """

    value: Optional[T] = None
    error: Optional[ErrorKind] = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the exception for the error kind.

        Returns:
            The successful value.

        Raises:
            BrancaError: The subclass matching the error kind, with its fixed
                message.
        """
        if self.error is not None:
            raise self.error.exception()
        return self.value  # type: ignore[return-value]
