"""Encoding implementation package.

This package provides the base62 token encoding and the Unix clock.
"""

from .base62 import ALPHABET, Base62
from .clock import UnixClock

__all__ = [
    "ALPHABET",
    "Base62",
    "UnixClock",
]
