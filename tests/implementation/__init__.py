"""Test implementation package.

This package provides deterministic and instrumented implementations of the
branca interfaces for use in tests.
"""

from .aead import RecordingAead
from .clock import FixedClock
from .entropy import FixedEntropy

__all__ = [
    "FixedClock",
    "FixedEntropy",
    "RecordingAead",
]
