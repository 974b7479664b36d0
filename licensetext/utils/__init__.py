"""Utility functions for fingerprints and display formatting."""

from .hashing import FINGERPRINT_ALGORITHM, fingerprint
from .wrapping import format_percent, wrap

__all__ = [
    # Hashing
    "fingerprint",
    "FINGERPRINT_ALGORITHM",
    # Display
    "wrap",
    "format_percent",
]
