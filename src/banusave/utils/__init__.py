"""Utility functions for banusave.

This module provides checksums and size calculation.
"""

from __future__ import annotations

from .checksum import sha256_digest, verify_sha256
from .sizing import encoded_size, envelope_size

__all__ = [
    # Checksum functions
    "sha256_digest",
    "verify_sha256",
    # Sizing functions
    "encoded_size",
    "envelope_size",
]
