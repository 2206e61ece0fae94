"""Archive envelope for banusave.

This module provides the magic header, game ID and SHA-256 checksum that
wrap an encoded value.
"""

from __future__ import annotations

from .container import (
    LEGACY_MAGIC,
    MAGIC,
    Envelope,
    decode,
    decode_envelope,
    encode,
    encode_legacy,
)

__all__ = [
    "encode",
    "decode",
    "encode_legacy",
    "decode_envelope",
    "Envelope",
    "MAGIC",
    "LEGACY_MAGIC",
]
