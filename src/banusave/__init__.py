"""banusave: BanUSave archive codec

A Python library for the BanUSave save-game format: a compact tagged binary
encoding of JSON-like values, sealed in an envelope that records a game ID and
a SHA-256 checksum of the payload.

Key Features:
- Lossless round-trip of None, bool, 64-bit int, float, str, list and dict
- Tamper detection with SHA-256
- Reads legacy "BANUSAVE" archives alongside current "BANUSAVE2" ones
- Optional Pydantic models for typed save states

Quick Start:
    >>> from banusave import encode, decode
    >>>
    >>> data = encode({"name": "John Doe", "age": 42}, "gameID")
    >>> decode(data)
    ({'name': 'John Doe', 'age': 42}, 'gameID')
"""

from __future__ import annotations

from .codec import ValueType, decode_value, encode_value
from .config import DecodeOptions
from .envelope import Envelope, decode, decode_envelope, encode, encode_legacy
from .exceptions import (
    BanUSaveError,
    FormatError,
    InputValidationError,
    IntegrityError,
)
from .models import SaveModel, decode_model, encode_model
from .utils import encoded_size, envelope_size, sha256_digest, verify_sha256

__version__ = "0.2.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "encode_legacy",
    "decode_envelope",
    "Envelope",
    "DecodeOptions",
    # Value codec
    "encode_value",
    "decode_value",
    "ValueType",
    # Models
    "SaveModel",
    "encode_model",
    "decode_model",
    # Exceptions
    "BanUSaveError",
    "InputValidationError",
    "FormatError",
    "IntegrityError",
    # Checksum
    "sha256_digest",
    "verify_sha256",
    # Sizing
    "encoded_size",
    "envelope_size",
    # Version
    "__version__",
]
