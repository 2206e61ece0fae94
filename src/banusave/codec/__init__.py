"""Tagged binary value codec for banusave.

This module provides encoding and decoding of single JSON-like values to and
from the tag-prefixed, terminator-delimited banusave value format.
"""

from __future__ import annotations

from .decoder import decode_value
from .encoder import encode_value, value_type
from .tags import ValueType

__all__ = [
    "encode_value",
    "decode_value",
    "value_type",
    "ValueType",
]
