"""Pydantic model support for banusave.

This module provides the SaveModel base class and typed encode/decode helpers.
"""

from __future__ import annotations

from .base import SaveModel, decode_model, encode_model

__all__ = [
    "SaveModel",
    "encode_model",
    "decode_model",
]
