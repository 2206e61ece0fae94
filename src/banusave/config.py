"""Decoding options for banusave archives.

This module provides the configuration dataclass that tunes how strictly
archives are decoded.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True)
class DecodeOptions:
    """Configuration for decoding banusave archives.

    Attributes:
        strict: Reject bytes left over after the root value (default True).
            Older writers never produce trailing bytes, so strict decoding
            only turns away damaged or hand-crafted archives. Set to False to
            ignore them instead.

        allow_legacy: Accept version 1 archives (``BANUSAVE`` magic, no game ID),
            default True. Legacy archives decode with a game ID of None.

        max_depth: Maximum nesting of arrays and objects (default 256).
            Also enforced by the encoder so that anything written can be read back.

        text_errors: Error handler used when decoding UTF-8 strings, keys and
            game IDs (default "strict"). Any handler registered with the
            ``codecs`` module is accepted, e.g. "replace" or "surrogateescape".

    Examples:
        ```python
        from banusave import DecodeOptions, decode

        # Ignore padding written by third-party tools
        value, game_id = decode(data, DecodeOptions(strict=False))

        # Only accept current-format archives
        value, game_id = decode(data, DecodeOptions(allow_legacy=False))
        ```
    """

    strict: bool = True
    allow_legacy: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH
    text_errors: str = "strict"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth!r}")

        try:
            codecs.lookup_error(self.text_errors)
        except LookupError as err:
            raise ValueError(f"Unknown text error handler: {self.text_errors!r}") from err
