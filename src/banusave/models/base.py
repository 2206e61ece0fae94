"""Pydantic base class for typed save states.

This module provides SaveModel and the helpers that move model instances in
and out of banusave archives.
"""

from __future__ import annotations

from typing import ClassVar, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ..config import DecodeOptions
from ..envelope.container import decode_envelope, encode
from ..exceptions import FormatError, InputValidationError

T = TypeVar("T", bound=BaseModel)


class SaveModel(BaseModel):
    """Base class for typed save states.

    Fields must dump to values the codec supports: None, bool, int, float,
    str, lists/tuples and dicts with string keys.

    Example:
        >>> from pydantic import Field
        >>> class PlayerSave(SaveModel):
        ...     name: str
        ...     level: int = Field(ge=1, le=99)
        ...     inventory: list[str] = []
        ...
        ...     banusave_game_id: ClassVar[Optional[str]] = "dungeon-crawler"
        >>> data = encode_model(PlayerSave(name="John Doe", level=42))
        >>> decode_model(PlayerSave, data).level
        42

    Attributes:
        banusave_game_id: Game ID written by encode_model() and required by
            decode_model() (optional)
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    banusave_game_id: ClassVar[Optional[str]] = None


def encode_model(model: BaseModel, game_id: Optional[str] = None) -> bytes:
    """Encode a Pydantic model instance into a banusave archive.

    Args:
        model: Model instance to encode
        game_id: Game ID to embed; defaults to the class's banusave_game_id

    Returns:
        Archive bytes

    Raises:
        InputValidationError: If no game ID is available or a field value cannot be encoded
    """
    if game_id is None:
        game_id = getattr(type(model), "banusave_game_id", None)
    if game_id is None:
        raise InputValidationError(
            f"{type(model).__name__} has no banusave_game_id; pass game_id explicitly"
        )

    return encode(model.model_dump(mode="python"), game_id)


def decode_model(
    model_class: type[T], data: bytes, options: Optional[DecodeOptions] = None
) -> T:
    """Decode a banusave archive into a Pydantic model instance.

    Args:
        model_class: Model class to validate the decoded value against
        data: Archive bytes
        options: Decoding options

    Returns:
        Validated model instance

    Raises:
        FormatError: If the archive is malformed, belongs to another game,
            or does not validate against model_class
        IntegrityError: If the checksum does not match
    """
    envelope = decode_envelope(data, options)

    expected_id = getattr(model_class, "banusave_game_id", None)
    if expected_id is not None and envelope.game_id != expected_id:
        raise FormatError(
            f"Game ID mismatch: archive has {envelope.game_id!r}, expected {expected_id!r} "
            f"for {model_class.__name__}"
        )

    try:
        return model_class.model_validate(envelope.value)
    except ValidationError as e:
        raise FormatError(f"Failed to construct {model_class.__name__}: {e}") from e

