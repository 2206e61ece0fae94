#!/usr/bin/env python3
"""Basic usage example for banusave.

This example demonstrates:
1. Encoding a JSON-like value with a game ID
2. Decoding it back
3. Detecting a corrupted archive
4. Typed save states with Pydantic
"""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from banusave import (
    IntegrityError,
    SaveModel,
    decode,
    decode_envelope,
    decode_model,
    encode,
    encode_model,
    encoded_size,
)


class PlayerSave(SaveModel):
    """Player save slot."""

    name: str
    level: int = Field(ge=1, le=99)
    inventory: list[str] = Field(default_factory=list)

    banusave_game_id: ClassVar[Optional[str]] = "dungeon-crawler"


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("banusave Basic Usage Example")
    print("=" * 60)
    print()

    value = {"name": "John Doe", "age": 42, "position": [1.5, -3.0], "alive": True}

    print("1. Encoding a save state...")
    data = encode(value, "gameID")
    print(f"   Value bytes: {encoded_size(value)}")
    print(f"   Archive bytes: {len(data)} (9 magic + game ID + value + 32 checksum)")
    print(f"   Hex: {data.hex()}")
    print()

    print("2. Decoding...")
    decoded, game_id = decode(data)
    print(f"   Game ID: {game_id}")
    print(f"   Value: {decoded}")
    print(f"   Match: {decoded == value}")
    print()

    print("3. Corrupting one byte...")
    corrupted = bytearray(data)
    corrupted[20] ^= 0x01
    try:
        decode(bytes(corrupted))
    except IntegrityError as e:
        print(f"   Rejected: {e}")
    print()

    print("4. Typed save state...")
    save = PlayerSave(name="Jane", level=12, inventory=["sword", "potion"])
    data = encode_model(save)
    envelope = decode_envelope(data)
    print(f"   Format version: {envelope.version}, game ID: {envelope.game_id}")
    print(f"   Restored: {decode_model(PlayerSave, data)!r}")
    print()


if __name__ == "__main__":
    main()
