"""Archive inspection CLI command."""

from __future__ import annotations

from pathlib import Path

from ..codec.encoder import value_type
from ..codec.tags import ValueType
from ..config import DecodeOptions
from ..envelope.container import LEGACY_MAGIC, MAGIC, Envelope, decode_envelope


def inspect_file(file_path: Path, options: DecodeOptions | None = None) -> None:
    """Decode an archive file and print a breakdown of its layout.

    Args:
        file_path: Path to the archive

    Raises:
        BanUSaveError: If the archive cannot be decoded
        OSError: If the file cannot be read
    """
    data = file_path.read_bytes()
    envelope = decode_envelope(data, options)
    print_envelope(envelope, total_size=len(data), name=file_path.name)


def print_envelope(envelope: Envelope, *, total_size: int, name: str) -> None:
    """Print a decoded archive's header, body and checksum sections."""
    magic = MAGIC if envelope.version == 2 else LEGACY_MAGIC

    print(f"{'=' * 19} {name} {'=' * 19}")
    print(f"Archive size: {total_size} bytes")
    print(f"        magic{'.' * 33}{len(magic)} ({magic.decode('ascii')}, version {envelope.version})")
    print(f"        body{'.' * 34}{envelope.body_size}")
    print(f"        checksum{'.' * 30}{len(envelope.checksum)}")
    print()

    print(f"{'-' * 28} Body {'-' * 28}")
    if envelope.game_id is None:
        print("Game ID: (none, legacy archive)")
    else:
        print(f"Game ID: {envelope.game_id}")
    print(f"Root value: {_describe(envelope.value)}")
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"SHA-256: {envelope.checksum.hex()}")
    print()


def _describe(value: object) -> str:
    kind = value_type(value)
    if kind is ValueType.ARRAY:
        return f"array ({len(value)} items)"  # type: ignore[arg-type]
    if kind is ValueType.OBJECT:
        return f"object ({len(value)} keys)"  # type: ignore[arg-type]
    if kind in (ValueType.TRUE, ValueType.FALSE):
        return "boolean"
    return kind.name.lower()
