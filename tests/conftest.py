"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from banusave import encode


@pytest.fixture
def sample_value() -> dict[str, Any]:
    """Sample save state covering every value type."""
    return {
        "name": "John Doe",
        "age": 42,
        "ratio": 2.5,
        "alive": True,
        "banned": False,
        "guild": None,
        "inventory": ["sword", 3, 1.5, [], {}],
        "stats": {"hp": -7, "mp": 9_000_000_000},
    }


@pytest.fixture
def sample_game_id() -> str:
    """Sample game ID for testing."""
    return "gameID"


@pytest.fixture
def sample_archive(sample_value: dict[str, Any], sample_game_id: str) -> bytes:
    """Encoded archive of sample_value."""
    return encode(sample_value, sample_game_id)
