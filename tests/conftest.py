"""Shared pytest fixtures for decoding and rendering tests."""

import pytest

from retrotile.core.palettes import Palette
from retrotile.core.tiles import Tile


@pytest.fixture
def ramp_palette():
    """Palette with 16 distinct colours."""
    return Palette((i * 17, 255 - i * 17, i) for i in range(16))


@pytest.fixture
def second_palette():
    """Another palette with 16 distinct colours, none shared with ramp_palette."""
    return Palette((i, i * 16, 200) for i in range(16))


@pytest.fixture
def asymmetric_tile():
    """Tile whose pixels are neither horizontally nor vertically symmetric."""
    return Tile((y * 8 + x) % 16 for y in range(8) for x in range(8))


@pytest.fixture
def solid_tile():
    """Tile using colour index 5 everywhere."""
    return Tile([5] * 64)
