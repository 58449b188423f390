"""
Retro Tile Studio - Tile Decoding

Tiles are 8x8 pixels at 4 bits per pixel, packed linearly: two pixels per
byte, low nibble first, left to right, top to bottom. 32 bytes per tile.
This is not the planar bitplane layout used by NES/SNES CHR data.
"""

from pathlib import Path
from typing import Iterator

import numpy as np

from .errors import DecodeError
from ..logging_config import get_logger

logger = get_logger("core.tiles")

TILE_SIZE = 8  # 8x8 pixels per tile
PIXELS_PER_TILE = TILE_SIZE * TILE_SIZE
BYTES_PER_TILE = PIXELS_PER_TILE // 2
MAX_COLOR_INDEX = 15


class Tile:
    """An immutable 8x8 tile of 4-bit colour indices in row-major order."""

    __slots__ = ("_pixels",)

    def __init__(self, pixels):
        pixels = tuple(pixels)
        if len(pixels) != PIXELS_PER_TILE:
            raise DecodeError(
                f"Tile needs {PIXELS_PER_TILE} pixels, got {len(pixels)}"
            )
        for value in pixels:
            if not 0 <= value <= MAX_COLOR_INDEX:
                raise DecodeError(f"Pixel value {value} is not a 4-bit colour index")
        self._pixels: tuple[int, ...] = pixels

    @property
    def pixels(self) -> tuple[int, ...]:
        return self._pixels

    def pixel(self, x: int, y: int) -> int:
        """Colour index at column x, row y."""
        if not (0 <= x < TILE_SIZE and 0 <= y < TILE_SIZE):
            raise IndexError(f"Pixel ({x}, {y}) outside {TILE_SIZE}x{TILE_SIZE} tile")
        return self._pixels[y * TILE_SIZE + x]

    def rows(self) -> list[list[int]]:
        """8x8 array of colour indices."""
        return [
            list(self._pixels[row * TILE_SIZE : (row + 1) * TILE_SIZE])
            for row in range(TILE_SIZE)
        ]

    def __getitem__(self, index: int) -> int:
        return self._pixels[index]

    def __len__(self) -> int:
        return PIXELS_PER_TILE

    def __iter__(self) -> Iterator[int]:
        return iter(self._pixels)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self._pixels == other._pixels

    def __hash__(self) -> int:
        return hash(self._pixels)

    def __repr__(self) -> str:
        return f"Tile({list(self._pixels)!r})"

    def to_array(self) -> np.ndarray:
        """Return the pixels as an (8, 8) uint8 array."""
        return np.array(self._pixels, dtype=np.uint8).reshape(TILE_SIZE, TILE_SIZE)


def decode_tile(data: bytes, tile_idx: int = 0) -> Tile:
    """
    Decode a single 32-byte tile.

    Args:
        data: Either a full tile file or a single 32-byte tile
        tile_idx: Tile index if data holds several tiles (default: 0)

    Returns:
        Decoded Tile

    Raises:
        DecodeError: If the tile extends past the end of data
    """
    offset = tile_idx * BYTES_PER_TILE
    if tile_idx < 0 or offset + BYTES_PER_TILE > len(data):
        raise DecodeError(f"Tile {tile_idx} out of range for {len(data)} bytes")

    pixels = []
    for byte in data[offset : offset + BYTES_PER_TILE]:
        pixels.append(byte & 0xF)
        pixels.append((byte >> 4) & 0xF)
    return Tile(pixels)


def decode_tiles(data: bytes) -> list[Tile]:
    """
    Decode every complete tile in a buffer.

    A trailing group shorter than 32 bytes is discarded.

    Args:
        data: Raw tile file contents

    Returns:
        Tiles in file order
    """
    num_tiles = len(data) // BYTES_PER_TILE
    tiles = [decode_tile(data, tile_idx) for tile_idx in range(num_tiles)]

    leftover = len(data) - num_tiles * BYTES_PER_TILE
    if leftover:
        logger.debug("Discarded %d trailing tile bytes", leftover)
    logger.debug("Decoded %d tiles from %d bytes", num_tiles, len(data))
    return tiles


def load_tiles(path: str | Path) -> list[Tile]:
    """Read a tile file and decode it."""
    with open(path, "rb") as f:
        data = f.read()
    return decode_tiles(data)
