"""
Retro Tile Studio - Palette Decoding

Palette files are sequences of 16-bit little-endian words with 5 bits per
channel (0bBBBBBGGGGGRRRRR, bit 15 ignored), 16 words per palette.
"""

import struct
from pathlib import Path
from typing import Iterator

import numpy as np

from .errors import ColorIndexError
from ..logging_config import get_logger

logger = get_logger("core.palettes")

# Type alias for RGB color
RGBColor = tuple[int, int, int]

COLORS_PER_PALETTE = 16
BYTES_PER_COLOR = 2
BYTES_PER_PALETTE = COLORS_PER_PALETTE * BYTES_PER_COLOR

CHANNEL_MASK = 0x1F
CHANNEL_MAX = 31
RGB888_MAX = 255

_PALETTE_STRUCT = struct.Struct(f"<{COLORS_PER_PALETTE}H")


def scale_channel(bits: int) -> int:
    """Scale a 5-bit channel to 0-255 with floor(bits * 255 / 31)."""
    return (bits * RGB888_MAX) // CHANNEL_MAX


def bgr555_to_rgb888(word: int) -> RGBColor:
    """
    Convert a packed 15-bit colour word to an RGB888 tuple.

    Args:
        word: 16-bit colour value (bit 15 is ignored)

    Returns:
        Tuple of (r, g, b) values in 0-255 range
    """
    r = word & CHANNEL_MASK
    g = (word >> 5) & CHANNEL_MASK
    b = (word >> 10) & CHANNEL_MASK
    return scale_channel(r), scale_channel(g), scale_channel(b)


class Palette:
    """An immutable set of exactly 16 colours."""

    __slots__ = ("_colors",)

    def __init__(self, colors):
        colors = tuple(tuple(color) for color in colors)
        if len(colors) != COLORS_PER_PALETTE:
            raise ValueError(
                f"Palette needs {COLORS_PER_PALETTE} colours, got {len(colors)}"
            )
        self._colors: tuple[RGBColor, ...] = colors

    @property
    def colors(self) -> tuple[RGBColor, ...]:
        return self._colors

    def __getitem__(self, index: int) -> RGBColor:
        if not 0 <= index < COLORS_PER_PALETTE:
            raise ColorIndexError(index, COLORS_PER_PALETTE)
        return self._colors[index]

    def __len__(self) -> int:
        return COLORS_PER_PALETTE

    def __iter__(self) -> Iterator[RGBColor]:
        return iter(self._colors)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return f"Palette({list(self._colors)!r})"

    def to_array(self) -> np.ndarray:
        """Return the colours as a (16, 3) uint8 lookup table."""
        return np.array(self._colors, dtype=np.uint8)


def decode_palette(words) -> Palette:
    """Decode 16 packed colour words into a Palette."""
    return Palette(bgr555_to_rgb888(word) for word in words)


def decode_palettes(data: bytes) -> list[Palette]:
    """
    Decode every complete 16-colour palette in a buffer.

    A trailing group of fewer than 16 words (or an odd trailing byte) is
    discarded. Empty or undersized input yields an empty list.

    Args:
        data: Raw palette file contents

    Returns:
        Palettes in file order
    """
    usable = (len(data) // BYTES_PER_PALETTE) * BYTES_PER_PALETTE
    palettes = [
        decode_palette(words)
        for words in _PALETTE_STRUCT.iter_unpack(memoryview(data)[:usable])
    ]

    if usable != len(data):
        logger.debug(
            "Discarded %d trailing palette bytes", len(data) - usable
        )
    logger.debug("Decoded %d palettes from %d bytes", len(palettes), len(data))
    return palettes


def load_palettes(path: str | Path) -> list[Palette]:
    """Read a palette file and decode it."""
    with open(path, "rb") as f:
        data = f.read()
    return decode_palettes(data)
