"""
Retro Tile Studio - PIL Renderer

Pillow wrappers around the compositor, producing RGB images from the
pixel buffers.
"""

from typing import Sequence

import numpy as np
from PIL import Image

from ..core.palettes import Palette
from ..core.tilemap import TileMap
from ..core.tiles import Tile
from .compositor import (
    DEFAULT_INSPECTOR_MAGNIFICATION,
    DEFAULT_PALETTE_BLOCK_SIZE,
    render_palette_strip,
    render_selection,
    render_tile_map,
    render_tile_sheet,
)


def buffer_to_image(buffer: np.ndarray) -> Image.Image:
    """
    Convert a pixel buffer to a PIL RGB image.

    Zero-height buffers (an empty tile sheet) are returned as 1-pixel-tall
    black images since PIL cannot hold empty images of non-zero width.
    """
    if buffer.shape[0] == 0 or buffer.shape[1] == 0:
        return Image.new("RGB", (max(buffer.shape[1], 1), 1))
    return Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8), "RGB")


def render_tile_sheet_to_image(
    palette: Palette, tiles: Sequence[Tile], magnification: int = 1
) -> Image.Image:
    return buffer_to_image(render_tile_sheet(palette, tiles, magnification))


def render_tile_map_to_image(
    palettes: Sequence[Palette],
    tiles: Sequence[Tile],
    tile_map: TileMap,
    magnification: int = 1,
) -> Image.Image:
    return buffer_to_image(render_tile_map(palettes, tiles, tile_map, magnification))


def render_palette_strip_to_image(
    palettes: Sequence[Palette], block_size: int = DEFAULT_PALETTE_BLOCK_SIZE
) -> Image.Image:
    return buffer_to_image(render_palette_strip(palettes, block_size))


def render_selection_to_image(
    palettes: Sequence[Palette],
    tiles: Sequence[Tile],
    tile_map: TileMap,
    selection: tuple[int, int] | None,
    magnification: int = DEFAULT_INSPECTOR_MAGNIFICATION,
) -> Image.Image:
    return buffer_to_image(
        render_selection(palettes, tiles, tile_map, selection, magnification)
    )
