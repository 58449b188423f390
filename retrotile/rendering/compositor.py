"""
Retro Tile Studio - Compositor

Renders tile sheets, tile maps, palette strips and single cells into pixel
buffers. A pixel buffer is a (height, width, 3) uint8 numpy array of RGB
triples, filled black before painting.
"""

from typing import Sequence

import numpy as np

from ..core.assets import lookup
from ..core.errors import ColorIndexError, DecodeError
from ..core.palettes import COLORS_PER_PALETTE, Palette
from ..core.tilemap import TILE_MAP_HEIGHT, TILE_MAP_WIDTH, TileMap, TileMapEntry
from ..core.tiles import PIXELS_PER_TILE, TILE_SIZE, Tile
from ..logging_config import get_logger

logger = get_logger("rendering.compositor")

TILE_SHEET_COLUMNS = 32
BACKGROUND_COLOR = (0, 0, 0)

DEFAULT_PALETTE_BLOCK_SIZE = 8
DEFAULT_INSPECTOR_MAGNIFICATION = 8


def _check_positive(name: str, value: int):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def blank_buffer(width: int, height: int) -> np.ndarray:
    """Black pixel buffer of the given size."""
    buffer = np.zeros((height, width, 3), dtype=np.uint8)
    buffer[:, :] = BACKGROUND_COLOR
    return buffer


def palette_table(palette: Palette | Sequence) -> np.ndarray:
    """(n, 3) uint8 colour lookup table for a palette."""
    if isinstance(palette, Palette):
        return palette.to_array()
    return np.array([tuple(color) for color in palette], dtype=np.uint8).reshape(-1, 3)


def tile_indices(tile: Tile | Sequence[int]) -> np.ndarray:
    """(8, 8) array of colour indices for a tile."""
    if isinstance(tile, Tile):
        return tile.to_array()
    if len(tile) != PIXELS_PER_TILE:
        raise DecodeError(f"Tile needs {PIXELS_PER_TILE} pixels, got {len(tile)}")
    return np.array(tile, dtype=np.int64).reshape(TILE_SIZE, TILE_SIZE)


def render_tile_block(
    tile: Tile | Sequence[int],
    palette: Palette | Sequence,
    magnification: int = 1,
    horizontal_flip: bool = False,
    vertical_flip: bool = False,
    table: np.ndarray | None = None,
) -> np.ndarray:
    """
    Render one tile with one palette.

    Flips mirror the sample coordinates: with horizontal_flip the pixel drawn
    at column sx is read from column 7 - sx (likewise for rows).

    Args:
        tile: Tile or 64 colour indices
        palette: Palette or sequence of RGB colours
        magnification: Size of the square block each source pixel becomes
        horizontal_flip: Mirror left/right
        vertical_flip: Mirror top/bottom
        table: Precomputed palette_table(palette), optional

    Returns:
        (8 * magnification, 8 * magnification, 3) pixel buffer

    Raises:
        ColorIndexError: If a pixel indexes past the end of the palette
    """
    _check_positive("magnification", magnification)
    if table is None:
        table = palette_table(palette)

    indices = tile_indices(tile)
    if vertical_flip:
        indices = indices[::-1, :]
    if horizontal_flip:
        indices = indices[:, ::-1]

    highest = int(indices.max())
    if highest >= len(table) or int(indices.min()) < 0:
        bad = highest if highest >= len(table) else int(indices.min())
        raise ColorIndexError(bad, len(table))

    block = table[indices]
    if magnification > 1:
        block = np.repeat(np.repeat(block, magnification, axis=0), magnification, axis=1)
    return block


def _paint(buffer: np.ndarray, block: np.ndarray, x: int, y: int):
    height, width = block.shape[:2]
    buffer[y : y + height, x : x + width] = block


def render_tile_sheet(
    palette: Palette | Sequence,
    tiles: Sequence[Tile],
    magnification: int = 1,
) -> np.ndarray:
    """
    Lay out tiles in a 32-column grid using one palette.

    Tile i lands at column i % 32, row i // 32. The buffer is
    32 * 8 * magnification wide and ceil(len(tiles) / 32) * 8 * magnification
    tall.

    Raises:
        ColorIndexError: If any tile pixel indexes past the palette
    """
    _check_positive("magnification", magnification)
    cell = TILE_SIZE * magnification
    rows = -(-len(tiles) // TILE_SHEET_COLUMNS)
    buffer = blank_buffer(TILE_SHEET_COLUMNS * cell, rows * cell)

    table = palette_table(palette)
    for tile_idx, tile in enumerate(tiles):
        block = render_tile_block(tile, palette, magnification, table=table)
        col = tile_idx % TILE_SHEET_COLUMNS
        row = tile_idx // TILE_SHEET_COLUMNS
        _paint(buffer, block, col * cell, row * cell)

    return buffer


def render_cell(
    palettes: Sequence[Palette],
    tiles: Sequence[Tile],
    entry: TileMapEntry,
    magnification: int = 1,
    tables: dict[int, np.ndarray] | None = None,
) -> np.ndarray | None:
    """
    Render a single tile map entry.

    Args:
        tables: Palette lookup tables keyed by palette index, filled lazily

    Returns:
        The cell's pixel block, or None if its tile or palette is not loaded
    """
    tile = lookup(tiles, entry.tile_index)
    palette = lookup(palettes, entry.palette_index)
    if tile is None or palette is None:
        return None

    table = None
    if tables is not None:
        table = tables.get(entry.palette_index)
        if table is None:
            table = tables[entry.palette_index] = palette_table(palette)

    return render_tile_block(
        tile,
        palette,
        magnification,
        horizontal_flip=entry.horizontal_flip,
        vertical_flip=entry.vertical_flip,
        table=table,
    )


def render_tile_map(
    palettes: Sequence[Palette],
    tiles: Sequence[Tile],
    tile_map: TileMap,
    magnification: int = 1,
) -> np.ndarray:
    """
    Render the full 32x32 tile map.

    Cells whose tile or palette index is not loaded are skipped and keep
    the black background.

    Returns:
        (256 * magnification, 256 * magnification, 3) pixel buffer
    """
    _check_positive("magnification", magnification)
    cell = TILE_SIZE * magnification
    buffer = blank_buffer(TILE_MAP_WIDTH * cell, TILE_MAP_HEIGHT * cell)

    tables: dict[int, np.ndarray] = {}
    skipped = 0
    for x, y, entry in tile_map.entries():
        block = render_cell(palettes, tiles, entry, magnification, tables=tables)
        if block is None:
            skipped += 1
            continue
        _paint(buffer, block, x * cell, y * cell)

    if skipped:
        logger.debug("Skipped %d tile map cells with unloaded references", skipped)
    return buffer


def render_selection(
    palettes: Sequence[Palette],
    tiles: Sequence[Tile],
    tile_map: TileMap,
    selection: tuple[int, int] | None,
    magnification: int = DEFAULT_INSPECTOR_MAGNIFICATION,
) -> np.ndarray:
    """
    Render the selected cell alone for the current-tile inspector.

    Args:
        selection: (x, y) of the selected cell, or None

    Returns:
        (8 * magnification, 8 * magnification, 3) pixel buffer, black when
        nothing is selected, the selection lies outside the map or the
        selected cell cannot be resolved
    """
    _check_positive("magnification", magnification)
    size = TILE_SIZE * magnification
    buffer = blank_buffer(size, size)
    if selection is None:
        return buffer

    x, y = selection
    if not TileMap.in_bounds(x, y):
        return buffer
    block = render_cell(palettes, tiles, tile_map.get(x, y), magnification)
    if block is not None:
        _paint(buffer, block, 0, 0)
    return buffer


def render_palette_strip(
    palettes: Sequence[Palette | Sequence],
    block_size: int = DEFAULT_PALETTE_BLOCK_SIZE,
) -> np.ndarray:
    """
    Draw each palette as a row of 16 swatches with 1-pixel gutters.

    Returns:
        (len(palettes) * (block_size + 1) + 1, 16 * (block_size + 1) + 1, 3)
        pixel buffer
    """
    _check_positive("block_size", block_size)
    step = block_size + 1
    buffer = blank_buffer(
        COLORS_PER_PALETTE * step + 1, len(palettes) * step + 1
    )

    for palette_idx, palette in enumerate(palettes):
        for color_idx, color in enumerate(palette):
            x = color_idx * step + 1
            y = palette_idx * step + 1
            buffer[y : y + block_size, x : x + block_size] = color

    return buffer
