"""
Retro Tile Studio - Editor State

Session state: the loaded palettes and tiles, the tile map and the
currently selected cell. The core rendering functions only ever read
snapshots of this state.
"""

from pathlib import Path
from typing import Iterable

from retrotile.core.assets import AssetList, decode_buffers, read_files
from retrotile.core.palettes import Palette, decode_palettes
from retrotile.core.tilemap import TileMap, TileMapEntry
from retrotile.core.tiles import Tile, decode_tiles
from retrotile.logging_config import get_logger

logger = get_logger("editor.state")


class EditorState:
    """Manages editor application state."""

    def __init__(self):
        # Decoded assets, append-only
        self.palettes: AssetList[Palette] = AssetList()
        self.tiles: AssetList[Tile] = AssetList()

        self.tile_map = TileMap()
        self.current_tile_coords: tuple[int, int] | None = None

        # Palette used to draw the tile sheet
        self.selected_palette_index: int = 0

        # View settings
        self.show_grid: bool = True

        # Bumped on every change that affects rendering
        self.revision: int = 0

    def _touch(self):
        self.revision += 1

    @property
    def current_tile_entry(self) -> TileMapEntry | None:
        """Entry at the selected cell, or None if nothing is selected."""
        if self.current_tile_coords is None:
            return None
        x, y = self.current_tile_coords
        return self.tile_map.get(x, y)

    @property
    def sheet_palette(self) -> Palette | None:
        """Selected tile sheet palette, or None if it is not loaded yet."""
        return self.palettes.get(self.selected_palette_index)

    # Loading

    def add_palette_buffers(self, buffers: Iterable[bytes]) -> int:
        """
        Decode palette buffers in order and append the results.

        Returns:
            Number of palettes added
        """
        added = self.palettes.extend(decode_buffers(buffers, decode_palettes))
        self._touch()
        logger.info("Added %d palettes (%d loaded)", added, len(self.palettes))
        return added

    def add_tile_buffers(self, buffers: Iterable[bytes]) -> int:
        """
        Decode tile buffers in order and append the results.

        Returns:
            Number of tiles added
        """
        added = self.tiles.extend(decode_buffers(buffers, decode_tiles))
        self._touch()
        logger.info("Added %d tiles (%d loaded)", added, len(self.tiles))
        return added

    def load_palette_files(self, paths: Iterable[str | Path]) -> int:
        """
        Read and decode palette files in selection order.

        All files are read before anything is appended, so a failed read
        leaves the palettes unchanged.

        Raises:
            OSError: If a file cannot be read
        """
        return self.add_palette_buffers(read_files(paths))

    def load_tile_files(self, paths: Iterable[str | Path]) -> int:
        """
        Read and decode tile files in selection order.

        Raises:
            OSError: If a file cannot be read
        """
        return self.add_tile_buffers(read_files(paths))

    # Selection

    def select_cell(self, x: int, y: int):
        """Select a tile map cell."""
        if not TileMap.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside tile map")
        self.current_tile_coords = (x, y)
        self._touch()

    def clear_selection(self):
        self.current_tile_coords = None
        self._touch()

    # Editing the selected cell

    def update_current_entry(self, **changes) -> TileMapEntry | None:
        """
        Replace fields of the selected entry.

        Returns:
            The new entry, or None if no cell is selected
        """
        entry = self.current_tile_entry
        if entry is None:
            return None
        x, y = self.current_tile_coords
        new_entry = entry.with_changes(**changes)
        self.tile_map.set(x, y, new_entry)
        self._touch()
        return new_entry

    def toggle_horizontal_flip(self) -> TileMapEntry | None:
        entry = self.current_tile_entry
        if entry is None:
            return None
        return self.update_current_entry(horizontal_flip=not entry.horizontal_flip)

    def toggle_vertical_flip(self) -> TileMapEntry | None:
        entry = self.current_tile_entry
        if entry is None:
            return None
        return self.update_current_entry(vertical_flip=not entry.vertical_flip)

    def step_tile_index(self, delta: int) -> TileMapEntry | None:
        """Move the selected entry's tile index by delta, stopping at 0."""
        entry = self.current_tile_entry
        if entry is None:
            return None
        return self.update_current_entry(tile_index=max(0, entry.tile_index + delta))

    def step_palette_index(self, delta: int) -> TileMapEntry | None:
        """Move the selected entry's palette index by delta, stopping at 0."""
        entry = self.current_tile_entry
        if entry is None:
            return None
        return self.update_current_entry(
            palette_index=max(0, entry.palette_index + delta)
        )

    # Tile sheet and view

    def set_selected_palette_index(self, index: int):
        """Choose the sheet palette, clamped to the loaded palettes."""
        highest = max(0, len(self.palettes) - 1)
        self.selected_palette_index = max(0, min(highest, index))
        self._touch()

    def step_selected_palette(self, delta: int):
        self.set_selected_palette_index(self.selected_palette_index + delta)

    def toggle_grid(self):
        """Toggle grid visibility."""
        self.show_grid = not self.show_grid
