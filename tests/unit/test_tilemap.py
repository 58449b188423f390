"""Unit tests for the TileMap grid and TileMapEntry value type."""

from dataclasses import FrozenInstanceError

import pytest

from retrotile.core.tilemap import (
    TILE_MAP_CELLS,
    TILE_MAP_HEIGHT,
    TILE_MAP_WIDTH,
    TileMap,
    TileMapEntry,
)


class TestTileMapEntry:
    """Tests for TileMapEntry defaults and edits."""

    def test_defaults(self):
        entry = TileMapEntry()
        assert entry.tile_index == 1
        assert entry.horizontal_flip is False
        assert entry.vertical_flip is False
        assert entry.palette_index == 0

    def test_is_immutable(self):
        entry = TileMapEntry()
        with pytest.raises(FrozenInstanceError):
            entry.tile_index = 3

    def test_with_changes_returns_new_entry(self):
        entry = TileMapEntry()
        changed = entry.with_changes(tile_index=7, palette_index=2)
        assert changed == TileMapEntry(tile_index=7, palette_index=2)
        assert entry.tile_index == 1

    def test_toggled_flips(self):
        entry = TileMapEntry().toggled_horizontal_flip()
        assert entry.horizontal_flip is True
        assert entry.vertical_flip is False
        entry = entry.toggled_vertical_flip().toggled_horizontal_flip()
        assert entry.horizontal_flip is False
        assert entry.vertical_flip is True

    def test_negative_tile_index_rejected(self):
        with pytest.raises(ValueError, match="tile_index"):
            TileMapEntry(tile_index=-1)

    def test_negative_palette_index_rejected(self):
        with pytest.raises(ValueError, match="palette_index"):
            TileMapEntry(palette_index=-1)


class TestTileMap:
    """Tests for TileMap get/set and iteration."""

    def test_dimensions(self):
        assert TILE_MAP_WIDTH == 32
        assert TILE_MAP_HEIGHT == 32
        assert TILE_MAP_CELLS == 1024

    def test_every_cell_has_default_entry(self):
        tile_map = TileMap()
        entries = list(tile_map.entries())
        assert len(entries) == 1024
        assert all(entry == TileMapEntry() for _, _, entry in entries)

    def test_cells_are_independent_objects(self):
        tile_map = TileMap()
        ids = {id(tile_map.get(x, y)) for x in range(32) for y in range(32)}
        assert len(ids) == 1024

    def test_set_only_changes_one_cell(self):
        tile_map = TileMap()
        tile_map.set(4, 9, TileMapEntry(tile_index=12, vertical_flip=True))

        assert tile_map.get(4, 9) == TileMapEntry(tile_index=12, vertical_flip=True)
        assert tile_map.get(9, 4) == TileMapEntry()
        changed = [(x, y) for x, y, e in tile_map.entries() if e != TileMapEntry()]
        assert changed == [(4, 9)]

    def test_set_does_not_validate_references(self):
        tile_map = TileMap()
        tile_map.set(0, 0, TileMapEntry(tile_index=5000, palette_index=300))
        assert tile_map.get(0, 0).tile_index == 5000

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (32, 0), (0, 32)])
    def test_get_out_of_range_raises(self, x, y):
        with pytest.raises(IndexError):
            TileMap().get(x, y)

    def test_set_out_of_range_raises(self):
        with pytest.raises(IndexError):
            TileMap().set(32, 32, TileMapEntry())

    def test_entries_row_major(self):
        coords = [(x, y) for x, y, _ in TileMap().entries()]
        assert coords[0] == (0, 0)
        assert coords[1] == (1, 0)
        assert coords[32] == (0, 1)
        assert coords[-1] == (31, 31)

    def test_fill(self):
        tile_map = TileMap()
        tile_map.fill(TileMapEntry(tile_index=0))
        assert all(e.tile_index == 0 for _, _, e in tile_map.entries())

    def test_copy_is_independent(self):
        tile_map = TileMap()
        clone = tile_map.copy()
        assert clone == tile_map

        clone.set(1, 1, TileMapEntry(tile_index=9))
        assert tile_map.get(1, 1) == TileMapEntry()
        assert clone != tile_map

    def test_in_bounds(self):
        assert TileMap.in_bounds(0, 0)
        assert TileMap.in_bounds(31, 31)
        assert not TileMap.in_bounds(32, 0)
        assert not TileMap.in_bounds(0, -1)
