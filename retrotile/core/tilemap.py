"""
Retro Tile Studio - Tile Map

A fixed 32x32 grid of cell descriptors. Each cell references a tile and a
palette by index and may mirror the tile horizontally and/or vertically.
References are not validated against the loaded collections: a cell may
point at a tile or palette that has not been loaded yet.
"""

from dataclasses import dataclass, replace
from typing import Iterator

TILE_MAP_WIDTH = 32
TILE_MAP_HEIGHT = 32
TILE_MAP_CELLS = TILE_MAP_WIDTH * TILE_MAP_HEIGHT

DEFAULT_TILE_INDEX = 1
DEFAULT_PALETTE_INDEX = 0


@dataclass(frozen=True)
class TileMapEntry:
    """One tile map cell."""

    tile_index: int = DEFAULT_TILE_INDEX
    horizontal_flip: bool = False
    vertical_flip: bool = False
    palette_index: int = DEFAULT_PALETTE_INDEX

    def __post_init__(self):
        if self.tile_index < 0:
            raise ValueError(f"tile_index must be non-negative, got {self.tile_index}")
        if self.palette_index < 0:
            raise ValueError(
                f"palette_index must be non-negative, got {self.palette_index}"
            )

    def with_changes(self, **changes) -> "TileMapEntry":
        """Copy of this entry with the given fields replaced."""
        return replace(self, **changes)

    def toggled_horizontal_flip(self) -> "TileMapEntry":
        return replace(self, horizontal_flip=not self.horizontal_flip)

    def toggled_vertical_flip(self) -> "TileMapEntry":
        return replace(self, vertical_flip=not self.vertical_flip)


class TileMap:
    """
    Fixed-size 32x32 matrix of TileMapEntry, stored row-major as [y][x].

    Every cell is always present. Cells are constructed independently so
    no two cells share an entry object by construction.
    """

    width = TILE_MAP_WIDTH
    height = TILE_MAP_HEIGHT

    def __init__(self):
        self._rows: list[list[TileMapEntry]] = [
            [TileMapEntry() for _ in range(TILE_MAP_WIDTH)]
            for _ in range(TILE_MAP_HEIGHT)
        ]

    @staticmethod
    def in_bounds(x: int, y: int) -> bool:
        return 0 <= x < TILE_MAP_WIDTH and 0 <= y < TILE_MAP_HEIGHT

    def _check(self, x: int, y: int):
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) outside {TILE_MAP_WIDTH}x{TILE_MAP_HEIGHT} tile map"
            )

    def get(self, x: int, y: int) -> TileMapEntry:
        """
        Get the entry at column x, row y.

        Raises:
            IndexError: If the coordinate is outside the map
        """
        self._check(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, entry: TileMapEntry):
        """
        Replace the entry at column x, row y.

        Tile and palette indices are not checked against loaded assets.

        Raises:
            IndexError: If the coordinate is outside the map
        """
        self._check(x, y)
        self._rows[y][x] = entry

    def fill(self, entry: TileMapEntry):
        """Set every cell to entry."""
        for row in self._rows:
            for x in range(TILE_MAP_WIDTH):
                row[x] = entry

    def entries(self) -> Iterator[tuple[int, int, TileMapEntry]]:
        """Yield (x, y, entry) for every cell in row-major order."""
        for y, row in enumerate(self._rows):
            for x, entry in enumerate(row):
                yield x, y, entry

    def copy(self) -> "TileMap":
        """Snapshot of the map; later edits to either map are independent."""
        clone = TileMap()
        clone._rows = [list(row) for row in self._rows]
        return clone

    def __eq__(self, other) -> bool:
        if not isinstance(other, TileMap):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"TileMap({TILE_MAP_WIDTH}x{TILE_MAP_HEIGHT})"
