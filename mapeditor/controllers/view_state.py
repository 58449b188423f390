"""
Retro Tile Studio - View State

Maps screen coordinates to tile map cells and back.
"""

from pygame import Rect

from retrotile.core.tilemap import TileMap
from retrotile.core.tiles import TILE_SIZE


class ViewState:
    """Manages the tile map canvas position and scale."""

    def __init__(self, canvas_rect: Rect, scale: int = 2):
        """
        Initialize view state.

        Args:
            canvas_rect: The canvas drawing area (screen coordinates)
            scale: Map magnification
        """
        self.canvas_rect = canvas_rect
        self.scale = scale

    @property
    def tile_size(self) -> int:
        """Get the on-screen size of one cell in pixels."""
        return TILE_SIZE * self.scale

    def screen_to_cell(self, screen_pos: tuple[int, int]) -> tuple[int, int] | None:
        """
        Convert screen position to tile map coordinates.

        Returns:
            Cell coordinates (x, y), or None if outside the map
        """
        if not self.canvas_rect.collidepoint(screen_pos):
            return None

        x = (screen_pos[0] - self.canvas_rect.x) // self.tile_size
        y = (screen_pos[1] - self.canvas_rect.y) // self.tile_size
        if not TileMap.in_bounds(x, y):
            return None
        return (x, y)

    def cell_to_screen(self, cell: tuple[int, int]) -> tuple[int, int]:
        """Top-left screen position of cell (x, y)."""
        x, y = cell
        return (
            self.canvas_rect.x + x * self.tile_size,
            self.canvas_rect.y + y * self.tile_size,
        )

    def cell_rect(self, cell: tuple[int, int]) -> Rect:
        sx, sy = self.cell_to_screen(cell)
        return Rect(sx, sy, self.tile_size, self.tile_size)


class ScrollPane:
    """A fixed-height sidebar region showing a vertically scrollable surface."""

    def __init__(self, rect: Rect, scroll_step: int = 20):
        """
        Initialize scroll pane.

        Args:
            rect: Visible area of the pane (screen coordinates)
            scroll_step: Pixels moved per mouse wheel notch
        """
        self.rect = rect
        self.scroll_step = scroll_step
        self.content_height = 0
        self.offset_y = 0

    @property
    def max_offset(self) -> int:
        return max(0, self.content_height - self.rect.height)

    def set_content_height(self, height: int):
        """Record the height of the content, keeping the offset in range."""
        self.content_height = height
        self.offset_y = min(self.offset_y, self.max_offset)

    def scroll(self, notches: int):
        """Scroll down by notches (negative scrolls up), clamped to the content."""
        self.offset_y = max(0, min(self.max_offset, self.offset_y + notches * self.scroll_step))

    def contains(self, screen_pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(screen_pos)

    def visible_area(self, content_width: int) -> Rect:
        """Source rectangle of the content currently inside the pane."""
        height = min(self.rect.height, max(0, self.content_height - self.offset_y))
        return Rect(0, self.offset_y, content_width, height)
