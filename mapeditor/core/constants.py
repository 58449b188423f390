"""
Retro Tile Studio - Editor Constants

All configuration constants for the editor including dimensions,
colors and layout values.
"""

from retrotile.core.tilemap import TILE_MAP_HEIGHT, TILE_MAP_WIDTH
from retrotile.core.tiles import TILE_SIZE

# Magnifications
DEFAULT_MAP_SCALE = 2
MIN_MAP_SCALE = 1
MAX_MAP_SCALE = 4
SHEET_MAGNIFICATION = 2
PALETTE_BLOCK_SIZE = 10
INSPECTOR_MAGNIFICATION = 8

# UI Layout
TOOLBAR_HEIGHT = 40
STATUS_HEIGHT = 30
SIDEBAR_WIDTH = 550
SIDEBAR_PADDING = 10
SECTION_LABEL_HEIGHT = 20
SHEET_VIEW_HEIGHT = 192
PALETTE_VIEW_HEIGHT = 160
CANVAS_OFFSET_X = 0
CANVAS_OFFSET_Y = TOOLBAR_HEIGHT
MIN_SCREEN_HEIGHT = 800

# Colors
COLOR_BG = (48, 48, 48)
COLOR_TOOLBAR = (32, 32, 32)
COLOR_STATUS = (32, 32, 32)
COLOR_SIDEBAR_BG = (40, 40, 40)
COLOR_GRID = (80, 80, 80)
COLOR_SELECTION = (255, 215, 0)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_DIM = (160, 160, 160)
COLOR_BUTTON = (79, 70, 229)
COLOR_BUTTON_HOVER = (67, 56, 202)
COLOR_BUTTON_ACTIVE = (100, 100, 200)

# File dialog filters
ASSET_FILETYPES = [("Binary files", "*.bin"), ("All files", "*.*")]


def map_canvas_size(scale: int) -> tuple[int, int]:
    """Pixel size of the tile map canvas at a given scale."""
    return (TILE_MAP_WIDTH * TILE_SIZE * scale, TILE_MAP_HEIGHT * TILE_SIZE * scale)
