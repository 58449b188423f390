"""
Retro Tile Studio - Grid Renderer

Renders grid overlay on the tile map canvas.
"""

import pygame
from pygame import Surface

from retrotile.core.tilemap import TILE_MAP_HEIGHT, TILE_MAP_WIDTH

from mapeditor.controllers.view_state import ViewState
from mapeditor.core.constants import COLOR_GRID


class GridRenderer:
    """Renders grid overlay on canvas."""

    @staticmethod
    def render(screen: Surface, view: ViewState):
        """
        Render one line per cell boundary across the tile map.

        Args:
            screen: Pygame surface to draw on
            view: Tile map canvas view
        """
        rect = view.canvas_rect
        tile_size = view.tile_size
        right = rect.x + TILE_MAP_WIDTH * tile_size
        bottom = rect.y + TILE_MAP_HEIGHT * tile_size

        for col in range(TILE_MAP_WIDTH + 1):
            x = rect.x + col * tile_size
            pygame.draw.line(screen, COLOR_GRID, (x, rect.y), (x, bottom))

        for row in range(TILE_MAP_HEIGHT + 1):
            y = rect.y + row * tile_size
            pygame.draw.line(screen, COLOR_GRID, (rect.x, y), (right, y))
