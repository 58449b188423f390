"""
Selection renderer - outlines the currently selected tile map cell.
"""

import pygame

from mapeditor.controllers.view_state import ViewState
from mapeditor.core.constants import COLOR_SELECTION


class SelectionRenderer:
    """Renders the selected cell outline."""

    @staticmethod
    def render(
        screen: pygame.Surface,
        view: ViewState,
        selection: tuple[int, int] | None,
    ):
        """
        Draw a 2px gold border around the selected cell.

        Args:
            screen: Pygame surface to draw on
            view: Tile map canvas view
            selection: Selected cell (x, y), or None
        """
        if selection is None:
            return
        pygame.draw.rect(screen, COLOR_SELECTION, view.cell_rect(selection), 2)
