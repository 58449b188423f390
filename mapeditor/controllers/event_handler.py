"""
Retro Tile Studio - Event Handler

Handles user input events including mouse, keyboard, and window events.
"""

from typing import Callable

import pygame

from retrotile.logging_config import get_logger

from .editor_state import EditorState
from .view_state import ScrollPane, ViewState
from mapeditor.ui.widgets import Button

logger = get_logger("editor.events")


class EventHandler:
    """Handles all user input events."""

    def __init__(
        self,
        state: EditorState,
        view: ViewState,
        buttons: list[Button],
        on_upload_tiles: Callable[[], None],
        on_upload_palettes: Callable[[], None],
        scroll_panes: list[ScrollPane] | None = None,
    ):
        """
        Initialize event handler.

        Args:
            state: Editor state
            view: Tile map canvas view
            buttons: List of UI buttons
            on_upload_tiles: Callback for the tile upload action
            on_upload_palettes: Callback for the palette upload action
            scroll_panes: Sidebar panes scrolled by the mouse wheel
        """
        self.state = state
        self.view = view
        self.buttons = buttons
        self.on_upload_tiles = on_upload_tiles
        self.on_upload_palettes = on_upload_palettes
        self.scroll_panes = scroll_panes or []

    def handle_events(self, events: list[pygame.event.Event]) -> bool:
        """
        Handle all pygame events.

        Args:
            events: List of pygame events to process

        Returns:
            True if application should continue running, False if quit requested
        """
        for event in events:
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.KEYDOWN:
                self._handle_key(event)
                continue

            handled = False
            for button in self.buttons:
                if button.handle_event(event):
                    handled = True
                    break
            if handled:
                continue

            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    self._select_at(event.pos)
                elif event.button == 4:  # Scroll up
                    self._scroll_at(event.pos, -1)
                elif event.button == 5:  # Scroll down
                    self._scroll_at(event.pos, 1)

        return True

    def _select_at(self, pos: tuple[int, int]):
        cell = self.view.screen_to_cell(pos)
        if cell is None:
            return
        self.state.select_cell(*cell)
        logger.debug("Selected cell %s: %s", cell, self.state.current_tile_entry)

    def _scroll_at(self, pos: tuple[int, int], notches: int):
        for pane in self.scroll_panes:
            if pane.contains(pos):
                pane.scroll(notches)
                return

    def _handle_key(self, event):
        """Handle keyboard input."""
        ctrl = bool(pygame.key.get_mods() & pygame.KMOD_CTRL)

        if ctrl:
            if event.key == pygame.K_t:
                self.on_upload_tiles()
            elif event.key == pygame.K_p:
                self.on_upload_palettes()
            return

        if event.key == pygame.K_g:
            self.state.toggle_grid()
        elif event.key == pygame.K_ESCAPE:
            self.state.clear_selection()
        elif event.key == pygame.K_h:
            self.state.toggle_horizontal_flip()
        elif event.key == pygame.K_v:
            self.state.toggle_vertical_flip()
        elif event.key == pygame.K_RIGHT:
            self.state.step_tile_index(1)
        elif event.key == pygame.K_LEFT:
            self.state.step_tile_index(-1)
        elif event.key == pygame.K_UP:
            self.state.step_palette_index(1)
        elif event.key == pygame.K_DOWN:
            self.state.step_palette_index(-1)
        elif event.key == pygame.K_PAGEUP:
            self.state.step_selected_palette(1)
        elif event.key == pygame.K_PAGEDOWN:
            self.state.step_selected_palette(-1)
