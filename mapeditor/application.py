"""
Retro Tile Studio - Editor Application

Main application class that orchestrates all editor components.
"""

from pathlib import Path

import pygame
from pygame import Rect

from retrotile.logging_config import get_logger

from .controllers.editor_state import EditorState
from .controllers.event_handler import EventHandler
from .controllers.view_state import ScrollPane, ViewState
from .core.constants import (
    ASSET_FILETYPES,
    CANVAS_OFFSET_X,
    CANVAS_OFFSET_Y,
    COLOR_BG,
    COLOR_SIDEBAR_BG,
    COLOR_STATUS,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    COLOR_TOOLBAR,
    MIN_SCREEN_HEIGHT,
    PALETTE_VIEW_HEIGHT,
    SECTION_LABEL_HEIGHT,
    SHEET_VIEW_HEIGHT,
    SIDEBAR_PADDING,
    SIDEBAR_WIDTH,
    STATUS_HEIGHT,
    TOOLBAR_HEIGHT,
    map_canvas_size,
)
from .core.pygame_rendering import SurfaceCache
from .rendering.grid_renderer import GridRenderer
from .rendering.selection_renderer import SelectionRenderer
from .ui.dialogs import open_files_dialog
from .ui.widgets import Button

logger = get_logger("editor.app")


class EditorApplication:
    """Main editor application."""

    def __init__(self, map_scale: int = 2):
        pygame.init()

        self.map_scale = map_scale
        canvas_width, canvas_height = map_canvas_size(map_scale)
        self.screen_width = canvas_width + SIDEBAR_WIDTH
        self.screen_height = max(
            MIN_SCREEN_HEIGHT, TOOLBAR_HEIGHT + canvas_height + STATUS_HEIGHT
        )
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        pygame.display.set_caption("Retro Tile Studio")

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_small = pygame.font.SysFont("monospace", 12)

        self.state = EditorState()
        self.view = ViewState(
            Rect(CANVAS_OFFSET_X, CANVAS_OFFSET_Y, canvas_width, canvas_height),
            map_scale,
        )
        self.surfaces = SurfaceCache(self.state, map_scale)
        self.sidebar_x = canvas_width
        self.sheet_pane, self.palette_pane = self._create_panes()

        self.buttons: list[Button] = []
        self._create_ui()

        self.event_handler = EventHandler(
            self.state,
            self.view,
            self.buttons,
            on_upload_tiles=self._on_upload_tiles,
            on_upload_palettes=self._on_upload_palettes,
            scroll_panes=[self.sheet_pane, self.palette_pane],
        )

        self.running = True
        self.clock = pygame.time.Clock()

    def _create_panes(self) -> tuple[ScrollPane, ScrollPane]:
        """Lay out the scrollable tile sheet and palette strip views."""
        x = self.sidebar_x + SIDEBAR_PADDING
        width = SIDEBAR_WIDTH - SIDEBAR_PADDING * 2
        sheet_y = TOOLBAR_HEIGHT + SIDEBAR_PADDING + SECTION_LABEL_HEIGHT
        palette_y = sheet_y + SHEET_VIEW_HEIGHT + SIDEBAR_PADDING + SECTION_LABEL_HEIGHT
        return (
            ScrollPane(Rect(x, sheet_y, width, SHEET_VIEW_HEIGHT)),
            ScrollPane(Rect(x, palette_y, width, PALETTE_VIEW_HEIGHT)),
        )

    def _create_ui(self):
        """Create toolbar buttons."""
        x = 10
        self.buttons = [
            Button(Rect(x, 5, 120, 30), "Upload Tiles", self._on_upload_tiles),
            Button(Rect(x + 130, 5, 130, 30), "Upload Palette", self._on_upload_palettes),
            Button(
                Rect(x + 270, 5, 50, 30),
                "Grid",
                self.state.toggle_grid,
                is_active=lambda: self.state.show_grid,
            ),
            Button(
                Rect(x + 340, 5, 30, 30),
                "-",
                lambda: self.state.step_selected_palette(-1),
            ),
            Button(
                Rect(x + 375, 5, 30, 30),
                "+",
                lambda: self.state.step_selected_palette(1),
            ),
        ]

    def load_palettes(self, paths: list[str | Path]):
        """Load palette files, logging instead of raising on read errors."""
        try:
            self.state.load_palette_files(paths)
        except OSError as e:
            logger.error("Failed to load palettes: %s", e)

    def load_tiles(self, paths: list[str | Path]):
        """Load tile files, logging instead of raising on read errors."""
        try:
            self.state.load_tile_files(paths)
        except OSError as e:
            logger.error("Failed to load tiles: %s", e)

    def _on_upload_tiles(self):
        paths = open_files_dialog("Upload Tiles", ASSET_FILETYPES)
        if paths:
            self.load_tiles(paths)

    def _on_upload_palettes(self):
        paths = open_files_dialog("Upload Palette", ASSET_FILETYPES)
        if paths:
            self.load_palettes(paths)

    def run(self):
        """Main loop."""
        while self.running:
            events = pygame.event.get()
            self.running = self.event_handler.handle_events(events)
            self._render()
            self.clock.tick(60)

        pygame.quit()

    def _render(self):
        """Render the editor."""
        self.screen.fill(COLOR_BG)
        self._render_toolbar()
        self._render_canvas()
        self._render_sidebar()
        self._render_status()
        pygame.display.flip()

    def _render_toolbar(self):
        pygame.draw.rect(self.screen, COLOR_TOOLBAR, (0, 0, self.screen_width, TOOLBAR_HEIGHT))
        for button in self.buttons:
            button.render(self.screen, self.font_small)

        label = self.font.render(
            f"Sheet palette: {self.state.selected_palette_index}", True, COLOR_TEXT
        )
        self.screen.blit(label, (425, 12))

    def _render_canvas(self):
        """Render the composited tile map and overlays."""
        self.screen.blit(self.surfaces.tile_map(), self.view.canvas_rect.topleft)
        if self.state.show_grid:
            GridRenderer.render(self.screen, self.view)
        SelectionRenderer.render(self.screen, self.view, self.state.current_tile_coords)

    def _section_label(self, text: str, y: int) -> int:
        surf = self.font.render(text, True, COLOR_TEXT)
        self.screen.blit(surf, (self.sidebar_x + SIDEBAR_PADDING, y))
        return y + SECTION_LABEL_HEIGHT

    def _blit_scrolled(self, surf, pane: ScrollPane):
        pane.set_content_height(surf.get_height())
        self.screen.blit(surf, pane.rect.topleft, pane.visible_area(surf.get_width()))

    def _render_sidebar(self):
        """Render tile sheet, palette strip and current tile inspector."""
        sidebar_rect = Rect(
            self.sidebar_x,
            TOOLBAR_HEIGHT,
            self.screen_width - self.sidebar_x,
            self.screen_height - TOOLBAR_HEIGHT - STATUS_HEIGHT,
        )
        pygame.draw.rect(self.screen, COLOR_SIDEBAR_BG, sidebar_rect)

        self._section_label(
            f"Tiles: {len(self.state.tiles)} tiles loaded", sidebar_rect.y + SIDEBAR_PADDING
        )
        sheet = self.surfaces.tile_sheet()
        if sheet is not None:
            self._blit_scrolled(sheet, self.sheet_pane)
        else:
            self.sheet_pane.set_content_height(0)
        y = self.sheet_pane.rect.bottom + SIDEBAR_PADDING

        y = self._section_label(f"Palettes: {len(self.state.palettes)} palettes loaded", y)
        strip = self.surfaces.palette_strip()
        if strip is not None:
            self._blit_scrolled(strip, self.palette_pane)
        else:
            self.palette_pane.set_content_height(0)
        y = self.palette_pane.rect.bottom + SIDEBAR_PADDING

        y = self._section_label("Current tile", y)
        inspector = self.surfaces.inspector()
        self.screen.blit(inspector, (self.sidebar_x + SIDEBAR_PADDING, y))

        text_x = self.sidebar_x + SIDEBAR_PADDING * 2 + inspector.get_width()
        for i, line in enumerate(self._inspector_lines()):
            surf = self.font_small.render(line, True, COLOR_TEXT_DIM)
            self.screen.blit(surf, (text_x, y + i * 16))

    def _inspector_lines(self) -> list[str]:
        coords = self.state.current_tile_coords
        entry = self.state.current_tile_entry
        if coords is None or entry is None:
            return ["No cell selected"]
        lines = [
            f"Cell: ({coords[0]}, {coords[1]})",
            f"Tile: {entry.tile_index}",
            f"Palette: {entry.palette_index}",
            f"H flip: {entry.horizontal_flip}",
            f"V flip: {entry.vertical_flip}",
        ]
        if self.state.tiles.get(entry.tile_index) is None:
            lines.append("Tile not loaded")
        if self.state.palettes.get(entry.palette_index) is None:
            lines.append("Palette not loaded")
        return lines

    def _render_status(self):
        y = self.screen_height - STATUS_HEIGHT
        pygame.draw.rect(self.screen, COLOR_STATUS, (0, y, self.screen_width, STATUS_HEIGHT))
        text = (
            "Click: select  H/V: flip  Left/Right: tile  Up/Down: palette  "
            "PgUp/PgDn: sheet palette  G: grid  Ctrl+T/Ctrl+P: upload"
        )
        surf = self.font_small.render(text, True, COLOR_TEXT)
        self.screen.blit(surf, (10, y + 8))
