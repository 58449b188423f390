"""
Retro Tile Studio - Pygame Rendering

Converts compositor output into pygame surfaces, re-rendering only when
the editor state has changed.
"""

from typing import Callable

import pygame
from pygame import Surface
from PIL import Image

from retrotile.rendering import pil_renderer

from mapeditor.controllers.editor_state import EditorState
from mapeditor.core.constants import (
    INSPECTOR_MAGNIFICATION,
    PALETTE_BLOCK_SIZE,
    SHEET_MAGNIFICATION,
)


def image_to_surface(img: Image.Image) -> Surface:
    """Convert a PIL RGB image to a pygame surface."""
    if img.mode != "RGB":
        img = img.convert("RGB")
    return pygame.image.frombytes(img.tobytes(), img.size, "RGB")


class SurfaceCache:
    """
    Holds the rendered map, tile sheet, palette strip and inspector surfaces.

    Surfaces are rebuilt lazily when EditorState.revision or the map scale
    changes.
    """

    def __init__(self, state: EditorState, map_scale: int):
        self.state = state
        self.map_scale = map_scale
        self._surfaces: dict[str, Surface | None] = {}
        self._revision: int | None = None
        self._scale: int | None = None

    def _refresh(self):
        if self._revision == self.state.revision and self._scale == self.map_scale:
            return
        self._surfaces = {}
        self._revision = self.state.revision
        self._scale = self.map_scale

    def _get(self, key: str, build: Callable[[], Surface | None]) -> Surface | None:
        self._refresh()
        if key not in self._surfaces:
            self._surfaces[key] = build()
        return self._surfaces[key]

    def tile_map(self) -> Surface:
        state = self.state
        return self._get(
            "map",
            lambda: image_to_surface(
                pil_renderer.render_tile_map_to_image(
                    state.palettes.snapshot(),
                    state.tiles.snapshot(),
                    state.tile_map,
                    self.map_scale,
                )
            ),
        )

    def tile_sheet(self) -> Surface | None:
        """Tile sheet in the selected palette, or None if it is not loaded."""
        state = self.state

        def build():
            palette = state.sheet_palette
            if palette is None or not state.tiles:
                return None
            return image_to_surface(
                pil_renderer.render_tile_sheet_to_image(
                    palette, state.tiles.snapshot(), SHEET_MAGNIFICATION
                )
            )

        return self._get("sheet", build)

    def palette_strip(self) -> Surface | None:
        state = self.state

        def build():
            if not state.palettes:
                return None
            return image_to_surface(
                pil_renderer.render_palette_strip_to_image(
                    state.palettes.snapshot(), PALETTE_BLOCK_SIZE
                )
            )

        return self._get("palettes", build)

    def inspector(self) -> Surface:
        state = self.state
        return self._get(
            "inspector",
            lambda: image_to_surface(
                pil_renderer.render_selection_to_image(
                    state.palettes.snapshot(),
                    state.tiles.snapshot(),
                    state.tile_map,
                    state.current_tile_coords,
                    INSPECTOR_MAGNIFICATION,
                )
            ),
        )
