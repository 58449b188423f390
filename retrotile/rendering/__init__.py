"""
Rendering of decoded assets into pixel buffers and PIL images.
"""

from .compositor import (
    render_palette_strip,
    render_selection,
    render_tile_map,
    render_tile_sheet,
)

__all__ = [
    "render_palette_strip",
    "render_selection",
    "render_tile_map",
    "render_tile_sheet",
]
