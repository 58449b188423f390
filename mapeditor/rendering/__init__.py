"""
Retro Tile Studio - Rendering Module

Overlays drawn on top of the composited tile map.
"""

from .grid_renderer import GridRenderer
from .selection_renderer import SelectionRenderer

__all__ = ["GridRenderer", "SelectionRenderer"]
