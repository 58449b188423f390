"""
Core decoding functionality.

This package contains palette and tile decoding, the tile map model and
the asset collections the editor appends decoded files to.
"""

from .assets import AssetList, decode_buffers, lookup, read_files
from .errors import ColorIndexError, DecodeError
from .palettes import Palette, RGBColor, decode_palettes, load_palettes
from .tilemap import TileMap, TileMapEntry
from .tiles import Tile, decode_tiles, load_tiles

__all__ = [
    "AssetList",
    "ColorIndexError",
    "DecodeError",
    "Palette",
    "RGBColor",
    "Tile",
    "TileMap",
    "TileMapEntry",
    "decode_buffers",
    "decode_palettes",
    "decode_tiles",
    "load_palettes",
    "load_tiles",
    "lookup",
    "read_files",
]
