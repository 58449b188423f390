"""
Retro Tile Studio - Map Editor

A Pygame-based editor for loading palettes and tiles and arranging them
on a 32x32 tile map.
"""
