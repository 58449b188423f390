"""Helpers for building raw palette and tile binaries in tests."""

import struct


def pack_color(r: int, g: int, b: int) -> int:
    """Pack 5-bit channels into a 15-bit colour word."""
    return r | (g << 5) | (b << 10)


def palette_bytes(words: list[int]) -> bytes:
    """Little-endian palette file contents for the given colour words."""
    return struct.pack(f"<{len(words)}H", *words)


def tile_bytes(pixels: list[int]) -> bytes:
    """Linear 4bpp encoding of 64 pixels, low nibble first."""
    return bytes(pixels[i] | (pixels[i + 1] << 4) for i in range(0, len(pixels), 2))
