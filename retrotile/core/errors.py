"""
Retro Tile Studio - Errors

Exceptions raised by the decoding core.
"""


class DecodeError(Exception):
    """Raised when asset data violates the palette/tile format contract."""

    pass


class ColorIndexError(DecodeError, IndexError):
    """Raised when a colour index outside the palette is looked up."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Colour index {index} out of range for {size}-colour palette")
