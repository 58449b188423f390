"""
Retro Tile Studio - Asset Collections

Append-only collections of decoded palettes and tiles with a bounds-checked
accessor. Lookups that miss return None so the compositor can skip cells
whose references are not loaded yet.
"""

from pathlib import Path
from typing import Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from ..logging_config import get_logger

logger = get_logger("core.assets")

T = TypeVar("T")


def lookup(items: Sequence[T], index: int) -> T | None:
    """
    Bounds-checked index into a sequence.

    Returns:
        The item, or None when index is negative or past the end
    """
    if 0 <= index < len(items):
        return items[index]
    return None


def read_files(paths: Iterable[str | Path]) -> list[bytes]:
    """
    Read every file fully, preserving order.

    Raises:
        OSError: If any file cannot be read
    """
    buffers = []
    for path in paths:
        with open(path, "rb") as f:
            buffers.append(f.read())
    return buffers


def decode_buffers(
    buffers: Iterable[bytes], decoder: Callable[[bytes], list[T]]
) -> list[T]:
    """Decode each buffer independently and concatenate results in order."""
    decoded: list[T] = []
    for data in buffers:
        decoded.extend(decoder(data))
    return decoded


class AssetList(Generic[T]):
    """Ordered, append-only collection of decoded assets."""

    def __init__(self, items: Iterable[T] = ()):
        self._items: list[T] = list(items)

    def get(self, index: int) -> T | None:
        """Item at index, or None if it is not loaded."""
        return lookup(self._items, index)

    def extend(self, items: Iterable[T]) -> int:
        """
        Append items after the existing ones.

        Returns:
            Number of items appended
        """
        before = len(self._items)
        self._items.extend(items)
        return len(self._items) - before

    def snapshot(self) -> tuple[T, ...]:
        """Immutable view for a render call."""
        return tuple(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"AssetList({len(self._items)} items)"
