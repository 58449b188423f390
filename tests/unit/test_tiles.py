"""Unit tests for retrotile.core.tiles decoding."""

import random

import pytest

from retrotile.core.errors import DecodeError
from retrotile.core.tiles import (
    BYTES_PER_TILE,
    Tile,
    decode_tile,
    decode_tiles,
    load_tiles,
)
from tests.helpers import tile_bytes


class TestDecodeTiles:
    """Tests for decode_tiles()."""

    @pytest.mark.parametrize("length", [0, 1, 31, 32, 33, 63, 64, 65, 1000])
    def test_count_is_floor_of_length_over_32(self, length):
        tiles = decode_tiles(bytes(length))
        assert len(tiles) == length // 32
        for tile in tiles:
            assert len(tile) == 64

    def test_values_are_4_bit(self):
        rng = random.Random(1234)
        data = bytes(rng.randrange(256) for _ in range(BYTES_PER_TILE * 4))
        for tile in decode_tiles(data):
            assert all(0 <= value <= 15 for value in tile)

    def test_all_zero_bytes_give_zero_pixels(self):
        for tile in decode_tiles(bytes(BYTES_PER_TILE * 2)):
            assert set(tile) == {0}

    def test_low_nibble_first(self):
        """[0x10, 0, ...] decodes to pixel 0 = 0, pixel 1 = 1, rest 0."""
        tile = decode_tiles(bytes([0x10]) + bytes(31))[0]
        assert tile[0] == 0
        assert tile[1] == 1
        assert list(tile[2:]) == [0] * 62

    def test_nibble_order_within_byte(self):
        tile = decode_tiles(bytes([0xAB]) + bytes(31))[0]
        assert tile.pixel(0, 0) == 0xB
        assert tile.pixel(1, 0) == 0xA

    def test_linear_row_major_layout(self):
        """Byte 4 holds pixels 8 and 9: the first two pixels of row 1."""
        data = bytearray(32)
        data[4] = 0x21
        tile = decode_tiles(bytes(data))[0]
        assert tile.pixel(0, 1) == 1
        assert tile.pixel(1, 1) == 2

    def test_encoded_pixels_decode_back(self, asymmetric_tile):
        tile = decode_tiles(tile_bytes(list(asymmetric_tile)))[0]
        assert tile == asymmetric_tile

    def test_trailing_partial_tile_dropped(self):
        data = bytes([0xFF] * 32) + bytes([0x11] * 31)
        tiles = decode_tiles(data)
        assert len(tiles) == 1
        assert set(tiles[0]) == {15}

    def test_load_tiles_reads_file(self, tmp_path):
        path = tmp_path / "bg.bin"
        path.write_bytes(bytes([0x33] * 96))
        tiles = load_tiles(path)
        assert len(tiles) == 3
        assert set(tiles[2]) == {3}


class TestDecodeTile:
    """Tests for decode_tile() single-tile access."""

    def test_second_tile_by_index(self):
        data = bytes(32) + bytes([0x77] * 32)
        assert set(decode_tile(data, 1)) == {7}

    def test_index_past_end_raises(self):
        with pytest.raises(DecodeError):
            decode_tile(bytes(32), 1)

    def test_short_buffer_raises(self):
        with pytest.raises(DecodeError):
            decode_tile(bytes(31))


class TestTile:
    """Tests for the Tile value type."""

    def test_requires_64_pixels(self):
        with pytest.raises(DecodeError):
            Tile([0] * 63)

    def test_rejects_values_above_15(self):
        with pytest.raises(DecodeError):
            Tile([0] * 63 + [16])

    def test_rejects_negative_values(self):
        with pytest.raises(DecodeError):
            Tile([-1] + [0] * 63)

    def test_pixel_lookup(self, asymmetric_tile):
        assert asymmetric_tile.pixel(3, 1) == 11
        assert asymmetric_tile.pixel(7, 7) == 15

    def test_pixel_out_of_range(self, asymmetric_tile):
        with pytest.raises(IndexError):
            asymmetric_tile.pixel(8, 0)

    def test_rows(self, asymmetric_tile):
        rows = asymmetric_tile.rows()
        assert len(rows) == 8
        assert rows[0] == [0, 1, 2, 3, 4, 5, 6, 7]
        assert rows[1] == [8, 9, 10, 11, 12, 13, 14, 15]

    def test_to_array_shape(self, asymmetric_tile):
        array = asymmetric_tile.to_array()
        assert array.shape == (8, 8)
        assert array[1, 3] == 11
