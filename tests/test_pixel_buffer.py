"""
Unit tests for pixel_buffer module.

Tests construction, validation, region copy/paste and freezing.
"""

import numpy as np
import pytest

from PE_Libs.ImageEditingLib.pixel_buffer import PixelBuffer
from PE_Libs.errors import InvalidImageError


class TestConstruction:
    """Tests for building PixelBuffers."""

    def test_blank_has_requested_size(self):
        buf = PixelBuffer.blank(7, 3, 42)

        assert buf.size == (7, 3)
        assert buf.width == 7
        assert buf.height == 3
        assert buf.array.dtype == np.uint8
        assert np.all(buf.array == 42)

    def test_from_rows_is_row_major(self):
        buf = PixelBuffer.from_rows([[1, 2, 3], [4, 5, 6]])

        assert buf.get(0, 0) == 1
        assert buf.get(2, 0) == 3
        assert buf.get(0, 1) == 4
        assert buf.to_list() == [[1, 2, 3], [4, 5, 6]]

    def test_rejects_non_2d_data(self):
        with pytest.raises(InvalidImageError):
            PixelBuffer(np.zeros((2, 2, 3), dtype=np.uint8))

    @pytest.mark.parametrize("data", [
        [[1.7, 2.0]],
        np.zeros((2, 2), dtype=np.float32),
        [[True, False]],
    ])
    def test_rejects_non_integer_data(self, data):
        with pytest.raises(InvalidImageError, match="integers"):
            PixelBuffer(data)

    def test_rejects_out_of_range_values(self):
        with pytest.raises(ValueError):
            PixelBuffer([[0, 256]])

        with pytest.raises(ValueError):
            PixelBuffer([[-1, 0]])

    def test_data_is_copied(self):
        source = np.zeros((2, 2), dtype=np.uint8)
        buf = PixelBuffer(source)
        source[0, 0] = 99

        assert buf.get(0, 0) == 0


class TestRegions:
    """Tests for region helpers."""

    def test_contains_region(self):
        buf = PixelBuffer.blank(10, 5)

        assert buf.contains_region(0, 0, 10, 5)
        assert buf.contains_region(9, 4, 1, 1)
        assert buf.contains_region(3, 3, 0, 0)
        assert not buf.contains_region(-1, 0, 1, 1)
        assert not buf.contains_region(0, 0, 11, 1)
        assert not buf.contains_region(0, 1, 1, 5)
        assert not buf.contains_region(0, 0, -1, 1)

    def test_region_copies_the_rectangle(self, gradient_image):
        region = gradient_image.region(2, 1, 3, 4)

        assert region.size == (3, 4)
        for y in range(4):
            for x in range(3):
                assert region.get(x, y) == gradient_image.get(x + 2, y + 1)

        original_value = gradient_image.get(2, 1)
        region.set(0, 0, (original_value + 1) % 256)
        assert gradient_image.get(2, 1) == original_value

    def test_paste_writes_in_place(self):
        buf = PixelBuffer.blank(5, 5)
        buf.paste(PixelBuffer.blank(2, 2, 9), 3, 1)

        assert buf.get(3, 1) == 9
        assert buf.get(4, 2) == 9
        assert buf.get(2, 1) == 0
        assert int(buf.array.sum()) == 36

    def test_freeze_blocks_writes(self):
        buf = PixelBuffer.blank(2, 2).freeze()

        assert not buf.writeable
        with pytest.raises(ValueError):
            buf.set(0, 0, 1)

    def test_copy_of_frozen_buffer_is_writeable(self):
        buf = PixelBuffer.blank(2, 2).freeze()
        clone = buf.copy()

        clone.set(1, 1, 5)
        assert clone.get(1, 1) == 5
        assert buf.get(1, 1) == 0

    def test_equality(self):
        assert PixelBuffer.blank(2, 3, 1) == PixelBuffer.blank(2, 3, 1)
        assert PixelBuffer.blank(2, 3, 1) != PixelBuffer.blank(2, 3, 2)
        assert PixelBuffer.blank(2, 3) != PixelBuffer.blank(3, 2)
