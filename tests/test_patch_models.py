"""
Unit tests for patch_models module.

Tests operation kind parsing, patch construction and bounds checks, and
operation records.
"""

import unittest

import numpy as np
import pytest

from PE_Libs.ImageEditingLib.patch_models import OperationKind, OperationRecord, Patch
from PE_Libs.ImageEditingLib.pixel_buffer import PixelBuffer
from PE_Libs.errors import OutOfBoundsError


class TestOperationKind(unittest.TestCase):
    """Test OperationKind parsing."""

    def test_parse_by_value_name_and_label(self):
        self.assertIs(OperationKind.parse("negate"), OperationKind.NEGATE)
        self.assertIs(OperationKind.parse("EDGE_DETECT"), OperationKind.EDGE_DETECT)
        self.assertIs(OperationKind.parse("edge-detect"), OperationKind.EDGE_DETECT)
        self.assertIs(OperationKind.parse("Smooth"), OperationKind.SMOOTH)
        self.assertIs(OperationKind.parse("Invert"), OperationKind.NEGATE)

    def test_parse_by_list_index(self):
        self.assertIs(OperationKind.parse(0), OperationKind.EDGE_DETECT)
        self.assertIs(OperationKind.parse(1), OperationKind.NEGATE)
        self.assertIs(OperationKind.parse(2), OperationKind.SMOOTH)
        self.assertIs(OperationKind.parse(3), OperationKind.CONTRAST)

    def test_parse_passes_members_through(self):
        self.assertIs(OperationKind.parse(OperationKind.CONTRAST), OperationKind.CONTRAST)

    def test_parse_unknown_raises(self):
        with self.assertRaises(ValueError):
            OperationKind.parse("sharpen")
        with self.assertRaises(ValueError):
            OperationKind.parse(4)
        with self.assertRaises(ValueError):
            OperationKind.parse(True)


class TestPatchFromImage:
    """Tests for Patch.from_image."""

    @pytest.mark.parametrize("rect", [
        (-1, 0, 2, 2),
        (0, -1, 2, 2),
        (0, 0, -1, 2),
        (0, 0, 2, -1),
        (11, 0, 2, 2),
        (0, 7, 2, 2),
        (0, 0, 13, 1),
        (0, 0, 1, 9),
    ])
    def test_out_of_bounds_rejected(self, gradient_image, rect):
        with pytest.raises(OutOfBoundsError) as excinfo:
            Patch.from_image(gradient_image, OperationKind.NEGATE, *rect)

        assert excinfo.value.rect == rect
        assert excinfo.value.image_size == (12, 8)

    @pytest.mark.parametrize("rect", [
        (0, 0, 12, 8),
        (11, 7, 1, 1),
        (3, 2, 4, 5),
        (5, 5, 0, 0),
    ])
    def test_pre_buffer_equals_region(self, gradient_image, rect):
        x, y, w, h = rect
        patch = Patch.from_image(gradient_image, OperationKind.SMOOTH, x, y, w, h)

        assert patch.valid
        assert patch.rect == rect
        assert np.array_equal(patch.pre.array, gradient_image.array[y:y + h, x:x + w])
        assert patch.post == patch.pre
        assert not patch.is_filtered

    def test_pre_buffer_is_read_only(self, gradient_image):
        patch = Patch.from_image(gradient_image, OperationKind.NEGATE, 0, 0, 3, 3)

        with pytest.raises(ValueError):
            patch.pre.set(0, 0, 1)

    def test_patch_is_independent_of_image(self, gradient_image):
        patch = Patch.from_image(gradient_image, OperationKind.NEGATE, 0, 0, 3, 3)
        before = patch.pre.get(1, 1)
        gradient_image.set(1, 1, (before + 7) % 256)

        assert patch.pre.get(1, 1) == before


class TestPatchResult:
    """Tests for storing a filter result."""

    def test_set_result_once(self):
        patch = Patch.from_image(PixelBuffer.blank(4, 4), OperationKind.NEGATE, 0, 0, 2, 2)
        patch.set_result(PixelBuffer.blank(2, 2, 255))

        assert patch.is_filtered
        assert patch.buffer(True) == PixelBuffer.blank(2, 2, 255)
        assert patch.buffer(False) == PixelBuffer.blank(2, 2, 0)

        with pytest.raises(RuntimeError):
            patch.set_result(PixelBuffer.blank(2, 2, 1))

    def test_set_result_size_mismatch(self):
        patch = Patch.from_image(PixelBuffer.blank(4, 4), OperationKind.NEGATE, 0, 0, 2, 2)

        with pytest.raises(ValueError):
            patch.set_result(PixelBuffer.blank(3, 2))

    def test_default_patch_is_invalid(self):
        patch = Patch()

        assert not patch.valid
        assert patch.rect == (0, 0, 0, 0)
        with pytest.raises(ValueError):
            patch.pre
        with pytest.raises(ValueError):
            patch.set_result(PixelBuffer.blank(0, 0))


class TestOperationRecord:
    """Tests for OperationRecord."""

    def test_exposes_geometry(self):
        patch = Patch.from_image(PixelBuffer.blank(10, 10), OperationKind.CONTRAST, 2, 3, 4, 5)
        record = OperationRecord(patch, OperationKind.CONTRAST, alpha=1.5, beta=-10)

        assert record.rect == (2, 3, 4, 5)
        assert (record.x, record.y, record.width, record.height) == (2, 3, 4, 5)
        assert "Contrast" in record.describe()
        assert "alpha=1.5" in record.describe()

    def test_is_frozen(self):
        patch = Patch.from_image(PixelBuffer.blank(4, 4), OperationKind.NEGATE, 0, 0, 1, 1)
        record = OperationRecord(patch, OperationKind.NEGATE)

        with pytest.raises(AttributeError):
            record.kind = OperationKind.SMOOTH

    def test_rejects_invalid_patch(self):
        with pytest.raises(ValueError):
            OperationRecord(Patch(), OperationKind.NEGATE)
