"""
Unit tests for compositor module.
"""

import numpy as np
import pytest

from PE_Libs.ImageEditingLib.compositor import write_back
from PE_Libs.ImageEditingLib.filter_engine import negate_filter
from PE_Libs.ImageEditingLib.patch_models import OperationKind, Patch
from PE_Libs.ImageEditingLib.pixel_buffer import PixelBuffer
from PE_Libs.errors import OutOfBoundsError


@pytest.fixture
def negated_patch(gradient_image):
    patch = Patch.from_image(gradient_image, OperationKind.NEGATE, 3, 2, 4, 3)
    patch.set_result(negate_filter(patch.pre))
    return patch


class TestWriteBack:
    """Tests for write_back."""

    def test_writes_filtered_pixels(self, gradient_image, negated_patch):
        before = gradient_image.copy()

        result = write_back(gradient_image, negated_patch, use_filtered=True)

        assert result is gradient_image
        inside = gradient_image.array[2:5, 3:7]
        assert np.array_equal(inside, 255 - before.array[2:5, 3:7])

    def test_leaves_outside_untouched(self, gradient_image, negated_patch):
        before = gradient_image.copy()

        write_back(gradient_image, negated_patch, use_filtered=True)

        mask = np.ones(before.array.shape, dtype=bool)
        mask[2:5, 3:7] = False
        assert np.array_equal(gradient_image.array[mask], before.array[mask])

    def test_writes_snapshot(self, gradient_image, negated_patch):
        before = gradient_image.copy()
        write_back(gradient_image, negated_patch, use_filtered=True)

        write_back(gradient_image, negated_patch, use_filtered=False)

        assert gradient_image == before

    def test_rejects_patch_that_does_not_fit(self, negated_patch):
        small = PixelBuffer.blank(5, 5)

        with pytest.raises(OutOfBoundsError):
            write_back(small, negated_patch, use_filtered=True)

    def test_rejects_invalid_patch(self, gradient_image):
        with pytest.raises(ValueError):
            write_back(gradient_image, Patch(), use_filtered=True)
