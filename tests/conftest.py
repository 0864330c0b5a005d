"""
Pytest configuration and shared fixtures for Patch Editor tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import numpy as np
import pytest

from PE_Libs.ImageEditingLib.pixel_buffer import PixelBuffer
from PE_Libs.ImageEditingLib.image_io import save_grayscale


@pytest.fixture
def zero_image():
    """A 10x10 all-black image."""
    return PixelBuffer.blank(10, 10, 0)


@pytest.fixture
def gradient_image():
    """
    A 12x8 image whose pixel (x, y) holds (x * 20 + y * 3) % 256.

    Returns:
        PixelBuffer with distinct values in every row and column
    """
    ys, xs = np.mgrid[0:8, 0:12]
    return PixelBuffer((xs * 20 + ys * 3) % 256)


@pytest.fixture
def pgm_file(tmp_path, gradient_image):
    """Path to a PGM file holding gradient_image."""
    return save_grayscale(gradient_image, tmp_path / "gradient.pgm")
