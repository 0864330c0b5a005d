"""
Single-channel pixel buffer for Patch Editor.

A PixelBuffer is a 2D grid of 8-bit intensities (0-255) stored row-major in a
NumPy array of shape (height, width). Full images and patch snapshots are both
PixelBuffers.

Classes:
    PixelBuffer: Mutable grayscale intensity grid with region copy/paste helpers
"""

from typing import Any, List, Tuple

import numpy as np

from PE_Libs.constants import MAX_INTENSITY, MIN_INTENSITY
from PE_Libs.errors import InvalidImageError


class PixelBuffer:
    """
    A 2D grid of single-channel intensities.

    Pixels are addressed as (x, y) with x the column and y the row, matching
    the image convention; the backing array is indexed [y, x].

    Example:
        >>> buf = PixelBuffer.blank(4, 3)
        >>> buf.set(1, 2, 200)
        >>> buf.get(1, 2)
        200
    """

    def __init__(self, data: Any):
        """
        Wrap intensity data.

        Args:
            data: 2D array-like of integers in 0-255. The data is copied.

        Raises:
            InvalidImageError: If data is not a 2D grid of integers
            ValueError: If any value lies outside 0-255
        """
        array = np.array(data)

        if array.ndim != 2:
            raise InvalidImageError(
                f"Pixel data must be 2D (height, width), got shape {array.shape}"
            )

        if not np.issubdtype(array.dtype, np.integer):
            raise InvalidImageError(f"Pixel data must be integers, got dtype {array.dtype}")

        if array.dtype != np.uint8:
            if array.size and (array.min() < MIN_INTENSITY or array.max() > MAX_INTENSITY):
                raise ValueError(
                    f"Pixel values must be in {MIN_INTENSITY}-{MAX_INTENSITY}, "
                    f"got range {array.min()}-{array.max()}"
                )
            array = array.astype(np.uint8)

        self._data = array

    @classmethod
    def blank(cls, width: int, height: int, value: int = 0) -> "PixelBuffer":
        """Create a buffer of the given size filled with one intensity."""
        if width < 0 or height < 0:
            raise ValueError(f"Buffer size must be non-negative, got {width}x{height}")
        return cls(np.full((height, width), value, dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: List[List[int]]) -> "PixelBuffer":
        """Create a buffer from a list of rows (top to bottom)."""
        return cls(rows)

    @property
    def array(self) -> np.ndarray:
        """The backing (height, width) uint8 array. Mutations are visible."""
        return self._data

    @property
    def width(self) -> int:
        return int(self._data.shape[1])

    @property
    def height(self) -> int:
        return int(self._data.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), in the Pillow order."""
        return self.width, self.height

    @property
    def writeable(self) -> bool:
        return bool(self._data.flags.writeable)

    def get(self, x: int, y: int) -> int:
        return int(self._data[y, x])

    def set(self, x: int, y: int, value: int) -> None:
        if not (MIN_INTENSITY <= value <= MAX_INTENSITY):
            raise ValueError(f"Intensity must be 0-255, got {value}")
        self._data[y, x] = value

    def contains_region(self, x: int, y: int, w: int, h: int) -> bool:
        """Check that a rectangle has a non-negative origin/size and fits."""
        if x < 0 or y < 0 or w < 0 or h < 0:
            return False
        return x + w <= self.width and y + h <= self.height

    def region(self, x: int, y: int, w: int, h: int) -> "PixelBuffer":
        """Return a copy of the w x h rectangle whose upper-left corner is (x, y)."""
        return PixelBuffer(self._data[y:y + h, x:x + w])

    def paste(self, source: "PixelBuffer", x: int, y: int) -> None:
        """Overwrite the rectangle at (x, y) with the contents of source, in place."""
        self._data[y:y + source.height, x:x + source.width] = source.array

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self._data)

    def freeze(self) -> "PixelBuffer":
        """Make the buffer read-only. Returns self."""
        self._data.flags.writeable = False
        return self

    def to_list(self) -> List[List[int]]:
        return self._data.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"
