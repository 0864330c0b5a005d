"""
Exception types raised by the Patch Editor core.

Classes:
    PatchEditorError: Base class for every core error
    OutOfBoundsError: Requested rectangle does not fit inside the image
    EmptyHistoryError: Undo/redo requested with no record available
    InvalidImageError: Image buffer missing, malformed or undecodable
"""

from typing import Optional, Tuple


class PatchEditorError(Exception):
    """Base class for Patch Editor errors."""


class OutOfBoundsError(PatchEditorError, ValueError):
    """Raised when a rectangle has a negative origin/size or exceeds the image."""

    def __init__(
        self,
        rect: Tuple[int, int, int, int],
        image_size: Optional[Tuple[int, int]] = None,
    ):
        self.rect = tuple(rect)
        self.image_size = image_size
        x, y, w, h = self.rect
        message = f"Region (x={x}, y={y}, w={w}, h={h}) is out of bounds"
        if image_size is not None:
            message += f" for image of size {image_size[0]}x{image_size[1]}"
        super().__init__(message)


class EmptyHistoryError(PatchEditorError, IndexError):
    """Raised when popping from an empty history stack."""

    def __init__(self, stack_name: str = "history"):
        self.stack_name = stack_name
        super().__init__(f"Nothing to pop: {stack_name} stack is empty")


class InvalidImageError(PatchEditorError, ValueError):
    """Raised when an image cannot be decoded or is not a 2D intensity grid."""
