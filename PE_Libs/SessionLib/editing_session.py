"""
Editing session for Patch Editor.

An EditingSession owns everything one open image needs: the current image,
the image as it was loaded, the undo/redo history and the configuration.
Front ends hold a session and route every change through it instead of
touching pixel buffers directly.

Classes:
    EditingSession: Image plus history, edited through apply/undo/redo
"""

from pathlib import Path
from typing import Any, Optional, Tuple, Union
import logging

from PE_Libs.HistoryLib.operation_history import OperationHistory
from PE_Libs.ImageEditingLib import image_editing_ops
from PE_Libs.ImageEditingLib.image_io import (
    blank_image,
    load_grayscale,
    render_image,
    save_grayscale,
)
from PE_Libs.ImageEditingLib.patch_models import OperationRecord
from PE_Libs.ImageEditingLib.pixel_buffer import PixelBuffer
from PE_Libs.SessionLib.editor_config import EditorConfig

logger = logging.getLogger(__name__)


class EditingSession:
    """
    One image under edit, with its bounded undo/redo history.

    Example:
        >>> session = EditingSession()
        >>> session.load_image("barbara.pgm")
        >>> session.apply_operation("negate", 10, 10, 50, 40)
        >>> session.undo()
        >>> session.history_depth()
        (0, 1)
    """

    def __init__(
        self,
        image: Optional[PixelBuffer] = None,
        config: Optional[EditorConfig] = None,
    ):
        """
        Args:
            image: Starting image (default: black 100x100 canvas)
            config: Session settings (default: EditorConfig())
        """
        self.config = config or EditorConfig()
        self.history = OperationHistory(
            capacity=self.config.history_capacity,
            clear_redo_on_apply=self.config.clear_redo_on_apply,
        )
        self.source_path: Optional[Path] = None
        self.set_image(image if image is not None else blank_image())

    @property
    def image(self) -> PixelBuffer:
        """Read-only snapshot of the current image. Edit through the session."""
        return self._image.copy().freeze()

    @property
    def original(self) -> PixelBuffer:
        """Read-only copy of the image as it was loaded."""
        return self._original

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    # ------------------------------------------------------------------
    # Image lifecycle
    # ------------------------------------------------------------------

    def set_image(self, image: PixelBuffer) -> None:
        """Replace the image. History from the previous image is discarded."""
        if not isinstance(image, PixelBuffer):
            raise TypeError(f"Expected PixelBuffer, got {type(image)}")

        self._image = image.copy()
        self._original = image.copy().freeze()
        self.history.clear()

    def load_image(self, file_path: Union[str, Path]) -> PixelBuffer:
        """
        Load a grayscale image from disk and start editing it.

        Raises:
            InvalidImageError: If the file is missing or cannot be decoded
        """
        image = load_grayscale(file_path)
        self.set_image(image)
        self.source_path = Path(file_path)

        logger.info(f"Loaded image (w:{image.width}, h:{image.height}) from {file_path}")
        return self._image

    def save_image(self, file_path: Union[str, Path]) -> Path:
        """Write the current image to disk."""
        path = save_grayscale(self._image, file_path)
        logger.info(f"Saved image to {path}")
        return path

    def revert_to_original(self) -> None:
        """Restore the image as loaded and clear the history."""
        self._image = self._original.copy()
        self.history.clear()
        logger.info("Reverted image to its original state")

    def render(self, mode: str = "RGB") -> Any:
        """Pillow image of the current state, for display."""
        return render_image(self._image, mode)

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def apply_operation(
        self,
        kind,
        x: int,
        y: int,
        w: int,
        h: int,
        alpha: Optional[float] = None,
        beta: Optional[int] = None,
    ) -> OperationRecord:
        """
        Apply a filter to a rectangle of the current image.

        See image_editing_ops.apply_operation; (w, h) == (0, 0) selects
        the whole image.
        """
        record = image_editing_ops.apply_operation(
            self._image,
            self.history,
            kind,
            x, y, w, h,
            alpha=alpha,
            beta=beta,
            options=self.config.filter_options(),
        )
        logger.info(f"Operation applied: {record.describe()}")
        self._log_depth()
        return record

    def undo(self) -> OperationRecord:
        """
        Revert the most recent operation.

        Raises:
            EmptyHistoryError: If there is nothing to undo
        """
        record = image_editing_ops.undo(self._image, self.history)
        logger.info(f"Operation undone: {record.describe()}")
        self._log_depth()
        return record

    def redo(self) -> OperationRecord:
        """
        Re-apply the most recently undone operation.

        Raises:
            EmptyHistoryError: If there is nothing to redo
        """
        record = image_editing_ops.redo(self._image, self.history)
        logger.info(f"Operation redone: {record.describe()}")
        self._log_depth()
        return record

    def history_depth(self) -> Tuple[int, int]:
        """(undo_count, redo_count)"""
        return image_editing_ops.history_depth(self.history)

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def _log_depth(self) -> None:
        undo_count, redo_count = self.history.depth()
        logger.debug(
            f"History: {undo_count}/{self.history.capacity} to undo, "
            f"{redo_count}/{self.history.capacity} to redo"
        )
