"""
Core image editing operations for Patch Editor.

This module ties patches, filters, the compositor and the history together
into the four operations a front end calls.

Functions:
    resolve_region: Apply the "whole image" rule to a requested rectangle
    apply_operation: Filter a region of an image and record it
    undo: Revert the most recent operation
    redo: Re-apply the most recently reverted operation
    history_depth: Number of records available to undo and redo
"""

from typing import TYPE_CHECKING, Optional, Tuple
import logging

from PE_Libs.ImageEditingLib.compositor import write_back
from PE_Libs.ImageEditingLib.filter_engine import FilterOptions, apply_filter
from PE_Libs.ImageEditingLib.patch_models import (
    OperationKind,
    OperationRecord,
    Patch,
    Rect,
)
from PE_Libs.ImageEditingLib.pixel_buffer import PixelBuffer
from PE_Libs.constants import DEFAULT_ALPHA, DEFAULT_BETA

if TYPE_CHECKING:
    from PE_Libs.HistoryLib.operation_history import OperationHistory

logger = logging.getLogger(__name__)


def resolve_region(x: int, y: int, w: int, h: int, image_width: int, image_height: int) -> Rect:
    """
    Resolve the rectangle an operation should cover.

    A zero width together with a zero height selects the whole image,
    whatever the origin.

    Returns:
        (x, y, w, h)
    """
    if w == 0 and h == 0:
        return 0, 0, image_width, image_height
    return x, y, w, h


def apply_operation(
    image: PixelBuffer,
    history: Optional["OperationHistory"],
    kind,
    x: int,
    y: int,
    w: int,
    h: int,
    alpha: Optional[float] = None,
    beta: Optional[int] = None,
    options: Optional[FilterOptions] = None,
) -> OperationRecord:
    """
    Filter a rectangle of an image in place and record the operation.

    The filtered patch is computed completely before the image or the
    history is touched, so a failure leaves both as they were.

    Args:
        image: Full image, modified in place
        history: History receiving the record on its undo stack (None to skip)
        kind: OperationKind, or anything OperationKind.parse accepts
        x, y: Upper-left corner of the rectangle
        w, h: Rectangle size; (0, 0) selects the whole image
        alpha: Contrast gain (contrast only, default 1.0)
        beta: Brightness offset (contrast only, default 0)
        options: Filter compatibility switches

    Returns:
        The OperationRecord pushed onto the undo stack

    Raises:
        OutOfBoundsError: If the rectangle does not fit the image
        ValueError: If kind or the coefficients are invalid
    """
    kind = OperationKind.parse(kind)
    x, y, w, h = resolve_region(x, y, w, h, image.width, image.height)

    patch = Patch.from_image(image, kind, x, y, w, h)
    patch.set_result(apply_filter(kind, patch.pre, alpha, beta, options))

    if kind is OperationKind.CONTRAST:
        record = OperationRecord(
            patch,
            kind,
            alpha=DEFAULT_ALPHA if alpha is None else float(alpha),
            beta=DEFAULT_BETA if beta is None else int(beta),
        )
    else:
        record = OperationRecord(patch, kind)

    write_back(image, patch, use_filtered=True)
    if history is not None:
        history.record_applied(record)

    logger.debug(f"Applied {record.describe()}")
    return record


def undo(image: PixelBuffer, history: "OperationHistory") -> OperationRecord:
    """
    Revert the most recent operation.

    Writes the top undo record's snapshot back into the image and moves the
    record onto the redo stack.

    Raises:
        EmptyHistoryError: If there is nothing to undo
    """
    record = history.undo_stack.peek()
    write_back(image, record.patch, use_filtered=False)
    history.undo_stack.pop()
    history.redo_stack.push(record)

    logger.debug(f"Undid {record.describe()}")
    return record


def redo(image: PixelBuffer, history: "OperationHistory") -> OperationRecord:
    """
    Re-apply the most recently reverted operation.

    Writes the top redo record's filtered pixels back into the image and
    moves the record onto the undo stack.

    Raises:
        EmptyHistoryError: If there is nothing to redo
    """
    record = history.redo_stack.peek()
    write_back(image, record.patch, use_filtered=True)
    history.redo_stack.pop()
    history.undo_stack.push(record)

    logger.debug(f"Redid {record.describe()}")
    return record


def history_depth(history: "OperationHistory") -> Tuple[int, int]:
    """Return (undo_count, redo_count)."""
    return history.depth()
