"""
ImageEditingLib - Core image editing functionality

This module provides pixel buffers, patches, filters, compositing, grayscale
image I/O and the core apply/undo/redo operations for the Patch Editor project.
"""

from PE_Libs.ImageEditingLib.pixel_buffer import PixelBuffer
from PE_Libs.ImageEditingLib.patch_models import OperationKind, OperationRecord, Patch
from PE_Libs.ImageEditingLib.filter_engine import (
    FILTERS,
    FilterOptions,
    apply_filter,
    contrast_filter,
    edge_filter,
    negate_filter,
    smooth_filter,
)
from PE_Libs.ImageEditingLib.compositor import write_back
from PE_Libs.ImageEditingLib.image_io import (
    blank_image,
    load_grayscale,
    render_image,
    save_grayscale,
)
from PE_Libs.ImageEditingLib.image_editing_ops import (
    apply_operation,
    history_depth,
    redo,
    resolve_region,
    undo,
)

__all__ = [
    "PixelBuffer",
    "OperationKind",
    "OperationRecord",
    "Patch",
    "FILTERS",
    "FilterOptions",
    "apply_filter",
    "contrast_filter",
    "edge_filter",
    "negate_filter",
    "smooth_filter",
    "write_back",
    "blank_image",
    "load_grayscale",
    "render_image",
    "save_grayscale",
    "apply_operation",
    "history_depth",
    "redo",
    "resolve_region",
    "undo",
]
