"""
Constants and configuration values for Patch Editor.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the library.
"""

# History constants
STACK_SIZE = 10
UNDO_STACK_NAME = "undo"
REDO_STACK_NAME = "redo"

# Pixel range
MIN_INTENSITY = 0
MAX_INTENSITY = 255

# Smoothing kernel (5x5, integer weights)
GAUSS_KERNEL = (
    (1, 4, 7, 4, 1),
    (4, 16, 26, 16, 4),
    (7, 26, 41, 26, 7),
    (4, 16, 26, 16, 4),
    (1, 4, 7, 4, 1),
)

# Sobel kernels (3x3)
SOBEL_X_KERNEL = (
    (-1, 0, 1),
    (-2, 0, 2),
    (-1, 0, 1),
)
SOBEL_Y_KERNEL = (
    (1, 2, 1),
    (0, 0, 0),
    (-1, -2, -1),
)

# Contrast defaults and limits
DEFAULT_ALPHA = 1.0
DEFAULT_BETA = 0
MIN_ALPHA = 0.0

# Boundary handling modes for convolution filters
BOUNDARY_SKIP = "skip"
BOUNDARY_RENORMALIZE = "renormalize"
BOUNDARY_ROW_BREAK = "row_break"
BOUNDARY_MODES = (BOUNDARY_SKIP, BOUNDARY_RENORMALIZE, BOUNDARY_ROW_BREAK)

# Default canvas shown before any image is loaded
DEFAULT_CANVAS_WIDTH = 100
DEFAULT_CANVAS_HEIGHT = 100

# Supported file formats
PGM_EXTENSION = ".pgm"
PNM_FORMAT = "PPM"
GRAYSCALE_MODE = "L"
DISPLAY_MODES = ("L", "RGB", "RGBA")
SUPPORTED_GRAYSCALE_IMAGES = {".pgm", ".pnm", ".png", ".bmp", ".tiff", ".tif"}

# Config field names
FIELD_HISTORY_CAPACITY = "history_capacity"
FIELD_CLEAR_REDO_ON_APPLY = "clear_redo_on_apply"
FIELD_BOUNDARY_MODE = "boundary_mode"
FIELD_SATURATE_EDGES = "saturate_edges"
FIELD_CLAMP_CONTRAST_LOW = "clamp_contrast_low"
