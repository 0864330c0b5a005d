"""
Patch filter operations.

Provides the four filters the editor can apply to a patch:
- Smoothing: 5x5 Gaussian-like integer convolution
- Edge detection: 3x3 Sobel gradient magnitude
- Contrast/brightness: linear remap out = in * alpha + beta
- Negation: 8-bit complement

Every filter is a pure function from an input PixelBuffer to a new
PixelBuffer of the same size. Convolution samples that fall outside the patch
are skipped, and the smoothing divisor stays the full kernel sum, so pixels
near the patch border come out darker. FilterOptions selects between that
behavior and the alternatives.

Example:
    >>> buf = PixelBuffer.blank(8, 8, 120)
    >>> smoothed = smooth_filter(buf)
    >>> edges = edge_filter(buf, FilterOptions(saturate_edges=True))
    >>> brighter = contrast_filter(buf, alpha=1.2, beta=10)
"""

from dataclasses import dataclass
from numbers import Integral
import math
from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from PE_Libs.ImageEditingLib.patch_models import OperationKind
from PE_Libs.ImageEditingLib.pixel_buffer import PixelBuffer
from PE_Libs.constants import (
    BOUNDARY_MODES,
    BOUNDARY_RENORMALIZE,
    BOUNDARY_ROW_BREAK,
    BOUNDARY_SKIP,
    DEFAULT_ALPHA,
    DEFAULT_BETA,
    GAUSS_KERNEL,
    MAX_INTENSITY,
    MIN_ALPHA,
    SOBEL_X_KERNEL,
    SOBEL_Y_KERNEL,
)

FilterFunction = Callable[..., PixelBuffer]


@dataclass(frozen=True)
class FilterOptions:
    """Compatibility switches for the filters.

    Attributes:
        boundary_mode: How convolution treats samples outside the patch
                       'skip': drop them, keep the full smoothing divisor
                       'renormalize': drop them, divide by the weights used
                       'row_break': as 'skip', but a window whose left
                       column is outside the patch contributes nothing
        saturate_edges: Clip edge magnitudes to 255 instead of wrapping mod 256
        clamp_contrast_low: Clip negative contrast results to 0 instead of
                            wrapping mod 256
    """
    boundary_mode: str = BOUNDARY_SKIP
    saturate_edges: bool = False
    clamp_contrast_low: bool = False

    def __post_init__(self):
        if self.boundary_mode not in BOUNDARY_MODES:
            raise ValueError(
                f"Unknown boundary_mode: {self.boundary_mode}. "
                f"Valid modes: {', '.join(BOUNDARY_MODES)}"
            )


DEFAULT_OPTIONS = FilterOptions()


# ============================================================================
# Convolution
# ============================================================================

def _correlate(
    values: np.ndarray,
    kernel: Sequence[Sequence[int]],
    boundary_mode: str,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Accumulate kernel-weighted neighborhoods, skipping out-of-patch samples.

    Output pixel (x, y) accumulates values[y + i, x + j] * kernel[ci + i][cj + j]
    for every offset whose sample lies inside the array.

    Returns:
        (accumulator, weight sum actually used) as int64 arrays
    """
    kernel = np.asarray(kernel, dtype=np.int64)
    height, width = values.shape
    center_i = kernel.shape[0] // 2
    center_j = kernel.shape[1] // 2

    acc = np.zeros((height, width), dtype=np.int64)
    used = np.zeros((height, width), dtype=np.int64)

    for ki in range(kernel.shape[0]):
        di = ki - center_i
        y0, y1 = max(0, -di), min(height, height - di)
        if y0 >= y1:
            continue
        for kj in range(kernel.shape[1]):
            dj = kj - center_j
            x0, x1 = max(0, -dj), min(width, width - dj)
            if x0 >= x1:
                continue
            weight = kernel[ki, kj]
            acc[y0:y1, x0:x1] += weight * values[y0 + di:y1 + di, x0 + dj:x1 + dj]
            used[y0:y1, x0:x1] += weight

    if boundary_mode == BOUNDARY_ROW_BREAK:
        # every window row starts left of the patch, so every row is dropped
        acc[:, :center_j] = 0
        used[:, :center_j] = 0

    return acc, used


def _as_int(buffer: PixelBuffer) -> np.ndarray:
    if not isinstance(buffer, PixelBuffer):
        raise TypeError(f"Expected PixelBuffer, got {type(buffer)}")
    return buffer.array.astype(np.int64)


def _to_8bit(values: np.ndarray) -> PixelBuffer:
    """Store values the way an 8-bit cast does (mod 256)."""
    return PixelBuffer((values & 0xFF).astype(np.uint8))


# ============================================================================
# Filters
# ============================================================================

def smooth_filter(buffer: PixelBuffer, options: Optional[FilterOptions] = None) -> PixelBuffer:
    """
    Smooth a patch with the 5x5 Gaussian-like kernel (sum 273).

    Args:
        buffer: Pre-operation pixels
        options: Boundary handling (default: skip, full divisor)

    Returns:
        New PixelBuffer of the same size
    """
    options = options or DEFAULT_OPTIONS
    acc, used = _correlate(_as_int(buffer), GAUSS_KERNEL, options.boundary_mode)

    if options.boundary_mode == BOUNDARY_RENORMALIZE:
        divisor = np.maximum(used, 1)
    else:
        divisor = int(np.sum(GAUSS_KERNEL))

    return PixelBuffer((acc // divisor).astype(np.uint8))


def edge_filter(buffer: PixelBuffer, options: Optional[FilterOptions] = None) -> PixelBuffer:
    """
    Sobel edge magnitude, round(sqrt(gx^2 + gy^2)).

    Magnitudes above 255 wrap mod 256 unless options.saturate_edges is set.
    """
    options = options or DEFAULT_OPTIONS
    values = _as_int(buffer)
    gx, _ = _correlate(values, SOBEL_X_KERNEL, options.boundary_mode)
    gy, _ = _correlate(values, SOBEL_Y_KERNEL, options.boundary_mode)

    magnitude = np.rint(np.sqrt(gx * gx + gy * gy)).astype(np.int64)

    if options.saturate_edges:
        return PixelBuffer(np.clip(magnitude, 0, MAX_INTENSITY).astype(np.uint8))
    return _to_8bit(magnitude)


def contrast_filter(
    buffer: PixelBuffer,
    alpha: float = DEFAULT_ALPHA,
    beta: int = DEFAULT_BETA,
    options: Optional[FilterOptions] = None,
) -> PixelBuffer:
    """
    Linear contrast/brightness remap: out = trunc(in * alpha) + beta.

    Results above 255 are clamped to 255. Negative results wrap mod 256
    unless options.clamp_contrast_low is set.

    Args:
        buffer: Pre-operation pixels
        alpha: Contrast gain, finite and >= 0
        beta: Integer brightness offset

    Raises:
        ValueError: If alpha is negative or not finite, or beta is not an integer
    """
    options = options or DEFAULT_OPTIONS
    alpha = float(alpha)
    if not math.isfinite(alpha) or alpha < MIN_ALPHA:
        raise ValueError(f"alpha must be a finite number >= 0, got {alpha}")

    if isinstance(beta, float) and beta.is_integer():
        beta = int(beta)
    if isinstance(beta, bool) or not isinstance(beta, Integral):
        raise ValueError(f"beta must be an integer, got {beta!r}")

    # stays float until clamped, products can exceed int64
    scaled = np.minimum(np.trunc(_as_int(buffer) * alpha) + beta, MAX_INTENSITY)

    if options.clamp_contrast_low:
        return PixelBuffer(np.maximum(scaled, 0).astype(np.uint8))
    return PixelBuffer(np.mod(scaled, 256).astype(np.uint8))


def negate_filter(buffer: PixelBuffer, options: Optional[FilterOptions] = None) -> PixelBuffer:
    """Complement every intensity: out = 255 XOR in."""
    return PixelBuffer(np.bitwise_xor(buffer.array, np.uint8(MAX_INTENSITY)))


# ============================================================================
# Dispatch
# ============================================================================

FILTERS: Dict[OperationKind, FilterFunction] = {
    OperationKind.EDGE_DETECT: edge_filter,
    OperationKind.NEGATE: negate_filter,
    OperationKind.SMOOTH: smooth_filter,
    OperationKind.CONTRAST: contrast_filter,
}


def apply_filter(
    kind: OperationKind,
    buffer: PixelBuffer,
    alpha: Optional[float] = None,
    beta: Optional[int] = None,
    options: Optional[FilterOptions] = None,
) -> PixelBuffer:
    """
    Run the filter registered for kind on buffer.

    alpha and beta are only used by the contrast filter; missing values fall
    back to the identity coefficients (1.0, 0).

    Raises:
        ValueError: If kind is unknown or the coefficients are invalid
    """
    kind = OperationKind.parse(kind)
    func = FILTERS[kind]

    if kind is OperationKind.CONTRAST:
        return func(
            buffer,
            DEFAULT_ALPHA if alpha is None else alpha,
            DEFAULT_BETA if beta is None else beta,
            options=options,
        )
    return func(buffer, options=options)
