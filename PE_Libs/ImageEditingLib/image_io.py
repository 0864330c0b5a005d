"""
Grayscale image loading, saving and display rendering.

The editor works on single-channel images, normally portable gray maps
(.pgm). Any format Pillow can open is accepted; images with several bands
are expected to carry the same gray level in each band, and the first band
is used.

Functions:
    load_grayscale: Load an image file into a PixelBuffer
    save_grayscale: Write a PixelBuffer to disk
    blank_image: Create the default black canvas
    render_image: Broadcast a PixelBuffer to a Pillow image for display
"""

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from PE_Libs.ImageEditingLib.pixel_buffer import PixelBuffer
from PE_Libs.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DISPLAY_MODES,
    GRAYSCALE_MODE,
    PGM_EXTENSION,
    PNM_FORMAT,
    SUPPORTED_GRAYSCALE_IMAGES,
)
from PE_Libs.errors import InvalidImageError

PathLike = Union[str, Path]


def is_supported_format(file_path: PathLike) -> bool:
    """Check if a file path has one of the expected grayscale extensions."""
    return Path(file_path).suffix.lower() in SUPPORTED_GRAYSCALE_IMAGES


def image_to_buffer(image: "Image.Image") -> PixelBuffer:
    """
    Convert a Pillow image to a PixelBuffer.

    Mode 'L' is used as is, multi-band images use their first band and any
    other mode is converted to 'L'.
    """
    if image.mode != GRAYSCALE_MODE:
        if image.mode in ("RGB", "RGBA", "LA"):
            image = image.getchannel(0)
        else:
            image = image.convert(GRAYSCALE_MODE)
    return PixelBuffer(np.asarray(image, dtype=np.uint8))


def load_grayscale(file_path: PathLike) -> PixelBuffer:
    """
    Load an image file as a single-channel PixelBuffer.

    Args:
        file_path: Path to the image (PGM or any Pillow-readable format)

    Returns:
        PixelBuffer holding the image intensities

    Raises:
        InvalidImageError: If the file is missing or cannot be decoded
    """
    path = Path(file_path)

    if not path.is_file():
        raise InvalidImageError(f"Image file not found: {path}")

    try:
        with Image.open(path) as image:
            image.load()
            return image_to_buffer(image)
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise InvalidImageError(f"Cannot decode image {path}: {exc}") from exc


def save_grayscale(buffer: PixelBuffer, file_path: PathLike) -> Path:
    """
    Save a PixelBuffer to disk.

    .pgm files are written with Pillow's PNM writer in mode 'L'; other
    suffixes let Pillow infer the format.

    Returns:
        The path written

    Raises:
        OSError: If the parent directory does not exist or the file cannot be written
    """
    path = Path(file_path)

    if not path.parent.exists():
        raise OSError(f"Output directory does not exist: {path.parent}")

    image = render_image(buffer, GRAYSCALE_MODE)
    if path.suffix.lower() == PGM_EXTENSION:
        image.save(path, format=PNM_FORMAT)
    else:
        image.save(path)
    return path


def blank_image(width: int = DEFAULT_CANVAS_WIDTH, height: int = DEFAULT_CANVAS_HEIGHT) -> PixelBuffer:
    """Black canvas shown before any image is loaded."""
    return PixelBuffer.blank(width, height, 0)


def render_image(buffer: PixelBuffer, mode: str = "RGB") -> "Image.Image":
    """
    Build a Pillow image for display, copying the intensity to every color channel.

    Args:
        buffer: Intensities to render
        mode: 'L', 'RGB' or 'RGBA' (alpha is opaque)

    Raises:
        ValueError: If mode is not supported
    """
    if mode not in DISPLAY_MODES:
        raise ValueError(f"Unsupported display mode: {mode}. Valid modes: {', '.join(DISPLAY_MODES)}")

    gray = Image.fromarray(np.ascontiguousarray(buffer.array))
    if mode == GRAYSCALE_MODE:
        return gray

    bands = [gray, gray, gray]
    if mode == "RGBA":
        bands.append(Image.new(GRAYSCALE_MODE, gray.size, 255))
    return Image.merge(mode, bands)
