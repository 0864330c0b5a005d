"""
Patch compositing.

Writes a patch back into the full image at the offset it was cut from, either
its filtered pixels (apply, redo) or its snapshot (undo).

Functions:
    write_back: Copy a patch buffer into a full image in place
"""

from PE_Libs.ImageEditingLib.patch_models import Patch
from PE_Libs.ImageEditingLib.pixel_buffer import PixelBuffer
from PE_Libs.errors import OutOfBoundsError


def write_back(image: PixelBuffer, patch: Patch, use_filtered: bool) -> PixelBuffer:
    """
    Copy one of a patch's buffers into an image at the patch offset.

    Args:
        image: Full image, modified in place
        patch: Patch cut from an image of the same size
        use_filtered: True for the post-operation pixels, False for the snapshot

    Returns:
        The same image object, for chaining

    Raises:
        ValueError: If the patch is invalid
        OutOfBoundsError: If the patch does not fit the image (e.g. a different
            image was loaded since the patch was cut)
    """
    source = patch.buffer(use_filtered)

    if not image.contains_region(*patch.rect):
        raise OutOfBoundsError(patch.rect, image.size)

    image.paste(source, patch.x, patch.y)
    return image
