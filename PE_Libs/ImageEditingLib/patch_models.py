"""
Patch data models for Patch Editor.

This module defines the data structures that carry one edit from the moment a
region is cut out of the image until it drops off the end of the history.

Classes:
    OperationKind: The filter applied to a patch
    Patch: Rectangular region with pre- and post-operation pixels
    OperationRecord: Completed, immutable patch stored in history
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from PE_Libs.ImageEditingLib.pixel_buffer import PixelBuffer
from PE_Libs.errors import OutOfBoundsError

Rect = Tuple[int, int, int, int]


class OperationKind(Enum):
    """Filter kinds, in the order the editor lists them."""

    EDGE_DETECT = "edge_detect"
    NEGATE = "negate"
    SMOOTH = "smooth"
    CONTRAST = "contrast"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]

    @classmethod
    def parse(cls, value) -> "OperationKind":
        """
        Resolve a kind from an OperationKind, its value, its name or its list index.

        Raises:
            ValueError: If value does not name a known kind
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        else:
            text = str(value).strip().lower().replace("-", "_")
            for kind in cls:
                if text in (kind.value, kind.name.lower(), kind.label.lower()):
                    return kind

        valid = ", ".join(kind.value for kind in cls)
        raise ValueError(f"Unknown operation kind: {value!r}. Valid kinds: {valid}")


_KIND_LABELS = {
    OperationKind.EDGE_DETECT: "Edges",
    OperationKind.NEGATE: "Invert",
    OperationKind.SMOOTH: "Smooth",
    OperationKind.CONTRAST: "Contrast",
}


class Patch:
    """
    A rectangular region of an image holding its state before and after one filter.

    The pre-operation buffer is a read-only snapshot taken at construction.
    The post-operation buffer starts as a copy of it and is replaced once by
    set_result(). A Patch() built without arguments is invalid and has no
    buffers.
    """

    def __init__(
        self,
        kind: Optional[OperationKind] = None,
        x: int = 0,
        y: int = 0,
        pre: Optional[PixelBuffer] = None,
    ):
        self.kind = kind
        self.x = x
        self.y = y
        self._filtered = False

        if pre is None:
            self.valid = False
            self.width = 0
            self.height = 0
            self._pre = None
            self._post = None
            return

        self.valid = True
        self.width = pre.width
        self.height = pre.height
        self._pre = pre.copy().freeze()
        self._post = pre.copy()

    @classmethod
    def from_image(
        cls,
        image: PixelBuffer,
        kind: OperationKind,
        x: int,
        y: int,
        w: int,
        h: int,
    ) -> "Patch":
        """
        Cut a patch out of an image.

        Args:
            image: Full image to copy the region from
            kind: Operation that will be applied to the patch
            x, y: Upper-left corner of the region
            w, h: Region size

        Returns:
            A valid Patch whose buffers both equal the region

        Raises:
            OutOfBoundsError: If the origin or size is negative or the region
                extends past the image
        """
        if not image.contains_region(x, y, w, h):
            raise OutOfBoundsError((x, y, w, h), image.size)

        return cls(OperationKind.parse(kind), x, y, image.region(x, y, w, h))

    @property
    def rect(self) -> Rect:
        return self.x, self.y, self.width, self.height

    @property
    def pre(self) -> PixelBuffer:
        self._require_valid()
        return self._pre

    @property
    def post(self) -> PixelBuffer:
        self._require_valid()
        return self._post

    @property
    def is_filtered(self) -> bool:
        return self._filtered

    def buffer(self, use_filtered: bool) -> PixelBuffer:
        """Return the post-operation buffer if use_filtered, else the snapshot."""
        return self.post if use_filtered else self.pre

    def set_result(self, result: PixelBuffer) -> None:
        """
        Store the filter output as the post-operation buffer.

        Raises:
            ValueError: If the patch is invalid or result has the wrong size
            RuntimeError: If a result was already stored
        """
        self._require_valid()

        if self._filtered:
            raise RuntimeError("Patch already holds a filter result")

        if result.size != self._pre.size:
            raise ValueError(
                f"Filter result size {result.size} does not match patch size {self._pre.size}"
            )

        self._post = result.copy().freeze()
        self._filtered = True

    def _require_valid(self) -> None:
        if not self.valid:
            raise ValueError("Patch is invalid and carries no pixel buffers")

    def __repr__(self) -> str:
        kind = self.kind.value if self.kind else None
        return f"Patch(kind={kind}, rect={self.rect}, valid={self.valid})"


@dataclass(frozen=True)
class OperationRecord:
    """An applied operation as kept in history.

    Attributes:
        patch: Filtered patch holding both pixel states
        kind: Operation that produced the patch
        alpha: Contrast gain (contrast only)
        beta: Brightness offset (contrast only)
    """
    patch: Patch
    kind: OperationKind
    alpha: Optional[float] = None
    beta: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.patch, Patch) or not self.patch.valid:
            raise ValueError("OperationRecord requires a valid Patch")

    @property
    def x(self) -> int:
        return self.patch.x

    @property
    def y(self) -> int:
        return self.patch.y

    @property
    def width(self) -> int:
        return self.patch.width

    @property
    def height(self) -> int:
        return self.patch.height

    @property
    def rect(self) -> Rect:
        return self.patch.rect

    def describe(self) -> str:
        """One-line summary used in log messages."""
        text = (
            f"{self.kind.label} on x:{self.x}, y:{self.y}, "
            f"w:{self.width}, h:{self.height}"
        )
        if self.kind is OperationKind.CONTRAST:
            text += f" (alpha={self.alpha}, beta={self.beta})"
        return text
