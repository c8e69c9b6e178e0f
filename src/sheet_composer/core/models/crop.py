"""
Module: crop

Purpose:
    The CropArea dataclass - the source-image rectangle that becomes the
    tile. Its width/height are also the pixel size of the prepared tile
    and the cell size used by the grid arithmetic.

Key Functions:
    - CropArea.from_corners(): Build from (x_start, y_start, x_end, y_end)
    - CropArea.fits_within(): Check against a source image size
    - CropArea.box: PIL-style (left, top, right, bottom) tuple

Dependencies:
    - dataclasses (std)
    - core.errors: CropOutOfBounds
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import CropOutOfBounds


@dataclass(frozen=True, slots=True)
class CropArea:
    """
    Axis-aligned crop rectangle in source-image pixels.

    The region is [x_start, x_end) x [y_start, y_end).

    Attributes:
        x_start: Left edge (inclusive)
        y_start: Top edge (inclusive)
        x_end: Right edge (exclusive)
        y_end: Bottom edge (exclusive)

    Invariants:
        - x_end > x_start
        - y_end > y_start

    Example:
        >>> crop = CropArea(10, 20, 110, 70)
        >>> crop.width, crop.height
        (100, 50)
    """

    x_start: int
    y_start: int
    x_end: int
    y_end: int

    def __post_init__(self) -> None:
        """Validate the rectangle on construction."""
        for label in ("x_start", "y_start", "x_end", "y_end"):
            value = getattr(self, label)
            if isinstance(value, bool) or not isinstance(value, int):
                raise CropOutOfBounds(f"{label} must be an integer: {value!r}")
        if self.x_end <= self.x_start:
            raise CropOutOfBounds(
                f"Crop width must be positive: x_end {self.x_end} <= x_start {self.x_start}"
            )
        if self.y_end <= self.y_start:
            raise CropOutOfBounds(
                f"Crop height must be positive: y_end {self.y_end} <= y_start {self.y_start}"
            )

    @classmethod
    def from_corners(cls, x_start: int, y_start: int, x_end: int, y_end: int) -> CropArea:
        return cls(x_start, y_start, x_end, y_end)

    @classmethod
    def from_size(cls, width: int, height: int, *, x: int = 0, y: int = 0) -> CropArea:
        """Build a crop of the given size with its top-left corner at (x, y)."""
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> int:
        return self.x_end - self.x_start

    @property
    def height(self) -> int:
        return self.y_end - self.y_start

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple for PIL."""
        return (self.x_start, self.y_start, self.x_end, self.y_end)

    def fits_within(self, width: int, height: int) -> bool:
        """
        Check whether the whole rectangle lies inside an image.

        Args:
            width: Image width in pixels
            height: Image height in pixels

        Returns:
            True if 0 <= start and end <= image extent on both axes
        """
        return (
            self.x_start >= 0
            and self.y_start >= 0
            and self.x_end <= width
            and self.y_end <= height
        )
