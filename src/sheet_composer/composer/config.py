"""
Module: composer.config

Purpose:
    Configuration for a composition run. Immutable, validated on
    construction.

Key Classes:
    - ComposerConfig: Sheet/tile formats, crop area, rotations, background

Dependencies:
    - dataclasses (std)
    - PIL.ImageColor: Background color validation
    - core.models: Formats, CropArea, RotationSpec

Used By:
    - composer.controller: compose_sheet()
    - composer.sheet: ImageSheet facade
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from PIL import Image, ImageColor

from ..core.errors import CropOutOfBounds, InvalidFormat
from ..core.models import A4, PASSPORT_PHOTO, CropArea, ImageFormat, RotationSpec, SheetFormat
from .imaging import DEFAULT_RESAMPLE, Color

DEFAULT_BACKGROUND = "white"


@dataclass(frozen=True)
class ComposerConfig:
    """
    Configuration for composing a sheet (immutable).

    Attributes:
        crop_area: Source rectangle that becomes the tile
        sheet_format: Page footprint (default A4)
        image_format: Tile footprint (default passport photo)
        tile_rotation_degrees: Clockwise rotation of the tile; only > 0 rotates
        output_rotation_degrees: Clockwise rotation of the sheet; only > 0 rotates
        background_color: Canvas fill (Pillow color name or tuple)
        resample: Resampling filter for tile preparation (default bicubic)

    Raises:
        CropOutOfBounds: crop_area is not a CropArea
        InvalidFormat: sheet_format or image_format has the wrong type
        ValueError: Non-numeric or non-finite rotation angle, unknown
            background color or unknown resample filter (argument checks,
            outside the ComposerError taxonomy)

    Example:
        >>> config = ComposerConfig(crop_area=CropArea(0, 0, 100, 100))
        >>> config.sheet_format.size
        (210, 297)
    """

    crop_area: CropArea
    sheet_format: SheetFormat = A4
    image_format: ImageFormat = PASSPORT_PHOTO

    # Rotation
    tile_rotation_degrees: float = 0.0
    output_rotation_degrees: float = 0.0

    # Rendering
    background_color: Color = DEFAULT_BACKGROUND
    resample: Optional[Any] = DEFAULT_RESAMPLE

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.crop_area, CropArea):
            raise CropOutOfBounds(f"crop_area must be a CropArea: {self.crop_area!r}")
        if not isinstance(self.sheet_format, SheetFormat):
            raise InvalidFormat(f"sheet_format must be a SheetFormat: {self.sheet_format!r}")
        if not isinstance(self.image_format, ImageFormat):
            raise InvalidFormat(f"image_format must be an ImageFormat: {self.image_format!r}")
        # Raises ValueError for non-numeric or non-finite angles
        RotationSpec(self.tile_rotation_degrees, self.output_rotation_degrees)
        if isinstance(self.background_color, str):
            try:
                ImageColor.getrgb(self.background_color)
            except ValueError as e:
                raise ValueError(f"Unknown background_color: {self.background_color!r}") from e
        if self.resample is not None and self.resample not in set(Image.Resampling):
            raise ValueError(f"Unknown resample filter: {self.resample!r}")

    @property
    def rotation(self) -> RotationSpec:
        """Both rotation angles as a RotationSpec."""
        return RotationSpec(
            tile_degrees=self.tile_rotation_degrees,
            output_degrees=self.output_rotation_degrees,
        )

    def with_overrides(self, **changes: Any) -> ComposerConfig:
        """
        Return a copy with some fields replaced (re-validated).

        Example:
            >>> rotated = config.with_overrides(output_rotation_degrees=90)
        """
        return replace(self, **changes)
