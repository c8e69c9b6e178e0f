"""
Module: composer.sheet

Purpose:
    ImageSheet - step-by-step builder around compose_sheet(). Set the
    formats, crop area and rotations one at a time, then create().

Key Classes:
    - ImageSheet: Stateful builder facade

Used By:
    - Callers that configure a sheet incrementally
"""

from __future__ import annotations

from typing import Any, Optional

from ..core.errors import CropOutOfBounds
from ..core.models import A4, PASSPORT_PHOTO, CropArea, ImageFormat, SheetFormat
from .config import DEFAULT_BACKGROUND, ComposerConfig
from .controller import SheetResult, compose_sheet
from .imaging import Color, ImagingBackend
from .planner import GridPlan


class ImageSheet:
    """
    Builder for a tiled sheet from one source image.

    Attributes:
        source_image: Image passed to from_image() (never modified)
        cropped_image: Prepared tile, set by create()
        output_image: Final sheet, set by create()
        plan: GridPlan, set by create()

    Example:
        >>> sheet = ImageSheet.from_image(photo)
        >>> sheet.set_crop_area(0, 0, 100, 100)
        >>> sheet.set_output_image_rotation(90)
        >>> sheet.create().size
        (579, 410)
    """

    def __init__(self, source_image: Any, backend: Optional[ImagingBackend] = None) -> None:
        self.source_image = source_image
        self.backend = backend
        self.sheet_format: SheetFormat = A4
        self.image_format: ImageFormat = PASSPORT_PHOTO
        self.crop_area: Optional[CropArea] = None
        self.cropped_image_rotation_degrees = 0.0
        self.output_image_rotation_degrees = 0.0
        self.background_color: Color = DEFAULT_BACKGROUND

        self.cropped_image: Any = None
        self.output_image: Any = None
        self.plan: Optional[GridPlan] = None
        self.result: Optional[SheetResult] = None

    @classmethod
    def from_image(cls, source_image: Any, backend: Optional[ImagingBackend] = None) -> ImageSheet:
        return cls(source_image, backend)

    def set_sheet_format(self, sheet_format: SheetFormat) -> ImageSheet:
        self.sheet_format = sheet_format
        return self

    def set_image_format(self, image_format: ImageFormat) -> ImageSheet:
        self.image_format = image_format
        return self

    def set_crop_area(self, x_start: int, y_start: int, x_end: int, y_end: int) -> ImageSheet:
        self.crop_area = CropArea.from_corners(x_start, y_start, x_end, y_end)
        return self

    def set_cropped_image_rotation(self, degrees: float) -> ImageSheet:
        self.cropped_image_rotation_degrees = degrees
        return self

    def set_output_image_rotation(self, degrees: float) -> ImageSheet:
        self.output_image_rotation_degrees = degrees
        return self

    def set_background_color(self, color: Color) -> ImageSheet:
        self.background_color = color
        return self

    def to_config(self) -> ComposerConfig:
        """
        Snapshot the current settings as a ComposerConfig.

        Raises:
            CropOutOfBounds: If no crop area has been set
        """
        if self.crop_area is None:
            raise CropOutOfBounds("No crop area set; call set_crop_area() first")
        return ComposerConfig(
            crop_area=self.crop_area,
            sheet_format=self.sheet_format,
            image_format=self.image_format,
            tile_rotation_degrees=self.cropped_image_rotation_degrees,
            output_rotation_degrees=self.output_image_rotation_degrees,
            background_color=self.background_color,
        )

    def create(self) -> Any:
        """
        Compose the sheet with the current settings.

        Results of a previous run are cleared first, so a failed run
        leaves no output behind.

        Returns:
            The final output image (also stored on output_image)
        """
        self.result = None
        self.cropped_image = None
        self.output_image = None
        self.plan = None

        result = compose_sheet(self.source_image, self.to_config(), backend=self.backend)
        self.result = result
        self.cropped_image = result.tile
        self.output_image = result.image
        self.plan = result.plan
        return result.image
