"""
Module: composer.planner

Purpose:
    Grid Planner. Works out how many tiles fit the sheet, how the
    leftover space is spread as borders, and how large the output
    canvas is in pixels.

Key Functions:
    - plan_grid(): Compute a GridPlan from formats and crop area

Key Classes:
    - GridPlan: Rows, columns, borders and canvas size

Dependencies:
    - dataclasses (std)
    - core.models: SheetFormat, ImageFormat, CropArea

Used By:
    - composer.controller: First pipeline stage
    - composer.compositor: Insertion points
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.errors import STAGE_PLAN, InvalidFormat
from ..core.models import CropArea, ImageFormat, SheetFormat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridPlan:
    """
    Layout of tiles on the output canvas (immutable).

    Attributes:
        num_rows: Tiles per column (may be 0)
        num_cols: Tiles per row (may be 0)
        border_w: Horizontal gap before, between and after tiles (px)
        border_h: Vertical gap before, between and after tiles (px)
        output_width: Canvas width (px)
        output_height: Canvas height (px), derived from the sheet aspect ratio
        cell_width: Crop width (px)
        cell_height: Crop height (px)

    Example:
        >>> plan = plan_grid(A4, PASSPORT_PHOTO, CropArea(0, 0, 100, 100))
        >>> plan.num_cols, plan.num_rows
        (4, 5)
    """

    num_rows: int
    num_cols: int
    border_w: int
    border_h: int
    output_width: int
    output_height: int
    cell_width: int
    cell_height: int

    @property
    def tile_count(self) -> int:
        return self.num_rows * self.num_cols

    @property
    def is_empty(self) -> bool:
        """True when the tile footprint is larger than the sheet on either axis."""
        return self.tile_count == 0

    @property
    def row_derived_height(self) -> int:
        """
        Height the rows and borders actually occupy.

        Not used for the canvas: output_height comes from the sheet's
        aspect ratio and may be larger or smaller than this.
        """
        return self.num_rows * self.cell_height + self.border_h * (self.num_rows + 1)

    @property
    def height_mismatch(self) -> int:
        """output_height - row_derived_height (positive means spare rows at the bottom)."""
        return self.output_height - self.row_derived_height


def _check_format(fmt, label: str) -> None:
    # Formats validate themselves, but duck-typed inputs still reach here
    if fmt.width <= 0 or fmt.height <= 0:
        raise InvalidFormat(
            f"{label} dimensions must be positive: {fmt.width}x{fmt.height}",
            stage=STAGE_PLAN,
        )


def _border(remainder: int, footprint: int, cell: int, count: int) -> int:
    # Leftover sheet units, scaled into crop pixels, split over count + 1 gaps
    return int(remainder / footprint * cell / (count + 1))


def plan_grid(
    sheet_format: SheetFormat,
    image_format: ImageFormat,
    crop_area: CropArea,
) -> GridPlan:
    """
    Compute the tile grid for a sheet.

    Column/row counts use truncating integer division of the sheet by
    the tile footprint. The remainder becomes border thickness. The
    canvas width follows from the columns; the canvas height follows
    from the sheet aspect ratio, not from the rows.

    Args:
        sheet_format: Page footprint
        image_format: Tile footprint, same units as the sheet
        crop_area: Crop rectangle; its size is the cell size in pixels

    Returns:
        GridPlan (zero rows or columns when the tile does not fit)

    Raises:
        InvalidFormat: If any format dimension is zero or negative
    """
    _check_format(sheet_format, "Sheet format")
    _check_format(image_format, "Image format")

    num_cols = sheet_format.width // image_format.width
    num_rows = sheet_format.height // image_format.height

    border_w = _border(
        sheet_format.width % image_format.width, image_format.width, crop_area.width, num_cols
    )
    border_h = _border(
        sheet_format.height % image_format.height, image_format.height, crop_area.height, num_rows
    )

    aspect_ratio = sheet_format.width / sheet_format.height
    output_width = num_cols * crop_area.width + border_w * (num_cols + 1)
    output_height = int(output_width / aspect_ratio)

    plan = GridPlan(
        num_rows=num_rows,
        num_cols=num_cols,
        border_w=border_w,
        border_h=border_h,
        output_width=output_width,
        output_height=output_height,
        cell_width=crop_area.width,
        cell_height=crop_area.height,
    )

    logger.debug(
        f"Grid {num_cols}x{num_rows}, borders {border_w}x{border_h}px, "
        f"canvas {output_width}x{output_height}px"
    )
    if plan.is_empty:
        logger.warning(
            f"Tile footprint {image_format.width}x{image_format.height} does not fit "
            f"sheet {sheet_format.width}x{sheet_format.height}; no tiles will be drawn"
        )
    elif plan.height_mismatch != 0:
        logger.warning(
            f"Canvas height {output_height}px differs from tiled height "
            f"{plan.row_derived_height}px by {plan.height_mismatch}px"
        )
    return plan
