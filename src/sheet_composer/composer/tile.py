"""
Module: composer.tile

Purpose:
    Tile Preparer. Extracts the crop area from the source image,
    resamples it to the crop's own size and optionally rotates it.
    The source image is never modified.

Key Functions:
    - prepare_tile(): Produce the reusable tile image

Dependencies:
    - composer.imaging: ImagingBackend
    - core.models: CropArea

Used By:
    - composer.controller: Second pipeline stage
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..core.errors import STAGE_TILE, CropOutOfBounds, collaborator_call
from ..core.models import CropArea
from .imaging import Color, ImagingBackend

logger = logging.getLogger(__name__)


def prepare_tile(
    source: Any,
    crop_area: CropArea,
    backend: ImagingBackend,
    *,
    rotation_degrees: float = 0.0,
    resample: Optional[Any] = None,
    fill: Optional[Color] = None,
) -> Any:
    """
    Crop, resample and optionally rotate the tile.

    A rotation that is not a multiple of 90 degrees grows the tile's
    bounding box; callers must use the returned image's size, not the
    crop size, when placing it.

    Args:
        source: Source image (read-only)
        crop_area: Region to extract
        backend: Imaging primitives
        rotation_degrees: Clockwise angle; only > 0 rotates
        resample: Filter for the resample step (None = backend default)
        fill: Color for corners uncovered by rotation

    Returns:
        New tile image

    Raises:
        CropOutOfBounds: If crop_area extends outside the source
        CollaboratorFailure: If an imaging primitive fails
    """
    with collaborator_call(STAGE_TILE, "size"):
        source_width, source_height = backend.size(source)

    if not crop_area.fits_within(source_width, source_height):
        raise CropOutOfBounds(
            f"Crop {crop_area.box} exceeds source image {source_width}x{source_height}",
            stage=STAGE_TILE,
        )

    with collaborator_call(STAGE_TILE, "crop"):
        tile = backend.crop(source, crop_area)
    with collaborator_call(STAGE_TILE, "resize"):
        tile = backend.resize(tile, crop_area.width, crop_area.height, resample)

    if rotation_degrees > 0.0:
        with collaborator_call(STAGE_TILE, "rotate"):
            tile = backend.rotate(tile, rotation_degrees, fill=fill)
        logger.debug(f"Rotated tile by {rotation_degrees} degrees")

    return tile
