"""
Module: composer.controller

Purpose:
    Orchestrate the composition pipeline.
    Plan → Prepare tile → Composite → Finish

Key Functions:
    - compose_sheet(): Main entry point

Key Classes:
    - SheetResult: Final sheet plus the intermediate artifacts

Dependencies:
    - composer.planner, composer.tile, composer.compositor, composer.finisher
    - composer.imaging: PillowBackend (default backend)

Used By:
    - composer.sheet: ImageSheet facade
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .compositor import compose_canvas
from .config import ComposerConfig
from .finisher import finish_output
from .imaging import ImagingBackend, PillowBackend
from .planner import GridPlan, plan_grid
from .tile import prepare_tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetResult:
    """
    Complete composition result (immutable).

    Attributes:
        image: Final sheet (rotated if requested)
        tile: The tile that was stamped
        plan: Grid plan used for the canvas
        positions: Insertion points, in stamping order
        elapsed_seconds: Wall time for the run

    Example:
        >>> result = compose_sheet(photo, ComposerConfig(crop_area=CropArea(0, 0, 100, 100)))
        >>> result.tile_count
        20
    """

    image: Any
    tile: Any
    plan: GridPlan
    positions: Tuple[Tuple[int, int], ...]
    elapsed_seconds: float = 0.0

    @property
    def tile_count(self) -> int:
        return len(self.positions)


def compose_sheet(
    source: Any,
    config: ComposerConfig,
    *,
    backend: Optional[ImagingBackend] = None,
) -> SheetResult:
    """
    Compose a sheet of repeated tiles from one source image.

    Pipeline:
    1. Plan the grid (rows, columns, borders, canvas size)
    2. Crop, resample and optionally rotate the tile
    3. Allocate the canvas and stamp the tile at every grid position
    4. Optionally rotate the finished canvas

    Any stage failure aborts the run; nothing partial is returned.

    Args:
        source: Source image (read-only)
        config: Composition configuration
        backend: Imaging primitives (default: PillowBackend)

    Returns:
        SheetResult

    Raises:
        InvalidFormat: Bad sheet/image format
        CropOutOfBounds: Crop area outside the source
        CollaboratorFailure: Imaging backend error
    """
    if backend is None:
        backend = PillowBackend()

    start_time = time.perf_counter()
    rotation = config.rotation

    logger.info(
        f"Composing sheet {config.sheet_format!r} with tile {config.image_format!r} "
        f"from crop {config.crop_area.box}"
    )

    # 1. Plan
    plan = plan_grid(config.sheet_format, config.image_format, config.crop_area)
    logger.info(
        f"Planned {plan.num_cols}x{plan.num_rows} grid on "
        f"{plan.output_width}x{plan.output_height}px canvas"
    )

    # 2. Tile
    tile = prepare_tile(
        source,
        config.crop_area,
        backend,
        rotation_degrees=rotation.tile_degrees,
        resample=config.resample,
        fill=config.background_color,
    )

    # 3. Composite
    canvas, positions = compose_canvas(
        plan, tile, backend, background=config.background_color
    )

    # 4. Finish
    image = finish_output(
        canvas,
        backend,
        rotation_degrees=rotation.output_degrees,
        fill=config.background_color,
    )

    elapsed = time.perf_counter() - start_time
    logger.info(f"Composed {len(positions)} tiles in {elapsed:.3f}s")

    return SheetResult(
        image=image,
        tile=tile,
        plan=plan,
        positions=tuple(positions),
        elapsed_seconds=elapsed,
    )
