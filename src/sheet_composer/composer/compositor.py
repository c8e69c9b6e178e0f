"""
Module: composer.compositor

Purpose:
    Canvas Compositor. Allocates the output canvas and stamps the tile
    at every grid position.

Key Functions:
    - tile_positions(): Insertion points for a plan, in stamping order
    - compose_canvas(): Allocate the canvas and draw all tiles

Dependencies:
    - composer.imaging: ImagingBackend
    - composer.planner: GridPlan

Used By:
    - composer.controller: Third pipeline stage
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from ..core.errors import STAGE_COMPOSITE, collaborator_call
from .imaging import Color, ImagingBackend
from .planner import GridPlan

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


def tile_positions(
    plan: GridPlan,
    tile_size: Optional[Tuple[int, int]] = None,
) -> List[Point]:
    """
    Compute top-left insertion points for every tile.

    Order is column by column, top to bottom within a column, so the
    result is deterministic for a given plan.

    Args:
        plan: Grid plan
        tile_size: (width, height) of the tile actually drawn. Defaults to
            the plan's cell size; pass the rotated tile's size when the
            tile was rotated.

    Returns:
        List of (x, y) points, length plan.tile_count

    Example:
        >>> tile_positions(plan)[:2]
        [(2, 13), (2, 126)]
    """
    step_w, step_h = tile_size if tile_size is not None else (plan.cell_width, plan.cell_height)
    return [
        (
            plan.border_w + col * (step_w + plan.border_w),
            plan.border_h + row * (step_h + plan.border_h),
        )
        for col in range(plan.num_cols)
        for row in range(plan.num_rows)
    ]


def compose_canvas(
    plan: GridPlan,
    tile: Any,
    backend: ImagingBackend,
    *,
    background: Color = "white",
) -> Tuple[Any, List[Point]]:
    """
    Allocate the output canvas and stamp the tile onto it.

    The canvas is mutated in place for each stamp.

    Args:
        plan: Grid plan with canvas size and borders
        tile: Prepared tile image
        backend: Imaging primitives
        background: Canvas fill color

    Returns:
        Tuple of (canvas, positions)

    Raises:
        CollaboratorFailure: If allocation or drawing fails
    """
    with collaborator_call(STAGE_COMPOSITE, "new_canvas"):
        canvas = backend.new_canvas(plan.output_width, plan.output_height, background)
    with collaborator_call(STAGE_COMPOSITE, "size"):
        tile_size = backend.size(tile)

    if tile_size != (plan.cell_width, plan.cell_height):
        logger.debug(
            f"Tile is {tile_size[0]}x{tile_size[1]}px, cell is "
            f"{plan.cell_width}x{plan.cell_height}px; spacing by tile size"
        )

    positions = tile_positions(plan, tile_size)
    with collaborator_call(STAGE_COMPOSITE, "draw_at"):
        for point in positions:
            backend.draw_at(canvas, tile, point)

    logger.debug(f"Stamped {len(positions)} tiles")
    return canvas, positions
