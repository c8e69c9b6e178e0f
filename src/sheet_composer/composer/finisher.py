"""
Module: composer.finisher

Purpose:
    Output Finisher. Applies the optional whole-sheet rotation.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..core.errors import STAGE_FINISH, collaborator_call
from .imaging import Color, ImagingBackend

logger = logging.getLogger(__name__)


def finish_output(
    canvas: Any,
    backend: ImagingBackend,
    *,
    rotation_degrees: float = 0.0,
    fill: Optional[Color] = None,
) -> Any:
    """
    Rotate the composed canvas if the angle is strictly positive.

    Args:
        canvas: Composed canvas
        backend: Imaging primitives
        rotation_degrees: Clockwise angle; zero or negative returns canvas unchanged
        fill: Color for corners uncovered by rotation

    Returns:
        The rotated image (bounding box grows for non-right angles), or canvas itself

    Raises:
        CollaboratorFailure: If the rotation fails
    """
    if rotation_degrees <= 0.0:
        return canvas

    with collaborator_call(STAGE_FINISH, "rotate"):
        rotated = backend.rotate(canvas, rotation_degrees, fill=fill)
    logger.debug(f"Rotated output by {rotation_degrees} degrees")
    return rotated
