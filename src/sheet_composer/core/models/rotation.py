"""
Module: rotation

Purpose:
    Two independent rotation angles: one for the tile before compositing,
    one for the finished sheet. Only strictly positive angles rotate;
    zero and negative values mean "leave as is".
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RotationSpec:
    """
    Rotation angles in degrees (clockwise).

    Attributes:
        tile_degrees: Applied to the tile before it is stamped
        output_degrees: Applied to the composed canvas

    Example:
        >>> RotationSpec(tile_degrees=90).rotates_tile
        True
        >>> RotationSpec(output_degrees=-90).rotates_output
        False
    """

    tile_degrees: float = 0.0
    output_degrees: float = 0.0

    def __post_init__(self) -> None:
        for label in ("tile_degrees", "output_degrees"):
            value = getattr(self, label)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{label} must be a number: {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{label} must be finite: {value!r}")

    @property
    def rotates_tile(self) -> bool:
        return self.tile_degrees > 0.0

    @property
    def rotates_output(self) -> bool:
        return self.output_degrees > 0.0
