"""
Module: composer

Purpose:
    Sheet composition pipeline: tile one cropped sub-image into an
    evenly bordered grid on a sheet-shaped canvas.

Key Functions:
    - compose_sheet(): Main entry point
    - plan_grid(): Grid Planner
    - prepare_tile(): Tile Preparer
    - compose_canvas(): Canvas Compositor
    - finish_output(): Output Finisher

Key Classes:
    - ComposerConfig: Configuration for a run
    - ImageSheet: Step-by-step builder facade
    - ImagingBackend / PillowBackend: Imaging primitives

Dependencies:
    - PIL: Image manipulation (PillowBackend)
"""

from .config import ComposerConfig
from .imaging import ImagingBackend, PillowBackend
from .planner import GridPlan, plan_grid
from .tile import prepare_tile
from .compositor import compose_canvas, tile_positions
from .finisher import finish_output
from .controller import SheetResult, compose_sheet
from .sheet import ImageSheet

__all__ = [
    # Config
    "ComposerConfig",
    # Backends
    "ImagingBackend",
    "PillowBackend",
    # Stages
    "GridPlan",
    "plan_grid",
    "prepare_tile",
    "compose_canvas",
    "tile_positions",
    "finish_output",
    # Controller
    "SheetResult",
    "compose_sheet",
    "ImageSheet",
]
