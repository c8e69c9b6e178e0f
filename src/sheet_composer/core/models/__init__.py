"""
Core Models Package

Immutable, validated value types used by the composition pipeline.

| Type | Meaning |
|------|---------|
| `SheetFormat` | Printable page footprint (abstract units, e.g. mm) |
| `ImageFormat` | One tile's nominal footprint, same units |
| `CropArea` | Source-image rectangle that becomes the tile (pixels) |
| `RotationSpec` | Tile and output rotation angles (degrees) |
"""

from .formats import (
    Format,
    SheetFormat,
    ImageFormat,
    A4,
    PASSPORT_PHOTO,
    CHINESE_VISA_PHOTO,
    SHEET_PRESETS,
    IMAGE_PRESETS,
)
from .crop import CropArea
from .rotation import RotationSpec

__all__ = [
    "Format",
    "SheetFormat",
    "ImageFormat",
    "A4",
    "PASSPORT_PHOTO",
    "CHINESE_VISA_PHOTO",
    "SHEET_PRESETS",
    "IMAGE_PRESETS",
    "CropArea",
    "RotationSpec",
]
