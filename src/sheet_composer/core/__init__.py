"""
Sheet Composer Core Package

Value types shared by every pipeline stage, plus the error taxonomy.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Formats, crop areas and rotations are frozen dataclasses
   - Validation happens once, on construction

2. **Presets Are Values, Not Subclasses**
   - "A4" or "passport photo" are named constants of the same type
     as a caller-supplied custom format
"""

from .errors import ComposerError, InvalidFormat, CropOutOfBounds, CollaboratorFailure
from .models import (
    SheetFormat,
    ImageFormat,
    CropArea,
    RotationSpec,
    A4,
    PASSPORT_PHOTO,
    CHINESE_VISA_PHOTO,
)

__all__ = [
    # Errors
    "ComposerError",
    "InvalidFormat",
    "CropOutOfBounds",
    "CollaboratorFailure",
    # Models
    "SheetFormat",
    "ImageFormat",
    "CropArea",
    "RotationSpec",
    # Presets
    "A4",
    "PASSPORT_PHOTO",
    "CHINESE_VISA_PHOTO",
]
