"""
Module: formats

Purpose:
    Sheet and tile footprints. A format is either one of a closed set of
    named presets ("A4", "passport photo", ...) or a caller-supplied
    custom size. Both variants expose the same read-only width/height,
    so callers never need to tell them apart.

Key Classes:
    - Format: Shared immutable (width, height, name) value
    - SheetFormat: Page footprint
    - ImageFormat: Single tile footprint

Key Constants:
    - A4: 210 x 297
    - PASSPORT_PHOTO: 51 x 51
    - CHINESE_VISA_PHOTO: 38 x 48

Dependencies:
    - dataclasses (std)
    - core.errors: InvalidFormat

Used By:
    - composer.config: ComposerConfig defaults
    - composer.planner: Grid arithmetic
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from ..errors import InvalidFormat


@dataclass(frozen=True, slots=True)
class Format:
    """
    Width/height footprint in abstract sheet units.

    Attributes:
        width: Horizontal extent (> 0)
        height: Vertical extent (> 0)
        name: Preset name, or None for a custom format (not compared)

    Invariants:
        - width and height are positive integers
    """

    width: int
    height: int
    name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidFormat(
                    f"{type(self).__name__} {label} must be an integer: {value!r}"
                )
            if value <= 0:
                raise InvalidFormat(
                    f"{type(self).__name__} {label} must be positive: {value}"
                )

    @property
    def kind(self) -> str:
        """Either "preset" or "custom"."""
        return "custom" if self.name is None else "preset"

    @property
    def is_custom(self) -> bool:
        return self.name is None

    @property
    def aspect_ratio(self) -> float:
        """width / height as a float."""
        return self.width / self.height

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @classmethod
    def custom(cls, width: int, height: int):
        """Create a caller-supplied format."""
        return cls(width, height)

    def __repr__(self) -> str:
        if self.name is None:
            return f"{type(self).__name__}.custom({self.width}, {self.height})"
        return f"{type(self).__name__}({self.name!r}: {self.width}x{self.height})"


class SheetFormat(Format):
    """Footprint of the printable page the tiles are laid out on."""

    __slots__ = ()

    @classmethod
    def preset(cls, name: str) -> SheetFormat:
        """
        Look up a sheet preset by name (case-insensitive).

        Raises:
            InvalidFormat: If no preset has that name

        Example:
            >>> SheetFormat.preset("a4").size
            (210, 297)
        """
        return _lookup(SHEET_PRESETS, name, "sheet")


class ImageFormat(Format):
    """Nominal footprint of one tile on the sheet."""

    __slots__ = ()

    @classmethod
    def preset(cls, name: str) -> ImageFormat:
        """
        Look up an image preset by name (case-insensitive).

        Accepts "passport", "passport_photo", "chinese-visa", ...

        Raises:
            InvalidFormat: If no preset has that name
        """
        return _lookup(IMAGE_PRESETS, name, "image")


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def _lookup(presets: Dict[str, Format], name: str, what: str):
    key = _normalize(name)
    if key not in presets:
        known = ", ".join(sorted(presets))
        raise InvalidFormat(f"Unknown {what} format preset {name!r} (known: {known})")
    return presets[key]


# Presets
A4 = SheetFormat(210, 297, name="A4")
PASSPORT_PHOTO = ImageFormat(51, 51, name="passport_photo")
CHINESE_VISA_PHOTO = ImageFormat(38, 48, name="chinese_visa_photo")

SHEET_PRESETS: Dict[str, SheetFormat] = {
    "a4": A4,
}

IMAGE_PRESETS: Dict[str, ImageFormat] = {
    "passport": PASSPORT_PHOTO,
    "passport_photo": PASSPORT_PHOTO,
    "chinese_visa": CHINESE_VISA_PHOTO,
    "chinese_visa_photo": CHINESE_VISA_PHOTO,
}
