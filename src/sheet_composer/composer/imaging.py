"""
Module: composer.imaging

Purpose:
    The imaging collaborator seam. The composer never touches pixels
    directly: cropping, resampling, rotating, canvas allocation and
    stamping all go through an ImagingBackend. PillowBackend is the
    standard implementation.

Key Classes:
    - ImagingBackend: Abstract interface for imaging primitives
    - PillowBackend: Pillow implementation (default)

Dependencies:
    - PIL: Image manipulation
    - core.models: CropArea

Used By:
    - composer.tile: crop/resize/rotate
    - composer.compositor: new_canvas/draw_at
    - composer.finisher: rotate
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, Union

from PIL import Image, ImageColor

from ..core.models import CropArea

Color = Union[str, Tuple[int, ...], int]

DEFAULT_RESAMPLE = Image.Resampling.BICUBIC


class ImagingBackend(ABC):
    """
    Abstract interface for the imaging primitives the composer needs.

    Implementations may raise any exception; the pipeline stages wrap
    them into CollaboratorFailure.
    """

    @abstractmethod
    def size(self, image: Any) -> Tuple[int, int]:
        """
        Get (width, height) of an image.

        Args:
            image: Backend image handle

        Returns:
            Tuple of (width, height) in pixels
        """

    @abstractmethod
    def crop(self, image: Any, area: CropArea) -> Any:
        """
        Extract a region as a new image. Must not modify the source.

        Args:
            image: Source image
            area: Region to extract

        Returns:
            New image of size area.size
        """

    @abstractmethod
    def resize(self, image: Any, width: int, height: int, resample: Any = None) -> Any:
        """
        Resample an image to exactly (width, height).

        Args:
            image: Image to resample
            width: Target width
            height: Target height
            resample: Filter; None means the backend's high-quality default

        Returns:
            New image
        """

    @abstractmethod
    def rotate(self, image: Any, degrees: float, *, fill: Optional[Color] = None) -> Any:
        """
        Rotate clockwise, growing the bounding box to fit.

        Args:
            image: Image to rotate
            degrees: Clockwise angle
            fill: Color for the uncovered corners

        Returns:
            New (possibly larger) image
        """

    @abstractmethod
    def new_canvas(self, width: int, height: int, background: Color) -> Any:
        """
        Allocate a canvas filled with a background color.

        Returns:
            New image of (width, height)
        """

    @abstractmethod
    def draw_at(self, canvas: Any, tile: Any, top_left: Tuple[int, int]) -> None:
        """
        Draw tile onto canvas at top_left. Mutates canvas in place.
        """


class PillowBackend(ImagingBackend):
    """
    ImagingBackend backed by Pillow.

    Canvases are allocated in ``mode`` (RGB, RGBA or L). Images are
    converted to that mode, or to RGBA when they carry alpha, before
    rotating, so fill colors always resolve against the drawing mode.
    Tiles with an alpha channel are alpha-composited onto the canvas.

    Attributes:
        mode: Canvas image mode
        default_resample: Filter used when resize() gets no filter

    Example:
        >>> backend = PillowBackend()
        >>> canvas = backend.new_canvas(410, 579, "white")
        >>> backend.size(canvas)
        (410, 579)
    """

    def __init__(
        self,
        mode: str = "RGB",
        default_resample: Image.Resampling = DEFAULT_RESAMPLE,
    ) -> None:
        if mode not in ("RGB", "RGBA", "L"):
            raise ValueError(f"Unsupported canvas mode: {mode!r}")
        self.mode = mode
        self.default_resample = default_resample

    def size(self, image: Image.Image) -> Tuple[int, int]:
        return image.size

    def crop(self, image: Image.Image, area: CropArea) -> Image.Image:
        # Image.crop is lazy; load() detaches the result from the source
        region = image.crop(area.box)
        region.load()
        return region

    def resize(
        self,
        image: Image.Image,
        width: int,
        height: int,
        resample: Optional[Image.Resampling] = None,
    ) -> Image.Image:
        if resample is None:
            resample = self.default_resample
        return image.resize((width, height), resample)

    def rotate(
        self,
        image: Image.Image,
        degrees: float,
        *,
        fill: Optional[Color] = None,
    ) -> Image.Image:
        # Rotate in the mode the image will be drawn in, so the fill is
        # resolved for that mode rather than the source's
        image = self._to_canvas_mode(image)
        # Pillow rotates counter-clockwise
        return image.rotate(
            -degrees,
            resample=Image.Resampling.BICUBIC,
            expand=True,
            fillcolor=self._fill_for(image, fill),
        )

    def new_canvas(self, width: int, height: int, background: Color) -> Image.Image:
        return Image.new(self.mode, (width, height), background)

    def draw_at(
        self,
        canvas: Image.Image,
        tile: Image.Image,
        top_left: Tuple[int, int],
    ) -> None:
        if tile.mode != canvas.mode:
            tile = tile.convert("RGBA" if _has_alpha(tile) else canvas.mode)
        mask = tile if tile.mode == "RGBA" else None
        canvas.paste(tile, top_left, mask)

    def _to_canvas_mode(self, image: Image.Image) -> Image.Image:
        """Convert to the canvas mode, or RGBA when the image carries alpha."""
        target = "RGBA" if _has_alpha(image) else self.mode
        if image.mode == target:
            return image
        return image.convert(target)

    @staticmethod
    def _fill_for(image: Image.Image, fill: Optional[Color]) -> Optional[Color]:
        """Resolve a color name, RGB(A) tuple or gray level for the image mode."""
        if fill is None:
            return None
        if isinstance(fill, int):
            fill = (fill, fill, fill)
        if isinstance(fill, tuple):
            fill = "#" + "".join(f"{channel:02x}" for channel in fill)
        return ImageColor.getcolor(fill, image.mode)


def _has_alpha(image: Image.Image) -> bool:
    return "A" in image.getbands() or "transparency" in image.info
