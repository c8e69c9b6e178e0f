"""
Module: core.errors

Purpose:
    Error taxonomy for sheet composition. Every failure surfaced to a
    caller is one of these kinds, tagged with the pipeline stage that
    raised it (when known).

Key Classes:
    - ComposerError: Base class, carries ``stage``
    - InvalidFormat: Zero/negative sheet or image dimensions
    - CropOutOfBounds: Crop rectangle outside the source, or empty
    - CollaboratorFailure: Wraps errors raised by the imaging backend

Used By:
    - core.models: Construction-time validation
    - composer.*: Stage preconditions and backend calls
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

# Pipeline stage names, in execution order
STAGE_PLAN = "plan"
STAGE_TILE = "tile"
STAGE_COMPOSITE = "composite"
STAGE_FINISH = "finish"

STAGES = (STAGE_PLAN, STAGE_TILE, STAGE_COMPOSITE, STAGE_FINISH)


class ComposerError(Exception):
    """
    Base error for all composition failures.

    Attributes:
        stage: Pipeline stage that failed ("plan", "tile", "composite",
            "finish"), or None when raised outside the pipeline
            (e.g. while constructing a format).
    """

    def __init__(self, message: str, *, stage: Optional[str] = None) -> None:
        if stage is not None and stage not in STAGES:
            raise ValueError(f"Unknown pipeline stage: {stage!r}")
        super().__init__(message)
        self.stage = stage

    def __str__(self) -> str:
        message = super().__str__()
        if self.stage is None:
            return message
        return f"[{self.stage}] {message}"


class InvalidFormat(ComposerError, ValueError):
    """Sheet or image format with zero or negative dimensions."""
    pass


class CropOutOfBounds(ComposerError, ValueError):
    """Crop area exceeds the source image or has non-positive size."""
    pass


class CollaboratorFailure(ComposerError):
    """Error surfaced by the imaging backend (crop, resize, rotate, ...)."""
    pass


@contextmanager
def collaborator_call(stage: str, operation: str) -> Iterator[None]:
    """
    Wrap an imaging backend call so its failures become CollaboratorFailure.

    Errors that are already part of the taxonomy pass through untouched.

    Args:
        stage: Pipeline stage performing the call
        operation: Backend operation name, used in the message

    Raises:
        CollaboratorFailure: If the wrapped block raises anything else

    Example:
        >>> with collaborator_call(STAGE_TILE, "crop"):
        ...     tile = backend.crop(source, crop_area)
    """
    try:
        yield
    except ComposerError:
        raise
    except Exception as e:
        raise CollaboratorFailure(
            f"Imaging backend failed during {operation}: {e}", stage=stage
        ) from e
