"""Exception types raised by the motion analysis pipeline."""
from __future__ import annotations

FPS_ERROR_MESSAGE = "FPS must be a positive number."
READ_ERROR_MESSAGE = "Something went wrong while reading the files."


class FaceMotionError(Exception):
    """Base class for user-visible failures."""


class InvalidFrameRateError(FaceMotionError, ValueError):
    """The configured frame rate is not a finite positive number."""

    def __init__(self, message: str = FPS_ERROR_MESSAGE) -> None:
        super().__init__(message)


class BatchReadError(FaceMotionError, OSError):
    """A file in a batch could not be read; the whole batch is discarded."""

    def __init__(self, message: str = READ_ERROR_MESSAGE) -> None:
        super().__init__(message)
