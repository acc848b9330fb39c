"""Input validation exceptions.

These are raised before any device I/O takes place:
- InvalidColorError: Color is not three channels in 0-255
- InvalidCoordinateError: x or y outside 0-7
- InvalidRotationError: Rotation not one of 0, 90, 180, 270
- InvalidFrameShapeError: Grid is not exactly 8 rows of 8 cells

Each also subclasses ValueError so generic callers can catch them.
"""

from typing import Any

from .base import SenseMatrixError


class MatrixValidationError(SenseMatrixError, ValueError):
    """Caller-supplied value was rejected before touching the device."""

    def __init__(self, user_message: str, value: Any = None, **kwargs):
        super().__init__(user_message, recoverable=True, **kwargs)
        self.value = value


class InvalidColorError(MatrixValidationError):
    """Color is not an [R, G, B] triple with each channel in 0-255."""

    def __init__(self, value: Any, reason: str | None = None):
        """
        Initialize invalid color error.

        Args:
            value: The rejected color value
            reason: Optional detail about what is wrong with it
        """
        msg = f"Invalid color {value!r}: must be [R, G, B] with 0 <= channel <= 255"
        if reason:
            msg += f" ({reason})"
        super().__init__(
            msg,
            value=value,
            recovery_hint="Pass three integers, e.g. 255 0 0 for red",
        )


class InvalidCoordinateError(MatrixValidationError):
    """Coordinate is outside the 8x8 grid."""

    def __init__(self, axis: str, value: Any):
        """
        Initialize invalid coordinate error.

        Args:
            axis: "x" or "y"
            value: The rejected coordinate
        """
        super().__init__(
            f"{axis} = {value!r} violates 0 <= {axis} <= 7",
            value=value,
        )
        self.axis = axis


class InvalidRotationError(MatrixValidationError):
    """Rotation is not one of the four supported angles."""

    def __init__(self, value: Any):
        super().__init__(
            f"Rotation {value!r} is not supported: must be 0, 90, 180 or 270 degrees",
            value=value,
        )


class InvalidFrameShapeError(MatrixValidationError):
    """Pixel grid is not exactly 8 rows of 8 cells."""

    def __init__(self, reason: str):
        super().__init__(
            f"Pixels must be an 8x8 array of [R, G, B] values: {reason}",
            value=None,
        )
        self.reason = reason
