"""Frame models: a full 8x8 matrix image and a procedural pixel source."""

from collections.abc import Callable, Sequence
from typing import Any, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator

from sensematrix.exceptions import InvalidCoordinateError, InvalidFrameShapeError

from .color import Color

GRID_SIZE = 8
NUM_PIXELS = GRID_SIZE * GRID_SIZE


def validate_coordinate(x: int, y: int) -> None:
    """
    Check that (x, y) lies on the 8x8 grid.

    Raises:
        InvalidCoordinateError: If x or y is not an integer in 0-7
    """
    for axis, value in (("x", x), ("y", y)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidCoordinateError(axis, value)
        if not 0 <= value < GRID_SIZE:
            raise InvalidCoordinateError(axis, value)


class Frame(BaseModel):
    """
    Immutable 8x8 grid of colors in row-major order.

    `rows[y][x]` is the color at column x of row y, with (0, 0) the
    top-left pixel of the matrix as seen at rotation 0.
    """

    model_config = ConfigDict(frozen=True)

    rows: tuple[tuple[Color, ...], ...]

    @field_validator("rows")
    @classmethod
    def validate_shape(cls, rows: tuple[tuple[Color, ...], ...]) -> tuple[tuple[Color, ...], ...]:
        """Ensure the grid is exactly 8x8."""
        if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
            raise ValueError("Frame must have exactly 8 rows of 8 colors")
        return rows

    @classmethod
    def from_rows(cls, rows: Any) -> "Frame":
        """
        Build a frame from nested rows of colors.

        Cells may be Color instances or [R, G, B] sequences. The whole grid is
        validated up front so no partially valid frame ever reaches a device.

        Raises:
            InvalidFrameShapeError: If the grid is not 8 rows of 8 cells
            InvalidColorError: If any cell is not a valid color
        """
        if isinstance(rows, Frame):
            return rows
        if isinstance(rows, np.ndarray):
            return cls.from_array(rows)
        if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
            raise InvalidFrameShapeError(f"expected a sequence of rows, got {type(rows).__name__}")
        if len(rows) != GRID_SIZE:
            raise InvalidFrameShapeError(f"got {len(rows)} rows")

        validated = []
        for y, row in enumerate(rows):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                raise InvalidFrameShapeError(f"row {y} is not a sequence")
            if len(row) != GRID_SIZE:
                raise InvalidFrameShapeError(f"row {y} has {len(row)} cells")
            validated.append(tuple(Color.from_sequence(cell) for cell in row))

        return cls(rows=tuple(validated))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Frame":
        """
        Build a frame from an (8, 8, 3) array of channel values.

        Raises:
            InvalidFrameShapeError: If the array is not shaped (8, 8, 3)
            InvalidColorError: If any value is outside 0-255 or not an integer
        """
        array = np.asarray(array)
        if array.shape != (GRID_SIZE, GRID_SIZE, 3):
            raise InvalidFrameShapeError(f"array shape {array.shape} is not (8, 8, 3)")
        return cls(
            rows=tuple(
                tuple(Color.from_sequence(array[y, x].tolist()) for x in range(GRID_SIZE))
                for y in range(GRID_SIZE)
            )
        )

    @classmethod
    def filled(cls, color: Any) -> "Frame":
        """Create a frame with every pixel set to one color."""
        color = Color.from_sequence(color)
        row = (color,) * GRID_SIZE
        return cls(rows=(row,) * GRID_SIZE)

    @classmethod
    def blank(cls) -> "Frame":
        """Create an all-off frame."""
        return cls.filled(Color.off())

    def color_at(self, x: int, y: int) -> Color:
        """Get the color at column x of row y."""
        validate_coordinate(x, y)
        return self.rows[y][x]

    def materialize(self) -> "Frame":
        """Return this frame (already materialized)."""
        return self

    def flipped_horizontal(self) -> "Frame":
        """Return a new frame with the columns reversed."""
        return Frame(rows=tuple(tuple(reversed(row)) for row in self.rows))

    def flipped_vertical(self) -> "Frame":
        """Return a new frame with the rows reversed."""
        return Frame(rows=tuple(reversed(self.rows)))

    def to_lists(self) -> list[list[list[int]]]:
        """Convert to nested [[[R, G, B], ...], ...] lists."""
        return [[color.to_list() for color in row] for row in self.rows]

    def to_array(self) -> np.ndarray:
        """Convert to a uint8 array shaped (8, 8, 3)."""
        return np.array(self.to_lists(), dtype=np.uint8)


class PixelGenerator:
    """
    Procedural pixel source.

    Wraps a function `fn(x, y) -> Color | [R, G, B]` that is evaluated
    lazily, once per cell, when the source is materialized. Lets callers
    draw patterns without building a grid first.

    Example:
        ```python
        gradient = PixelGenerator(lambda x, y: (x * 32, y * 32, 0))
        driver.set_pixels(gradient)
        ```
    """

    def __init__(self, fn: Callable[[int, int], Any]):
        if not callable(fn):
            raise TypeError(f"PixelGenerator requires a callable, got {type(fn).__name__}")
        self.fn = fn

    def color_at(self, x: int, y: int) -> Color:
        """Evaluate the function for one cell and validate its result."""
        validate_coordinate(x, y)
        return Color.from_sequence(self.fn(x, y))

    def materialize(self) -> Frame:
        """
        Evaluate every cell in row-major order into a Frame.

        Raises:
            InvalidColorError: If the function returns an invalid color
        """
        return Frame(
            rows=tuple(
                tuple(self.color_at(x, y) for x in range(GRID_SIZE))
                for y in range(GRID_SIZE)
            )
        )

    def __repr__(self) -> str:
        return f"PixelGenerator({self.fn!r})"


# Variant accepted by MatrixDriver.set_pixels
PixelSource = Union[Frame, PixelGenerator]
