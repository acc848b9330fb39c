"""Color model for LED control."""

import operator
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sensematrix.exceptions import InvalidColorError


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    Uses standard 8-bit RGB (0-255) as the application's color representation.
    Conversion to the device's RGB565 records is handled by the codec.

    The model is frozen so colors are hashable and can be shared between frames.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def from_sequence(cls, value: Any) -> "Color":
        """Build a Color from an [R, G, B] sequence.

        Colors pass through unchanged. Anything that is not exactly three
        integer channels in 0-255 raises InvalidColorError.

        Example:
            >>> Color.from_sequence([255, 128, 0])
            Color(r=255, g=128, b=0)
        """
        if isinstance(value, cls):
            return value
        # numpy arrays are not registered Sequences but behave like one here
        if isinstance(value, (str, bytes, dict)) or not (
            isinstance(value, Sequence) or hasattr(value, "__array__")
        ):
            raise InvalidColorError(value, "not a sequence")
        if len(value) != 3:
            raise InvalidColorError(value, f"length = {len(value)} violates length = 3")

        channels = []
        for channel in value:
            if isinstance(channel, bool):
                raise InvalidColorError(value, "channels must be integers")
            try:
                channel = operator.index(channel)
            except TypeError:
                raise InvalidColorError(value, "channels must be integers") from None
            if not 0 <= channel <= 255:
                raise InvalidColorError(value)
            channels.append(channel)

        r, g, b = channels
        return cls(r=r, g=g, b=b)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_list(self) -> list[int]:
        """Convert to [R, G, B] list."""
        return [self.r, self.g, self.b]

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
