"""Data models for the LED matrix."""

from .color import Color
from .config import MatrixConfig
from .enums import Rotation
from .frame import GRID_SIZE, NUM_PIXELS, Frame, PixelGenerator, PixelSource, validate_coordinate

__all__ = [
    "GRID_SIZE",
    "NUM_PIXELS",
    # Models
    "Color",
    "Frame",
    "MatrixConfig",
    "PixelGenerator",
    "PixelSource",
    # Enums
    "Rotation",
    "validate_coordinate",
]
