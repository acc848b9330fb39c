"""sensematrix: Driver for the Raspberry Pi Sense HAT 8x8 LED matrix."""

__version__ = "0.1.0"

from .devices import MatrixDriver
from .models import Color, Frame, PixelGenerator, Rotation

__all__ = [
    "Color",
    "Frame",
    "MatrixDriver",
    "PixelGenerator",
    "Rotation",
]
