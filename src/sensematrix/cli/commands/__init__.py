"""CLI commands for sensematrix."""

from .config import config
from .device import device_group
from .display import clear, fill, flip, rotate, show
from .pixel import pixel_group

__all__ = ["clear", "config", "device_group", "fill", "flip", "pixel_group", "rotate", "show"]
