"""Framebuffer device access for the 8x8 LED matrix."""

from .codec import FRAME_SIZE, RECORD_SIZE, ColorCodec
from .discovery import find_framebuffer, list_framebuffers, require_framebuffer
from .driver import MatrixDriver
from .framebuffer import FrameBufferFile
from .mapper import AddressMapper
from .protocols import DeviceHandle

__all__ = [
    "FRAME_SIZE",
    "RECORD_SIZE",
    "AddressMapper",
    "ColorCodec",
    "DeviceHandle",
    "FrameBufferFile",
    "MatrixDriver",
    "find_framebuffer",
    "list_framebuffers",
    "require_framebuffer",
]
