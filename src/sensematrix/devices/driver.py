"""High-level LED matrix driver."""

import logging
from pathlib import Path
from typing import Any

from sensematrix.exceptions import ErrorContext
from sensematrix.models import GRID_SIZE, Color, Frame, MatrixConfig, PixelGenerator, PixelSource, Rotation
from sensematrix.models.config import SENSE_HAT_PRODUCT_NAME

from .codec import ColorCodec
from .discovery import DEFAULT_DEVICE_DIR, DEFAULT_GRAPHICS_DIR, require_framebuffer
from .framebuffer import FrameBufferFile
from .mapper import AddressMapper
from .protocols import DeviceHandle

logger = logging.getLogger(__name__)


class MatrixDriver:
    """
    Read and write the 8x8 LED matrix through a device handle.

    Coordinates are logical: (0, 0) is the top-left pixel as the viewer sees
    it under the current rotation. Rotation is per-instance state, starting
    at 0 unless given, and only changed by set_rotation().

    All input validation happens before any device I/O. Operations are
    synchronous and unsynchronised; concurrent writers to the same device
    interleave unpredictably.
    """

    def __init__(self, device: DeviceHandle, rotation: Rotation | int = Rotation.R0):
        """
        Initialize the driver.

        Args:
            device: Handle for the framebuffer device
            rotation: Initial rotation. Applied without redrawing the matrix.
        """
        self.device = device
        self._rotation = Rotation.parse(rotation)
        self.codec = ColorCodec()
        self.mapper = AddressMapper()

    @classmethod
    def discover(
        cls,
        graphics_dir: Path = DEFAULT_GRAPHICS_DIR,
        device_dir: Path = DEFAULT_DEVICE_DIR,
        product_name: str = SENSE_HAT_PRODUCT_NAME,
        rotation: Rotation | int = Rotation.R0,
    ) -> "MatrixDriver":
        """
        Create a driver for the discovered Sense HAT framebuffer.

        Raises:
            DeviceNotFoundError: If no matching framebuffer exists
        """
        path = require_framebuffer(graphics_dir, device_dir, product_name)
        return cls(FrameBufferFile(path), rotation=rotation)

    @classmethod
    def from_config(cls, config: MatrixConfig) -> "MatrixDriver":
        """
        Create a driver from configuration.

        Uses config.device_path when set, otherwise runs discovery with the
        configured directories and product name.

        Raises:
            DeviceNotFoundError: If discovery finds nothing
        """
        if config.device_path is not None:
            logger.info(f"Using configured device {config.device_path}")
            return cls(FrameBufferFile(config.device_path), rotation=config.rotation)

        return cls.discover(
            graphics_dir=config.graphics_dir,
            device_dir=config.device_dir,
            product_name=config.product_name,
            rotation=config.rotation,
        )

    @property
    def rotation(self) -> Rotation:
        """Current rotation."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: Rotation | int) -> None:
        self.set_rotation(value)

    def get_pixel(self, x: int, y: int) -> Color:
        """
        Read the color of one pixel.

        Raises:
            InvalidCoordinateError: If x or y is outside 0-7 (no I/O performed)
            DeviceUnavailableError: If the device cannot be read
        """
        index = self.mapper.index(x, y, self._rotation)
        values = self.codec.decode_buffer(self.device.read_all())
        return self.codec.unpack(values[index])

    def set_pixel(self, x: int, y: int, color: Any) -> None:
        """
        Set one pixel with a single random-access write.

        Args:
            x: Column (0-7)
            y: Row (0-7)
            color: Color or [R, G, B] sequence

        Raises:
            InvalidCoordinateError: If x or y is outside 0-7 (no I/O performed)
            InvalidColorError: If color is invalid (no I/O performed)
            DeviceUnavailableError: If the device cannot be written
        """
        offset = self.mapper.byte_offset(x, y, self._rotation)
        packed = self.codec.pack(color)
        self.device.write_record(offset, packed)
        logger.debug(f"Set pixel ({x}, {y}) to {packed:#06x} at offset {offset}")

    def get_pixels(self) -> Frame:
        """
        Read the whole matrix as a row-major frame under the current rotation.

        Raises:
            DeviceUnavailableError: If the device cannot be read
        """
        values = self.codec.decode_buffer(self.device.read_all())
        rows = []
        for y in range(GRID_SIZE):
            rows.append(tuple(
                self.codec.unpack(values[self.mapper.index(x, y, self._rotation)])
                for x in range(GRID_SIZE)
            ))
        return Frame(rows=tuple(rows))

    def set_pixels(self, source: PixelSource | Any) -> None:
        """
        Write all 64 pixels.

        Args:
            source: A Frame or PixelGenerator. For convenience, a nested 8x8
                sequence or (8, 8, 3) array is converted with Frame.from_rows,
                and a bare callable fn(x, y) is wrapped in a PixelGenerator.

        Every cell is validated (and generator cells evaluated) before the
        first write. The 64 records are then written in one batch.

        Raises:
            InvalidFrameShapeError: If a grid is not 8x8 (no I/O performed)
            InvalidColorError: If any cell is invalid (no I/O performed)
            DeviceUnavailableError: If a write fails. Pixels already written
                stay written; records_written on the error says how many.
        """
        self._write_frame(self._to_source(source).materialize())

    def clear(self) -> None:
        """Turn every pixel off."""
        self.set_pixels(Frame.blank())

    def fill(self, color: Any) -> None:
        """Set every pixel to one color."""
        self.set_pixels(Frame.filled(color))

    def set_rotation(self, rotation: Rotation | int) -> None:
        """
        Change rotation, keeping the visible image in place.

        The frame is read under the old rotation and written back under the
        new one. This is not atomic with respect to other writers. The rotation
        only changes once the rewrite succeeds; if it fails, the driver keeps
        the old rotation.

        Raises:
            InvalidRotationError: If rotation is not 0, 90, 180 or 270 (no I/O performed)
            DeviceUnavailableError: If the device cannot be read or written
        """
        new_rotation = Rotation.parse(rotation)
        old_rotation = self._rotation

        with ErrorContext(f"rotate matrix {old_rotation.value} -> {new_rotation.value}", logger_instance=logger):
            frame = self.get_pixels()
            self._write_frame(frame, new_rotation)
            self._rotation = new_rotation

        logger.info(f"Rotation changed from {old_rotation.value} to {new_rotation.value} degrees")

    def flip_horizontal(self) -> Frame:
        """Mirror the image left to right. Returns the new frame."""
        frame = self.get_pixels().flipped_horizontal()
        self._write_frame(frame)
        return frame

    def flip_vertical(self) -> Frame:
        """Mirror the image top to bottom. Returns the new frame."""
        frame = self.get_pixels().flipped_vertical()
        self._write_frame(frame)
        return frame

    @staticmethod
    def _to_source(source: Any) -> PixelSource:
        if isinstance(source, (Frame, PixelGenerator)):
            return source
        if callable(source):
            return PixelGenerator(source)
        return Frame.from_rows(source)

    def _write_frame(self, frame: Frame, rotation: Rotation | None = None) -> None:
        rotation = self._rotation if rotation is None else rotation
        records = [
            (self.mapper.byte_offset(x, y, rotation), self.codec.pack(frame.rows[y][x]))
            for x, y in self.mapper.coordinates()
        ]
        written = self.device.write_records(records)
        logger.debug(f"Wrote frame ({written} pixels) at rotation {rotation.value}")
