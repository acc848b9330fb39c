"""File-backed framebuffer port for the LED matrix."""

import logging
from collections.abc import Iterable
from pathlib import Path

from sensematrix.exceptions import DeviceUnavailableError, wrap_device_error

from .codec import FRAME_SIZE, RECORD_SIZE, ColorCodec
from .protocols import DeviceHandle

logger = logging.getLogger(__name__)


class FrameBufferFile(DeviceHandle):
    """
    Framebuffer device accessed through its device node.

    Every call opens and closes its own file descriptor; no handle is kept
    between calls. Concurrent writers are not coordinated.
    """

    def __init__(self, path: Path | str):
        """
        Initialize the port.

        Args:
            path: Device node, e.g. /dev/fb1
        """
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"FrameBufferFile({str(self.path)!r})"

    @staticmethod
    def _check_offset(offset: int) -> None:
        if offset % RECORD_SIZE or not 0 <= offset <= FRAME_SIZE - RECORD_SIZE:
            raise ValueError(f"Invalid record offset {offset}: must be even and in 0-{FRAME_SIZE - RECORD_SIZE}")

    def read_all(self) -> bytes:
        """
        Read the whole frame.

        Raises:
            DeviceUnavailableError: If the device cannot be opened or read
        """
        try:
            with open(self.path, "rb") as fb:
                data = fb.read(FRAME_SIZE)
        except OSError as e:
            logger.error(f"Failed to read {self.path}: {e}")
            raise wrap_device_error(e, self.path) from e

        if len(data) != FRAME_SIZE:
            logger.error(f"Short read from {self.path}: {len(data)} bytes")
            raise DeviceUnavailableError(
                self.path,
                original_error=f"expected {FRAME_SIZE} bytes, got {len(data)}",
                recovery_hint=f"{self.path} does not look like an 8x8 LED matrix framebuffer.",
            )

        logger.debug(f"Read {len(data)} bytes from {self.path}")
        return data

    def read_record(self, offset: int) -> int:
        """Read the packed value at a byte offset."""
        self._check_offset(offset)
        return int(ColorCodec.decode_buffer(self.read_all())[offset // RECORD_SIZE])

    def write_record(self, offset: int, packed: int) -> None:
        """
        Write one 2-byte record.

        Raises:
            DeviceUnavailableError: If the device cannot be opened or written
        """
        self._check_offset(offset)
        self.write_records([(offset, packed)])

    def write_records(self, records: Iterable[tuple[int, int]]) -> int:
        """
        Write records in order using a single open.

        Each record is written with its own seek + write, so a failure
        leaves earlier records in place.

        Returns:
            Number of records written

        Raises:
            DeviceUnavailableError: On any I/O failure; records_written on the
                exception says how far the batch got
        """
        records = list(records)
        for offset, _ in records:
            self._check_offset(offset)

        written = 0
        try:
            with open(self.path, "r+b", buffering=0) as fb:
                for offset, packed in records:
                    fb.seek(offset)
                    if fb.write(ColorCodec.encode_record(packed)) != RECORD_SIZE:
                        raise OSError(f"short write at offset {offset}")
                    written += 1
        except OSError as e:
            logger.error(f"Write to {self.path} failed after {written} of {len(records)} records: {e}")
            raise wrap_device_error(
                e, self.path, records_written=written if len(records) > 1 else None
            ) from e

        logger.debug(f"Wrote {written} records to {self.path}")
        return written

    def write_all(self, data: bytes) -> None:
        """
        Write the whole frame in one call.

        Raises:
            ValueError: If data is not exactly 128 bytes
            DeviceUnavailableError: If the device cannot be opened or written
        """
        if len(data) != FRAME_SIZE:
            raise ValueError(f"Frame must be {FRAME_SIZE} bytes, got {len(data)}")

        try:
            with open(self.path, "r+b", buffering=0) as fb:
                fb.seek(0)
                if fb.write(data) != FRAME_SIZE:
                    raise OSError("short write of frame")
        except OSError as e:
            logger.error(f"Failed to write frame to {self.path}: {e}")
            raise wrap_device_error(e, self.path) from e

        logger.debug(f"Wrote {FRAME_SIZE} bytes to {self.path}")
