"""Device handle protocol for the LED matrix framebuffer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class DeviceHandle(Protocol):
    """
    Random-access binary device holding the 128-byte matrix frame.

    Offsets are byte offsets of 2-byte records (0, 2, ..., 126). Failures
    at the OS level surface as DeviceUnavailableError.
    """

    def read_all(self) -> bytes:
        """Read the entire 128-byte frame."""
        ...

    def read_record(self, offset: int) -> int:
        """Read one packed pixel value at a byte offset."""
        ...

    def write_record(self, offset: int, packed: int) -> None:
        """Write one packed pixel value at a byte offset."""
        ...

    def write_records(self, records: Iterable[tuple[int, int]]) -> int:
        """
        Write (offset, packed) records in order.

        Returns:
            Number of records written

        Note:
            Records already written before a failure are not rolled back.
        """
        ...

    def write_all(self, data: bytes) -> None:
        """Write the entire 128-byte frame."""
        ...
