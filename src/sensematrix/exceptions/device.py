"""Device-related exceptions.

This module defines exceptions for framebuffer device errors:
- DeviceError: Base class for device errors
- DeviceUnavailableError: Open/read/write on the device failed
- DeviceNotFoundError: No Sense HAT framebuffer could be discovered
"""

from pathlib import Path

from .base import SenseMatrixError


class DeviceError(SenseMatrixError):
    """Framebuffer device initialization or operation failed."""

    def __init__(self, user_message: str, path: Path | str | None = None, **kwargs):
        """
        Initialize device error.

        Args:
            user_message: User-friendly error message
            path: The device path involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.path = Path(path) if path is not None else None


class DeviceUnavailableError(DeviceError):
    """OS-level I/O on the framebuffer device failed."""

    def __init__(
        self,
        path: Path | str | None,
        original_error: str | None = None,
        records_written: int | None = None,
        recovery_hint: str | None = None,
    ):
        """
        Initialize device-unavailable error.

        Args:
            path: Device path that failed
            original_error: The original OS error message
            records_written: Records written before the failure, for batch writes
            recovery_hint: Optional hint, defaults to a generic one
        """
        if path is not None:
            user_msg = f"LED matrix device {path} is unavailable."
        else:
            user_msg = "LED matrix device is unavailable."
        if records_written is not None:
            user_msg += f" Frame write stopped after {records_written} of 64 pixels."

        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            path=path,
            recoverable=False,
            recovery_hint=recovery_hint
            or "Check that the device exists and is writable. "
            "Run 'sensematrix device detect' to locate it.",
        )
        self.original_error = original_error
        self.records_written = records_written


class DeviceNotFoundError(DeviceError):
    """No framebuffer matching the Sense HAT product name was found."""

    def __init__(self, graphics_dir: Path | str, product_name: str):
        """
        Initialize device-not-found error.

        Args:
            graphics_dir: Directory that was scanned
            product_name: The name marker that was looked for
        """
        super().__init__(
            user_message="Cannot find a Raspberry Pi Sense HAT matrix LED! Are we running on a Pi?",
            technical_message=f"No fb* entry under {graphics_dir} has name '{product_name}'",
            recoverable=True,
            recovery_hint=(
                "Make sure the Sense HAT is attached and its overlay is loaded, "
                "or pass the device explicitly with '--device /dev/fbN'.\n"
                "Run 'sensematrix device list' to see available framebuffers."
            ),
        )
        self.graphics_dir = Path(graphics_dir)
        self.product_name = product_name
