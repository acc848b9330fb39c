"""RGB565 color packing for the LED matrix framebuffer."""

import numpy as np

from sensematrix.exceptions import DeviceUnavailableError
from sensematrix.models import NUM_PIXELS, Color

# Each pixel is one little-endian uint16 record
RECORD_SIZE = 2
FRAME_SIZE = NUM_PIXELS * RECORD_SIZE


class ColorCodec:
    """
    Convert between 8-bit RGB colors and 16-bit RGB565 records.

    Bit layout of a packed pixel, most significant bit first:

        RRRRR GGGGGG BBBBB

    Packing drops the low 3 bits of red and blue and the low 2 bits of
    green, so `unpack(pack(c))` is lossy for arbitrary colors while
    `pack(unpack(p)) == p` holds for every 16-bit value.
    """

    @staticmethod
    def pack(color) -> int:
        """
        Pack a color into a 16-bit RGB565 value.

        Args:
            color: Color or [R, G, B] sequence (each channel 0-255)

        Returns:
            Packed 16-bit value

        Raises:
            InvalidColorError: If color is not 3 channels in 0-255

        Example:
            >>> ColorCodec.pack([255, 255, 255])
            65535
        """
        color = Color.from_sequence(color)
        r5 = color.r >> 3
        g6 = color.g >> 2
        b5 = color.b >> 3
        return (r5 << 11) | (g6 << 5) | b5

    @staticmethod
    def unpack(packed: int) -> Color:
        """
        Unpack a 16-bit RGB565 value into a Color.

        Every 16-bit input produces a valid color.

        Example:
            >>> ColorCodec.unpack(0xFFFF).to_rgb_tuple()
            (248, 252, 248)
        """
        packed = int(packed)
        r5 = (packed >> 11) & 0x1F
        g6 = (packed >> 5) & 0x3F
        b5 = packed & 0x1F
        return Color(r=r5 << 3, g=g6 << 2, b=b5 << 3)

    @staticmethod
    def encode_record(packed: int) -> bytes:
        """Encode a packed value as its 2-byte little-endian record."""
        return int(packed).to_bytes(RECORD_SIZE, "little")

    @staticmethod
    def decode_buffer(data: bytes) -> np.ndarray:
        """
        Decode a full framebuffer into 64 packed values.

        Args:
            data: Raw 128-byte frame read from the device

        Returns:
            uint16 array of length 64, record i taken from byte offset 2*i

        Raises:
            DeviceUnavailableError: If the buffer is not exactly 128 bytes
        """
        if len(data) != FRAME_SIZE:
            raise DeviceUnavailableError(
                path=None,
                original_error=f"expected {FRAME_SIZE} bytes from device, got {len(data)}",
            )
        return np.frombuffer(data, dtype="<u2")
