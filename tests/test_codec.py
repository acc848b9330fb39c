"""Unit tests for ColorCodec."""

import numpy as np
import pytest

from sensematrix.devices import FRAME_SIZE, ColorCodec
from sensematrix.exceptions import DeviceUnavailableError, InvalidColorError
from sensematrix.models import Color


@pytest.mark.unit
class TestPack:
    """Test RGB to RGB565 packing."""

    def test_pack_white(self):
        """Test that full white packs to 0xFFFF."""
        assert ColorCodec.pack([255, 255, 255]) == 0xFFFF

    def test_pack_black(self):
        assert ColorCodec.pack([0, 0, 0]) == 0x0000

    def test_pack_primary_colors(self):
        """Test each channel lands in its own bit field."""
        assert ColorCodec.pack([255, 0, 0]) == 0xF800
        assert ColorCodec.pack([0, 255, 0]) == 0x07E0
        assert ColorCodec.pack([0, 0, 255]) == 0x001F

    def test_pack_accepts_color_and_tuple(self):
        assert ColorCodec.pack(Color(r=16, g=8, b=24)) == ColorCodec.pack((16, 8, 24))

    def test_pack_drops_low_bits(self):
        """Test that low 3/2/3 bits do not affect the packed value."""
        assert ColorCodec.pack([7, 3, 7]) == 0
        assert ColorCodec.pack([8, 4, 8]) == (1 << 11) | (1 << 5) | 1

    @pytest.mark.parametrize("bad", [
        [256, 0, 0],
        [0, -1, 0],
        [0, 0],
        [0, 0, 0, 0],
        [1.5, 0, 0],
        "red",
        None,
    ])
    def test_pack_invalid_color(self, bad):
        """Test that invalid colors raise InvalidColorError."""
        with pytest.raises(InvalidColorError):
            ColorCodec.pack(bad)


@pytest.mark.unit
class TestUnpack:
    """Test RGB565 to RGB unpacking."""

    def test_unpack_white(self):
        """Test that 0xFFFF unpacks to the truncated maximum."""
        assert ColorCodec.unpack(0xFFFF) == Color(r=248, g=252, b=248)

    def test_unpack_accepts_numpy_scalar(self):
        assert ColorCodec.unpack(np.uint16(0xF800)) == Color(r=248, g=0, b=0)

    def test_packed_round_trip_is_exact(self):
        """Test pack(unpack(p)) == p for every 16-bit value."""
        for packed in range(0x10000):
            assert ColorCodec.pack(ColorCodec.unpack(packed)) == packed

    def test_color_round_trip_truncates(self):
        """Test unpack(pack(c)) keeps only the high bits of each channel."""
        for r in range(0, 256, 17):
            for g in range(0, 256, 15):
                for b in (0, 1, 7, 8, 127, 128, 254, 255):
                    result = ColorCodec.unpack(ColorCodec.pack([r, g, b]))
                    assert result.to_rgb_tuple() == (r & ~0x7, g & ~0x3, b & ~0x7)


@pytest.mark.unit
class TestRecords:
    """Test wire encoding of records."""

    def test_encode_record_little_endian(self):
        assert ColorCodec.encode_record(0xF800) == b"\x00\xf8"
        assert ColorCodec.encode_record(0x001F) == b"\x1f\x00"

    def test_decode_buffer(self):
        data = bytearray(FRAME_SIZE)
        data[2:4] = b"\xe0\x07"
        values = ColorCodec.decode_buffer(bytes(data))
        assert len(values) == 64
        assert values[1] == 0x07E0
        assert values[0] == 0

    def test_decode_buffer_wrong_size(self):
        """Test that a buffer that is not 128 bytes is rejected."""
        with pytest.raises(DeviceUnavailableError) as exc_info:
            ColorCodec.decode_buffer(bytes(10))
        assert exc_info.value.user_message == "LED matrix device is unavailable."
        assert "None" not in str(exc_info.value)
        assert "got 10" in exc_info.value.technical_message
