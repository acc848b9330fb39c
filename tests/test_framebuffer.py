"""Tests for FrameBufferFile."""

import errno
from unittest.mock import MagicMock, patch

import pytest

from sensematrix.devices import FRAME_SIZE, FrameBufferFile
from sensematrix.exceptions import DeviceUnavailableError


class TestFrameBufferFile:
    """Test byte-level access to the framebuffer device file."""

    @pytest.mark.unit
    def test_read_all(self, fb_path, framebuffer):
        fb_path.write_bytes(bytes(range(FRAME_SIZE)))
        assert framebuffer.read_all() == bytes(range(FRAME_SIZE))

    @pytest.mark.unit
    def test_read_record(self, fb_path, framebuffer):
        data = bytearray(FRAME_SIZE)
        data[6:8] = b"\x34\x12"
        fb_path.write_bytes(bytes(data))
        assert framebuffer.read_record(6) == 0x1234

    @pytest.mark.unit
    def test_write_record_little_endian(self, fb_path, framebuffer):
        """Test a record is written LE at its offset without touching neighbours."""
        framebuffer.write_record(4, 0xF800)
        data = fb_path.read_bytes()
        assert len(data) == FRAME_SIZE
        assert data[4:6] == b"\x00\xf8"
        assert data[:4] == bytes(4)
        assert data[6:] == bytes(FRAME_SIZE - 6)

    @pytest.mark.unit
    def test_write_records_in_order(self, framebuffer, read_records):
        written = framebuffer.write_records([(0, 1), (2, 2), (0, 3)])
        assert written == 3
        records = read_records()
        assert records[0] == 3  # later write to the same offset wins
        assert records[1] == 2

    @pytest.mark.unit
    def test_write_all(self, fb_path, framebuffer):
        framebuffer.write_all(b"\xff" * FRAME_SIZE)
        assert fb_path.read_bytes() == b"\xff" * FRAME_SIZE

    @pytest.mark.unit
    def test_write_all_wrong_size(self, framebuffer):
        with pytest.raises(ValueError):
            framebuffer.write_all(bytes(10))

    @pytest.mark.unit
    @pytest.mark.parametrize("offset", [-2, 1, 127, 128])
    def test_invalid_offset(self, framebuffer, offset):
        with pytest.raises(ValueError):
            framebuffer.write_record(offset, 0)

    @pytest.mark.unit
    def test_missing_device(self, tmp_path):
        """Test that a missing device raises DeviceUnavailableError."""
        port = FrameBufferFile(tmp_path / "nope")
        with pytest.raises(DeviceUnavailableError) as exc_info:
            port.read_all()
        assert exc_info.value.path == tmp_path / "nope"
        assert "does not exist" in exc_info.value.recovery_hint

        with pytest.raises(DeviceUnavailableError):
            port.write_record(0, 0)

    @pytest.mark.unit
    def test_short_device(self, tmp_path):
        """Test that a device smaller than one frame is rejected."""
        path = tmp_path / "fb0"
        path.write_bytes(bytes(16))
        with pytest.raises(DeviceUnavailableError):
            FrameBufferFile(path).read_all()

    @pytest.mark.unit
    def test_permission_denied_hint(self, framebuffer):
        with patch(
            "sensematrix.devices.framebuffer.open",
            side_effect=PermissionError(errno.EACCES, "Permission denied"),
            create=True,
        ):
            with pytest.raises(DeviceUnavailableError) as exc_info:
                framebuffer.read_all()
        assert "Permission denied" in exc_info.value.recovery_hint
        assert "Permission denied" in exc_info.value.technical_message

    @pytest.mark.unit
    def test_partial_batch_write_reported(self, framebuffer):
        """Test that a failure mid-batch reports how many records were written."""
        handle = MagicMock()
        handle.write.side_effect = [2] * 10 + [OSError(errno.EIO, "Input/output error")]
        opener = MagicMock()
        opener.return_value.__enter__.return_value = handle

        records = [(i * 2, 0xFFFF) for i in range(64)]
        with patch("sensematrix.devices.framebuffer.open", opener, create=True):
            with pytest.raises(DeviceUnavailableError) as exc_info:
                framebuffer.write_records(records)

        assert exc_info.value.records_written == 10
        assert "10 of 64" in exc_info.value.user_message
        assert handle.write.call_count == 11

    @pytest.mark.unit
    def test_short_write_is_failure(self, framebuffer):
        handle = MagicMock()
        handle.write.return_value = 1
        opener = MagicMock()
        opener.return_value.__enter__.return_value = handle

        with patch("sensematrix.devices.framebuffer.open", opener, create=True):
            with pytest.raises(DeviceUnavailableError):
                framebuffer.write_record(0, 0xFFFF)

    @pytest.mark.unit
    def test_no_descriptor_is_cached(self, framebuffer):
        """Test each call opens its own descriptor."""
        handle = MagicMock()
        handle.write.return_value = 2
        handle.read.return_value = bytes(FRAME_SIZE)
        opener = MagicMock()
        opener.return_value.__enter__.return_value = handle

        with patch("sensematrix.devices.framebuffer.open", opener, create=True):
            framebuffer.write_record(0, 1)
            framebuffer.write_record(2, 1)
            framebuffer.read_all()

        assert opener.call_count == 3
