"""Pytest fixtures for tests."""

from pathlib import Path

import pytest

from sensematrix.devices import FRAME_SIZE, FrameBufferFile, MatrixDriver


@pytest.fixture
def fb_path(tmp_path):
    """A 128-byte zeroed file standing in for /dev/fbN."""
    path = tmp_path / "fb1"
    path.write_bytes(bytes(FRAME_SIZE))
    return path


@pytest.fixture
def framebuffer(fb_path):
    """FrameBufferFile over the fake device."""
    return FrameBufferFile(fb_path)


@pytest.fixture
def driver(framebuffer):
    """MatrixDriver at rotation 0 over the fake device."""
    return MatrixDriver(framebuffer)


@pytest.fixture
def sysfs(tmp_path):
    """
    Fake /sys/class/graphics and /dev trees.

    fb0 is the HDMI console, fb1 is the LED matrix, fb2 has no name file.
    """
    graphics_dir = tmp_path / "sys" / "class" / "graphics"
    device_dir = tmp_path / "dev"
    device_dir.mkdir(parents=True)

    for entry, name in (("fb0", "BCM2708 FB\n"), ("fb1", "RPi-Sense FB\n"), ("fb2", None)):
        (graphics_dir / entry).mkdir(parents=True)
        if name is not None:
            (graphics_dir / entry / "name").write_text(name)
        (device_dir / entry).write_bytes(bytes(FRAME_SIZE))

    return graphics_dir, device_dir


@pytest.fixture
def read_records(fb_path):
    """Return a function decoding every little-endian record in the fake device."""
    def _read(path: Path = fb_path) -> list[int]:
        data = path.read_bytes()
        return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]
    return _read
