"""Locate the Sense HAT LED matrix framebuffer."""

import logging
from pathlib import Path
from typing import Optional

from sensematrix.exceptions import DeviceNotFoundError
from sensematrix.models.config import SENSE_HAT_PRODUCT_NAME

logger = logging.getLogger(__name__)

DEFAULT_GRAPHICS_DIR = Path("/sys/class/graphics")
DEFAULT_DEVICE_DIR = Path("/dev")


def read_framebuffer_name(entry: Path) -> Optional[str]:
    """
    Read the trimmed product name of a graphics-class framebuffer entry.

    Args:
        entry: e.g. /sys/class/graphics/fb1

    Returns:
        Content of entry/name, stripped, or None if it cannot be read
    """
    try:
        return (entry / "name").read_text().strip()
    except OSError as e:
        logger.debug(f"Cannot read name of {entry}: {e}")
        return None


def list_framebuffers(graphics_dir: Path = DEFAULT_GRAPHICS_DIR) -> list[tuple[str, Optional[str]]]:
    """
    List framebuffer entries and their product names.

    Returns:
        Sorted list of (entry_name, product_name or None)
    """
    return [
        (entry.name, read_framebuffer_name(entry))
        for entry in sorted(graphics_dir.glob("fb*"))
    ]


def find_framebuffer(
    graphics_dir: Path = DEFAULT_GRAPHICS_DIR,
    device_dir: Path = DEFAULT_DEVICE_DIR,
    product_name: str = SENSE_HAT_PRODUCT_NAME,
) -> Optional[Path]:
    """
    Find the device node of the framebuffer whose name matches product_name.

    Scans graphics_dir/fb* in sorted order and accepts the first entry whose
    name file (trimmed) equals product_name. The graphics-class entry
    /sys/class/graphics/fbN is translated to device_dir/fbN.

    Returns:
        Device path, or None if no entry matches
    """
    for entry_name, name in list_framebuffers(graphics_dir):
        if name == product_name:
            device = device_dir / entry_name
            logger.info(f"Found '{product_name}' framebuffer at {device}")
            return device

    logger.info(f"No '{product_name}' framebuffer under {graphics_dir}")
    return None


def require_framebuffer(
    graphics_dir: Path = DEFAULT_GRAPHICS_DIR,
    device_dir: Path = DEFAULT_DEVICE_DIR,
    product_name: str = SENSE_HAT_PRODUCT_NAME,
) -> Path:
    """
    Like find_framebuffer, but raise when nothing is found.

    Raises:
        DeviceNotFoundError: If no matching framebuffer exists
    """
    device = find_framebuffer(graphics_dir, device_dir, product_name)
    if device is None:
        raise DeviceNotFoundError(graphics_dir, product_name)
    return device
