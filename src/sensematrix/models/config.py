"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer, field_validator

from sensematrix.utils.persistence import PydanticPersistence

SENSE_HAT_PRODUCT_NAME = "RPi-Sense FB"


def default_config_path() -> Path:
    """Location of the user's config file (~/.sensematrix/config.json)."""
    return Path.home() / ".sensematrix" / "config.json"


class MatrixConfig(BaseModel):
    """LED matrix device and display settings."""

    # Device selection
    device_path: Path | None = Field(
        default=None,
        description=(
            "Framebuffer device to drive (e.g. /dev/fb1). "
            "None = discover the Sense HAT framebuffer automatically."
        ),
    )
    graphics_dir: Path = Field(
        default=Path("/sys/class/graphics"),
        description="Directory scanned for fb* entries during discovery",
    )
    device_dir: Path = Field(
        default=Path("/dev"),
        description="Directory holding framebuffer device nodes",
    )
    product_name: str = Field(
        default=SENSE_HAT_PRODUCT_NAME,
        description="Content of the fb*/name marker file identifying the matrix",
    )

    # Display
    rotation: int = Field(
        default=0,
        description="Rotation in degrees applied at start-up (0, 90, 180 or 270)",
    )

    @field_validator("rotation")
    @classmethod
    def validate_rotation(cls, v: int) -> int:
        """Ensure rotation is one of the supported angles."""
        if v not in (0, 90, 180, 270):
            raise ValueError("rotation must be 0, 90, 180 or 270")
        return v

    @field_serializer("device_path", "graphics_dir", "device_dir")
    def serialize_path(self, path: Path | None) -> str | None:
        """Serialize Path to string."""
        return str(path) if path is not None else None

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "MatrixConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.sensematrix/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = default_config_path()
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = default_config_path()
        PydanticPersistence.save_json(self, path)
