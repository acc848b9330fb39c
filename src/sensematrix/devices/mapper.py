"""Coordinate to framebuffer offset mapping for the 8x8 matrix."""

from collections.abc import Iterator

from sensematrix.models import GRID_SIZE, Rotation, validate_coordinate

from .codec import RECORD_SIZE


class AddressMapper:
    """
    Map logical (x, y) coordinates to byte offsets in the framebuffer.

    The device stores 64 records in row-major order. Rotation changes which
    physical cell represents a logical coordinate:

    - 0:   index = y*8 + x
    - 90:  index = x*8 + (7 - y)
    - 180: index = (7 - y)*8 + (7 - x)
    - 270: index = (7 - x)*8 + y

    For each rotation the mapping is a bijection from the 64 coordinates
    onto the record offsets 0, 2, ..., 126.
    """

    LAST = GRID_SIZE - 1

    @classmethod
    def index(cls, x: int, y: int, rotation: Rotation | int = Rotation.R0) -> int:
        """
        Convert (x, y) to a record index (0-63) under a rotation.

        Raises:
            InvalidCoordinateError: If x or y is outside 0-7
            InvalidRotationError: If rotation is not 0, 90, 180 or 270
        """
        validate_coordinate(x, y)
        rotation = Rotation.parse(rotation)

        if rotation is Rotation.R0:
            return y * GRID_SIZE + x
        if rotation is Rotation.R90:
            return x * GRID_SIZE + (cls.LAST - y)
        if rotation is Rotation.R180:
            return (cls.LAST - y) * GRID_SIZE + (cls.LAST - x)
        if rotation is Rotation.R270:
            return (cls.LAST - x) * GRID_SIZE + y
        raise AssertionError(f"unhandled rotation {rotation!r}")

    @classmethod
    def byte_offset(cls, x: int, y: int, rotation: Rotation | int = Rotation.R0) -> int:
        """
        Convert (x, y) to the byte offset of its 2-byte record.

        Example:
            >>> AddressMapper.byte_offset(0, 0, 90)
            14
            >>> AddressMapper.byte_offset(7, 7, 90)
            112
        """
        return cls.index(x, y, rotation) * RECORD_SIZE

    @staticmethod
    def coordinates() -> Iterator[tuple[int, int]]:
        """Yield all 64 (x, y) coordinates in row-major order."""
        for y in range(GRID_SIZE):
            for x in range(GRID_SIZE):
                yield x, y
