"""Enumerations for the LED matrix."""

import operator
from enum import IntEnum
from typing import Any

from sensematrix.exceptions import InvalidRotationError


class Rotation(IntEnum):
    """Clockwise display rotation in degrees."""

    R0 = 0
    R90 = 90
    R180 = 180
    R270 = 270

    @classmethod
    def parse(cls, value: Any) -> "Rotation":
        """
        Convert a degree value to a Rotation.

        Only the four exact angles are accepted; there is no modulo-360
        normalisation and no default.

        Raises:
            InvalidRotationError: For any other value
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidRotationError(value)
        try:
            return cls(operator.index(value))
        except (TypeError, ValueError):
            raise InvalidRotationError(value) from None
