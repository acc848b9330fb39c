"""
Custom exception hierarchy for sensematrix.

## Exception Hierarchy

```
SenseMatrixError (base)
├── MatrixValidationError (also a ValueError)
│   ├── InvalidColorError
│   ├── InvalidCoordinateError
│   ├── InvalidRotationError
│   └── InvalidFrameShapeError
├── DeviceError
│   ├── DeviceUnavailableError
│   └── DeviceNotFoundError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Validation errors are always raised before any device I/O. Device errors
carry the path involved and, for interrupted frame writes, how many pixels
were already written.

### Example: Interrupted frame write

```python
from sensematrix.exceptions import DeviceUnavailableError

try:
    driver.set_pixels(frame)
except DeviceUnavailableError as e:
    # The matrix may show a mix of old and new pixels
    logger.error(f"{e.technical_message} (written: {e.records_written})")
```

See `sensematrix.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import SenseMatrixError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import DeviceError, DeviceNotFoundError, DeviceUnavailableError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    handle_errors,
    wrap_device_error,
    wrap_pydantic_error,
)
from .validation import (
    InvalidColorError,
    InvalidCoordinateError,
    InvalidFrameShapeError,
    InvalidRotationError,
    MatrixValidationError,
)

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Device
    "DeviceError",
    "DeviceNotFoundError",
    "DeviceUnavailableError",
    # Handlers
    "ErrorContext",
    # Validation
    "InvalidColorError",
    "InvalidCoordinateError",
    "InvalidFrameShapeError",
    "InvalidRotationError",
    "MatrixValidationError",
    # Base
    "SenseMatrixError",
    "format_error_for_display",
    "handle_errors",
    "wrap_device_error",
    "wrap_pydantic_error",
]
