"""
Centralized error handling utilities.

Errors are translated one layer at a time:

```
┌─────────────────────────────────────┐
│  USER LAYER (CLI)                   │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
│  - Logs to file with --debug        │
└─────────────────────────────────────┘
                  ↑
                  │ SenseMatrixError
                  │
┌─────────────────────────────────────┐
│  DRIVER LAYER (MatrixDriver)        │
│  - Validates input before any I/O   │
│  - Raises Invalid*Error             │
└─────────────────────────────────────┘
                  ↑
                  │ OSError
                  │
┌─────────────────────────────────────┐
│  LOW LEVEL (FrameBufferFile)        │
│  - Converts OSError with            │
│    wrap_device_error()              │
└─────────────────────────────────────┘
```

## Quick Reference

| Scenario | Use This |
|----------|----------|
| Device open/read/write failed | `raise wrap_device_error(e, path) from e` |
| Config file failed pydantic validation | `raise wrap_pydantic_error(e, str(path)) from e` |
| Log and re-raise around a command | `@handle_errors(operation_name="clear matrix")` |
| Critical section with auto-logging | `with ErrorContext("rotate frame"): ...` |
"""

import errno
import logging
from functools import wraps
from pathlib import Path
from typing import Callable, Optional, TypeVar

from .base import SenseMatrixError
from .config import ConfigFileInvalidError, ConfigValidationError
from .device import DeviceUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(*, operation_name: str, log_level: int = logging.ERROR) -> Callable:
    """
    Decorator that logs any exception from the wrapped call and re-raises it.

    Args:
        operation_name: Name of the operation for logging (e.g., "set pixel")
        log_level: Logging level for the error (default: ERROR)

    Returns:
        Decorated function
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)

            except SenseMatrixError as e:
                logger.log(log_level, f"Failed to {operation_name}: {e.technical_message}")
                raise

            except Exception as e:
                logger.log(
                    log_level,
                    f"Unexpected error during {operation_name}: {e}",
                    exc_info=True
                )
                raise

        return wrapper
    return decorator


class ErrorContext:
    """
    Context manager that logs a failure of the enclosed block and lets it propagate.

    Example:
        ```python
        with ErrorContext("re-project frame", logger_instance=logger):
            frame = self.get_pixels()
            self._write_frame(frame)
        ```
    """

    def __init__(self, operation: str, logger_instance: Optional[logging.Logger] = None):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.error: Optional[Exception] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context, logging any exception. Never suppresses it.
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, SenseMatrixError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        return False


def wrap_pydantic_error(error: Exception, file_path: str) -> SenseMatrixError:
    """
    Convert Pydantic validation errors to sensematrix exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def wrap_device_error(
    error: OSError,
    path: Path | str | None,
    records_written: Optional[int] = None,
) -> DeviceUnavailableError:
    """
    Convert a low-level OSError on the framebuffer into DeviceUnavailableError.

    Args:
        error: The original OSError
        path: The device path being accessed
        records_written: Records already written when a batch write failed

    Returns:
        DeviceUnavailableError with a recovery hint matched to the errno
    """
    hint = None
    if error.errno in (errno.EACCES, errno.EPERM):
        hint = (
            f"Permission denied on {path}. Add your user to the 'video' group "
            "or run with sufficient privileges."
        )
    elif error.errno == errno.ENOENT:
        hint = (
            f"{path} does not exist. Run 'sensematrix device detect' "
            "to locate the Sense HAT framebuffer."
        )

    return DeviceUnavailableError(
        path=path,
        original_error=str(error),
        records_written=records_written,
        recovery_hint=hint,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, SenseMatrixError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
