"""Tests for the exception hierarchy and error handling helpers."""

import errno
import logging

import pytest
from pydantic import BaseModel, Field, ValidationError

from sensematrix.exceptions import (
    ConfigFileInvalidError,
    ConfigValidationError,
    DeviceNotFoundError,
    DeviceUnavailableError,
    ErrorContext,
    InvalidColorError,
    InvalidCoordinateError,
    InvalidRotationError,
    MatrixValidationError,
    SenseMatrixError,
    format_error_for_display,
    handle_errors,
    wrap_device_error,
    wrap_pydantic_error,
)


class Limits(BaseModel):
    rotation: int = Field(default=0, ge=0, le=270)
    name: str = "x"


class TestHierarchy:
    """Test exception classes."""

    @pytest.mark.unit
    def test_validation_errors_are_value_errors(self):
        for error in (
            InvalidColorError([1, 2]),
            InvalidCoordinateError("x", 8),
            InvalidRotationError(45),
        ):
            assert isinstance(error, ValueError)
            assert isinstance(error, MatrixValidationError)
            assert isinstance(error, SenseMatrixError)
            assert error.recoverable

    @pytest.mark.unit
    def test_coordinate_message(self):
        error = InvalidCoordinateError("x", 8)
        assert str(error) == "x = 8 violates 0 <= x <= 7"
        assert error.axis == "x"
        assert error.value == 8

    @pytest.mark.unit
    def test_full_message_includes_hint(self):
        error = InvalidColorError([0, 0, 256])
        assert "Suggestion:" in error.get_full_message()
        assert error.user_message in error.get_full_message()

    @pytest.mark.unit
    def test_device_unavailable_records_written(self):
        error = DeviceUnavailableError("/dev/fb1", "EIO", records_written=12)
        assert "12 of 64" in error.user_message
        assert "EIO" in error.technical_message
        assert error.records_written == 12

    @pytest.mark.unit
    def test_device_unavailable_default_hint(self):
        error = DeviceUnavailableError("/dev/fb1")
        assert error.records_written is None
        assert "device detect" in error.recovery_hint

    @pytest.mark.unit
    def test_device_not_found(self):
        error = DeviceNotFoundError("/sys/class/graphics", "RPi-Sense FB")
        assert "Sense HAT" in error.user_message
        assert "RPi-Sense FB" in error.technical_message
        assert "--device" in error.recovery_hint


class TestWrapDeviceError:
    """Test OSError conversion."""

    @pytest.mark.unit
    def test_permission_denied(self):
        error = wrap_device_error(PermissionError(errno.EACCES, "Permission denied"), "/dev/fb1")
        assert isinstance(error, DeviceUnavailableError)
        assert "video" in error.recovery_hint

    @pytest.mark.unit
    def test_missing(self):
        error = wrap_device_error(FileNotFoundError(errno.ENOENT, "No such file"), "/dev/fb9")
        assert "/dev/fb9 does not exist" in error.recovery_hint

    @pytest.mark.unit
    def test_other_errno_uses_default_hint(self):
        error = wrap_device_error(OSError(errno.EIO, "Input/output error"), "/dev/fb1", records_written=3)
        assert error.records_written == 3
        assert "Input/output error" in error.technical_message
        assert error.recovery_hint


class TestWrapPydanticError:
    """Test pydantic error conversion."""

    @pytest.mark.unit
    def test_invalid_json(self):
        with pytest.raises(ValidationError) as exc_info:
            Limits.model_validate_json('{"rotation": 90,}')
        error = wrap_pydantic_error(exc_info.value, "config.json")
        assert isinstance(error, ConfigFileInvalidError)
        assert error.file_path == "config.json"

    @pytest.mark.unit
    def test_single_field(self):
        with pytest.raises(ValidationError) as exc_info:
            Limits.model_validate({"rotation": 400})
        error = wrap_pydantic_error(exc_info.value, "config.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "rotation"
        assert error.value == 400
        assert "0, 90, 180, 270" in error.recovery_hint

    @pytest.mark.unit
    def test_multiple_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            Limits.model_validate({"rotation": -1, "name": 5})
        error = wrap_pydantic_error(exc_info.value, "config.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "multiple fields"
        assert "2 validation errors" in error.user_message


class TestHandlers:
    """Test handle_errors and ErrorContext."""

    @pytest.mark.unit
    def test_handle_errors_reraises(self):
        @handle_errors(operation_name="set pixel")
        def failing():
            raise InvalidCoordinateError("y", -1)

        with pytest.raises(InvalidCoordinateError):
            failing()

    @pytest.mark.unit
    def test_handle_errors_logs_package_error(self, caplog):
        @handle_errors(operation_name="read matrix")
        def failing():
            raise DeviceUnavailableError("/dev/fb1", "EIO")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(DeviceUnavailableError):
                failing()
        assert "Failed to read matrix" in caplog.text
        assert "EIO" in caplog.text

    @pytest.mark.unit
    def test_handle_errors_unexpected(self, caplog):
        @handle_errors(operation_name="flip")
        def failing():
            raise RuntimeError("boom")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(RuntimeError):
                failing()
        assert "Unexpected error during flip" in caplog.text

    @pytest.mark.unit
    def test_handle_errors_passes_result(self):
        @handle_errors(operation_name="noop")
        def ok(value):
            return value * 2

        assert ok(21) == 42

    @pytest.mark.unit
    def test_error_context_reraises_and_records(self, caplog):
        context = ErrorContext("rotate matrix")
        with caplog.at_level(logging.ERROR):
            with pytest.raises(DeviceUnavailableError):
                with context:
                    raise DeviceUnavailableError("/dev/fb1")
        assert isinstance(context.error, DeviceUnavailableError)
        assert "Failed to rotate matrix" in caplog.text

    @pytest.mark.unit
    def test_error_context_propagates_unexpected(self, caplog):
        context = ErrorContext("clear matrix")
        with caplog.at_level(logging.ERROR):
            with pytest.raises(OSError):
                with context:
                    raise OSError("gone")
        assert isinstance(context.error, OSError)
        assert "gone" in caplog.text

    @pytest.mark.unit
    def test_error_context_success(self):
        with ErrorContext("noop") as context:
            pass
        assert context.error is None


class TestFormatting:
    """Test format_error_for_display."""

    @pytest.mark.unit
    def test_package_error(self):
        message, hint = format_error_for_display(InvalidRotationError(45))
        assert "45" in message
        assert hint is None

    @pytest.mark.unit
    def test_package_error_with_hint(self):
        message, hint = format_error_for_display(DeviceUnavailableError("/dev/fb1"))
        assert "/dev/fb1" in message
        assert hint

    @pytest.mark.unit
    def test_generic_error(self):
        message, hint = format_error_for_display(KeyError("x"))
        assert message.startswith("KeyError")
        assert hint is None
