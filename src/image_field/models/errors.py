"""Custom exception classes for the image field."""

from typing import Any

from image_field.utils.constants import (
    ERROR_CODE_CONFIGURATION,
    ERROR_CODE_FILE_NOT_FOUND,
    ERROR_CODE_IMAGE_FORMAT,
    ERROR_CODE_UNKNOWN_FILE,
    ERROR_CODE_VALIDATION_FAILED,
)


class ImageFieldError(Exception):
    """
    Base exception for all image field errors.

    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ConfigurationError(ImageFieldError):
    """Raised at schema definition time when a field is misconfigured."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIGURATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ValidationError(ImageFieldError):
    """Raised when an uploaded file is rejected."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class MissingFileError(ValidationError):
    """Raised when upload is called without a file."""

    def __init__(
        self,
        *,
        message: str = "File not found",
        error_code: str = ERROR_CODE_FILE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class UnknownFileError(ValidationError):
    """Raised when the file is neither bytes, a path, nor a path-bearing descriptor."""

    def __init__(
        self,
        *,
        message: str = "Unknown image file",
        error_code: str = ERROR_CODE_UNKNOWN_FILE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ImageFormatError(ValidationError):
    """Raised when the resolved extension is not allowed for the field."""

    def __init__(
        self,
        *,
        message: str = "Image format error",
        error_code: str = ERROR_CODE_IMAGE_FORMAT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
