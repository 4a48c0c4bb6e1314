"""
Unit tests for image_field.models.errors
"""

from image_field.models.errors import (
    ConfigurationError,
    ImageFieldError,
    ImageFormatError,
    MissingFileError,
    UnknownFileError,
    ValidationError,
)


class TestImageFieldError:
    def test_base_error(self) -> None:
        err = ImageFieldError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            details={"foo": "bar"},
        )

        assert err.message == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.details == {"foo": "bar"}
        assert str(err) == "Something went wrong"


class TestConfigurationError:
    def test_defaults(self) -> None:
        err = ConfigurationError(message="bad config")

        assert err.error_code == "CONFIGURATION_ERROR"
        assert err.details == {}
        assert isinstance(err, ImageFieldError)


class TestValidationErrors:
    def test_validation_error_defaults(self) -> None:
        err = ValidationError(message="Invalid input")

        assert err.error_code == "VALIDATION_FAILED"
        assert err.details == {}

    def test_missing_file(self) -> None:
        err = MissingFileError()

        assert isinstance(err, ValidationError)
        assert err.message == "File not found"
        assert err.error_code == "FILE_NOT_FOUND"

    def test_unknown_file(self) -> None:
        err = UnknownFileError(details={"type": "dict"})

        assert isinstance(err, ValidationError)
        assert err.message == "Unknown image file"
        assert err.error_code == "UNKNOWN_FILE"
        assert err.details == {"type": "dict"}

    def test_image_format(self) -> None:
        err = ImageFormatError()

        assert isinstance(err, ValidationError)
        assert str(err) == "Image format error"
        assert err.error_code == "IMAGE_FORMAT_ERROR"
