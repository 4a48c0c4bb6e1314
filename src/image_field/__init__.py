"""Image field for pydantic document models, backed by Amazon S3."""

from image_field.fields.document import define_document, get_value, set_value
from image_field.fields.image_field import ImageField, ImageFieldAccessor
from image_field.models.config import FieldConfig
from image_field.models.errors import (
    ConfigurationError,
    ImageFieldError,
    ImageFormatError,
    MissingFileError,
    UnknownFileError,
    ValidationError,
)
from image_field.models.image import ImageMetadata
from image_field.upload.models import BufferInput, PathInput, UploadedFile, classify_file
from image_field.upload.service import UploadService, upload

__version__ = "1.0.0"
__description__ = "S3-backed image field for pydantic document models"

__all__ = [
    "BufferInput",
    "ConfigurationError",
    "FieldConfig",
    "ImageField",
    "ImageFieldAccessor",
    "ImageFieldError",
    "ImageFormatError",
    "ImageMetadata",
    "MissingFileError",
    "PathInput",
    "UnknownFileError",
    "UploadService",
    "UploadedFile",
    "ValidationError",
    "classify_file",
    "define_document",
    "get_value",
    "set_value",
    "upload",
]
