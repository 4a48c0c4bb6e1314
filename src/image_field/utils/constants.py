"""Global constants used throughout the image field package.

Defaults for field options, error codes, MIME mappings and the names of the
environment variables consulted when building a storage client.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"

# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_FILE_NOT_FOUND = "FILE_NOT_FOUND"
ERROR_CODE_UNKNOWN_FILE = "UNKNOWN_FILE"
ERROR_CODE_IMAGE_FORMAT = "IMAGE_FORMAT_ERROR"


# ============================================================================
# Field Defaults
# ============================================================================

DEFAULT_THUMB_SUFFIX: Final[str] = "@2o_200w_1l_90Q.jpg"
DEFAULT_ALLOWED_EXTENSIONS: Final[tuple[str, ...]] = ("jpg", "png", "gif")
DEFAULT_MIME_TYPE: Final[str] = "image/jpeg"
DEFAULT_CACHE_CONTROL: Final[str] = "no-cache"

DEFAULT_CELL = "ImageFieldCell"
DEFAULT_VIEW = "ImageFieldView"

UPLOAD_POLICY_REPLACE = "replace"
UPLOAD_POLICY_APPEND = "append"

VIEW_OPTIONS: Final[tuple[str, ...]] = ("multi", "allowed", "cell", "view")

CORS_METADATA_KEY = "access-control-allow-origin"


# ============================================================================
# MIME Types
# ============================================================================

# First entry is the canonical extension for the type
MIME_TYPE_EXTENSION_MAP: Final[dict[str, tuple[str, ...]]] = {
    "image/jpeg": ("jpg", "jpeg"),
    "image/pjpeg": ("jpg",),
    "image/png": ("png",),
    "image/gif": ("gif",),
    "image/webp": ("webp",),
    "image/bmp": ("bmp",),
    "image/tiff": ("tiff", "tif"),
    "image/svg+xml": ("svg",),
}


# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
