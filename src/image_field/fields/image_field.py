"""Image field for pydantic document models.

An ``ImageField`` is declared once per document attribute. It validates its
options, describes the stored shape (one ``ImageMetadata`` or an ordered list
of them) and provides the per-record ``upload`` and ``data`` operations.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from image_field.fields.document import get_value, set_value
from image_field.models.config import FieldConfig
from image_field.models.errors import ConfigurationError
from image_field.models.image import ImageMetadata
from image_field.upload.service import upload
from image_field.utils.constants import UPLOAD_POLICY_APPEND, VIEW_OPTIONS
from image_field.utils.validators import (
    describe_validation_error,
    sanitize_validation_errors,
)

logger = Logger(service="image-field", UTC=True)

REQUIRED_OPTIONS = ("bucket", "client")


def _url_of(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Mapping):
        return value.get("url") or ""
    return getattr(value, "url", None) or ""


class ImageField:
    """Declared image attribute of a document model."""

    def __init__(self, path: str, *, model: str, **options: Any) -> None:
        """Validate options and resolve the storage client.

        Raises:
            ConfigurationError: If ``bucket`` or ``client`` is missing, or an
                option has an invalid value
        """
        self.path = path
        self.model = model

        for key in REQUIRED_OPTIONS:
            if not options.get(key):
                raise ConfigurationError(
                    message=f'Image field config "{key}" is required in {model}.{path}',
                    details={"model": model, "path": path, "option": key},
                )

        try:
            self.config = FieldConfig(**options)
        except PydanticValidationError as exc:
            raise ConfigurationError(
                message=(
                    f"Invalid image field config in {model}.{path}: "
                    f"{describe_validation_error(exc)}"
                ),
                details={
                    "model": model,
                    "path": path,
                    "errors": sanitize_validation_errors(exc.errors()),
                },
            ) from exc

        logger.debug(
            "Image field configured",
            extra={
                "model": model,
                "path": path,
                "bucket": self.config.bucket,
                "multi": self.config.multi,
            },
        )

    def __repr__(self) -> str:
        return f"ImageField({self.model}.{self.path}, multi={self.config.multi})"

    @property
    def multi(self) -> bool:
        return self.config.multi

    @property
    def annotation(self) -> Any:
        if self.config.multi:
            return list[ImageMetadata]
        return ImageMetadata | None

    def field_definition(self) -> tuple[Any, Any]:
        """Return the ``(annotation, default)`` pair for ``pydantic.create_model``."""
        if self.config.multi:
            return self.annotation, Field(default_factory=list)
        return self.annotation, None

    def contribute_to_schema(self, schema: dict[str, Any]) -> None:
        schema[self.path] = self.field_definition()

    def view_options(self) -> dict[str, Any]:
        """Options forwarded to the admin UI."""
        options = {name: getattr(self.config, name) for name in VIEW_OPTIONS}
        options["allowed"] = list(self.config.allowed)
        return options

    async def upload(self, record: Any, file: Any) -> None:
        """Upload ``file`` and store its metadata on ``record``.

        The record is only modified once the object is in storage. Saving the
        record is left to the caller.
        """
        image = await upload(file, self.config)

        if not self.config.multi:
            set_value(record, self.path, image)
            return

        if self.config.upload_policy == UPLOAD_POLICY_APPEND:
            images = list(get_value(record, self.path) or [])
            images.append(image)
        else:
            images = [image]

        set_value(record, self.path, images)

    def data(self, record: Any) -> str | list[str]:
        """Return the image URL, or the list of URLs of a multi field."""
        value = get_value(record, self.path)

        if not self.config.multi:
            return _url_of(value)

        return [url for url in (_url_of(v) for v in value or []) if url]

    def bind(self, record: Any) -> "ImageFieldAccessor":
        return ImageFieldAccessor(self, record)


class ImageFieldAccessor:
    """``upload``/``data`` operations of one field bound to one record."""

    def __init__(self, field: ImageField, record: Any) -> None:
        self.field = field
        self.record = record

    async def upload(self, file: Any = None) -> None:
        await self.field.upload(self.record, file)

    def data(self) -> str | list[str]:
        return self.field.data(self.record)
