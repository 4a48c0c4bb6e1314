"""Validated, immutable configuration of a declared image field."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Literal

from botocore.exceptions import BotoCoreError
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    ValidationInfo,
    field_validator,
)

from image_field.infrastructure.adapters.s3_adapter import S3Adapter
from image_field.utils.constants import (
    DEFAULT_ALLOWED_EXTENSIONS,
    DEFAULT_CACHE_CONTROL,
    DEFAULT_CELL,
    DEFAULT_THUMB_SUFFIX,
    DEFAULT_VIEW,
    UPLOAD_POLICY_REPLACE,
)
from image_field.utils.mime import normalize_extension


class FieldConfig(BaseModel):
    """Options of one image field, fixed once the schema is defined."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
        str_strip_whitespace=True,
    )

    bucket: str = Field(..., min_length=1, description="Target bucket name")
    client: Any = Field(..., description="S3 client, or boto3 client options")

    multi: StrictBool = False
    dir: str = ""
    path_format: str = ""
    prefix: str = ""
    thumb_suffix: str = DEFAULT_THUMB_SUFFIX
    allowed: tuple[str, ...] = DEFAULT_ALLOWED_EXTENSIONS
    upload_policy: Literal["replace", "append"] = UPLOAD_POLICY_REPLACE

    content_type: str | None = None
    cache_control: str = DEFAULT_CACHE_CONTROL
    content_disposition: str = ""
    server_side_encryption: str | None = None
    expires: datetime | None = None
    access_control_allow_origin: str | None = None
    acl: str | None = None

    cell: str = DEFAULT_CELL
    view: str = DEFAULT_VIEW

    @field_validator("client", mode="before")
    @classmethod
    def resolve_client(cls, value: Any) -> Any:
        """Build a boto3 client when constructor options were given."""
        if hasattr(value, "put_object"):
            return value

        if isinstance(value, Mapping):
            try:
                return S3Adapter.build_client(value)
            except (TypeError, BotoCoreError) as exc:
                raise ValueError(f"invalid client options: {exc}") from exc

        raise ValueError("client must be an S3 client or a mapping of client options")

    @field_validator("thumb_suffix", mode="before")
    @classmethod
    def resolve_thumb_suffix(cls, value: Any) -> str:
        # None means "not given"; False or "" switch thumbnails off
        if value is None or value is True:
            return DEFAULT_THUMB_SUFFIX
        if value is False:
            return ""
        return value

    @field_validator("allowed", mode="before")
    @classmethod
    def normalize_allowed(cls, value: Any) -> tuple[str, ...]:
        if not value:
            return DEFAULT_ALLOWED_EXTENSIONS

        if isinstance(value, str):
            value = value.split(",")

        extensions: list[str] = []
        for raw in value:
            if not isinstance(raw, str):
                raise ValueError("allowed must contain extension strings")
            ext = normalize_extension(raw)
            if ext:
                extensions.append(ext)

        if not extensions:
            return DEFAULT_ALLOWED_EXTENSIONS

        # deduplicate while preserving order
        return tuple(dict.fromkeys(extensions))

    @field_validator("dir", "path_format", "prefix", "content_disposition", mode="before")
    @classmethod
    def empty_when_unset(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("cache_control", mode="before")
    @classmethod
    def default_cache_control(cls, value: Any) -> Any:
        return value or DEFAULT_CACHE_CONTROL

    @field_validator("cell", "view", mode="before")
    @classmethod
    def default_ui_component(cls, value: Any, info: ValidationInfo) -> Any:
        if value:
            return value
        return DEFAULT_CELL if info.field_name == "cell" else DEFAULT_VIEW
