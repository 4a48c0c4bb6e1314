"""Business logic for image uploads.

This module turns an upload argument into an object in S3 plus the
ImageMetadata that describes it. Nothing is retried and nothing is
rolled back: storage and disk errors reach the caller unchanged.
"""

import asyncio
import uuid
from pathlib import Path
from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from image_field.infrastructure.adapters.s3_adapter import S3Adapter
from image_field.models.config import FieldConfig
from image_field.models.errors import ImageFormatError, MissingFileError
from image_field.models.image import ImageMetadata
from image_field.upload.models import BufferInput, FileInput, UploadedFile, classify_file
from image_field.utils.mime import extension_for_mime, normalize_extension
from image_field.utils.time import format_date_prefix, utc_now

logger = Logger(service="image-field", UTC=True)


class UploadService:
    """Application service responsible for uploading images of one field.

    The upload flow is:
    1. Classify the input and read its bytes
    2. Resolve and validate the extension
    3. Derive the object key and public URLs
    4. Put the object into the bucket
    """

    def __init__(self, config: FieldConfig) -> None:
        self.config = config
        self.storage = S3Adapter(config.client, bucket=config.bucket)

    @staticmethod
    def generate_image_id() -> str:
        """Generate a unique image identifier."""
        return uuid.uuid4().hex

    @staticmethod
    async def read_file(path: str) -> bytes:
        return await asyncio.to_thread(Path(path).read_bytes)

    def build_key(self, image_id: str, ext: str) -> str:
        """Return ``date prefix + id + "." + ext``."""
        date_prefix = format_date_prefix(self.config.path_format, utc_now())
        return f"{date_prefix}{image_id}.{ext}"

    def build_urls(self, key: str) -> tuple[str, str]:
        url = f"{self.config.prefix}{key}"
        if self.config.thumb_suffix:
            return url, f"{url}{self.config.thumb_suffix}"
        return url, url

    async def _load(self, file: FileInput) -> tuple[bytes, str | None]:
        if isinstance(file, BufferInput):
            return file.data, file.mime_type

        data = await self.read_file(file.path)
        if isinstance(file, UploadedFile):
            return data, file.resolved_mime_type()
        return data, file.mime_type

    async def upload_image(self, file: Any) -> ImageMetadata:
        """Upload an image and return its metadata.

        Args:
            file: Bytes, a filesystem path, an object carrying a ``path``,
                or one of the input models

        Returns:
            Metadata of the stored image

        Raises:
            MissingFileError: If no file was given
            UnknownFileError: If the file shape is not recognized
            ImageFormatError: If the extension is not allowed
            OSError: If reading the file from disk fails
            ClientError: If the S3 put fails
        """
        if file is None:
            raise MissingFileError()

        source = classify_file(file)
        logger.debug("Starting image upload", extra={"kind": source.kind})

        data, mime_type = await self._load(source)

        ext = normalize_extension(source.ext) or extension_for_mime(mime_type)
        if ext not in self.config.allowed:
            logger.warning(
                "Image format not allowed",
                extra={"ext": ext, "mime_type": mime_type, "allowed": self.config.allowed},
            )
            raise ImageFormatError(
                details={"ext": ext, "allowed": list(self.config.allowed)},
            )

        image_id = self.generate_image_id()
        key = self.build_key(image_id, ext)
        url, thumb_url = self.build_urls(key)

        try:
            await self.storage.put_object(
                key=key,
                body=data,
                content_type=self.config.content_type or mime_type or "application/octet-stream",
                cache_control=self.config.cache_control,
                content_disposition=self.config.content_disposition,
                server_side_encryption=self.config.server_side_encryption,
                expires=self.config.expires,
                acl=self.config.acl,
                access_control_allow_origin=self.config.access_control_allow_origin,
            )
        except (ClientError, BotoCoreError):
            logger.error(
                "S3 upload failed",
                extra={"bucket": self.config.bucket, "key": key},
            )
            raise

        logger.info(
            "Image uploaded successfully",
            extra={"image_id": image_id, "key": key, "size": len(data)},
        )

        return ImageMetadata(
            id=image_id,
            ext=ext,
            path=key,
            url=url,
            thumb_url=thumb_url,
            name=source.name,
            size=len(data),
        )


async def upload(file: Any, config: FieldConfig) -> ImageMetadata:
    """Upload ``file`` using the settings of ``config``."""
    return await UploadService(config).upload_image(file)
