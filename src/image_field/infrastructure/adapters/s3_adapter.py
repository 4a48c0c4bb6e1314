"""Thin adapter for interacting with Amazon S3."""

import asyncio
import os
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Protocol

import boto3

from image_field.utils.constants import (
    CORS_METADATA_KEY,
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
)


class S3ClientProtocol(Protocol):
    """Internal typing for boto3 S3 client (AWS-facing only)."""

    def put_object(self, **kwargs: Any) -> Any: ...


class S3Adapter:
    """Low-level S3 operations (mechanical, no error handling).

    This adapter:
    - Wraps a boto3 S3 client bound to one bucket
    - Runs the blocking boto3 call in a worker thread
    - Does NOT handle errors (lets them bubble up)
    """

    def __init__(self, client: S3ClientProtocol, *, bucket: str) -> None:
        self._client = client
        self._bucket = bucket

    @staticmethod
    def build_client(options: Mapping[str, Any]) -> S3ClientProtocol:
        """Create a boto3 S3 client from constructor options.

        Endpoint and region fall back to the environment when the options
        leave them out.
        """
        kwargs = dict(options)

        if not kwargs.get("endpoint_url") and os.getenv(ENV_AWS_ENDPOINT_URL):
            kwargs["endpoint_url"] = os.getenv(ENV_AWS_ENDPOINT_URL)

        if not kwargs.get("region_name") and os.getenv(ENV_AWS_REGION):
            kwargs["region_name"] = os.getenv(ENV_AWS_REGION)

        return boto3.client("s3", **kwargs)

    async def put_object(
        self,
        *,
        key: str,
        body: bytes,
        content_type: str,
        cache_control: str,
        content_disposition: str,
        server_side_encryption: str | None = None,
        expires: datetime | None = None,
        acl: str | None = None,
        access_control_allow_origin: str | None = None,
    ) -> None:
        """Store object in S3.
        Raises boto3 exceptions - caught by the caller if at all.
        """
        params: dict[str, Any] = {
            "Bucket": self._bucket,
            "Key": key,
            "Body": body,
            "ContentType": content_type,
            "CacheControl": cache_control,
        }

        if content_disposition:
            params["ContentDisposition"] = content_disposition

        if server_side_encryption:
            params["ServerSideEncryption"] = server_side_encryption

        if expires is not None:
            params["Expires"] = expires

        if acl:
            params["ACL"] = acl

        # S3 has no per-object CORS header; keep it as user metadata
        if access_control_allow_origin:
            params["Metadata"] = {CORS_METADATA_KEY: access_control_allow_origin}

        await asyncio.to_thread(self._client.put_object, **params)
