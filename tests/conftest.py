"""
Pytest configuration and fixtures for image field tests.
Provides AWS mocking and S3 fixtures with proper cleanup.
"""

import os
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("IMAGE_S3_BUCKET_NAME", "test-images")
os.environ.pop("AWS_ENDPOINT_URL", None)


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture
def bucket_name() -> str:
    return os.environ["IMAGE_S3_BUCKET_NAME"]


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


def _cleanup_s3_objects(s3_client, bucket_name):
    """Helper to delete all objects from S3 bucket efficiently."""
    try:
        paginator = s3_client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=bucket_name):
            objects = page.get("Contents", [])
            if objects:
                delete_keys = [{"Key": obj["Key"]} for obj in objects]
                s3_client.delete_objects(
                    Bucket=bucket_name, Delete={"Objects": delete_keys}
                )
    except ClientError as e:
        if e.response["Error"]["Code"] != "NoSuchBucket":
            raise


@pytest.fixture(scope="function")
def s3_bucket(s3_client, bucket_name):
    """
    Create and manage S3 bucket for testing.

    Cleanup Strategy:
    - Objects are deleted after each test (teardown)
    - Bucket is NOT deleted (moto cleans up on context exit)
    """
    try:
        s3_client.head_bucket(Bucket=bucket_name)
    except ClientError:
        s3_client.create_bucket(Bucket=bucket_name)

    yield s3_client

    _cleanup_s3_objects(s3_client, bucket_name)


@pytest.fixture
def s3_get_object(s3_client, bucket_name) -> Callable[[str], bytes]:
    """
    Helper to get an object body from S3.

    Usage:
        content = s3_get_object("2024/abc.jpg")
    """

    def _get(key: str) -> bytes:
        response: dict[str, Any] = s3_client.get_object(Bucket=bucket_name, Key=key)
        data: bytes = response["Body"].read()
        return data

    return _get


@pytest.fixture
def s3_head_object(s3_client, bucket_name) -> Callable[[str], dict[str, Any]]:
    """Helper to fetch object headers from S3."""

    def _head(key: str) -> dict[str, Any]:
        response: dict[str, Any] = s3_client.head_object(Bucket=bucket_name, Key=key)
        return response

    return _head


@pytest.fixture
def stub_client() -> MagicMock:
    """S3 client double that records put_object calls without network access."""
    client = MagicMock()
    client.put_object.return_value = {"ETag": '"etag"'}
    return client


@pytest.fixture
def sample_image_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    import base64

    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """Sample binary JPEG data (minimal valid JPEG)."""
    return (
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        b"\xff\xdb\x00C\x00\x08\x06\x06\x07\x06\x05\x08\x07\x07\x07\t\t\x08\n\x0c"
        b"\x14\r\x0c\x0b\x0b\x0c\x19\x12\x13\x0f\x14\x1d\x1a\x1f\x1e\x1d\x1a\x1c"
        b"\x1c $.' \",#\x1c\x1c(7),01444\x1f'9=82<.342\xff\xc0\x00\x0b\x08"
        b"\x00\x01\x00\x01\x01\x01\x11\x00\xff\xc4\x00\x14\x00\x01\x00\x00\x00"
        b"\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\t\xff\xc4\x00\x14\x10"
        b"\x01\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00"
        b"\xff\xda\x00\x08\x01\x01\x00\x00?\x00\x7f\x00\xff\xd9"
    )


@pytest.fixture
def png_file(tmp_path, sample_image_binary) -> str:
    """PNG image written to a temp directory."""
    path = tmp_path / "photo.png"
    path.write_bytes(sample_image_binary)
    return str(path)
