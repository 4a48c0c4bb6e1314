"""Pydantic models for the accepted upload inputs.

An upload accepts one of three shapes, modelled as a discriminated union:

- ``BufferInput``: raw bytes already in memory
- ``PathInput``: a filesystem path; MIME type and name come from the path
- ``UploadedFile``: a temp file descriptor (e.g. a multipart upload) that
  carries its own MIME type and original file name
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from image_field.models.errors import MissingFileError, UnknownFileError
from image_field.utils.constants import DEFAULT_MIME_TYPE
from image_field.utils.mime import mime_for_extension, mime_for_path


class BufferInput(BaseModel):
    """Image bytes held in memory."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["buffer"] = "buffer"
    data: bytes
    mime_type: str = DEFAULT_MIME_TYPE
    ext: str | None = None
    name: str = ""


class PathInput(BaseModel):
    """Image file on local disk, described by its path only."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["path"] = "path"
    path: str

    @property
    def name(self) -> str:
        return Path(self.path).name

    @property
    def mime_type(self) -> str | None:
        return mime_for_path(self.path)

    @property
    def ext(self) -> str | None:
        return None


class UploadedFile(BaseModel):
    """Temp file written by an upload handler."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["uploaded"] = "uploaded"
    path: str
    mime_type: str | None = None
    name: str = ""
    ext: str | None = None

    def resolved_mime_type(self) -> str | None:
        if self.mime_type:
            return self.mime_type
        if self.ext:
            return mime_for_extension(self.ext)
        return mime_for_path(self.path)


FileInput = Annotated[
    Union[BufferInput, PathInput, UploadedFile],
    Field(discriminator="kind"),
]


def _attribute(file: Any, *names: str) -> Any:
    for name in names:
        if isinstance(file, Mapping):
            value = file.get(name)
        else:
            value = getattr(file, name, None)
        if value:
            return value
    return None


def classify_file(file: Any) -> BufferInput | PathInput | UploadedFile:
    """Map a raw upload argument onto one of the input variants.

    Raises:
        MissingFileError: If no file was given
        UnknownFileError: If the shape is not recognized
    """
    if isinstance(file, (BufferInput, PathInput, UploadedFile)):
        return file

    if file is None or (isinstance(file, str) and not file):
        raise MissingFileError()

    if isinstance(file, (bytes, bytearray, memoryview)):
        return BufferInput(data=bytes(file))

    if isinstance(file, (str, os.PathLike)):
        return PathInput(path=os.fspath(file))

    path = _attribute(file, "path")
    if not path:
        raise UnknownFileError(details={"type": type(file).__name__})

    return UploadedFile(
        path=os.fspath(path),
        mime_type=_attribute(file, "mime", "mime_type", "mimeType", "content_type"),
        name=_attribute(file, "filename", "original_filename") or "",
        ext=_attribute(file, "ext"),
    )
