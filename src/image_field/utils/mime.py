import mimetypes
from collections.abc import Mapping

from image_field.utils.constants import MIME_TYPE_EXTENSION_MAP

EXTENSION_MIME_TYPES: Mapping[str, str] = {
    ext: mime
    for mime, extensions in reversed(list(MIME_TYPE_EXTENSION_MAP.items()))
    for ext in extensions
}


def normalize_extension(ext: str | None) -> str | None:
    if not ext:
        return None
    ext = ext.strip().lstrip(".").lower()
    if ext == "jpeg":
        return "jpg"
    return ext or None


def extension_for_mime(mime_type: str | None) -> str | None:
    """Return the normalized extension for a MIME type, or None if unknown."""
    if not mime_type:
        return None

    mime_type = mime_type.split(";", 1)[0].strip().lower()
    known = MIME_TYPE_EXTENSION_MAP.get(mime_type)
    if known:
        return known[0]

    return normalize_extension(mimetypes.guess_extension(mime_type))


def mime_for_path(path: str) -> str | None:
    mime_type, _ = mimetypes.guess_type(path)
    return mime_type


def mime_for_extension(ext: str) -> str | None:
    ext = normalize_extension(ext)
    if ext is None:
        return None
    return EXTENSION_MIME_TYPES.get(ext) or mime_for_path(f"file.{ext}")
