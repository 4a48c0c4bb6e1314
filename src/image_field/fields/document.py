"""Document model helpers.

Records are pydantic models (or plain mutable mappings); image fields are
addressed by dotted paths such as ``avatar`` or ``profile.avatar``.
"""

from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, create_model

if TYPE_CHECKING:
    from image_field.fields.image_field import ImageField


def _child(node: Any, name: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(name)
    return getattr(node, name, None)


def get_value(record: Any, path: str) -> Any:
    """Read the value at a dotted path; missing segments yield None."""
    node = record
    for name in path.split("."):
        if node is None:
            return None
        node = _child(node, name)
    return node


def set_value(record: Any, path: str, value: Any) -> None:
    """Assign the value at a dotted path. Intermediate nodes must exist."""
    *parents, leaf = path.split(".")

    node = record
    for name in parents:
        node = _child(node, name)
        if node is None:
            raise KeyError(f"Cannot set {path!r}: {name!r} is missing")

    if isinstance(node, MutableMapping):
        node[leaf] = value
    else:
        setattr(node, leaf, value)


def define_document(
    name: str,
    *fields: "ImageField",
    base: type[BaseModel] = BaseModel,
    **extra: Any,
) -> type[BaseModel]:
    """Create a pydantic document model holding the given image fields.

    ``extra`` takes additional ``create_model`` field definitions.

    Example:
        avatar = ImageField("avatar", model="User", bucket="b", client=s3)
        User = define_document("User", avatar, username=(str, ...))
    """
    schema: dict[str, Any] = dict(extra)
    for field in fields:
        field.contribute_to_schema(schema)

    return create_model(name, __base__=base, **schema)
