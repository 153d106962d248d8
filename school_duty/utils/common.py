from typing import Any, Callable, Hashable, Iterable

from bson import ObjectId
from bson.errors import InvalidId


def serialize_doc(doc):
    """Recursively converts ObjectId values to str for JSON compatibility."""
    if isinstance(doc, ObjectId):
        return str(doc)
    if isinstance(doc, dict):
        return {key: serialize_doc(value) for key, value in doc.items()}
    if isinstance(doc, list):
        return [serialize_doc(item) for item in doc]
    return doc


def to_object_id(value) -> ObjectId | None:
    """Parses a path id; returns None when it is not a valid ObjectId."""
    if not isinstance(value, str):
        return None
    try:
        return ObjectId(value)
    except InvalidId:
        return None


def group_by(items: Iterable[Any], key: Callable[[Any], Hashable]) -> dict[Hashable, list]:
    """Groups items by key(item), keeping keys in order of first occurrence."""
    groups: dict[Hashable, list] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups
