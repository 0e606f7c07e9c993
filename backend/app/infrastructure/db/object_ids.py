"""Conversions between string ids used by the domain and BSON ObjectIds."""
from typing import Any, Iterable, List, Optional

from bson import ObjectId


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Return an ObjectId for ``value``, or None if it is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def to_object_ids(values: Iterable[Any]) -> List[ObjectId]:
    """Convert every valid id, silently dropping the invalid ones."""
    converted = (to_object_id(value) for value in values)
    return [oid for oid in converted if oid is not None]


def to_str_id(value: Any) -> Optional[str]:
    return str(value) if value is not None else None
