"""
Helpers for converting between API string ids and MongoDB ObjectIds.
"""

from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Parse a 24-character hex id. Returns None for anything else."""
    if not value or not isinstance(value, str):
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def from_object_id(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)
