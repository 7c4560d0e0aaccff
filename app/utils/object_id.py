# app/utils/object_id.py
from bson import ObjectId, errors

from app.exceptions import InvalidEmployeeId

OBJECT_ID_EXAMPLE = "507f1f77bcf86cd799439011"

def parse_object_id(value: str) -> ObjectId:
    """Convert a 24-character hex string into an ObjectId."""
    try:
        return ObjectId(value)
    except (errors.InvalidId, TypeError):
        raise InvalidEmployeeId(value)
