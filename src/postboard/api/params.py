"""Path and query parameter helpers shared by the routers."""

from bson import ObjectId
from fastapi import HTTPException

from postboard.db.client import parse_object_id


def object_id_or_400(value: str, resource: str) -> ObjectId:
    """Parse an id or answer 400 "Invalid <Resource> Id"."""
    oid = parse_object_id(value)
    if oid is None:
        raise HTTPException(status_code=400, detail=f"Invalid {resource} Id")
    return oid
