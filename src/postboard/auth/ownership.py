"""Ownership checks shared by the post, comment, and user routes.

Callers look the resource up first (404 wins), then call require_owner
before applying any mutation.
"""

from fastapi import HTTPException

from postboard.auth.dependencies import CurrentIdentity


def is_owner(identity: CurrentIdentity, owner_id) -> bool:
    return owner_id is not None and str(owner_id) == identity.user_id


def require_owner(identity: CurrentIdentity, owner_id) -> None:
    """Raise 400 Unauthorized unless the identity owns the resource."""
    if not is_owner(identity, owner_id):
        raise HTTPException(status_code=400, detail="Unauthorized")
