"""User API routes.

Learn: A user may only change or delete their own record. Checks run
in a fixed order: malformed id (400), missing user (404), not the
caller (400 Unauthorized), then the body itself.
"""

import asyncio

from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from postboard.api.params import object_id_or_400
from postboard.auth.dependencies import CurrentIdentity, get_current_user
from postboard.auth.ownership import require_owner
from postboard.auth.password import hash_password
from postboard.db.client import get_db, parse_object_id
from postboard.schemas.user import UserCreate, UserRead, UserUpdate
from postboard.services.auth_service import AuthService
from postboard.services.user_service import DuplicateUserError, UserService

router = APIRouter(prefix="/user")


def _svc(db: AsyncIOMotorDatabase = Depends(get_db)) -> UserService:
    return UserService(db)


@router.post("", response_model=UserRead)
async def create_user(body: UserCreate, db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        return await AuthService(db).register(body.username, body.email, body.password)
    except DuplicateUserError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[UserRead])
async def list_users(svc: UserService = Depends(_svc)):
    return await svc.list_users()


@router.get("/{ref}", response_model=UserRead)
async def get_user(ref: str, svc: UserService = Depends(_svc)):
    """Look a user up by id, or by username when ref is not an id."""
    user = None
    user_id = parse_object_id(ref)
    if user_id is not None:
        user = await svc.get_user(user_id)
    if user is None:
        user = await svc.get_user_by_username(ref)
    if not user:
        raise HTTPException(status_code=404, detail="User Not Found")
    return user


@router.patch("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    body: UserUpdate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: UserService = Depends(_svc),
):
    oid = object_id_or_400(user_id, "User")
    if not await svc.get_user(oid):
        raise HTTPException(status_code=404, detail="User Not Found")
    require_owner(identity, oid)

    if body.username is not None:
        raise HTTPException(status_code=400, detail="Username cannot be updated")

    fields = {}
    if body.email is not None:
        fields["email"] = body.email
    if body.password is not None:
        fields["passwordHash"] = await asyncio.to_thread(hash_password, body.password)

    try:
        updated = await svc.update_user(oid, fields)
    except DuplicateUserError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not updated:
        raise HTTPException(status_code=404, detail="User Not Found")
    return updated


@router.delete("/{user_id}", response_model=UserRead)
async def delete_user(
    user_id: str,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: UserService = Depends(_svc),
):
    oid = object_id_or_400(user_id, "User")
    if not await svc.get_user(oid):
        raise HTTPException(status_code=404, detail="User Not Found")
    require_owner(identity, oid)

    deleted = await svc.delete_user(oid)
    if not deleted:
        raise HTTPException(status_code=404, detail="User Not Found")
    return deleted
