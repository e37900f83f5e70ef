"""Post API routes.

Learn: The sender of a new post is always the caller; it is never
taken from the body. Only the sender may update or delete a post.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from postboard.api.params import object_id_or_400
from postboard.auth.dependencies import CurrentIdentity, get_current_user
from postboard.auth.ownership import require_owner
from postboard.db.client import get_db
from postboard.schemas.post import PostRead, PostWrite
from postboard.services.post_service import PostService

router = APIRouter(prefix="/post")


def _svc(db: AsyncIOMotorDatabase = Depends(get_db)) -> PostService:
    return PostService(db)


@router.post("", response_model=PostRead)
async def create_post(
    body: PostWrite,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: PostService = Depends(_svc),
):
    sender = object_id_or_400(identity.user_id, "Sender")
    return await svc.create_post(body.title, body.content, sender)


@router.get("", response_model=list[PostRead])
async def list_posts(sender: Optional[str] = None, svc: PostService = Depends(_svc)):
    """All posts, or only those of one sender."""
    sender_id = object_id_or_400(sender, "Sender") if sender else None
    return await svc.list_posts(sender_id)


@router.get("/{post_id}", response_model=PostRead)
async def get_post(post_id: str, svc: PostService = Depends(_svc)):
    post = await svc.get_post(object_id_or_400(post_id, "Post"))
    if not post:
        raise HTTPException(status_code=404, detail="Post Not Found")
    return post


@router.put("/{post_id}", response_model=PostRead)
async def update_post(
    post_id: str,
    body: PostWrite,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: PostService = Depends(_svc),
):
    oid = object_id_or_400(post_id, "Post")
    existing = await svc.get_post(oid)
    if not existing:
        raise HTTPException(status_code=404, detail="Post Not Found")
    require_owner(identity, existing["sender"])

    updated = await svc.update_post(oid, body.title, body.content)
    if not updated:
        raise HTTPException(status_code=404, detail="Post Not Found")
    return updated


@router.delete("/{post_id}", response_model=PostRead)
async def delete_post(
    post_id: str,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: PostService = Depends(_svc),
):
    oid = object_id_or_400(post_id, "Post")
    existing = await svc.get_post(oid)
    if not existing:
        raise HTTPException(status_code=404, detail="Post Not Found")
    require_owner(identity, existing["sender"])

    deleted = await svc.delete_post(oid)
    if not deleted:
        raise HTTPException(status_code=404, detail="Post Not Found")
    return deleted
