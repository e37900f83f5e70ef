"""Comment API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from postboard.api.params import object_id_or_400
from postboard.auth.dependencies import CurrentIdentity, get_current_user
from postboard.auth.ownership import require_owner
from postboard.db.client import get_db, parse_object_id
from postboard.schemas.comment import CommentCreate, CommentRead, CommentUpdate
from postboard.services.comment_service import CommentService
from postboard.services.post_service import PostService

router = APIRouter(prefix="/comment")


def _svc(db: AsyncIOMotorDatabase = Depends(get_db)) -> CommentService:
    return CommentService(db)


@router.post("", response_model=CommentRead)
async def create_comment(
    body: CommentCreate,
    identity: CurrentIdentity = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    """Comment on an existing post."""
    post_id = parse_object_id(body.postId)
    post = await PostService(db).get_post(post_id) if post_id else None
    if not post:
        raise HTTPException(status_code=400, detail="Related Post Does Not Exist")

    sender = object_id_or_400(identity.user_id, "Sender")
    return await CommentService(db).create_comment(post_id, sender, body.content)


@router.get("", response_model=list[CommentRead])
async def list_comments(postId: Optional[str] = None, svc: CommentService = Depends(_svc)):
    post_id = object_id_or_400(postId, "Post") if postId else None
    return await svc.list_comments(post_id)


@router.get("/{comment_id}", response_model=CommentRead)
async def get_comment(comment_id: str, svc: CommentService = Depends(_svc)):
    comment = await svc.get_comment(object_id_or_400(comment_id, "Comment"))
    if not comment:
        raise HTTPException(status_code=404, detail="Comment Not Found")
    return comment


@router.patch("/{comment_id}", response_model=CommentRead)
async def update_comment(
    comment_id: str,
    body: CommentUpdate,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: CommentService = Depends(_svc),
):
    oid = object_id_or_400(comment_id, "Comment")
    existing = await svc.get_comment(oid)
    if not existing:
        raise HTTPException(status_code=404, detail="Comment Not Found")
    require_owner(identity, existing["sender"])

    updated = await svc.update_comment(oid, body.content)
    if not updated:
        raise HTTPException(status_code=404, detail="Comment Not Found")
    return updated


@router.delete("/{comment_id}", response_model=CommentRead)
async def delete_comment(
    comment_id: str,
    identity: CurrentIdentity = Depends(get_current_user),
    svc: CommentService = Depends(_svc),
):
    oid = object_id_or_400(comment_id, "Comment")
    existing = await svc.get_comment(oid)
    if not existing:
        raise HTTPException(status_code=404, detail="Comment Not Found")
    require_owner(identity, existing["sender"])

    deleted = await svc.delete_comment(oid)
    if not deleted:
        raise HTTPException(status_code=404, detail="Comment Not Found")
    return deleted
