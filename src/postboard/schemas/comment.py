"""Pydantic schemas for comments."""

from pydantic import BaseModel, Field

from postboard.schemas.common import ObjectIdStr


class CommentCreate(BaseModel):
    postId: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class CommentUpdate(BaseModel):
    content: str = Field(..., min_length=1)


class CommentRead(BaseModel):
    id: ObjectIdStr = Field(alias="_id")
    postId: ObjectIdStr
    sender: ObjectIdStr
    content: str

    model_config = {"populate_by_name": True}
