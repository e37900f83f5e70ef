"""Pydantic schemas for posts."""

from pydantic import BaseModel, Field

from postboard.schemas.common import ObjectIdStr


class PostWrite(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class PostRead(BaseModel):
    id: ObjectIdStr = Field(alias="_id")
    title: str
    content: str
    sender: ObjectIdStr

    model_config = {"populate_by_name": True}
