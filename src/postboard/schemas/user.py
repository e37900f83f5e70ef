"""Pydantic schemas for users.

Learn: Read schemas list only public fields, so the password hash and
the refresh-token set never leave the server.
"""

from typing import Optional

from pydantic import BaseModel, Field

from postboard.schemas.common import ObjectIdStr


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserUpdate(BaseModel):
    """PATCH body. Username is accepted only so it can be rejected."""
    username: Optional[str] = None
    email: Optional[str] = Field(None, min_length=1)
    password: Optional[str] = Field(None, min_length=1)


class UserRead(BaseModel):
    id: ObjectIdStr = Field(alias="_id")
    username: str
    email: str

    model_config = {"populate_by_name": True}
