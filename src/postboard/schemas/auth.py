"""Pydantic schemas for the auth endpoints.

Learn: Token fields use camelCase on the wire (accessToken,
refreshToken), matching the rest of the JSON API.
"""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenPair(BaseModel):
    accessToken: str
    refreshToken: str


class LogoutRequest(BaseModel):
    refreshToken: Optional[str] = None
