"""FastAPI auth dependencies.

Learn: These are used as Depends() in route handlers to extract
and validate the current identity from the request.

Per request:
- no token in the Authorization header → 401
- token present but bad signature or expired → 403
- valid token → CurrentIdentity handed to the handler

The access token is trusted until it expires; the user is not looked
up again here.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException

from postboard.auth.jwt import TokenError, TokenType, verify_token


class CurrentIdentity:
    """The authenticated user making the request.

    Learn: Built fresh for every request and passed explicitly to
    handlers and services, so no user state is shared between requests.
    """

    def __init__(self, user_id: str):
        self.user_id = user_id

    def __repr__(self) -> str:
        return f"CurrentIdentity(user_id={self.user_id!r})"


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """Return the credential part of a "<scheme> <token>" header value."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def get_bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    return extract_token(authorization)


async def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
) -> CurrentIdentity:
    """Extract current identity (required — 401 if no token, 403 if invalid)."""
    if not token:
        raise HTTPException(
            status_code=401,
            detail="Missing Authorization",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = verify_token(token, TokenType.ACCESS)
    except TokenError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return CurrentIdentity(user_id=payload["sub"])
