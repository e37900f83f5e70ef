"""JWT token creation and verification.

Learn: JWT (JSON Web Token) provides stateless authentication.
- Access token: short-lived, used for API calls, signed with its own secret
- Refresh token: no exp claim; it stays valid only while it is stored in
  the user's token set, so revoking it means removing it from the set

Each kind has its own secret, so an access token never verifies as a
refresh token and vice versa. The payload carries the user id ("sub"),
the issue time, and a random token id so two tokens minted within the
same second are still distinct strings.
"""

import uuid
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

import jwt

from postboard.config import settings


class TokenType(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


class TokenError(Exception):
    """Raised when token verification fails."""


class TokenExpiredError(TokenError):
    """Raised when a token's exp claim has passed."""


def _secret(kind: TokenType) -> str:
    if kind is TokenType.ACCESS:
        return settings.access_token_secret
    return settings.refresh_token_secret


def create_token(
    user_id: str,
    kind: TokenType,
    expires_in: Optional[timedelta] = None,
) -> str:
    """Create a signed token of the given kind for a user."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "iat": now,
        "jti": uuid.uuid4().hex,
    }
    if kind is TokenType.ACCESS:
        if expires_in is None:
            expires_in = settings.jwt_token_expiration
        payload["exp"] = now + expires_in
    return jwt.encode(payload, _secret(kind), algorithm=settings.jwt_algorithm)


def create_access_token(user_id: str, expires_in: Optional[timedelta] = None) -> str:
    return create_token(user_id, TokenType.ACCESS, expires_in)


def create_refresh_token(user_id: str) -> str:
    return create_token(user_id, TokenType.REFRESH)


def verify_token(token: str, kind: TokenType) -> dict:
    """Verify and decode a token of the given kind.

    Returns the payload dict on success.
    Raises TokenExpiredError or TokenError on failure.
    """
    try:
        payload = jwt.decode(
            token,
            _secret(kind),
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise TokenError(f"Invalid token: {e}")
    if not isinstance(payload.get("sub"), str):
        raise TokenError("Invalid token: missing subject")
    return payload
