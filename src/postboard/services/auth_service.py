"""Auth service — registration, login, and the refresh-token lifecycle.

Learn: Refresh tokens are single-use. Every user document carries the
list of refresh tokens that are currently valid for it:
- login appends a new token (one per device/session)
- refresh swaps the presented token for a new one in the same slot
- logout removes the presented token

A refresh token that verifies cryptographically but is missing from
the list has already been rotated or logged out. Seeing it again means
it was copied, so the whole list is cleared and every session of that
user must log in again.

Reads and writes of the token list are not locked; two concurrent
refreshes for one user race on the final write and the last one wins.
"""

import asyncio
from functools import lru_cache

import structlog
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from postboard.auth.jwt import (
    TokenError,
    TokenType,
    create_access_token,
    create_refresh_token,
    verify_token,
)
from postboard.auth.password import hash_password, verify_password
from postboard.db.client import parse_object_id
from postboard.services.user_service import UserService

logger = structlog.get_logger()


class AuthError(Exception):
    """Base class for authentication failures."""


class InvalidCredentialsError(AuthError):
    """Unknown username or wrong password (deliberately not told apart)."""


class InvalidTokenError(AuthError):
    """Refresh token failed verification or is no longer valid."""


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("postboard-timing-equalizer")


class AuthService:
    """Business logic for the auth endpoints."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.users = UserService(db)

    # ─── Registration ───────────────────────────────────

    async def register(self, username: str, email: str, password: str) -> dict:
        password_hash = await asyncio.to_thread(hash_password, password)
        user = await self.users.create_user(username, email, password_hash)
        logger.info("auth.registered", user_id=str(user["_id"]))
        return user

    # ─── Login ──────────────────────────────────────────

    async def authenticate(self, username: str, password: str) -> dict:
        """Return the user for valid credentials.

        Learn: An unknown username still pays for one bcrypt check so
        both failure paths take about the same time.
        """
        user = await self.users.get_user_by_username(username)
        stored_hash = user.get("passwordHash") if user else None
        matches = await asyncio.to_thread(
            verify_password, password, stored_hash or _dummy_hash()
        )
        if not user or not stored_hash or not matches:
            raise InvalidCredentialsError("Invalid Credentials")
        return user

    async def login(self, username: str, password: str) -> dict:
        """Verify credentials and open a new session for the user."""
        user = await self.authenticate(username, password)
        tokens = self._issue_pair(user["_id"])

        session_tokens = list(user.get("tokens") or [])
        session_tokens.append(tokens["refreshToken"])
        await self.users.set_tokens(user["_id"], session_tokens)

        logger.info(
            "auth.login", user_id=str(user["_id"]), sessions=len(session_tokens)
        )
        return tokens

    # ─── Refresh ────────────────────────────────────────

    async def verify_refresh_token(self, token: str) -> dict:
        """Resolve a refresh token to its live user document.

        Raises InvalidTokenError when the signature is bad, the user is
        gone, or the token is not in the user's token set. The last case
        also clears the user's token set.
        """
        try:
            payload = verify_token(token, TokenType.REFRESH)
        except TokenError as e:
            raise InvalidTokenError("Invalid token") from e

        user_id = parse_object_id(payload["sub"])
        user = await self.users.get_user(user_id) if user_id else None
        if not user:
            raise InvalidTokenError("Invalid token")

        if token not in (user.get("tokens") or []):
            await self.users.set_tokens(user["_id"], [])
            logger.warning("auth.refresh_token_reuse", user_id=str(user["_id"]))
            raise InvalidTokenError("Invalid token")

        return user

    async def refresh(self, token: str) -> dict:
        """Exchange a refresh token for a new pair (single use)."""
        user = await self.verify_refresh_token(token)
        tokens = self._issue_pair(user["_id"])

        session_tokens = list(user["tokens"])
        session_tokens[session_tokens.index(token)] = tokens["refreshToken"]
        await self.users.set_tokens(user["_id"], session_tokens)

        logger.info("auth.refreshed", user_id=str(user["_id"]))
        return tokens

    # ─── Logout ─────────────────────────────────────────

    async def logout(self, token: str) -> None:
        """End the session the refresh token belongs to."""
        user = await self.verify_refresh_token(token)

        session_tokens = list(user.get("tokens") or [])
        if token in session_tokens:
            session_tokens.remove(token)
            await self.users.set_tokens(user["_id"], session_tokens)

        logger.info("auth.logout", user_id=str(user["_id"]))

    def _issue_pair(self, user_id: ObjectId) -> dict:
        return {
            "accessToken": create_access_token(str(user_id)),
            "refreshToken": create_refresh_token(str(user_id)),
        }
