"""Auth API — registration, login, token refresh, logout.

Learn: Routes for the session lifecycle:
- POST /auth/register → create a new user account
- POST /auth/login → username/password → access + refresh tokens
- POST /auth/refreshToken → refresh token (Authorization header) → new pair
- POST /auth/logout → access token + refresh token in body → end session

Failures return short generic messages; which check failed is never
spelled out beyond that.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from postboard.auth.dependencies import get_bearer_token, get_current_user
from postboard.db.client import get_db
from postboard.schemas.auth import LoginRequest, LogoutRequest, TokenPair
from postboard.schemas.user import UserCreate, UserRead
from postboard.services.auth_service import (
    AuthService,
    InvalidCredentialsError,
    InvalidTokenError,
)
from postboard.services.user_service import DuplicateUserError

router = APIRouter(prefix="/auth")


def _svc(db: AsyncIOMotorDatabase = Depends(get_db)) -> AuthService:
    return AuthService(db)


# ─── Register ────────────────────────────────────────────


@router.post("/register", response_model=UserRead)
async def register(body: UserCreate, svc: AuthService = Depends(_svc)):
    """Create a new user account."""
    try:
        return await svc.register(body.username, body.email, body.password)
    except DuplicateUserError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ─── Login ───────────────────────────────────────────────


@router.post("/login", response_model=TokenPair)
async def login(body: LoginRequest, svc: AuthService = Depends(_svc)):
    """Login with username and password → JWT tokens."""
    try:
        return await svc.login(body.username, body.password)
    except InvalidCredentialsError:
        raise HTTPException(status_code=400, detail="Invalid Credentials")


# ─── Refresh ────────────────────────────────────────────


@router.post("/refreshToken", response_model=TokenPair)
async def refresh_token(
    token: Optional[str] = Depends(get_bearer_token),
    svc: AuthService = Depends(_svc),
):
    """Exchange a refresh token for a new access + refresh pair."""
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")
    try:
        return await svc.refresh(token)
    except InvalidTokenError:
        raise HTTPException(status_code=400, detail="Invalid token")


# ─── Logout ─────────────────────────────────────────────


@router.post("/logout", dependencies=[Depends(get_current_user)])
async def logout(
    body: Optional[LogoutRequest] = None,
    svc: AuthService = Depends(_svc),
):
    """End the session that owns the given refresh token."""
    token = body.refreshToken if body else None
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")
    try:
        await svc.logout(token)
    except InvalidTokenError:
        raise HTTPException(status_code=400, detail="Invalid User Session")
    return {"loggedOut": True}
