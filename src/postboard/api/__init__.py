"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: Auth is applied at the include_router level using FastAPI's
dependencies parameter. This protects all routes in each router
without modifying individual handlers. Handlers that need to know who
is calling also ask for get_current_user; FastAPI runs it once per
request. Health and auth routers are open.
"""

from fastapi import APIRouter, Depends

from postboard.api.auth import router as auth_router
from postboard.api.comments import router as comments_router
from postboard.api.health import router as health_router
from postboard.api.posts import router as posts_router
from postboard.api.users import router as users_router
from postboard.auth.dependencies import get_current_user

# All protected routers require a valid access token
_auth = [Depends(get_current_user)]

api_router = APIRouter()

# Open routes — no auth required
api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])

# Protected routes
api_router.include_router(posts_router, tags=["posts"], dependencies=_auth)
api_router.include_router(comments_router, tags=["comments"], dependencies=_auth)
api_router.include_router(users_router, tags=["users"], dependencies=_auth)
