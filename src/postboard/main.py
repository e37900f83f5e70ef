"""FastAPI application factory.

Learn: App factory pattern — create_app() returns a configured FastAPI
instance. Lifespan manages startup/shutdown (indexes, store client).
Middleware, CORS, error handlers, and routers all registered here.
"""

from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postboard import __version__
from postboard.api import api_router
from postboard.config import settings
from postboard.db.client import close_client, ensure_indexes, get_db
from postboard.errors import register_error_handlers
from postboard.middleware.request_id import RequestIdMiddleware
from postboard.middleware.security import SecurityHeadersMiddleware

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle.

    Learn: Anything before `yield` runs at startup, after `yield` runs
    at shutdown. A store that is down at startup is fatal: every route
    except /health needs it.
    """
    logger.info(
        "postboard.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
    )

    await ensure_indexes(await get_db())
    logger.info("postboard.database_ready", database=settings.database_name)

    yield

    logger.info("postboard.shutdown")
    close_client()


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="Postboard API",
        description="Users, posts, and comments behind rotating JWT sessions",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: CORS → Security → RequestId → handler
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: postboard.main:app)
app = create_app()


def serve() -> None:
    """Console entry point — run the API with uvicorn."""
    uvicorn.run(
        "postboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
