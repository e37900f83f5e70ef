"""Async MongoDB client and per-request database access.

Learn: motor wraps pymongo for asyncio. One client per process holds the
connection pool; each request borrows the database handle through the
get_db dependency, which tests override with an in-memory store.
"""

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from postboard.config import settings

USERS = "users"
POSTS = "posts"
COMMENTS = "comments"

_client: AsyncIOMotorClient | None = None


def get_client() -> AsyncIOMotorClient:
    """Return the process-wide client, creating it on first use."""
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(settings.database_uri)
    return _client


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None


async def get_db() -> AsyncIOMotorDatabase:
    """FastAPI dependency — the configured database handle."""
    return get_client()[settings.database_name]


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the unique indexes the user store relies on."""
    await db[USERS].create_index([("username", ASCENDING)], unique=True)
    await db[USERS].create_index([("email", ASCENDING)], unique=True)
    await db[POSTS].create_index([("sender", ASCENDING)])
    await db[COMMENTS].create_index([("postId", ASCENDING)])


def parse_object_id(value: str) -> ObjectId | None:
    """Convert a path/query string to an ObjectId, or None when malformed."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)
