"""User service — the user-record store.

Learn: Service layer separates business logic from HTTP routing.
Routes and the auth service call this class; it is the only code that
touches the users collection. Uniqueness of username and email is
enforced by the store's unique indexes, surfaced as DuplicateUserError.
"""

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from postboard.db.client import USERS


class DuplicateUserError(Exception):
    """Raised when a username or email is already taken."""


class UserService:
    """CRUD over user documents."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[USERS]

    async def create_user(self, username: str, email: str, password_hash: str) -> dict:
        doc = {
            "username": username,
            "email": email,
            "passwordHash": password_hash,
            "tokens": [],
        }
        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise DuplicateUserError("Username or email already exists") from e
        doc["_id"] = result.inserted_id
        return doc

    async def list_users(self) -> list[dict]:
        return await self.collection.find().to_list(length=None)

    async def get_user(self, user_id: ObjectId) -> dict | None:
        return await self.collection.find_one({"_id": user_id})

    async def get_user_by_username(self, username: str) -> dict | None:
        return await self.collection.find_one({"username": username})

    async def update_user(self, user_id: ObjectId, fields: dict) -> dict | None:
        """Apply a partial update and return the updated document."""
        if not fields:
            return await self.get_user(user_id)
        try:
            return await self.collection.find_one_and_update(
                {"_id": user_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateUserError("Email already exists") from e

    async def set_tokens(self, user_id: ObjectId, tokens: list[str]) -> None:
        """Replace the stored refresh-token set (last write wins)."""
        await self.collection.update_one(
            {"_id": user_id}, {"$set": {"tokens": tokens}}
        )

    async def delete_user(self, user_id: ObjectId) -> dict | None:
        return await self.collection.find_one_and_delete({"_id": user_id})
