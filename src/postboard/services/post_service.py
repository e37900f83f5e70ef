"""Post service — CRUD over the posts collection."""

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from postboard.db.client import POSTS


class PostService:
    """Business logic for posts."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[POSTS]

    async def create_post(self, title: str, content: str, sender: ObjectId) -> dict:
        doc = {"title": title, "content": content, "sender": sender}
        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    async def list_posts(self, sender: ObjectId | None = None) -> list[dict]:
        query = {"sender": sender} if sender is not None else {}
        return await self.collection.find(query).to_list(length=None)

    async def get_post(self, post_id: ObjectId) -> dict | None:
        return await self.collection.find_one({"_id": post_id})

    async def update_post(self, post_id: ObjectId, title: str, content: str) -> dict | None:
        return await self.collection.find_one_and_update(
            {"_id": post_id},
            {"$set": {"title": title, "content": content}},
            return_document=ReturnDocument.AFTER,
        )

    async def delete_post(self, post_id: ObjectId) -> dict | None:
        return await self.collection.find_one_and_delete({"_id": post_id})
