"""Comment service — CRUD over the comments collection.

Learn: A comment points at its post through postId. Creation checks the
post exists; later deletion of the post does not cascade.
"""

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from postboard.db.client import COMMENTS


class CommentService:
    """Business logic for comments."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[COMMENTS]

    async def create_comment(self, post_id: ObjectId, sender: ObjectId, content: str) -> dict:
        doc = {"postId": post_id, "sender": sender, "content": content}
        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    async def list_comments(self, post_id: ObjectId | None = None) -> list[dict]:
        query = {"postId": post_id} if post_id is not None else {}
        return await self.collection.find(query).to_list(length=None)

    async def get_comment(self, comment_id: ObjectId) -> dict | None:
        return await self.collection.find_one({"_id": comment_id})

    async def update_comment(self, comment_id: ObjectId, content: str) -> dict | None:
        return await self.collection.find_one_and_update(
            {"_id": comment_id},
            {"$set": {"content": content}},
            return_document=ReturnDocument.AFTER,
        )

    async def delete_comment(self, comment_id: ObjectId) -> dict | None:
        return await self.collection.find_one_and_delete({"_id": comment_id})
