"""Health check endpoint.

Learn: Simple GET endpoint that verifies the server is running
and the document store answers a ping.
"""

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from postboard import __version__
from postboard.db.client import get_db

router = APIRouter()


@router.get("/health")
async def health_check(db: AsyncIOMotorDatabase = Depends(get_db)):
    """Check server health and store connectivity."""
    checks = {"server": "ok", "version": __version__}

    try:
        await db.command("ping")
        checks["mongo"] = "ok"
    except Exception as e:
        checks["mongo"] = f"error: {e}"

    status = "healthy" if checks["mongo"] == "ok" else "degraded"
    return {"status": status, **checks}
