from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api import responses
from database import get_db, ping_db

router = APIRouter(tags=["health"])


@router.get("/ping")
async def ping(db: AsyncSession = Depends(get_db)):
    healthy = await ping_db(db)
    return responses.ok(
        {
            "status": "ok" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        "Health check completed",
    )
