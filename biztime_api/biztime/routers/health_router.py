# Health: /health pings the database. 200 OK, 503 if the DB is unreachable.
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from biztime.db import get_db
from biztime.logging_config import get_logger

router = APIRouter(tags=["health"])
logger = get_logger(__name__)


@router.get("/health")
async def health(db: AsyncSession = Depends(get_db)):
    """Liveness + DB readiness for load balancer / Docker."""
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("health.db_fail", error=str(e))
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "db": "fail"},
        )
    return {"status": "ok", "db": "ok"}
