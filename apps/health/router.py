from fastapi import APIRouter

from common.database import check_database_connection
from common.responses import error_json

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health():
    return {"status": "ok"}


@router.get("/db")
async def health_db():
    """
    Open one connection to the configured database, run DB_CHECK_QUERY and close it.
    503 with the driver error when the database is unreachable.
    """
    result = await check_database_connection()
    if not result.ok:
        return error_json("Database connection failed", result.error)
    return {"status": "ok", "server_time": result.server_time, "elapsed_ms": result.elapsed_ms}
