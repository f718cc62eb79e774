import logging
import time
from dataclasses import dataclass
from typing import Dict, Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from settings.config import get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectionCheckResult:
    ok: bool
    server_time: Optional[str] = None
    error: Optional[str] = None
    elapsed_ms: float = 0.0


# Per-driver name of the connect timeout argument
_TIMEOUT_ARGS = {
    "psycopg": "connect_timeout",
    "psycopg2": "connect_timeout",
    "asyncpg": "timeout",
    "aiomysql": "connect_timeout",
    "asyncmy": "connect_timeout",
}


def _connect_args(url: str, timeout: int) -> Dict[str, int]:
    """
    Driver-specific connect arguments. Unknown drivers get none.
    """
    arg = _TIMEOUT_ARGS.get(make_url(url).get_driver_name())
    return {arg: timeout} if arg else {}


def _make_engine(url: str, timeout: int) -> AsyncEngine:
    """
    Create a throwaway ASYNC engine for a single connectivity check.
    NullPool so the connection is really closed when released.
    """
    return create_async_engine(url, poolclass=NullPool, connect_args=_connect_args(url, timeout))


async def check_database_connection(url: Optional[str] = None, query: Optional[str] = None) -> ConnectionCheckResult:
    """
    Connect, run one query, disconnect.
    Failures are returned in the result instead of raised.
    """
    settings = get_settings()
    url = url or settings.build_database_url()
    query = query or settings.DB_CHECK_QUERY
    started = time.perf_counter()

    def _elapsed() -> float:
        return round((time.perf_counter() - started) * 1000, 2)

    try:
        engine = _make_engine(url, settings.DB_CONNECT_TIMEOUT_SECONDS)
    except (SQLAlchemyError, ImportError) as exc:
        logger.error("Invalid database URL: %s", exc)
        return ConnectionCheckResult(ok=False, error=str(exc), elapsed_ms=_elapsed())

    try:
        async with engine.connect() as conn:
            logger.info("Connected to %s", engine.url.render_as_string(hide_password=True))
            result = await conn.execute(text(query))
            row = result.first()
        server_time = str(row[0]) if row is not None and len(row) else None
        logger.info("Connection check succeeded in %sms", _elapsed())
        return ConnectionCheckResult(ok=True, server_time=server_time, elapsed_ms=_elapsed())
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Connection check failed: %s", exc)
        return ConnectionCheckResult(ok=False, error=str(exc), elapsed_ms=_elapsed())
    finally:
        await engine.dispose()
