"""
One-shot database smoke test.

    python -m scripts.check_db_connection [--url URL] [--query SQL]

Exits with status 1 when the connection or the query fails.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from common.database import check_database_connection
from settings.config import get_settings
from utils.logging import setup_logging

logger = logging.getLogger("check_db_connection")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check that the configured database accepts connections.")
    parser.add_argument("--url", default=None, help="SQLAlchemy async URL (defaults to DATABASE_URL / DB_* settings)")
    parser.add_argument("--query", default=None, help="Query to run once connected (defaults to DB_CHECK_QUERY)")
    return parser.parse_args(argv)


async def run(url: Optional[str] = None, query: Optional[str] = None) -> int:
    logger.info("Connecting to database...")
    result = await check_database_connection(url=url, query=query)
    if not result.ok:
        logger.error("Connection failed: %s", result.error)
        return 1
    logger.info("Connected successfully")
    logger.info("Query executed: %s", result.server_time)
    logger.info("Connection closed")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(get_settings().LOG_LEVEL)
    return asyncio.run(run(url=args.url, query=args.query))


if __name__ == "__main__":
    sys.exit(main())
