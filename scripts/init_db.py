#!/usr/bin/env python3
"""
Create the users and sessions tables.

The API also does this on startup; run it directly to prepare a database
ahead of a deploy.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --check
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect

from app.db.database import engine, init_db

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def list_tables() -> list[str]:
    """Names of the tables currently present."""
    async with engine.connect() as conn:
        return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())


async def main_async(check_only: bool = False) -> None:
    """Main async function."""
    try:
        if not check_only:
            await init_db()
            logger.info("Tables created.")

        tables = await list_tables()
        logger.info(f"Tables present: {', '.join(sorted(tables)) or '(none)'}")
    finally:
        await engine.dispose()


def main():
    parser = argparse.ArgumentParser(description="Create database tables")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only list existing tables, don't create anything",
    )

    args = parser.parse_args()
    asyncio.run(main_async(check_only=args.check))


if __name__ == "__main__":
    main()
