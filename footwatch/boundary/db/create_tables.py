"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, footwatch.configs
System role: Database schema initialization

Usage:
    python -m footwatch.boundary.db.create_tables
    python -m footwatch.boundary.db.create_tables --drop
"""

import asyncio
import sys

from footwatch.boundary.db.base import Base
from footwatch.boundary.db.connection import build_async_engine, create_all_tables
from footwatch.configs import get_settings


async def create_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = build_async_engine(get_settings().database)
    try:
        await create_all_tables(engine)
    finally:
        await engine.dispose()
    print("All tables created successfully.")


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    from footwatch.boundary.db import models  # noqa: F401

    engine = build_async_engine(get_settings().database)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    finally:
        await engine.dispose()
    print("All tables dropped successfully.")


if __name__ == "__main__":
    if "--drop" in sys.argv[1:]:
        asyncio.run(drop_all_tables())
    asyncio.run(create_tables())
