import argparse
import asyncio
import os
import sys

from sqlalchemy import text

# Add backend to path
sys.path.append(os.getcwd())

from app.core.config import get_settings
from app.db import Base, engine
# Import all models
from app.models import *  # noqa: F401, F403


async def drop_tables():
    print("Dropping all workout tracker tables...")
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        await conn.run_sync(Base.metadata.drop_all)
    print("Tables dropped. Run `alembic upgrade head` to recreate them.")
    await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Drop every table (development only).")
    parser.add_argument("--force", action="store_true", help="allow running against a production environment")
    args = parser.parse_args()
    environment = get_settings().environment
    if environment == "production" and not args.force:
        sys.exit("Refusing to drop tables in production (pass --force to override).")
    asyncio.run(drop_tables())
