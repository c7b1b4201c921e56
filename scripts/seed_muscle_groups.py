import asyncio
import os
import sys

# Add parent directory to path so we can import app modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import select

from app.core.constants import DEFAULT_MUSCLE_GROUPS
from app.db import async_session_maker, engine
from app.models import MuscleGroup


async def main():
    """Insert any default muscle group that is missing. Safe to run repeatedly."""
    async with async_session_maker() as session:
        result = await session.execute(select(MuscleGroup.name))
        existing = set(result.scalars().all())
        missing = [name for name in DEFAULT_MUSCLE_GROUPS if name not in existing]
        if not missing:
            print("All default muscle groups already present.")
        else:
            session.add_all(MuscleGroup(name=name) for name in missing)
            await session.commit()
            print(f"Added muscle groups: {', '.join(missing)}")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
