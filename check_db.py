import asyncio
import os
import sys

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Add backend directory to sys.path
sys.path.append(os.getcwd())

from app.db import async_session_maker, engine

TABLES = [
    "muscle_groups",
    "exercises",
    "exercise_muscle_groups",
    "workout_schedule",
    "workout_sessions",
    "workout_exercises",
    "workout_exercise_sets",
]


async def check_data():
    async with async_session_maker() as session:
        print(f"Checking tables: {TABLES}")
        for table in TABLES:
            try:
                result = await session.execute(text(f"SELECT count(*) FROM {table}"))
                print(f"Table '{table}' row count: {result.scalar()}")
            except SQLAlchemyError as e:
                print(f"Error querying {table}: {e}")
                await session.rollback()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
