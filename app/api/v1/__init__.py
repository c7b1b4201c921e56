"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    account,
    exercises,
    health,
    muscle_groups,
    schedule,
    statistics,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(muscle_groups.router, prefix="/muscle-groups", tags=["muscle-groups"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(schedule.router, prefix="/schedule", tags=["schedule"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
api_router.include_router(account.router, prefix="/account", tags=["account"])
