"""Liveness and readiness probes (no auth)."""

import logging
import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.models.muscle_group import MuscleGroup

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health():
    """Process is up. Includes built_at when BACKEND_BUILT_AT is set at deploy time."""
    payload: dict = {"status": "ok"}
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Database reachable and seeded; 503 otherwise."""
    try:
        seeded = (await db.execute(select(func.count(MuscleGroup.id)))).scalar_one()
    except SQLAlchemyError as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(status_code=503, content={"status": "error", "database": "unavailable"})
    if not seeded:
        return JSONResponse(status_code=503, content={"status": "error", "database": "not seeded"})
    return {"status": "ok", "database": "connected", "muscle_groups": seeded}
