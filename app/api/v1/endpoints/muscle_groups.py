"""Muscle groups - global and read-only through the API."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.db.session import get_db
from app.models.muscle_group import MuscleGroup
from app.schemas.muscle_group import MuscleGroupRead

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=list[MuscleGroupRead])
async def list_muscle_groups(db: AsyncSession = Depends(get_db)):
    """All muscle groups, by name."""
    result = await db.execute(select(MuscleGroup).order_by(MuscleGroup.name))
    return list(result.scalars().all())


@router.get("/{muscle_group_id}", response_model=MuscleGroupRead)
async def get_muscle_group(
    muscle_group_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(select(MuscleGroup).where(MuscleGroup.id == muscle_group_id))
    mg = result.scalar_one_or_none()
    if not mg:
        raise HTTPException(status_code=404, detail="Muscle group not found")
    return mg
