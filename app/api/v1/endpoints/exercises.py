"""Exercise CRUD endpoints (scoped to the current user)."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.api.deps import get_current_user
from app.db.session import get_db
from app.models.exercise import Exercise
from app.models.muscle_group import MuscleGroup
from app.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate
from app.services.auth_provider import AuthenticatedUser

router = APIRouter()

DUPLICATE_NAME = "An exercise with this name already exists."


def _exercise_query(user_id: uuid.UUID):
    return (
        select(Exercise)
        .where(Exercise.user_id == user_id)
        .options(selectinload(Exercise.muscle_groups))
    )


async def _get_owned(db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID) -> Exercise:
    result = await db.execute(_exercise_query(user_id).where(Exercise.id == exercise_id))
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


async def _name_taken(
    db: AsyncSession,
    user_id: uuid.UUID,
    name: str,
    exclude_id: uuid.UUID | None = None,
) -> bool:
    """Case-insensitive duplicate check within the user's exercises."""
    stmt = select(Exercise.id).where(Exercise.user_id == user_id, func.lower(Exercise.name) == name.lower())
    if exclude_id is not None:
        stmt = stmt.where(Exercise.id != exclude_id)
    result = await db.execute(stmt.limit(1))
    return result.scalar_one_or_none() is not None


async def _flush_exercise(db: AsyncSession) -> None:
    """Flush; a concurrent request that took the same name first shows up as the duplicate-name error."""
    try:
        await db.flush()
    except IntegrityError as e:
        raise HTTPException(status_code=400, detail=DUPLICATE_NAME) from e


async def _load_muscle_groups(db: AsyncSession, ids: list[uuid.UUID]) -> list[MuscleGroup]:
    unique_ids = list(dict.fromkeys(ids))
    result = await db.execute(select(MuscleGroup).where(MuscleGroup.id.in_(unique_ids)).order_by(MuscleGroup.name))
    groups = list(result.scalars().all())
    if len(groups) != len(unique_ids):
        raise HTTPException(status_code=400, detail="Unknown muscle group")
    return groups


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    muscle_group_id: uuid.UUID | None = None,
    include_hidden: bool = True,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """List the user's exercises by name, optionally for one muscle group."""
    stmt = _exercise_query(user.id)
    if muscle_group_id is not None:
        stmt = stmt.where(Exercise.muscle_groups.any(MuscleGroup.id == muscle_group_id))
    if not include_hidden:
        stmt = stmt.where(Exercise.hidden.is_(False))
    result = await db.execute(stmt.order_by(Exercise.name))
    return list(result.scalars().all())


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Create an exercise targeting one or more muscle groups."""
    if await _name_taken(db, user.id, payload.name):
        raise HTTPException(status_code=400, detail=DUPLICATE_NAME)
    groups = await _load_muscle_groups(db, payload.muscle_group_ids)
    exercise = Exercise(
        user_id=user.id,
        hidden=False,
        muscle_groups=groups,
        **payload.model_dump(exclude={"muscle_group_ids"}),
    )
    db.add(exercise)
    await _flush_exercise(db)
    return await _get_owned(db, user.id, exercise.id)


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    return await _get_owned(db, user.id, exercise_id)


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Partial update. Renaming and re-targeting happen in one transaction."""
    exercise = await _get_owned(db, user.id, exercise_id)
    data = payload.model_dump(exclude_unset=True)
    if data.get("name") and await _name_taken(db, user.id, data["name"], exclude_id=exercise_id):
        raise HTTPException(status_code=400, detail=DUPLICATE_NAME)
    if "muscle_group_ids" in data:
        ids = data.pop("muscle_group_ids")
        if ids is None:
            raise HTTPException(status_code=400, detail="An exercise needs at least one muscle group")
        exercise.muscle_groups = await _load_muscle_groups(db, ids)
    for k, v in data.items():
        if k in ("name", "hidden", "rest_time_seconds") and v is None:
            continue
        setattr(exercise, k, v)
    await _flush_exercise(db)
    return await _get_owned(db, user.id, exercise_id)


@router.post("/{exercise_id}/toggle-hidden", response_model=ExerciseRead)
async def toggle_hidden(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Hide or show the exercise in day plans. History is kept either way."""
    exercise = await _get_owned(db, user.id, exercise_id)
    exercise.hidden = not exercise.hidden
    await db.flush()
    return exercise


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Delete an exercise and all of its logged history."""
    exercise = await _get_owned(db, user.id, exercise_id)
    await db.delete(exercise)
    return None
