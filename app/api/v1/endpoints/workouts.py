"""Workout sessions: fetch by date, save, day plan and live totals."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.core.enums import DayState
from app.db.session import get_db
from app.models.exercise import Exercise
from app.schemas.workout import (
    DayPlan,
    EditedEntry,
    EntryEdit,
    WorkoutByDate,
    WorkoutSave,
    WorkoutSaved,
    WorkoutSummary,
    WorkoutSummaryRequest,
)
from app.services import workout_sessions
from app.services.aggregation import edit_entry, exercise_total, summarize
from app.services.auth_provider import AuthenticatedUser

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=WorkoutByDate)
async def get_workout_by_date(
    on_date: date = Query(..., alias="date"),
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Exercise map saved for the date; exercise_data is null when no session exists."""
    data = await workout_sessions.get_exercise_data(db, user.id, on_date)
    return WorkoutByDate(exercise_data=data)


@router.post("", response_model=WorkoutSaved)
async def save_workout(
    payload: WorkoutSave,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Upsert the day's session and replace its exercises and sets.

    On a training day every planned exercise must be filled in before saving.
    """
    entries = payload.exercise_data
    if entries:
        owned = await db.execute(
            select(Exercise.id).where(Exercise.user_id == user.id, Exercise.id.in_(list(entries)))
        )
        unknown = set(entries) - set(owned.scalars().all())
        if unknown:
            raise HTTPException(status_code=400, detail="Unknown exercise in workout")

    state, plan = await workout_sessions.get_plan_exercise_ids(db, user.id, payload.current_date)
    summary = summarize(plan, entries)
    if state == DayState.TRAINING and not summary.all_exercises_filled:
        raise HTTPException(status_code=400, detail="Fill in weight, reps and sets for every exercise before saving.")

    session = await workout_sessions.save_workout(db, user.id, payload.current_date, entries)
    logger.info("Saved workout %s for %s (%d exercises)", session.id, payload.current_date, len(entries))
    return WorkoutSaved(
        message="Workout saved successfully!",
        session_id=session.id,
        date=session.date,
        summary=summary,
    )


@router.delete("", status_code=204)
async def delete_workout(
    on_date: date = Query(..., alias="date"),
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Delete the day's session with its exercises and sets."""
    if not await workout_sessions.delete_session(db, user.id, on_date):
        raise HTTPException(status_code=404, detail="Workout not found")
    return None


@router.get("/plan", response_model=DayPlan)
async def get_day_plan(
    on_date: date | None = Query(None, alias="date"),
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """What to train on the date (default today), with last values to prefill."""
    return await workout_sessions.build_day_plan(db, user.id, on_date or date.today())


@router.post("/summary", response_model=WorkoutSummary)
async def summarize_workout(
    payload: WorkoutSummaryRequest,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Totals for unsaved entries against the date's plan (default today)."""
    _, plan = await workout_sessions.get_plan_exercise_ids(db, user.id, payload.current_date or date.today())
    return summarize(plan, payload.exercise_data)


@router.post("/entry", response_model=EditedEntry)
async def edit_workout_entry(
    payload: EntryEdit,
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Switch an unsaved entry between uniform and per-set without losing what was typed."""
    entry = edit_entry(payload.entry, payload.mode, payload.first_set)
    return EditedEntry(entry=entry, total=exercise_total(entry))
