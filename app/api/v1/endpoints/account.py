"""Account: data export, profile/email/password changes and account deletion.

Identity changes are forwarded to the auth provider; only validation happens here.
"""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_auth_provider, get_current_user
from app.db.session import get_db
from app.schemas.account import AccountMessage, EmailUpdate, PasswordUpdate, ProfileUpdate
from app.services.auth_provider import AuthenticatedUser, AuthProvider
from app.services.export import build_export, delete_user_data

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/export")
async def export_data(
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Everything the user owns as one downloadable JSON document."""
    document = await build_export(db, user)
    filename = f"workout-data-{date.today().isoformat()}.json"
    return JSONResponse(
        content=document.model_dump(mode="json"),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.patch("/profile", response_model=AccountMessage)
async def update_profile(
    payload: ProfileUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    provider: AuthProvider = Depends(get_auth_provider),
):
    await provider.update_user(user.token, {"data": {"username": payload.username.strip()}})
    return AccountMessage(message="Profile updated successfully!")


@router.post("/email", response_model=AccountMessage)
async def update_email(
    payload: EmailUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    provider: AuthProvider = Depends(get_auth_provider),
):
    """Starts the provider's confirmation flow for the new address."""
    await provider.update_user(user.token, {"email": payload.email})
    return AccountMessage(message="Email update initiated! Check your new email for confirmation.")


@router.post("/password", response_model=AccountMessage)
async def update_password(
    payload: PasswordUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    provider: AuthProvider = Depends(get_auth_provider),
):
    problem = payload.problem()
    if problem:
        raise HTTPException(status_code=400, detail=problem)
    await provider.update_user(user.token, {"password": payload.new_password})
    return AccountMessage(message="Password updated successfully!")


@router.delete("", status_code=204)
async def delete_account(
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
    provider: AuthProvider = Depends(get_auth_provider),
):
    """Delete all of the user's data, then the identity. A provider failure rolls the data back."""
    await delete_user_data(db, user.id)
    await provider.delete_user(user.id)
    logger.info("Deleted account %s", user.id)
    return None
