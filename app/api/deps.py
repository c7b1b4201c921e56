"""Shared API dependencies: the auth provider and the current user."""

from functools import lru_cache

from fastapi import Depends, Header, HTTPException

from app.core.config import get_settings
from app.services.auth_provider import AuthenticatedUser, AuthProvider


@lru_cache
def get_auth_provider() -> AuthProvider:
    """Process-wide provider client (holds the session cache)."""
    settings = get_settings()
    return AuthProvider(
        base_url=settings.auth_url,
        anon_key=settings.auth_anon_key,
        service_role_key=settings.auth_service_role_key,
        timeout=settings.auth_timeout_seconds,
    )


async def get_current_user(
    authorization: str | None = Header(None),
    provider: AuthProvider = Depends(get_auth_provider),
) -> AuthenticatedUser:
    """Resolve the bearer token to a user; 401 when missing or rejected."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=401, detail="Unauthorized")
    user = await provider.get_user(token.strip())
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
