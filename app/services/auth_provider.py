"""Client for the hosted auth provider (GoTrue-compatible REST API).

Identity, passwords and email confirmation live with the provider. This service only
resolves bearer tokens to users and forwards account changes. Resolved tokens are cached
for a short time and dropped whenever the account changes (password, email, deletion).
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

# Seconds a resolved token stays cached
SESSION_CACHE_TTL = 60.0


class AuthProviderError(Exception):
    """The auth provider could not be reached or rejected a call it should have accepted."""


class AuthenticatedUser(BaseModel):
    id: uuid.UUID
    email: str | None = None
    username: str | None = None
    token: str


class AuthProvider:
    def __init__(
        self,
        base_url: str,
        anon_key: str,
        service_role_key: str = "",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self.service_role_key = service_role_key
        self.timeout = timeout
        self._transport = transport
        self._clock = clock
        self._sessions: dict[str, tuple[float, AuthenticatedUser]] = {}

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self._transport)

    def _headers(self, bearer: str) -> dict[str, str]:
        return {"apikey": self.anon_key, "Authorization": f"Bearer {bearer}"}

    async def _request(self, method: str, path: str, bearer: str, json: dict[str, Any] | None = None) -> httpx.Response:
        try:
            async with self._client() as client:
                return await client.request(method, path, headers=self._headers(bearer), json=json)
        except httpx.RequestError as e:
            raise AuthProviderError(f"Auth provider unreachable: {e}") from e

    # ── Sessions ─────────────────────────────────────────────────────────

    async def get_user(self, token: str) -> AuthenticatedUser | None:
        """Resolve a bearer token. None when the provider does not recognize it."""
        now = self._clock()
        cached = self._sessions.get(token)
        if cached and now - cached[0] < SESSION_CACHE_TTL:
            return cached[1]
        self._evict_expired(now)

        response = await self._request("GET", "/user", token)
        if response.status_code in (401, 403, 404):
            self.invalidate(token)
            return None
        if response.status_code >= 400:
            raise AuthProviderError(f"GET /user failed with {response.status_code}")
        data = response.json()
        user = AuthenticatedUser(
            id=data["id"],
            email=data.get("email"),
            username=(data.get("user_metadata") or {}).get("username"),
            token=token,
        )
        self._sessions[token] = (now, user)
        return user

    def _evict_expired(self, now: float) -> None:
        for token, (cached_at, _) in list(self._sessions.items()):
            if now - cached_at >= SESSION_CACHE_TTL:
                del self._sessions[token]

    def invalidate(self, token: str | None = None) -> None:
        """Forget one cached token, or every cached token."""
        if token is None:
            self._sessions.clear()
        else:
            self._sessions.pop(token, None)

    def invalidate_user(self, user_id: uuid.UUID) -> None:
        for token, (_, user) in list(self._sessions.items()):
            if user.id == user_id:
                del self._sessions[token]

    # ── Account changes ──────────────────────────────────────────────────

    async def update_user(self, token: str, attributes: dict[str, Any]) -> None:
        """PUT /user with e.g. {"password": ...}, {"email": ...} or {"data": {"username": ...}}."""
        response = await self._request("PUT", "/user", token, json=attributes)
        if response.status_code >= 400:
            raise AuthProviderError(f"PUT /user failed with {response.status_code}")
        self.invalidate(token)

    async def delete_user(self, user_id: uuid.UUID) -> None:
        """Delete the identity. Needs the service role key."""
        if not self.service_role_key:
            raise AuthProviderError("Account deletion requires AUTH_SERVICE_ROLE_KEY")
        response = await self._request("DELETE", f"/admin/users/{user_id}", self.service_role_key)
        if response.status_code >= 400 and response.status_code != 404:
            raise AuthProviderError(f"DELETE /admin/users failed with {response.status_code}")
        self.invalidate_user(user_id)
        logger.info("Deleted auth identity %s", user_id)
