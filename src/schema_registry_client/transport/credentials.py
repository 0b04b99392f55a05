"""Bearer token credentials and the httpx auth flow that applies them."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncGenerator, Sequence
from dataclasses import dataclass
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)

# Tokens this close to expiry are refreshed before use.
_REFRESH_MARGIN_SECONDS = 300
_STATIC_TOKEN_LIFETIME_SECONDS = 10 * 365 * 24 * 3600


@dataclass(frozen=True)
class AccessToken:
    """Bearer token with its expiry as epoch seconds."""

    token: str
    expires_on: int


class TokenCredential(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol implemented by credential providers."""

    async def get_token(self, *scopes: str) -> AccessToken: ...


class StaticTokenCredential:  # pylint: disable=too-few-public-methods
    """Credential returning a fixed, pre-acquired bearer token."""

    def __init__(self, token: str, expires_on: int | None = None) -> None:
        if not token or not token.strip():
            raise ValueError("Bearer token must not be empty.")
        self._token = token.strip()
        self._expires_on = expires_on

    async def get_token(self, *scopes: str) -> AccessToken:
        expires_on = self._expires_on
        if expires_on is None:
            expires_on = int(time.time()) + _STATIC_TOKEN_LIFETIME_SECONDS
        return AccessToken(token=self._token, expires_on=expires_on)


class BearerTokenAuth(httpx.Auth):
    """Attach `Authorization: Bearer` headers, reusing a token until it nears expiry."""

    requires_request_body = False

    def __init__(self, credential: TokenCredential, scopes: Sequence[str]) -> None:
        self._credential = credential
        self._scopes = tuple(scopes)
        self._token: AccessToken | None = None
        self._token_lock = asyncio.Lock()

    def sync_auth_flow(self, request: httpx.Request):
        raise RuntimeError("BearerTokenAuth supports async clients only.")

    async def async_auth_flow(
        self, request: httpx.Request
    ) -> AsyncGenerator[httpx.Request, httpx.Response]:
        token = await self._current_token()
        request.headers["Authorization"] = f"Bearer {token.token}"
        yield request

    async def _current_token(self) -> AccessToken:
        async with self._token_lock:
            if self._token is None or self._needs_refresh(self._token):
                logger.debug("Requesting bearer token for scopes %s", ", ".join(self._scopes))
                self._token = await self._credential.get_token(*self._scopes)
            return self._token

    @staticmethod
    def _needs_refresh(token: AccessToken) -> bool:
        return token.expires_on - _REFRESH_MARGIN_SECONDS <= int(time.time())
