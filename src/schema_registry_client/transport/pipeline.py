"""HTTP client construction for registry requests."""

from __future__ import annotations

import logging

import httpx

from schema_registry_client.configuration.runtime_settings import ClientOptions
from schema_registry_client.constants import LIB_INFO

from .credentials import BearerTokenAuth, TokenCredential

logger = logging.getLogger(__name__)


def build_user_agent(user_agent_prefix: str | None) -> str:
    """Return the User-Agent value: the caller's prefix, if any, followed by library info."""
    prefix = (user_agent_prefix or "").strip()
    return f"{prefix} {LIB_INFO}" if prefix else LIB_INFO


def build_http_client(
    endpoint: str,
    credential: TokenCredential,
    options: ClientOptions,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the pooled async HTTP client every registry operation is sent through."""
    logger.debug("Creating HTTP client for %s", endpoint)
    return httpx.AsyncClient(
        base_url=endpoint,
        auth=BearerTokenAuth(credential, (options.token_scope,)),
        headers={
            "User-Agent": build_user_agent(options.user_agent_prefix),
            "Accept": "application/json",
        },
        timeout=httpx.Timeout(options.timeout_seconds),
        transport=transport,
    )
