"""Registry error hierarchy and HTTP error mapping."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class SchemaRegistryError(Exception):
    """Base class for every error raised by the registry client."""


class ServiceRequestError(SchemaRegistryError):
    """Raised when a request fails before any response is received."""


class RequestValidationError(SchemaRegistryError):
    """Raised when a required operation argument is missing."""


class ServiceError(SchemaRegistryError):
    """Raised when the service answers with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_code: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.response = response

    def __str__(self) -> str:
        prefix = f"({self.error_code}) " if self.error_code else ""
        return f"{prefix}{self.message} [status {self.status_code}]"


class ResourceNotFoundError(ServiceError):
    """Raised when the requested schema, group or id does not exist."""


class ClientAuthenticationError(ServiceError):
    """Raised when the service rejects the supplied credential."""


_STATUS_ERROR_TYPES: dict[int, type[ServiceError]] = {
    401: ClientAuthenticationError,
    403: ClientAuthenticationError,
    404: ResourceNotFoundError,
}


def raise_for_service_status(response: httpx.Response) -> None:
    """Raise the matching ServiceError when the response is not a success."""
    if response.is_success:
        return
    error_code, message = _parse_error_body(response)
    error_type = _STATUS_ERROR_TYPES.get(response.status_code, ServiceError)
    logger.debug(
        "Service returned %s for %s %s: %s",
        response.status_code,
        response.request.method,
        response.request.url.path,
        message,
    )
    raise error_type(
        message,
        status_code=response.status_code,
        error_code=error_code,
        response=response,
    )


def _parse_error_body(response: httpx.Response) -> tuple[str | None, str]:
    fallback = response.text.strip() or response.reason_phrase or "Service request failed."
    try:
        payload: Any = response.json()
    except ValueError:
        return None, fallback
    if not isinstance(payload, dict):
        return None, fallback
    error = payload.get("error", payload)
    if not isinstance(error, dict):
        return None, fallback
    code = error.get("code")
    message = error.get("message")
    return (
        str(code) if code is not None else None,
        str(message) if message else fallback,
    )
