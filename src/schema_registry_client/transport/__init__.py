"""Transport layer exports."""

from .credentials import AccessToken, BearerTokenAuth, StaticTokenCredential, TokenCredential
from .pipeline import build_http_client, build_user_agent
from .rest_operations import SchemaOperations
from .service_errors import (
    ClientAuthenticationError,
    RequestValidationError,
    ResourceNotFoundError,
    SchemaRegistryError,
    ServiceError,
    ServiceRequestError,
)

__all__ = [
    "AccessToken",
    "BearerTokenAuth",
    "StaticTokenCredential",
    "TokenCredential",
    "build_http_client",
    "build_user_agent",
    "SchemaOperations",
    "ClientAuthenticationError",
    "RequestValidationError",
    "ResourceNotFoundError",
    "SchemaRegistryError",
    "ServiceError",
    "ServiceRequestError",
]
