"""Async client for a remote schema registry service."""

import logging

from .configuration import ClientOptions
from .constants import SDK_VERSION
from .registry_client import SchemaRegistryClient
from .schema_records import MalformedResponseError, Schema, SchemaDescription, SchemaProperties
from .transport import (
    AccessToken,
    ClientAuthenticationError,
    RequestValidationError,
    ResourceNotFoundError,
    SchemaRegistryError,
    ServiceError,
    ServiceRequestError,
    StaticTokenCredential,
    TokenCredential,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = SDK_VERSION

__all__ = [
    "SchemaRegistryClient",
    "ClientOptions",
    "Schema",
    "SchemaDescription",
    "SchemaProperties",
    "AccessToken",
    "StaticTokenCredential",
    "TokenCredential",
    "SchemaRegistryError",
    "ServiceError",
    "ServiceRequestError",
    "ResourceNotFoundError",
    "ClientAuthenticationError",
    "RequestValidationError",
    "MalformedResponseError",
]
