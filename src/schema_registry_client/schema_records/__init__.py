"""Schema record exports."""

from .response_conversion import (
    MalformedResponseError,
    convert_schema_id_response,
    convert_schema_response,
)
from .schema_models import Schema, SchemaDescription, SchemaProperties

__all__ = [
    "Schema",
    "SchemaDescription",
    "SchemaProperties",
    "MalformedResponseError",
    "convert_schema_id_response",
    "convert_schema_response",
]
