"""Library identification and wire constants."""

from __future__ import annotations

import platform

SDK_NAME = "schema-registry-client"
SDK_VERSION = "1.0.0b1"

LIB_INFO = (
    f"{SDK_NAME}/{SDK_VERSION} Python/{platform.python_version()} ({platform.platform()})"
)

DEFAULT_API_VERSION = "2020-09-01-preview"
DEFAULT_TOKEN_SCOPE = "https://eventhubs.azure.net/.default"
DEFAULT_SERIALIZATION_TYPE = "avro"
DEFAULT_TIMEOUT_SECONDS = 30

# Response headers carrying schema identity. Names are fixed by the service.
LOCATION_HEADER = "location"
SCHEMA_ID_LOCATION_HEADER = "x-schema-id-location"
SCHEMA_ID_HEADER = "x-schema-id"
SCHEMA_VERSION_HEADER = "x-schema-version"
SCHEMA_TYPE_HEADER = "x-schema-type"

# Request header naming the serialization type of submitted content.
SERIALIZATION_TYPE_HEADER = "Serialization-Type"
