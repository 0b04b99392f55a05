"""Shared fixtures: an in-memory schema registry served through httpx.MockTransport."""

from __future__ import annotations

import json
import re
import uuid
from dataclasses import dataclass, field

import httpx
import pytest
from schema_registry_client.transport.credentials import AccessToken

ENDPOINT = "https://registry.example.com"
GROUP = "test-group"

_SCHEMA_PATH = re.compile(r"^/\$schemagroups/(?P<group>[^/]+)/schemas/(?P<name>[^/]+)$")
_SCHEMA_BY_ID_PATH = re.compile(r"^/\$schemagroups/getSchemaById/(?P<schema_id>[^/]+)$")


@dataclass
class _StoredSchema:
    schema_id: str
    group: str
    name: str
    version: int
    content: str


@dataclass
class FakeSchemaRegistry:
    """Registry semantics: versions per group/name, ids, lookup by content, not-found errors."""

    accepted_types: dict[str, str] = field(default_factory=lambda: {GROUP: "avro"})
    schemas: list[_StoredSchema] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)
    omit_headers: tuple[str, ...] = ()

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not request.headers.get("Authorization", "").startswith("Bearer "):
            return _error(401, "Unauthorized", "Missing bearer token.")

        schema_match = _SCHEMA_PATH.match(request.url.path)
        if schema_match and request.method in ("PUT", "POST"):
            return self._handle_schema_content(
                request, schema_match["group"], schema_match["name"]
            )
        by_id_match = _SCHEMA_BY_ID_PATH.match(request.url.path)
        if by_id_match and request.method == "GET":
            return self._handle_get_by_id(by_id_match["schema_id"])
        return _error(404, "ResourceNotFound", f"No route for {request.url.path}.")

    def _handle_schema_content(
        self, request: httpx.Request, group: str, name: str
    ) -> httpx.Response:
        accepted_type = self.accepted_types.get(group)
        if accepted_type is None:
            return _error(404, "ItemNotFound", f"Schema group '{group}' does not exist.")
        serialization_type = request.headers.get("Serialization-Type", "")
        if serialization_type.lower() != accepted_type:
            return _error(
                400,
                "InvalidSchemaType",
                f"Serialization type '{serialization_type}' is not accepted by group '{group}'.",
            )
        content = request.content.decode("utf-8")
        if request.method == "PUT":
            stored = self._store(group, name, content)
        else:
            stored = self._find(group, name, content)
            if stored is None:
                return _error(
                    404, "ItemNotFound", f"Schema '{name}' not found in group '{group}'."
                )
        return httpx.Response(
            200, headers=self._identity_headers(stored), json={"id": stored.schema_id}
        )

    def _handle_get_by_id(self, schema_id: str) -> httpx.Response:
        for stored in self.schemas:
            if stored.schema_id == schema_id:
                return httpx.Response(
                    200, headers=self._identity_headers(stored), content=stored.content.encode()
                )
        return _error(404, "ItemNotFound", f"Schema id '{schema_id}' does not exist.")

    def _store(self, group: str, name: str, content: str) -> _StoredSchema:
        versions = [s.version for s in self.schemas if s.group == group and s.name == name]
        stored = _StoredSchema(
            schema_id=uuid.uuid4().hex,
            group=group,
            name=name,
            version=max(versions, default=0) + 1,
            content=content,
        )
        self.schemas.append(stored)
        return stored

    def _find(self, group: str, name: str, content: str) -> _StoredSchema | None:
        for stored in self.schemas:
            if stored.group == group and stored.name == name and stored.content == content:
                return stored
        return None

    def _identity_headers(self, stored: _StoredSchema) -> dict[str, str]:
        query = "?api-version=2020-09-01-preview"
        headers = {
            "location": (
                f"{ENDPOINT}/$schemagroups/{stored.group}/schemas/{stored.name}"
                f"/versions/{stored.version}{query}"
            ),
            "x-schema-id-location": (
                f"{ENDPOINT}/$schemagroups/getSchemaById/{stored.schema_id}{query}"
            ),
            "x-schema-id": stored.schema_id,
            "x-schema-version": str(stored.version),
            "x-schema-type": "Avro",
        }
        return {key: value for key, value in headers.items() if key not in self.omit_headers}


def _error(status_code: int, code: str, message: str) -> httpx.Response:
    return httpx.Response(status_code, json={"error": {"code": code, "message": message}})


class FakeCredential:
    def __init__(self, token: str = "fake-token") -> None:
        self.token = token
        self.calls: list[tuple[str, ...]] = []

    async def get_token(self, *scopes: str) -> AccessToken:
        self.calls.append(scopes)
        return AccessToken(token=self.token, expires_on=4_102_444_800)


@pytest.fixture
def endpoint() -> str:
    return ENDPOINT


@pytest.fixture
def group() -> str:
    return GROUP


@pytest.fixture
def fake_registry() -> FakeSchemaRegistry:
    return FakeSchemaRegistry()


@pytest.fixture
def fake_credential() -> FakeCredential:
    return FakeCredential()


@pytest.fixture
def user_schema_content() -> str:
    return json.dumps(
        {
            "type": "record",
            "name": "User",
            "namespace": "com.example.schemaregistry.samples",
            "fields": [
                {"name": "name", "type": "string"},
                {"name": "favoriteNumber", "type": "int"},
            ],
        }
    )
