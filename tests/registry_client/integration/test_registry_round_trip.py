"""End-to-end registry behavior against the in-memory fake service."""

from __future__ import annotations

import pytest
from schema_registry_client import ResourceNotFoundError, SchemaRegistryClient


def _assert_valid_properties(properties, expected_serialization_type: str = "avro") -> None:
    assert properties.schema_id
    assert properties.location
    assert properties.location_by_id
    assert properties.serialization_type.lower() == expected_serialization_type
    assert properties.version >= 1


@pytest.mark.asyncio
async def test_registered_schema_is_fetched_with_identical_content(
    fake_registry, fake_credential, user_schema_content, endpoint, group
) -> None:
    async with SchemaRegistryClient(
        endpoint, fake_credential, transport=fake_registry.transport()
    ) as client:
        registered = await client.register_schema(group, "user", "avro", user_schema_content)
        found = await client.get_schema(registered.schema_id)

    _assert_valid_properties(registered)
    _assert_valid_properties(found.schema_properties)
    assert found.schema_content == user_schema_content
    assert found.schema_properties.schema_id == registered.schema_id
    assert found.raw_response is not None
    assert found.raw_response.status_code == 200


@pytest.mark.asyncio
async def test_changed_content_bumps_version_and_id(
    fake_registry, fake_credential, user_schema_content, endpoint, group
) -> None:
    async with SchemaRegistryClient(
        endpoint, fake_credential, transport=fake_registry.transport()
    ) as client:
        first = await client.register_schema(group, "user", "avro", user_schema_content)
        changed = await client.register_schema(
            group, "user", "avro", user_schema_content.replace('"name"', '"fullName"', 1)
        )

    _assert_valid_properties(first)
    _assert_valid_properties(changed)
    assert changed.version > first.version
    assert changed.schema_id != first.schema_id
    assert changed.location != first.location


@pytest.mark.asyncio
async def test_get_schema_id_finds_registered_content(
    fake_registry, fake_credential, user_schema_content, endpoint, group
) -> None:
    async with SchemaRegistryClient(
        endpoint, fake_credential, transport=fake_registry.transport()
    ) as client:
        registered = await client.register_schema(group, "user", "avro", user_schema_content)
        found = await client.get_schema_id(group, "user", "avro", user_schema_content)

    _assert_valid_properties(found)
    assert found.schema_id == registered.schema_id
    assert found.raw_response is not None
    assert found.raw_response.status_code == 200


@pytest.mark.asyncio
async def test_get_schema_id_fails_when_nothing_registered(
    fake_registry, fake_credential, user_schema_content, endpoint, group
) -> None:
    async with SchemaRegistryClient(
        endpoint, fake_credential, transport=fake_registry.transport()
    ) as client:
        with pytest.raises(ResourceNotFoundError, match="never-registered"):
            await client.get_schema_id(group, "never-registered", "avro", user_schema_content)


@pytest.mark.asyncio
async def test_get_schema_fails_for_unknown_id(fake_registry, fake_credential, endpoint) -> None:
    unknown_id = "ffffffffffffffffffffffffffffffff"

    async with SchemaRegistryClient(
        endpoint, fake_credential, transport=fake_registry.transport()
    ) as client:
        with pytest.raises(ResourceNotFoundError, match=unknown_id) as exc_info:
            await client.get_schema(unknown_id)

    assert exc_info.value.status_code == 404
