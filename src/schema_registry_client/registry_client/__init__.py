"""Registry client exports."""

from .schema_registry_client import SchemaRegistryClient

__all__ = ["SchemaRegistryClient"]
