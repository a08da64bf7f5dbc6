"""Schema repository exports."""

from .schema_repository import SchemaNotFoundError, SchemaRepository

__all__ = ["SchemaNotFoundError", "SchemaRepository"]
