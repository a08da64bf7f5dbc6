"""Schema scaffolding exports."""

from .scaffold_builder import (
    ScaffoldError,
    build_post_type_scaffold,
    build_taxonomy_scaffold,
    infer_field_type,
    write_schema_scaffold,
)

__all__ = [
    "ScaffoldError",
    "build_post_type_scaffold",
    "build_taxonomy_scaffold",
    "infer_field_type",
    "write_schema_scaffold",
]
