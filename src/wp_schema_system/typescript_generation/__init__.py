"""TypeScript generation exports."""

from .helper_types import HELPER_TYPES
from .type_mapping import (
    UNCONSTRAINED_TYPE,
    PostTypeLinks,
    map_field_type,
    structural_type,
    to_type_name,
)
from .typescript_emitter import (
    INDEX_FILENAME,
    emit_collection,
    emit_directory,
    emit_typescript,
    write_index,
)

__all__ = [
    "HELPER_TYPES",
    "INDEX_FILENAME",
    "PostTypeLinks",
    "UNCONSTRAINED_TYPE",
    "emit_collection",
    "emit_directory",
    "emit_typescript",
    "map_field_type",
    "structural_type",
    "to_type_name",
    "write_index",
]
