"""Schema management exports."""

from .relation_resolver import RelationMap, resolve_relations
from .schema_models import (
    ConditionRule,
    FieldSpec,
    FieldType,
    FlexibleLayout,
    PostTypeSchema,
    RestApiConfig,
    RewriteConfig,
    SchemaDocument,
    SchemaKind,
    TaxonomySchema,
    ValidationError,
)
from .schema_parsing import (
    SchemaDirectoryNotFoundError,
    SchemaError,
    SchemaFileNotFoundError,
    SchemaParseError,
    UnsupportedSchemaFormatError,
    build_schema_document,
    load_directory,
    load_post_type_directory,
    load_taxonomy_directory,
    parse_schema_file,
)
from .schema_validation import (
    validate_post_type_schema,
    validate_schema,
    validate_taxonomy_schema,
)

__all__ = [
    "ConditionRule",
    "FieldSpec",
    "FieldType",
    "FlexibleLayout",
    "PostTypeSchema",
    "RelationMap",
    "RestApiConfig",
    "RewriteConfig",
    "SchemaDocument",
    "SchemaKind",
    "TaxonomySchema",
    "ValidationError",
    "SchemaDirectoryNotFoundError",
    "SchemaError",
    "SchemaFileNotFoundError",
    "SchemaParseError",
    "UnsupportedSchemaFormatError",
    "build_schema_document",
    "load_directory",
    "load_post_type_directory",
    "load_taxonomy_directory",
    "parse_schema_file",
    "resolve_relations",
    "validate_post_type_schema",
    "validate_schema",
    "validate_taxonomy_schema",
]
