"""Schema file loading and parsing service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .schema_models import (
    ConditionalLogic,
    ConditionRule,
    FieldSpec,
    FlexibleLayout,
    PostTypeSchema,
    RestApiConfig,
    RewriteConfig,
    SchemaDocument,
    SchemaKind,
    TaxonomySchema,
)

logger = logging.getLogger(__name__)

SCHEMA_FILE_SUFFIXES: tuple[str, ...] = (".yaml", ".yml", ".json")


class SchemaError(Exception):
    """Base class for schema loading failures."""


class SchemaFileNotFoundError(SchemaError):
    """Raised when a schema file does not exist."""


class UnsupportedSchemaFormatError(SchemaError):
    """Raised when a schema file extension is not YAML or JSON."""


class SchemaParseError(SchemaError):
    """Raised when schema text cannot be decoded into a schema document."""


class SchemaDirectoryNotFoundError(SchemaError):
    """Raised when the mandatory post type schema directory is missing."""


def parse_schema_file(
    file_path: Path | str, *, kind: SchemaKind | None = None
) -> SchemaDocument:
    """Read one YAML or JSON schema file into a schema document.

    Args:
      file_path: Path to a `.yaml`, `.yml` or `.json` file.
      kind: Kind to assume when the document declares neither `post_type`
        nor `taxonomy`. When given, a document declaring the other kind is
        rejected.

    Returns:
      The parsed post type or taxonomy schema. No defaults are applied.

    Raises:
      SchemaFileNotFoundError: If the file does not exist.
      UnsupportedSchemaFormatError: If the extension is not supported.
      SchemaParseError: If decoding fails or the document shape is unusable.
    """
    path = Path(file_path)
    if not path.exists():
        raise SchemaFileNotFoundError(f"Schema file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SCHEMA_FILE_SUFFIXES:
        raise UnsupportedSchemaFormatError(
            f"Unsupported schema format: {path.suffix.lstrip('.') or '<none>'}"
        )

    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as exc:
        raise SchemaParseError(f"Failed to read {path}: {exc}") from exc
    if suffix == ".json":
        data = _decode_json(text, path)
    else:
        data = _decode_yaml(text, path)
    return build_schema_document(data, kind=kind, source_path=path)


def _decode_json(text: str, path: Path) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaParseError(f"Failed to parse JSON file {path}: {exc}") from exc


def _decode_yaml(text: str, path: Path) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaParseError(f"Failed to parse YAML file {path}: {exc}") from exc


def load_directory(
    directory: Path | str, *, kind: SchemaKind = SchemaKind.POST_TYPE
) -> dict[str, SchemaDocument]:
    """Load every schema file in a directory, keyed by declared slug.

    Files that fail to parse are logged and skipped. A missing post type
    directory is an error; a missing taxonomy directory yields no schemas.
    """
    path = Path(directory)
    if not path.is_dir():
        if kind is SchemaKind.TAXONOMY:
            return {}
        raise SchemaDirectoryNotFoundError(f"Directory not found: {path}")

    schemas: dict[str, SchemaDocument] = {}
    for schema_path in list_schema_files(path):
        try:
            document = parse_schema_file(schema_path, kind=kind)
        except SchemaError as exc:
            logger.warning("Failed to load %s schema from %s: %s", kind.value, schema_path, exc)
            continue
        schemas[document.slug or schema_path.stem] = document
    return schemas


def load_post_type_directory(directory: Path | str) -> dict[str, SchemaDocument]:
    """Load post type schemas; the directory must exist."""
    return load_directory(directory, kind=SchemaKind.POST_TYPE)


def load_taxonomy_directory(directory: Path | str) -> dict[str, SchemaDocument]:
    """Load taxonomy schemas; a missing directory means no taxonomies."""
    return load_directory(directory, kind=SchemaKind.TAXONOMY)


def list_schema_files(directory: Path) -> list[Path]:
    """Return schema files directly inside `directory`, sorted by name."""
    return sorted(
        candidate
        for candidate in directory.iterdir()
        if candidate.is_file() and candidate.suffix.lower() in SCHEMA_FILE_SUFFIXES
    )


def build_schema_document(
    data: Any, *, kind: SchemaKind | None = None, source_path: Path | None = None
) -> SchemaDocument:
    """Turn decoded YAML/JSON data into a typed schema document."""
    if not isinstance(data, Mapping):
        raise SchemaParseError("Schema root must be a mapping.")

    resolved_kind = _detect_kind(data, kind)
    if resolved_kind is SchemaKind.TAXONOMY:
        return _build_taxonomy_schema(data, source_path)
    return _build_post_type_schema(data, source_path)


def _detect_kind(data: Mapping[str, Any], requested: SchemaKind | None) -> SchemaKind:
    has_post_type = "post_type" in data
    has_taxonomy = "taxonomy" in data
    if has_post_type and has_taxonomy:
        raise SchemaParseError("Schema must declare either post_type or taxonomy, not both.")
    declared = (
        SchemaKind.POST_TYPE if has_post_type else SchemaKind.TAXONOMY if has_taxonomy else None
    )
    if declared is None:
        if requested is None:
            raise SchemaParseError("Schema must declare either post_type or taxonomy.")
        return requested
    if requested is not None and declared is not requested:
        raise SchemaParseError(
            f"Schema declares {declared.value} but a {requested.value} schema was expected."
        )
    return declared


def _build_post_type_schema(data: Mapping[str, Any], source_path: Path | None) -> PostTypeSchema:
    supports = data.get("supports")
    return PostTypeSchema(
        slug=_text(data.get("post_type")) or "",
        label=_text(data.get("label")),
        singular_label=_text(data.get("singular_label")),
        description=_text(data.get("description")),
        public=_flag(data.get("public")),
        show_in_rest=_flag(data.get("show_in_rest")),
        hierarchical=_flag(data.get("hierarchical")),
        has_archive=_flag(data.get("has_archive")),
        supports=None if supports is None else _string_tuple(supports),
        rewrite=_parse_rewrite(data.get("rewrite")),
        rest_api=_parse_rest_api(data.get("rest_api")),
        menu_icon=_text(data.get("menu_icon")),
        fields=_parse_fields(data.get("fields"), context="fields"),
        taxonomies=_string_tuple(data.get("taxonomies")),
        source=data,
        source_path=source_path,
    )


def _build_taxonomy_schema(data: Mapping[str, Any], source_path: Path | None) -> TaxonomySchema:
    capabilities = data.get("capabilities")
    query_var = data.get("query_var")
    return TaxonomySchema(
        slug=_text(data.get("taxonomy")) or "",
        label=_text(data.get("label")),
        singular_label=_text(data.get("singular_label")),
        description=_text(data.get("description")),
        public=_flag(data.get("public")),
        show_in_rest=_flag(data.get("show_in_rest")),
        hierarchical=_flag(data.get("hierarchical")),
        show_ui=_flag(data.get("show_ui")),
        show_in_menu=_flag(data.get("show_in_menu")),
        show_in_nav_menus=_flag(data.get("show_in_nav_menus")),
        show_tagcloud=_flag(data.get("show_tagcloud")),
        show_admin_column=_flag(data.get("show_admin_column")),
        query_var=query_var if isinstance(query_var, str) else _flag(query_var),
        rewrite=_parse_rewrite(data.get("rewrite")),
        rest_api=_parse_rest_api(data.get("rest_api")),
        capabilities=(
            {str(key): str(value) for key, value in capabilities.items()}
            if isinstance(capabilities, Mapping)
            else None
        ),
        post_types=_string_tuple(data.get("post_types")),
        fields=_parse_fields(data.get("fields"), context="fields"),
        source=data,
        source_path=source_path,
    )


def _parse_fields(value: Any, *, context: str) -> tuple[FieldSpec, ...]:
    if value is None or (isinstance(value, Sequence) and not isinstance(value, str) and not value):
        return ()
    if not isinstance(value, Mapping):
        raise SchemaParseError(f"'{context}' must be a mapping of field keys to definitions.")
    return tuple(
        _parse_field(str(key), definition, context=f"{context}.{key}")
        for key, definition in value.items()
    )


def _parse_field(key: str, definition: Any, *, context: str) -> FieldSpec:
    if definition is None:
        definition = {}
    if not isinstance(definition, Mapping):
        raise SchemaParseError(f"Field definition '{context}' must be a mapping.")

    return FieldSpec(
        key=key,
        field_type=_text(definition.get("type")) or "",
        label=_text(definition.get("label")),
        instructions=_text(definition.get("instructions")),
        required=bool(definition.get("required", False)),
        default_value=definition.get("default_value"),
        placeholder=_text(definition.get("placeholder")),
        choices=_parse_choices(definition.get("choices")),
        multiple=bool(definition.get("multiple", False)),
        return_format=_text(definition.get("return_format")),
        related_post_types=_string_tuple(definition.get("post_type")),
        sub_fields=_parse_fields(definition.get("sub_fields"), context=f"{context}.sub_fields"),
        layouts=_parse_layouts(definition.get("layouts"), context=f"{context}.layouts"),
        conditional_logic=_parse_conditional_logic(definition.get("conditional_logic")),
        source=definition,
    )


def _parse_layouts(value: Any, *, context: str) -> tuple[FlexibleLayout, ...]:
    if value is None or (isinstance(value, Sequence) and not isinstance(value, str) and not value):
        return ()
    if not isinstance(value, Mapping):
        raise SchemaParseError(f"'{context}' must be a mapping of layout keys to definitions.")
    layouts: list[FlexibleLayout] = []
    for key, definition in value.items():
        layout_context = f"{context}.{key}"
        if definition is None:
            definition = {}
        if not isinstance(definition, Mapping):
            raise SchemaParseError(f"Layout definition '{layout_context}' must be a mapping.")
        layouts.append(
            FlexibleLayout(
                key=str(key),
                label=_text(definition.get("label")),
                display=_text(definition.get("display")) or "block",
                sub_fields=_parse_fields(
                    definition.get("sub_fields"), context=f"{layout_context}.sub_fields"
                ),
                source=definition,
            )
        )
    return tuple(layouts)


def _parse_choices(value: Any) -> tuple[tuple[str, str], ...]:
    if isinstance(value, Mapping):
        return tuple((str(choice), str(label)) for choice, label in value.items())
    if isinstance(value, Sequence) and not isinstance(value, str):
        return tuple((str(choice), str(choice)) for choice in value)
    return ()


def _parse_conditional_logic(value: Any) -> ConditionalLogic:
    """Normalize to a disjunction of rule groups; malformed input is left to validation."""
    if not isinstance(value, Sequence) or isinstance(value, str):
        return ()
    groups: list[tuple[ConditionRule, ...]] = []
    for group in value:
        rules = [group] if isinstance(group, Mapping) else group
        if not isinstance(rules, Sequence) or isinstance(rules, str):
            continue
        parsed = tuple(
            ConditionRule(
                field=str(rule["field"]),
                operator=_text(rule.get("operator")) or "==",
                value=rule.get("value", ""),
            )
            for rule in rules
            if isinstance(rule, Mapping) and rule.get("field")
        )
        if parsed:
            groups.append(parsed)
    return tuple(groups)


def _parse_rewrite(value: Any) -> RewriteConfig | None:
    if not isinstance(value, Mapping) or not value:
        return None
    with_front = value.get("with_front")
    return RewriteConfig(
        slug=_text(value.get("slug")),
        with_front=None if with_front is None else bool(with_front),
    )


def _parse_rest_api(value: Any) -> RestApiConfig:
    if not isinstance(value, Mapping):
        return RestApiConfig()
    return RestApiConfig(
        enabled=_flag(value.get("enabled")),
        base=_text(value.get("base")),
        controller=_text(value.get("controller")),
    )


def _string_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        return tuple(str(item) for item in value if item is not None and str(item).strip())
    return ()


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _flag(value: Any) -> bool | None:
    return None if value is None else bool(value)
