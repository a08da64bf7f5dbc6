"""Schema validation service.

Validation never raises for data problems: every check runs and the
collected :class:`ValidationError` values are returned to the caller.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .schema_models import (
    FieldSpec,
    FieldType,
    PostTypeSchema,
    SchemaDocument,
    TaxonomySchema,
    ValidationError,
)
from .slug_normalization import (
    FIELD_KEY_PATTERN,
    POST_TYPE_SLUG_MAX_LENGTH,
    POST_TYPE_SLUG_PATTERN,
    TAXONOMY_SLUG_MAX_LENGTH,
    TAXONOMY_SLUG_PATTERN,
)

_COMPOSITE_TYPES = frozenset({FieldType.REPEATER.value, FieldType.GROUP.value})


def validate_schema(document: SchemaDocument) -> list[ValidationError]:
    """Validate a post type or taxonomy document."""
    if isinstance(document, TaxonomySchema):
        return validate_taxonomy_schema(document)
    return validate_post_type_schema(document)


def validate_post_type_schema(document: PostTypeSchema) -> list[ValidationError]:
    """Return every problem found in a post type schema; empty when valid."""
    errors = _validate_identity(
        document.slug,
        identity_field="post_type",
        max_length=POST_TYPE_SLUG_MAX_LENGTH,
        pattern=POST_TYPE_SLUG_PATTERN,
        allowed="lowercase letters, numbers, and underscores",
    )
    errors.extend(_validate_label(document.label))
    errors.extend(validate_fields(document.fields))
    return errors


def validate_taxonomy_schema(document: TaxonomySchema) -> list[ValidationError]:
    """Return every problem found in a taxonomy schema; empty when valid."""
    errors = _validate_identity(
        document.slug,
        identity_field="taxonomy",
        max_length=TAXONOMY_SLUG_MAX_LENGTH,
        pattern=TAXONOMY_SLUG_PATTERN,
        allowed="lowercase letters, numbers, underscores, and hyphens",
    )
    errors.extend(_validate_label(document.label))
    post_types = document.source.get("post_types")
    if post_types is not None and not _is_list(post_types):
        errors.append(ValidationError("post_types must be an array"))
    errors.extend(validate_fields(document.fields))
    return errors


def validate_fields(fields: Iterable[FieldSpec], *, prefix: str = "") -> list[ValidationError]:
    """Validate a sibling set of fields and, recursively, everything nested below them."""
    errors: list[ValidationError] = []
    for field in fields:
        errors.extend(_validate_field(field, prefix=prefix))
    return errors


def _validate_identity(
    slug: str, *, identity_field: str, max_length: int, pattern: re.Pattern[str], allowed: str
) -> list[ValidationError]:
    if not slug:
        return [ValidationError(f"Missing required field: {identity_field}")]
    errors: list[ValidationError] = []
    if len(slug) > max_length:
        errors.append(
            ValidationError(f"{identity_field} must be {max_length} characters or less")
        )
    if not pattern.fullmatch(slug):
        errors.append(ValidationError(f"{identity_field} must contain only {allowed}"))
    return errors


def _validate_label(label: str | None) -> list[ValidationError]:
    if not label:
        return [ValidationError("Missing required field: label")]
    return []


def _validate_field(field: FieldSpec, *, prefix: str) -> list[ValidationError]:
    path = f"{prefix}{field.key}"
    errors: list[ValidationError] = []

    if not FIELD_KEY_PATTERN.fullmatch(field.key):
        errors.append(
            ValidationError(
                f"Field key '{path}' must contain only lowercase letters, numbers, "
                "and underscores",
                field_path=path,
            )
        )
    if not field.field_type:
        errors.append(
            ValidationError(f"Field '{path}' missing required property: type", field_path=path)
        )
    if not field.label:
        errors.append(
            ValidationError(f"Field '{path}' missing required property: label", field_path=path)
        )
    if field.field_type and field.known_type is None:
        errors.append(
            ValidationError(
                f"Field '{path}' has invalid type: {field.field_type}", field_path=path
            )
        )

    if field.field_type in _COMPOSITE_TYPES:
        errors.extend(validate_fields(field.sub_fields, prefix=f"{path}."))
    if field.known_type is FieldType.FLEXIBLE_CONTENT:
        for layout in field.layouts:
            errors.extend(validate_fields(layout.sub_fields, prefix=f"{path}.{layout.key}."))

    errors.extend(_validate_conditional_logic(field.source.get("conditional_logic"), path))
    return errors


def _validate_conditional_logic(value: Any, path: str) -> list[ValidationError]:
    if value is None or (_is_list(value) and not value):
        return []
    if not _is_list(value):
        return [
            ValidationError(f"Field '{path}' conditional_logic must be an array", field_path=path)
        ]
    for group in value:
        rules = [group] if isinstance(group, Mapping) else group
        if not _is_list(rules) or not all(
            isinstance(rule, Mapping) and rule.get("field") for rule in rules
        ):
            return [
                ValidationError(
                    f"Field '{path}' conditional_logic rules must reference a field",
                    field_path=path,
                )
            ]
    return []


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)
