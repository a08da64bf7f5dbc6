"""Field group compilation service.

Lowers a schema's field tree into the field group structure understood by
Advanced Custom Fields. Post type and taxonomy schemas share the same
recursive field compiler; only the group envelope differs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from copy import deepcopy
from typing import Any

from wp_schema_system.schema_management.schema_models import (
    ConditionalLogic,
    FieldSpec,
    FieldType,
    FlexibleLayout,
    SchemaDocument,
    TaxonomySchema,
)
from wp_schema_system.schema_management.slug_normalization import humanize_key

from .field_defaults import FIELD_GROUP_DISPLAY_DEFAULTS, LAYOUT_DEFAULTS, option_defaults

logger = logging.getLogger(__name__)

FieldGroupDescription = dict[str, Any]
CompiledField = dict[str, Any]
FieldGroupRegistrar = Callable[[FieldGroupDescription], None]


def generate_field_group(schema: SchemaDocument) -> FieldGroupDescription:
    """Build the field group for a post type or the term fields of a taxonomy."""
    if isinstance(schema, TaxonomySchema):
        group_key = f"group_taxonomy_{schema.slug}"
        title = f"{schema.label} Term Fields"
        location_param = "taxonomy"
    else:
        group_key = f"group_{schema.slug}"
        title = f"{schema.label} Fields"
        location_param = "post_type"

    field_group: FieldGroupDescription = {
        "key": group_key,
        "title": title,
        "fields": [generate_field(field.key, field, schema.slug) for field in schema.fields],
        "location": [[{"param": location_param, "operator": "==", "value": schema.slug}]],
        **FIELD_GROUP_DISPLAY_DEFAULTS,
        "description": schema.description or "",
    }
    if schema.rest_enabled:
        field_group["show_in_rest"] = 1
    return field_group


def generate_field(key: str, spec: FieldSpec, scope_key: str) -> CompiledField:
    """Compile one field; nested fields are scoped under the compiled field's own key."""
    field_key = f"field_{scope_key}_{key}"
    field: CompiledField = {
        "key": field_key,
        "label": spec.label or humanize_key(key),
        "name": key,
        "type": spec.field_type,
        "instructions": spec.instructions or "",
        "required": 1 if spec.required else 0,
        "conditional_logic": 0,
        "wrapper": {"width": "", "class": "", "id": ""},
    }

    if spec.default_value is not None:
        field["default_value"] = spec.default_value
    if spec.placeholder:
        field["placeholder"] = spec.placeholder

    wrapper = spec.source.get("wrapper")
    if isinstance(wrapper, Mapping):
        for option in ("width", "class"):
            if wrapper.get(option) is not None:
                field["wrapper"][option] = wrapper[option]

    if spec.conditional_logic:
        field["conditional_logic"] = convert_conditional_logic(spec.conditional_logic, scope_key)

    field_type = spec.known_type
    if field_type is None:
        logger.debug(
            "Field %s has unsupported type %r; no type options applied", key, spec.field_type
        )
    else:
        _apply_type_options(field, spec, field_type)

    if spec.source.get("show_in_rest"):
        field["show_in_rest"] = 1
    return field


def convert_conditional_logic(
    logic: ConditionalLogic, scope_key: str
) -> list[list[dict[str, Any]]]:
    """Qualify rule references with the scope the referenced sibling is compiled in."""
    return [
        [
            {
                "field": f"field_{scope_key}_{rule.field}",
                "operator": rule.operator,
                "value": rule.value,
            }
            for rule in group
        ]
        for group in logic
    ]


def _apply_type_options(field: CompiledField, spec: FieldSpec, field_type: FieldType) -> None:
    if field_type in (FieldType.REPEATER, FieldType.GROUP):
        field["sub_fields"] = [
            generate_field(sub_field.key, sub_field, field["key"]) for sub_field in spec.sub_fields
        ]
    elif field_type is FieldType.FLEXIBLE_CONTENT:
        field["layouts"] = [_compile_layout(layout, field["key"]) for layout in spec.layouts]

    for option, default in option_defaults(field_type).items():
        field[option] = spec.option(option, deepcopy(default))


def _compile_layout(layout: FlexibleLayout, parent_key: str) -> dict[str, Any]:
    layout_key = f"layout_{parent_key}_{layout.key}"
    compiled: dict[str, Any] = {
        "key": layout_key,
        "name": layout.key,
        "label": layout.label or humanize_key(layout.key),
        "display": layout.display or LAYOUT_DEFAULTS["display"],
        "sub_fields": [
            generate_field(sub_field.key, sub_field, layout_key) for sub_field in layout.sub_fields
        ],
    }
    for option in ("min", "max"):
        value = layout.source.get(option)
        compiled[option] = LAYOUT_DEFAULTS[option] if value is None else value
    return compiled


def register(
    field_group: FieldGroupDescription, *, add_field_group: FieldGroupRegistrar | None = None
) -> bool:
    """Hand a compiled group to the field system; returns False when none is available."""
    if add_field_group is None:
        logger.info("Field system unavailable; field group %s not registered", field_group["key"])
        return False
    add_field_group(field_group)
    return True
