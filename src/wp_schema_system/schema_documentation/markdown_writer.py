"""Markdown documentation for a schema."""

from __future__ import annotations

from collections.abc import Iterable

from wp_schema_system.schema_management.schema_models import (
    FieldSpec,
    FieldType,
    SchemaDocument,
    TaxonomySchema,
)


def render_schema_markdown(schema: SchemaDocument) -> str:
    """Describe the schema, its REST endpoint and every field as Markdown."""
    identity = "Taxonomy" if isinstance(schema, TaxonomySchema) else "Post Type"
    lines = [f"# {schema.label or schema.slug}", "", f"**{identity}:** `{schema.slug}`", ""]
    if schema.description:
        lines.extend([schema.description, ""])

    rest_enabled = _rest_enabled(schema)
    lines.extend(["## REST API", "", f"- **Enabled:** {'Yes' if rest_enabled else 'No'}"])
    if rest_enabled:
        rest_base = schema.rest_api.base or schema.slug
        lines.append(f"- **Endpoint:** `/wp-json/wp/v2/{rest_base}`")
    lines.append("")

    if schema.fields:
        lines.extend(["## Fields", ""])
        lines.extend(_field_sections(schema.fields, heading="###"))
    return "\n".join(lines)


def _rest_enabled(schema: SchemaDocument) -> bool:
    if schema.show_in_rest is not None:
        return schema.show_in_rest
    if schema.rest_api.enabled is not None:
        return schema.rest_api.enabled
    return True


def _field_sections(fields: Iterable[FieldSpec], *, heading: str, prefix: str = "") -> list[str]:
    lines: list[str] = []
    for field in fields:
        required = " **[Required]**" if field.required else ""
        lines.extend([f"{heading} `{prefix}{field.key}`{required}", ""])
        lines.append(f"- **Label:** {field.label or field.key}")
        lines.append(f"- **Type:** `{field.field_type or 'unspecified'}`")
        if field.instructions:
            lines.append(f"- **Instructions:** {field.instructions}")
        if field.default_value not in (None, ""):
            lines.append(f"- **Default:** `{field.default_value}`")
        if field.choices and field.known_type in (
            FieldType.SELECT,
            FieldType.CHECKBOX,
            FieldType.RADIO,
        ):
            lines.append("- **Choices:**")
            lines.extend(f"  - `{value}`: {label}" for value, label in field.choices)
        lines.append("")
        if field.sub_fields:
            lines.extend(
                _field_sections(field.sub_fields, heading=heading, prefix=f"{prefix}{field.key}.")
            )
        for layout in field.layouts:
            lines.extend(
                _field_sections(
                    layout.sub_fields,
                    heading=heading,
                    prefix=f"{prefix}{field.key}.{layout.key}.",
                )
            )
    return lines
