"""TypeScript definition emitter.

Each schema becomes one emission unit (`<slug>.ts`) holding the ACF field
interface, the REST entity interface, response aliases, request types and
the shared helper interfaces. A batch additionally gets an `index.ts`.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from pathlib import Path

from wp_schema_system.schema_management.schema_models import (
    FieldSpec,
    PostTypeSchema,
    SchemaDocument,
    SchemaKind,
    TaxonomySchema,
)
from wp_schema_system.schema_management.schema_parsing import load_directory

from .helper_types import HELPER_TYPES, POST_STATUS_UNION
from .type_mapping import (
    PostTypeLinks,
    map_field_type,
    optional_marker,
    property_name,
    to_type_name,
)

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.ts"

_LINKS_BLOCK = (
    "  _links: {",
    "    self: Array<{ href: string }>;",
    "    collection: Array<{ href: string }>;",
    "  };",
)


def emit_typescript(schema: SchemaDocument, *, linked_post_types: Collection[str] = ()) -> str:
    """Render the TypeScript unit for one schema; identical input gives identical text.

    Related post types in `linked_post_types` are typed by name and imported from
    their sibling unit. Any other related post type is typed as the generic post.
    """
    type_name = to_type_name(schema.slug)
    links = PostTypeLinks({schema.slug, *linked_post_types})
    acf_lines = _acf_interface(type_name, schema.fields, links)

    if isinstance(schema, TaxonomySchema):
        entity_lines = _term_interfaces(schema, type_name)
    else:
        entity_lines = _post_interfaces(schema, type_name)

    lines = _header(schema)
    imports = {
        to_type_name(slug): slug for slug in sorted(links.referenced) if slug != schema.slug
    }
    for imported in sorted(imports):
        lines.append(f"import type {{ {imported} }} from './{imports[imported]}';")
    if imports:
        lines.append("")
    lines.extend(acf_lines)
    lines.extend(entity_lines)
    lines.append(HELPER_TYPES)
    return "\n".join(lines)


def _header(schema: SchemaDocument) -> list[str]:
    source_name = schema.source_path.name if schema.source_path else f"{schema.slug}.yaml"
    return [
        "/**",
        f" * Generated TypeScript types for {_comment_text(schema.label or schema.slug)}",
        f" * @generated from schema: {source_name}",
        " */",
        "",
    ]


def _acf_interface(
    type_name: str, fields: Iterable[FieldSpec], links: PostTypeLinks
) -> list[str]:
    lines = ["// ACF Fields Interface", f"export interface {type_name}ACF {{"]
    for field in fields:
        lines.extend(_field_property(field, links, indent="  "))
    lines.extend(["}", ""])
    return lines


def _field_property(field: FieldSpec, links: PostTypeLinks, *, indent: str) -> list[str]:
    lines: list[str] = []
    if field.label or field.instructions:
        lines.append(f"{indent}/** {_comment_text(field.label or '')}".rstrip())
        if field.instructions:
            for instruction_line in field.instructions.splitlines():
                lines.append(f"{indent} * {_comment_text(instruction_line)}".rstrip())
        lines.append(f"{indent} */")
    ts_type = map_field_type(field, links)
    lines.append(f"{indent}{property_name(field.key)}{optional_marker(field)}: {ts_type};")
    return lines


def _post_interfaces(schema: PostTypeSchema, type_name: str) -> list[str]:
    supports = set(schema.supports or ())
    lines = [
        "// WordPress Post Interface",
        f"export interface {type_name} {{",
        "  id: number;",
        "  date: string;",
        "  date_gmt: string;",
        "  modified: string;",
        "  modified_gmt: string;",
        "  slug: string;",
        f"  status: {POST_STATUS_UNION};",
        f"  type: '{schema.slug}';",
        "  link: string;",
        "  title: {",
        "    rendered: string;",
        "  };",
    ]
    for capability, block in (("editor", "content"), ("excerpt", "excerpt")):
        if capability in supports:
            lines.extend(
                [f"  {block}: {{", "    rendered: string;", "    protected: boolean;", "  };"]
            )
    if "thumbnail" in supports:
        lines.append("  featured_media: number;")
    lines.append(f"  acf: {type_name}ACF;")
    lines.extend(_LINKS_BLOCK)
    lines.extend(["}", ""])

    lines.extend(_response_aliases(type_name))

    lines.extend(
        [
            "// Create/Update Request Type",
            f"export interface {type_name}CreateRequest {{",
            "  title: string;",
            f"  status?: {POST_STATUS_UNION};",
        ]
    )
    if "editor" in supports:
        lines.append("  content?: string;")
    if "excerpt" in supports:
        lines.append("  excerpt?: string;")
    lines.append(f"  acf?: Partial<{type_name}ACF>;")
    lines.extend(["}", ""])
    lines.extend(_update_request(type_name))
    return lines


def _term_interfaces(schema: TaxonomySchema, type_name: str) -> list[str]:
    hierarchical = bool(schema.hierarchical)
    lines = [
        "// WordPress Term Interface",
        f"export interface {type_name} {{",
        "  id: number;",
        "  count: number;",
        "  description: string;",
        "  link: string;",
        "  name: string;",
        "  slug: string;",
        f"  taxonomy: '{schema.slug}';",
    ]
    if hierarchical:
        lines.append("  parent: number;")
    lines.append("  meta: Record<string, unknown>;")
    lines.append(f"  acf: {type_name}ACF;")
    lines.extend(_LINKS_BLOCK)
    lines.extend(["}", ""])

    lines.extend(_response_aliases(type_name))

    lines.extend(
        [
            "// Create/Update Request Type",
            f"export interface {type_name}CreateRequest {{",
            "  name: string;",
            "  slug?: string;",
            "  description?: string;",
        ]
    )
    if hierarchical:
        lines.append("  parent?: number;")
    lines.append(f"  acf?: Partial<{type_name}ACF>;")
    lines.extend(["}", ""])
    lines.extend(_update_request(type_name))
    return lines


def _response_aliases(type_name: str) -> list[str]:
    return [
        "// API Response Types",
        f"export type {type_name}Response = {type_name};",
        f"export type {type_name}ListResponse = {type_name}[];",
        "",
    ]


def _update_request(type_name: str) -> list[str]:
    return [f"export type {type_name}UpdateRequest = Partial<{type_name}CreateRequest>;", ""]


def _comment_text(text: str) -> str:
    return text.replace("*/", "*\\/")


def emit_collection(schemas: Mapping[str, SchemaDocument], output_dir: Path | str) -> list[Path]:
    """Write one unit per schema plus the index; returns the unit paths in collection order.

    Units only import the post types emitted in the same collection.
    """
    destination = Path(output_dir)
    destination.mkdir(parents=True, exist_ok=True)

    post_types = [slug for slug, schema in schemas.items() if schema.kind is SchemaKind.POST_TYPE]
    generated: list[Path] = []
    for slug, schema in schemas.items():
        output_path = destination / f"{slug}.ts"
        text = emit_typescript(schema, linked_post_types=post_types)
        output_path.write_text(text, encoding="utf-8")
        logger.debug("Wrote TypeScript unit %s", output_path)
        generated.append(output_path)

    write_index(schemas.keys(), destination)
    return generated


def emit_directory(
    schema_dir: Path | str,
    output_dir: Path | str,
    *,
    kind: SchemaKind = SchemaKind.POST_TYPE,
) -> list[Path]:
    """Load every schema in `schema_dir` and emit it into `output_dir`.

    Re-export order in the index follows the load order.
    """
    return emit_collection(load_directory(schema_dir, kind=kind), output_dir)


def write_index(slugs: Iterable[str], output_dir: Path | str) -> Path:
    """Write `index.ts` re-exporting every listed unit."""
    lines = ["/**", " * Generated TypeScript types index", " * @generated", " */", ""]
    lines.extend(f"export * from './{slug}';" for slug in slugs)
    index_path = Path(output_dir) / INDEX_FILENAME
    index_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return index_path
