"""Field type to TypeScript type expression mapping."""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Iterable

from wp_schema_system.schema_management.schema_models import FieldSpec, FieldType

from .helper_types import FILE_TYPE, GENERIC_POST_TYPE, IMAGE_TYPE, TERM_TYPE, USER_TYPE

logger = logging.getLogger(__name__)

UNCONSTRAINED_TYPE = "any"

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_MULTI_TERM_WIDGETS = frozenset({"checkbox", "multi_select"})


def to_type_name(slug: str) -> str:
    """`product_category` -> `ProductCategory`."""
    segments = re.split(r"[_\s-]+", slug)
    return "".join(segment[:1].upper() + segment[1:] for segment in segments)


class PostTypeLinks:
    """Related post types one unit may name, and the ones it ended up naming.

    A post type outside `available` is typed as the generic post interface, so a
    unit never imports a sibling that is not emitted alongside it. With no
    `available` set every related post type is named.
    """

    def __init__(self, available: Collection[str] | None = None) -> None:
        self.available = None if available is None else frozenset(available)
        self.referenced: set[str] = set()

    def type_for(self, slug: str) -> str:
        if self.available is not None and slug not in self.available:
            return GENERIC_POST_TYPE
        self.referenced.add(slug)
        return to_type_name(slug)


def property_name(key: str) -> str:
    """Return `key` as a TypeScript property name, quoting it when it is not an identifier."""
    if _IDENTIFIER.fullmatch(key):
        return key
    return _quote(key)


def map_field_type(spec: FieldSpec, links: PostTypeLinks | None = None) -> str:
    """Map one field to a TypeScript type expression.

    Args:
      spec: Field to map.
      links: Decides which related post types are named and records them,
        so the caller can import them.

    Returns:
      The type expression. Unknown or missing field types map to `any`.
    """
    field_type = spec.known_type
    if field_type is None:
        logger.warning(
            "Field '%s' has unmapped type %r; emitting %s",
            spec.key,
            spec.field_type,
            UNCONSTRAINED_TYPE,
        )
        return UNCONSTRAINED_TYPE

    match field_type:
        case (
            FieldType.TEXT
            | FieldType.TEXTAREA
            | FieldType.EMAIL
            | FieldType.URL
            | FieldType.PASSWORD
            | FieldType.WYSIWYG
            | FieldType.OEMBED
            | FieldType.COLOR_PICKER
            | FieldType.DATE_PICKER
            | FieldType.TIME_PICKER
            | FieldType.DATE_TIME_PICKER
        ):
            return "string"
        case FieldType.NUMBER:
            return "number"
        case FieldType.TRUE_FALSE:
            return "boolean"
        case FieldType.SELECT:
            return _choice_type(spec, multiple=spec.multiple)
        case FieldType.CHECKBOX:
            return _choice_type(spec, multiple=True)
        case FieldType.RADIO:
            return _choice_type(spec, multiple=False)
        case FieldType.IMAGE:
            return _attachment_type(spec, IMAGE_TYPE)
        case FieldType.FILE:
            return _attachment_type(spec, FILE_TYPE)
        case FieldType.GALLERY:
            return _array_of(_attachment_type(spec, IMAGE_TYPE))
        case FieldType.POST_OBJECT:
            return _post_type(spec, multiple=spec.multiple, links=links)
        case FieldType.RELATIONSHIP:
            return _post_type(spec, multiple=True, links=links)
        case FieldType.TAXONOMY:
            widget = spec.option("field_type", "checkbox")
            multiple = widget in _MULTI_TERM_WIDGETS
            return _related_type(spec, TERM_TYPE, multiple=multiple, default_format="id")
        case FieldType.USER:
            return _related_type(spec, USER_TYPE, multiple=spec.multiple, default_format="array")
        case FieldType.REPEATER:
            if spec.sub_fields:
                return _array_of(structural_type(spec.sub_fields, links=links))
            return "any[]"
        case FieldType.GROUP:
            if spec.sub_fields:
                return structural_type(spec.sub_fields, links=links)
            return "Record<string, any>"
        case FieldType.FLEXIBLE_CONTENT:
            if not spec.layouts:
                return "any[]"
            layout_types = [
                structural_type(
                    layout.sub_fields,
                    links=links,
                    leading=(f"acf_fc_layout: {_quote(layout.key)}",),
                )
                for layout in spec.layouts
            ]
            return f"Array<{' | '.join(layout_types)}>"
        case FieldType.GOOGLE_MAP:
            return "{lat: number; lng: number; address?: string}"
        case FieldType.LINK:
            if spec.return_format == "url":
                return "string"
            return "{url: string; title: string; target: string}"
    logger.warning("Field '%s' type %s has no TypeScript mapping", spec.key, field_type.value)
    return UNCONSTRAINED_TYPE


def structural_type(
    fields: Iterable[FieldSpec],
    *,
    links: PostTypeLinks | None = None,
    leading: tuple[str, ...] = (),
) -> str:
    """Inline object type for a set of sibling fields."""
    properties = list(leading)
    for field in fields:
        properties.append(
            f"{property_name(field.key)}{optional_marker(field)}: "
            f"{map_field_type(field, links)}"
        )
    return "{" + "; ".join(properties) + "}"


def optional_marker(spec: FieldSpec) -> str:
    """Fields are optional unless marked required."""
    return "" if spec.required else "?"


def _choice_type(spec: FieldSpec, *, multiple: bool) -> str:
    if not spec.choices:
        return "string[]" if multiple else "string"
    union = " | ".join(_quote(value) for value, _label in spec.choices)
    return f"Array<{union}>" if multiple else union


def _attachment_type(spec: FieldSpec, object_type: str) -> str:
    if spec.return_format == "url":
        return "string"
    if spec.return_format == "id":
        return "number"
    return object_type


def _post_type(spec: FieldSpec, *, multiple: bool, links: PostTypeLinks | None) -> str:
    if (spec.return_format or "object") == "id":
        return _array_of("number") if multiple else "number"
    if len(spec.related_post_types) == 1:
        related = spec.related_post_types[0]
        type_name = links.type_for(related) if links is not None else to_type_name(related)
    else:
        type_name = GENERIC_POST_TYPE
    return _array_of(type_name) if multiple else type_name


def _related_type(
    spec: FieldSpec, object_type: str, *, multiple: bool, default_format: str
) -> str:
    base = "number" if (spec.return_format or default_format) == "id" else object_type
    return _array_of(base) if multiple else base


def _array_of(type_expression: str) -> str:
    if _IDENTIFIER.fullmatch(type_expression) or type_expression.startswith("{"):
        return f"{type_expression}[]"
    return f"Array<{type_expression}>"


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
