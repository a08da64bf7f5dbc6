"""Starter schema generation for the `create` command.

The free-text prompt is stored verbatim as the schema description. Every
scaffold starts with a name and a description field; extra field names are
turned into keys and given a type guessed from the words in the key.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

from wp_schema_system.schema_management.schema_models import SchemaKind
from wp_schema_system.schema_management.slug_normalization import (
    humanize_key,
    sanitize_field_key,
    sanitize_post_type_slug,
    sanitize_taxonomy_slug,
)


class ScaffoldError(Exception):
    """Raised when a starter schema cannot be written."""


_BOOLEAN_PREFIXES = ("is_", "has_", "enable_")

# First match wins.
_FIELD_TYPE_HINTS: tuple[tuple[str, frozenset[str]], ...] = (
    ("email", frozenset({"email"})),
    ("url", frozenset({"url", "link", "website"})),
    ("gallery", frozenset({"images", "photos", "gallery"})),
    ("image", frozenset({"image", "photo", "picture", "avatar", "thumbnail"})),
    ("file", frozenset({"file", "attachment", "document", "pdf"})),
    (
        "number",
        frozenset(
            {"price", "amount", "quantity", "count", "number", "age", "weight", "height", "width"}
        ),
    ),
    ("true_false", frozenset({"featured", "active"})),
    ("date_picker", frozenset({"date", "birthday", "dob"})),
    ("time_picker", frozenset({"time"})),
    ("textarea", frozenset({"description", "content", "bio", "about"})),
    ("select", frozenset({"category", "categories", "type", "status", "department"})),
)


def infer_field_type(key: str) -> str:
    """Guess a field type from the words of a field key, falling back to `text`."""
    if key.startswith(_BOOLEAN_PREFIXES):
        return "true_false"
    words = set(key.split("_"))
    for field_type, hints in _FIELD_TYPE_HINTS:
        if words & hints:
            return field_type
    return "text"


def build_post_type_scaffold(
    slug: str, description: str, field_names: Sequence[str] = ()
) -> dict[str, Any]:
    """Starter post type schema with a name and a description field."""
    label = humanize_key(slug)
    return {
        "post_type": slug,
        "label": label,
        "singular_label": _singular(label),
        "description": description,
        "public": True,
        "show_in_rest": True,
        "menu_icon": "dashicons-admin-generic",
        "supports": ["title", "editor", "thumbnail"],
        "has_archive": True,
        "rewrite": {"slug": slug, "with_front": False},
        "fields": _starter_fields(field_names),
        "rest_api": {"enabled": True},
    }


def build_taxonomy_scaffold(
    slug: str, description: str, field_names: Sequence[str] = ()
) -> dict[str, Any]:
    """Starter taxonomy schema; post types are left for the author to fill in."""
    label = humanize_key(slug)
    return {
        "taxonomy": slug,
        "label": label,
        "singular_label": _singular(label),
        "description": description,
        "public": True,
        "show_in_rest": True,
        "hierarchical": False,
        "show_admin_column": True,
        "rewrite": {"slug": slug, "with_front": False},
        "post_types": [],
        "fields": _starter_fields(field_names),
        "rest_api": {"enabled": True},
    }


def write_schema_scaffold(
    directory: Path | str,
    slug: str,
    description: str,
    *,
    kind: SchemaKind = SchemaKind.POST_TYPE,
    field_names: Sequence[str] = (),
    overwrite: bool = False,
) -> Path:
    """Write `<slug>.yaml` into `directory` and return the resolved path.

    Raises:
      ScaffoldError: If the slug or a field name is unusable, or the file exists and
        `overwrite` is False.
    """
    if kind is SchemaKind.TAXONOMY:
        sanitized = sanitize_taxonomy_slug(slug)
    else:
        sanitized = sanitize_post_type_slug(slug)
    if not sanitized:
        raise ScaffoldError(f"Cannot derive a valid slug from '{slug}'.")

    destination = Path(directory) / f"{sanitized}.yaml"
    if destination.exists() and not overwrite:
        raise ScaffoldError(
            f"Schema already exists: {destination.resolve()}. Use --overwrite to replace it."
        )

    document = (
        build_taxonomy_scaffold(sanitized, description, field_names)
        if kind is SchemaKind.TAXONOMY
        else build_post_type_scaffold(sanitized, description, field_names)
    )
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(
            yaml.safe_dump(document, sort_keys=False, allow_unicode=True), encoding="utf-8"
        )
    except OSError as exc:
        raise ScaffoldError(f"Failed to write schema {destination}: {exc}") from exc
    return destination.resolve()


def _starter_fields(field_names: Sequence[str]) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "name": {"type": "text", "label": "Name", "required": True},
        "description": {"type": "textarea", "label": "Description", "rows": 4},
    }
    for name in field_names:
        key = sanitize_field_key(name)
        if not key:
            raise ScaffoldError(f"Cannot derive a field key from '{name}'.")
        fields.setdefault(key, {"type": infer_field_type(key), "label": humanize_key(key)})
    return fields


def _singular(label: str) -> str:
    return label[:-1] if label.endswith("s") and len(label) > 1 else label
