"""WordPress registration argument builders."""

from __future__ import annotations

from typing import Any

from wp_schema_system.schema_management.schema_models import (
    PostTypeSchema,
    RestApiConfig,
    TaxonomySchema,
)

DEFAULT_SUPPORTS: tuple[str, ...] = ("title", "editor", "thumbnail")


def to_post_type_args(schema: PostTypeSchema) -> dict[str, Any]:
    """Arguments for `register_post_type()`, with the plugin's defaults filled in."""
    label = schema.label or schema.slug
    singular = schema.display_singular_label
    labels = {
        "name": label,
        "singular_name": singular,
        "add_new": "Add New",
        "add_new_item": f"Add New {singular}",
        "edit_item": f"Edit {singular}",
        "new_item": f"New {singular}",
        "view_item": f"View {singular}",
        "view_items": f"View {label}",
        "search_items": f"Search {label}",
        "not_found": f"No {label.lower()} found",
        "not_found_in_trash": f"No {label.lower()} found in Trash",
        "all_items": f"All {label}",
        "archives": f"{singular} Archives",
        "attributes": f"{singular} Attributes",
        "insert_into_item": f"Insert into {singular.lower()}",
        "uploaded_to_this_item": f"Uploaded to this {singular.lower()}",
    }
    args: dict[str, Any] = {
        "labels": labels,
        "public": _default(schema.public, True),
        "show_in_rest": _default(schema.show_in_rest, True),
        "supports": list(DEFAULT_SUPPORTS if schema.supports is None else schema.supports),
        "hierarchical": _default(schema.hierarchical, False),
        "has_archive": _default(schema.has_archive, True),
    }
    if schema.description:
        args["description"] = schema.description
    if schema.menu_icon:
        args["menu_icon"] = schema.menu_icon
    if schema.rewrite is not None and schema.rewrite.as_args():
        args["rewrite"] = schema.rewrite.as_args()
    args.update(_rest_overrides(schema.rest_api))
    return args


def to_taxonomy_args(schema: TaxonomySchema) -> dict[str, Any]:
    """Arguments for `register_taxonomy()`; flat taxonomies get tag-style labels."""
    label = schema.label or schema.slug
    singular = schema.display_singular_label
    hierarchical = _default(schema.hierarchical, False)
    labels = {
        "name": label,
        "singular_name": singular,
        "search_items": f"Search {label}",
        "all_items": f"All {label}",
        "edit_item": f"Edit {singular}",
        "update_item": f"Update {singular}",
        "add_new_item": f"Add New {singular}",
        "new_item_name": f"New {singular} Name",
        "menu_name": label,
    }
    if hierarchical:
        labels["parent_item"] = f"Parent {singular}"
        labels["parent_item_colon"] = f"Parent {singular}:"
    else:
        labels["popular_items"] = f"Popular {label}"
        labels["separate_items_with_commas"] = f"Separate {label.lower()} with commas"
        labels["add_or_remove_items"] = f"Add or remove {label.lower()}"
        labels["choose_from_most_used"] = f"Choose from the most used {label.lower()}"
        labels["not_found"] = f"No {label.lower()} found"

    args: dict[str, Any] = {
        "labels": labels,
        "public": _default(schema.public, True),
        "show_in_rest": _default(schema.show_in_rest, True),
        "hierarchical": hierarchical,
        "show_admin_column": _default(schema.show_admin_column, True),
        "query_var": _default(schema.query_var, True),
    }
    if schema.description:
        args["description"] = schema.description
    for option in ("show_ui", "show_in_menu", "show_in_nav_menus", "show_tagcloud"):
        value = getattr(schema, option)
        if value is not None:
            args[option] = value
    if schema.rewrite is not None and schema.rewrite.as_args():
        args["rewrite"] = schema.rewrite.as_args()
    if schema.capabilities is not None:
        args["capabilities"] = dict(schema.capabilities)
    args.update(_rest_overrides(schema.rest_api))
    return args


def _rest_overrides(rest_api: RestApiConfig) -> dict[str, str]:
    overrides: dict[str, str] = {}
    if rest_api.base:
        overrides["rest_base"] = rest_api.base
    if rest_api.controller:
        overrides["rest_controller_class"] = rest_api.controller
    return overrides


def _default(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value
