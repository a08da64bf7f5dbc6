"""Post type <-> taxonomy relationship resolution."""

from __future__ import annotations

from collections.abc import Mapping

from .schema_models import PostTypeSchema, SchemaDocument, TaxonomySchema

RelationMap = dict[str, frozenset[str]]


def resolve_relations(
    post_type_schemas: Mapping[str, SchemaDocument],
    taxonomy_schemas: Mapping[str, SchemaDocument],
) -> RelationMap:
    """Merge both sides' declarations into `{taxonomy: {post types}}`.

    A taxonomy may list its post types (`post_types`) and a post type may
    list its taxonomies (`taxonomies`); neither side has to be complete.
    Taxonomies referenced only from a post type still get an entry.
    """
    relations: dict[str, set[str]] = {taxonomy: set() for taxonomy in taxonomy_schemas}

    for taxonomy, schema in taxonomy_schemas.items():
        if isinstance(schema, TaxonomySchema):
            relations[taxonomy].update(schema.post_types)

    for post_type, schema in post_type_schemas.items():
        if not isinstance(schema, PostTypeSchema):
            continue
        for taxonomy in schema.taxonomies:
            relations.setdefault(taxonomy, set()).add(post_type)

    return {taxonomy: frozenset(post_types) for taxonomy, post_types in relations.items()}
