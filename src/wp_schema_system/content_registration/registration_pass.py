"""Registration pass over the loaded schemas."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from wp_schema_system.field_groups.field_group_builder import (
    FieldGroupDescription,
    generate_field_group,
    register,
)
from wp_schema_system.schema_management.schema_models import (
    PostTypeSchema,
    SchemaDocument,
    SchemaKind,
    TaxonomySchema,
)
from wp_schema_system.schema_repository import SchemaRepository

from .registration_args import to_post_type_args, to_taxonomy_args

logger = logging.getLogger(__name__)


class ContentRegistrar(Protocol):
    """Host system receiving post types, taxonomies and field groups."""

    def register_post_type(self, slug: str, args: Mapping[str, Any]) -> None: ...

    def register_taxonomy(
        self, slug: str, object_types: Sequence[str], args: Mapping[str, Any]
    ) -> None: ...

    def add_field_group(self, field_group: FieldGroupDescription) -> None: ...

    def flush_rewrite_rules(self) -> None: ...


class RegistrationError(Exception):
    """Raised when a registration manifest cannot be read or written."""


@dataclass(frozen=True)
class RegistrationSummary:
    """What one registration pass handed to the registrar."""

    post_types: tuple[str, ...]
    taxonomies: tuple[str, ...]
    field_groups: tuple[str, ...]


def run_registration_pass(
    repository: SchemaRepository,
    registrar: ContentRegistrar,
    *,
    post_type: str | None = None,
) -> RegistrationSummary:
    """Register post types, then taxonomies with resolved post types, then field groups.

    When `post_type` is given only that post type and its field group are registered.
    """
    post_types: dict[str, SchemaDocument]
    taxonomies: dict[str, SchemaDocument]
    if post_type is not None:
        post_types = {post_type: repository.get(post_type, SchemaKind.POST_TYPE)}
        taxonomies = {}
    else:
        post_types = dict(repository.post_types)
        taxonomies = dict(repository.taxonomies)

    registered_post_types: list[str] = []
    for slug, schema in post_types.items():
        if isinstance(schema, PostTypeSchema):
            registrar.register_post_type(slug, to_post_type_args(schema))
            registered_post_types.append(slug)

    registered_taxonomies: list[str] = []
    if taxonomies:
        relations = repository.relations()
        for slug, schema in taxonomies.items():
            if isinstance(schema, TaxonomySchema):
                object_types = sorted(relations.get(slug, frozenset()))
                registrar.register_taxonomy(slug, object_types, to_taxonomy_args(schema))
                registered_taxonomies.append(slug)

    field_groups: list[str] = []
    for schema in (*post_types.values(), *taxonomies.values()):
        if not schema.fields:
            continue
        field_group = generate_field_group(schema)
        if register(field_group, add_field_group=registrar.add_field_group):
            field_groups.append(field_group["key"])

    logger.info(
        "Registered %d post type(s), %d taxonomy(ies), %d field group(s)",
        len(registered_post_types),
        len(registered_taxonomies),
        len(field_groups),
    )
    return RegistrationSummary(
        post_types=tuple(registered_post_types),
        taxonomies=tuple(registered_taxonomies),
        field_groups=tuple(field_groups),
    )


class ManifestRegistrar:
    """Registrar that records every registration in a JSON manifest for the host to apply."""

    def __init__(self, manifest: Mapping[str, Any] | None = None) -> None:
        source = manifest or {}
        self.post_types: dict[str, Any] = dict(source.get("post_types", {}))
        self.taxonomies: dict[str, Any] = dict(source.get("taxonomies", {}))
        self.field_groups: list[FieldGroupDescription] = list(source.get("field_groups", []))
        self.flush_requested: bool = bool(source.get("flush_rewrite_rules", False))

    @classmethod
    def load(cls, manifest_path: Path | str) -> ManifestRegistrar:
        """Continue from an existing manifest; a missing file starts empty."""
        path = Path(manifest_path)
        if not path.exists():
            return cls()
        try:
            parsed = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise RegistrationError(f"Failed to read registration manifest {path}: {exc}") from exc
        if not isinstance(parsed, Mapping):
            raise RegistrationError(f"Registration manifest {path} must contain an object.")
        return cls(parsed)

    def register_post_type(self, slug: str, args: Mapping[str, Any]) -> None:
        self.post_types[slug] = dict(args)

    def register_taxonomy(
        self, slug: str, object_types: Sequence[str], args: Mapping[str, Any]
    ) -> None:
        self.taxonomies[slug] = {"object_type": list(object_types), "args": dict(args)}

    def add_field_group(self, field_group: FieldGroupDescription) -> None:
        self.field_groups = [
            existing for existing in self.field_groups if existing.get("key") != field_group["key"]
        ]
        self.field_groups.append(field_group)

    def flush_rewrite_rules(self) -> None:
        self.flush_requested = True

    def as_manifest(self) -> dict[str, Any]:
        return {
            "post_types": self.post_types,
            "taxonomies": self.taxonomies,
            "field_groups": self.field_groups,
            "flush_rewrite_rules": self.flush_requested,
        }

    def write(self, manifest_path: Path | str) -> Path:
        """Write the manifest as indented JSON and return its resolved path."""
        path = Path(manifest_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            text = json.dumps(self.as_manifest(), indent=2, default=str)
            path.write_text(text + "\n", encoding="utf-8")
        except OSError as exc:
            raise RegistrationError(f"Failed to write registration manifest {path}: {exc}") from exc
        return path.resolve()
