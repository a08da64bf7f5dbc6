"""Schema repository: the explicit owner of the currently loaded schemas."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from wp_schema_system.schema_management.relation_resolver import RelationMap, resolve_relations
from wp_schema_system.schema_management.schema_models import SchemaDocument, SchemaKind
from wp_schema_system.schema_management.schema_parsing import (
    SCHEMA_FILE_SUFFIXES,
    SchemaError,
    load_directory,
    parse_schema_file,
)


class SchemaNotFoundError(SchemaError):
    """Raised when no schema with the requested slug exists."""


class SchemaRepository:
    """Loads post type and taxonomy schemas on first use and answers lookups by slug.

    One repository is built per process (or per command) and passed to the
    components that need schemas. `reload()` rereads both directories.
    """

    def __init__(self, post_types_dir: Path | str, taxonomies_dir: Path | str) -> None:
        self._directories = {
            SchemaKind.POST_TYPE: Path(post_types_dir),
            SchemaKind.TAXONOMY: Path(taxonomies_dir),
        }
        self._collections: dict[SchemaKind, dict[str, SchemaDocument]] | None = None

    def directory(self, kind: SchemaKind) -> Path:
        """Directory holding schemas of `kind`."""
        return self._directories[kind]

    def reload(self) -> None:
        """Read both schema directories again, replacing the loaded collections."""
        self._collections = {
            kind: load_directory(directory, kind=kind)
            for kind, directory in self._directories.items()
        }

    def collection(self, kind: SchemaKind) -> Mapping[str, SchemaDocument]:
        """All loaded schemas of `kind`, keyed by slug, in load order."""
        if self._collections is None:
            self.reload()
        assert self._collections is not None
        return MappingProxyType(self._collections[kind])

    @property
    def post_types(self) -> Mapping[str, SchemaDocument]:
        return self.collection(SchemaKind.POST_TYPE)

    @property
    def taxonomies(self) -> Mapping[str, SchemaDocument]:
        return self.collection(SchemaKind.TAXONOMY)

    def get(self, slug: str, kind: SchemaKind) -> SchemaDocument:
        """Look up one loaded schema by slug."""
        try:
            return self.collection(kind)[slug]
        except KeyError as exc:
            raise SchemaNotFoundError(f"{_kind_label(kind)} schema not found: {slug}") from exc

    def relations(self) -> RelationMap:
        """Resolve taxonomy -> post types from the loaded collections."""
        return resolve_relations(self.post_types, self.taxonomies)

    def find_schema_file(self, slug: str, kind: SchemaKind) -> Path:
        """Locate the file defining `slug`, trying `<slug>.yaml`, `.yml`, `.json` first."""
        directory = self.directory(kind)
        for suffix in SCHEMA_FILE_SUFFIXES:
            candidate = directory / f"{slug}{suffix}"
            if candidate.is_file():
                return candidate
        if directory.is_dir():
            document = self.collection(kind).get(slug)
            if document is not None and document.source_path is not None:
                return document.source_path
        raise SchemaNotFoundError(f"{_kind_label(kind)} schema not found: {slug}")

    def load_schema(self, slug: str, kind: SchemaKind) -> SchemaDocument:
        """Parse the schema file for `slug` directly; parse errors propagate."""
        return parse_schema_file(self.find_schema_file(slug, kind), kind=kind)


def _kind_label(kind: SchemaKind) -> str:
    return "Post type" if kind is SchemaKind.POST_TYPE else "Taxonomy"
